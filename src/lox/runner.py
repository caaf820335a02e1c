"""Runs Lox source through the full pipeline: scan, parse, interpret.

Scan, parse and runtime errors never escape ``Lox.run``; they are reported on
the returned RunResult so a front end can print them and pick an exit status.
Source nested deeper than the Python call stack allows is reported as a
ParseError (NESTING_TOO_DEEP).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from lox.errors import LexError, LoxError, LoxRuntimeError, ParseError
from lox.interpreter import Interpreter
from lox.parser import Parser
from lox.scanner import Scanner

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of running one piece of source.

    Attributes:
        lex_errors: Every lexical error found (parsing is skipped if any)
        parse_error: First syntax error, with the rest on ``parse_error.errors``
        runtime_error: Error that stopped evaluation
    """

    lex_errors: list[LexError] = field(default_factory=list)
    parse_error: ParseError | None = None
    runtime_error: LoxRuntimeError | None = None

    @property
    def had_error(self) -> bool:
        """True if the source could not be scanned or parsed."""
        return bool(self.lex_errors) or self.parse_error is not None

    @property
    def had_runtime_error(self) -> bool:
        return self.runtime_error is not None

    @property
    def errors(self) -> list[LoxError]:
        """All reported errors in the order they should be shown."""
        errors: list[LoxError] = list(self.lex_errors)
        if self.parse_error is not None:
            errors.extend(self.parse_error.errors)
        if self.runtime_error is not None:
            errors.append(self.runtime_error)
        return errors


class Lox:
    """Pipeline driver holding one interpreter across runs.

    Successive calls to ``run`` share one Environment, which is what a REPL
    session needs.

    Usage:
        lox = Lox()
        result = lox.run('print "hi";')
    """

    def __init__(self, output: TextIO | None = None):
        self.interpreter = Interpreter(output=output)

    def run(self, source: str | bytes) -> RunResult:
        """Scan, parse and execute ``source``."""
        result = RunResult()

        tokens, lex_errors = Scanner(source).scan_tokens()
        if lex_errors:
            logger.info("Scanning failed with %d error(s)", len(lex_errors))
            result.lex_errors = lex_errors
            return result

        try:
            statements = Parser(tokens).parse()
        except ParseError as e:
            logger.info("Parsing failed with %d error(s)", len(e.errors))
            result.parse_error = e
            return result

        try:
            self.interpreter.interpret(statements)
        except LoxRuntimeError as e:
            logger.info("Execution stopped: %s", e)
            result.runtime_error = e

        return result

    def run_file(self, path: Path) -> RunResult:
        """Read a source file as UTF-8 and run it."""
        logger.debug("Running %s", path)
        return self.run(path.read_bytes())
