"""Error types for the Lox pipeline.

Three kinds of error are raised, one per stage:
- LexError: invalid character or unterminated string (collected in batch)
- ParseError: first syntax error of a parse attempt
- LoxRuntimeError: type mismatch or undefined variable during evaluation

Every error carries a machine-readable ErrorCode and the best-known source line.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lox.tokens import Token


class ErrorKind(Enum):
    """Pipeline stage an error was raised from."""

    LEX = "lex"
    PARSE = "parse"
    RUNTIME = "runtime"


class ErrorCode(Enum):
    """Specific failure within a stage."""

    # Scanner
    UNEXPECTED_CHARACTER = "UNEXPECTED_CHARACTER"
    UNTERMINATED_STRING = "UNTERMINATED_STRING"

    # Parser
    EXPECT_EXPRESSION = "EXPECT_EXPRESSION"
    EXPECT_CLOSING_PAREN = "EXPECT_CLOSING_PAREN"
    EXPECT_SEMICOLON = "EXPECT_SEMICOLON"
    EXPECT_END = "EXPECT_END"
    NESTING_TOO_DEEP = "NESTING_TOO_DEEP"

    # Interpreter
    INVALID_OPERAND = "INVALID_OPERAND"
    OPERANDS_MUST_BE_NUMBERS = "OPERANDS_MUST_BE_NUMBERS"
    OPERANDS_MUST_BE_NUMBERS_OR_STRINGS = "OPERANDS_MUST_BE_NUMBERS_OR_STRINGS"
    UNDEFINED_VARIABLE = "UNDEFINED_VARIABLE"


class LoxError(Exception):
    """Base class for all language errors.

    Attributes:
        kind: Stage that raised the error
        code: Specific failure
        message: Human-readable message without location
        line: Source line (1-indexed), or None when unknown
        token: Offending token, if there is one
    """

    kind: ErrorKind

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        line: int | None = None,
        token: Token | None = None,
    ):
        self.code = code
        self.message = message
        self.token = token
        if line is None and token is not None:
            line = token.line
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is None:
            return f"Error: {self.message}"
        return f"[line {self.line}] Error: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "code": self.code.value,
            "message": self.message,
            "line": self.line,
        }


class LexError(LoxError):
    """Invalid input found while scanning."""

    kind = ErrorKind.LEX


class ParseError(LoxError):
    """Syntax error found while parsing.

    When the parser recovered from more than one error, ``errors`` holds all
    of them in source order and this instance is the first.
    """

    kind = ErrorKind.PARSE

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        line: int | None = None,
        token: Token | None = None,
    ):
        super().__init__(code, message, line, token)
        self.errors: list[ParseError] = [self]


class LoxRuntimeError(LoxError):
    """Error raised while evaluating a tree."""

    kind = ErrorKind.RUNTIME
