"""Debug CLI commands: dump tokens and syntax trees."""

from pathlib import Path

import click

from lox.errors import ParseError
from lox.parser import Parser
from lox.printer import AstPrinter
from lox.scanner import Scanner

EX_DATAERR = 65

_script_argument = click.argument(
    "script", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


def _scan_or_exit(script: Path):
    tokens, errors = Scanner(script.read_bytes()).scan_tokens()
    if errors:
        for error in errors:
            click.echo(click.style(str(error), fg="red"), err=True)
        raise SystemExit(EX_DATAERR)
    return tokens


@click.group()
def debug():
    """Inspect the scanner and parser output."""
    pass


@debug.command()
@_script_argument
def tokens(script: Path):
    """Print the tokens scanned from a script, one per line."""
    for token in _scan_or_exit(script):
        literal = "" if token.literal is None else f" {token.literal!r}"
        click.echo(f"{token.line:>4} {token.type.name:<14} {token.lexeme!r}{literal}")


@debug.command("ast")
@_script_argument
def ast_cmd(script: Path):
    """Print the syntax tree of each statement in prefix form."""
    try:
        statements = Parser(_scan_or_exit(script)).parse()
    except ParseError as e:
        for error in e.errors:
            click.echo(click.style(str(error), fg="red"), err=True)
        raise SystemExit(EX_DATAERR)

    printer = AstPrinter()
    for stmt in statements:
        click.echo(printer.print(stmt))
