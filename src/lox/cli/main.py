"""Lox CLI entry point: run scripts and the interactive prompt."""

from pathlib import Path

import click

from lox.config import LoxConfig, configure_logging
from lox.runner import Lox, RunResult

# sysexits.h codes used by the reference Lox tools
EX_DATAERR = 65
EX_SOFTWARE = 70


def _report(result: RunResult) -> None:
    """Print every error from a run to stderr."""
    for error in result.errors:
        click.echo(click.style(str(error), fg="red"), err=True)


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level for the interpreter (default: $LOX_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Lox, a small expression language interpreter."""
    config = LoxConfig.from_env()
    if log_level is not None:
        config.log_level = log_level.upper()

    try:
        configure_logging(config)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")

    ctx.obj = config


@cli.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def run(config: LoxConfig, script: Path):
    """Run a Lox script."""
    result = Lox().run_file(script)
    _report(result)

    if result.had_error:
        raise SystemExit(EX_DATAERR)
    if result.had_runtime_error:
        raise SystemExit(EX_SOFTWARE)


@cli.command()
@click.pass_obj
def repl(config: LoxConfig):
    """Start an interactive session. Definitions persist between lines."""
    lox = Lox()

    while True:
        try:
            line = click.prompt(
                config.prompt, default="", show_default=False, prompt_suffix=""
            )
        except click.Abort:
            click.echo()
            break

        if not line.strip():
            continue

        _report(lox.run(line))


# Register subcommand groups
from lox.cli.debug_cmd import debug  # noqa: E402

cli.add_command(debug)
