"""Run the Lox CLI.

Usage:
    python -m lox run script.lox
    python -m lox repl
"""

from lox.cli.main import cli


def main():
    cli(prog_name="lox")


if __name__ == "__main__":
    main()
