"""
plox - Lox Scanner Command-Line Interface
=========================================

Command-line front end for the Lox scanner.

Usage Examples
--------------
Print the tokens of a file:
    $ plox tokens script.lox

Fail on the first report of lexical errors (exit code 1, full report):
    $ plox tokens --strict script.lox

Scan lines interactively:
    $ plox repl
    > var x = 1;
    VAR var None
    ...

Print the sample expression tree:
    $ plox ast-demo
    (* (- 123) (group 45.67))

Environment
-----------
PYLOX_ENCODING and PYLOX_STRICT set the defaults for ``tokens``
(see ``pylox.runner.LoxOptions.from_env``).
"""

import logging
import sys
from pathlib import Path

import click

from pylox import __version__
from pylox.ast import ASTPrinter, demo_expression
from pylox.cli.errors import ExitCode, handle_cli_exception
from pylox.runner import LoxOptions, LoxRunner, RunResult


logger = logging.getLogger(__name__)

PROMPT = "> "


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """Shared context for CLI commands."""

    def __init__(self) -> None:
        self.verbose: bool = False

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.INFO
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


def print_result(result: RunResult) -> None:
    """Echo tokens to stdout and lexical errors to stderr."""
    for token in result.tokens:
        click.echo(str(token))
    for error in result.errors:
        click.echo(str(error), err=True)


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose (debug) output",
)
@click.version_option(version=__version__, prog_name="plox")
@pass_context
def main(ctx: Context, verbose: bool) -> None:
    """
    Scan Lox source code into tokens.

    Use 'plox tokens FILE' to scan a file or 'plox repl' to scan lines
    as you type them.
    """
    ctx.verbose = verbose
    ctx.setup_logging()


# =============================================================================
# Tokens Command
# =============================================================================

@main.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--strict",
    is_flag=True,
    help="Report all lexical errors as one failure instead of printing tokens",
)
@pass_context
def tokens(ctx: Context, input_file: Path, strict: bool) -> None:
    """
    Print the tokens of a Lox source file.

    INPUT_FILE is the Lox source file to scan. Each token is printed as
    'TYPE lexeme literal'; lexical errors go to stderr and make the
    command exit with status 1.
    """
    options = LoxOptions.from_env()
    if strict:
        options.strict = True

    try:
        result = LoxRunner(options).run_file(input_file)
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Scan")

    print_result(result)

    if ctx.verbose:
        click.echo(
            f"Scanned {input_file}: {result.token_count} tokens, "
            f"{len(result.errors)} errors",
            err=True,
        )

    if not result.success:
        sys.exit(ExitCode.SCAN_ERROR)


# =============================================================================
# REPL Command
# =============================================================================

@main.command()
@pass_context
def repl(ctx: Context) -> None:
    """
    Scan lines typed at a prompt until end of input.

    Every line is scanned on its own; an error on one line is reported
    and the session continues.
    """
    options = LoxOptions.from_env()
    options.strict = False
    runner = LoxRunner(options)
    stdin = click.get_text_stream("stdin")

    while True:
        click.echo(PROMPT, nl=False)
        line = stdin.readline()
        if not line:
            click.echo()
            break
        print_result(runner.run_source(line.rstrip("\n"), "<stdin>"))


# =============================================================================
# AST Demo Command
# =============================================================================

@main.command("ast-demo")
def ast_demo() -> None:
    """Print a sample expression tree in parenthesized form."""
    click.echo(ASTPrinter().print(demo_expression()))


if __name__ == "__main__":
    main()
