"""
pnglex - Penguin Lexer Command-Line Interface
=============================================

This module implements the command-line interface for the Penguin lexer.
It scans a source file (or a string given on the command line) and prints
the resulting tokens, one per line.

Usage Examples
--------------
Lex a file:
    $ pnglex main.pg

Lex a string:
    $ pnglex --expr "let x := 5;"

Aligned table output:
    $ pnglex main.pg --format table

Report scan time:
    $ pnglex main.pg --time

Verbose mode (debug logging):
    $ pnglex -v main.pg
"""

import codecs
import logging
from pathlib import Path
from typing import Optional

import click

from penguin import __version__
from penguin.cli.errors import handle_cli_exception
from penguin.driver import LexOptions, LexResult, run, run_file
from penguin.lexer import Token

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def validate_encoding(ctx: click.Context, param: click.Parameter, value: str) -> str:
    """Reject encodings the codecs registry does not know."""
    try:
        codecs.lookup(value)
    except LookupError:
        raise click.BadParameter(f"unknown encoding: {value}")
    return value


def format_token(token: Token, output_format: str) -> str:
    """Render one token for terminal output."""
    if output_format == "table":
        return f"{token.kind.name:<20} {token.literal!r:<24} {token.value_text()}".rstrip()
    return repr(token)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-e", "--expr",
    type=str,
    default=None,
    help="Lex this source text instead of a file",
)
@click.option(
    "-t", "--time", "timed",
    is_flag=True,
    help="Report how long the scan took",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["repr", "table"], case_sensitive=False),
    default="repr",
    help="Token output format (default: repr)",
)
@click.option(
    "--encoding",
    type=str,
    default="utf-8",
    callback=validate_encoding,
    help="Source file encoding (default: utf-8)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="pnglex")
def main(
    input_file: Optional[Path],
    expr: Optional[str],
    timed: bool,
    output_format: str,
    encoding: str,
    verbose: bool,
) -> None:
    """
    Lex Penguin source code and print its tokens.

    INPUT_FILE is the Penguin source file to lex. Use --expr instead to
    lex a string given on the command line.

    \b
    Examples:
        pnglex main.pg                  # One token per line
        pnglex -e "let x := 5;"         # Lex a string
        pnglex main.pg -f table         # Aligned columns
        pnglex main.pg --time           # Report scan time
    """
    if (input_file is None) == (expr is None):
        raise click.UsageError("provide exactly one of INPUT_FILE or --expr")

    setup_logging(verbose)
    options = LexOptions(encoding=encoding, timed=timed)

    try:
        result: LexResult
        if input_file is not None:
            logger.info(f"Lexing {input_file}")
            result = run_file(input_file, options)
        else:
            result = run(expr, options)
    except Exception as e:
        handle_cli_exception(e, verbose)

    for token in result.tokens:
        click.echo(format_token(token, output_format.lower()))

    if timed:
        click.echo(
            f"Lexed {result.token_count} tokens in {result.elapsed * 1000:.3f} ms",
            err=True,
        )


if __name__ == "__main__":
    main()
