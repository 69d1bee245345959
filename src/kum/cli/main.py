"""
kum - Kum Lexer Command-Line Interface
======================================

This module implements the kum command. It feeds source text to the
lexer and prints the resulting tokens, or the located error.

Usage Examples
--------------
Interactive loop (one line at a time, ':quit' or end of input to exit):
    $ kum repl
    > x += 2.5
    Token(IDENTIFIER, 'x')
    Token(OPERATOR, ADD_ASSIGN)
    Token(NUMBER, 2.5)

Tokenize a file:
    $ kum tokenize program.kum

Use the reduced dialect (Cyrillic identifiers, no operators):
    $ kum --variant reduced repl

Exit Codes
----------
0 - Success
1 - Lexer error
2 - Invalid arguments or unreadable file
3 - Internal error
"""

import logging
from pathlib import Path
import sys
from typing import Optional

import click

from kum import __version__
from kum.cli.errors import format_error, handle_cli_exception
from kum.errors import KumError
from kum.lexer import PRESETS, Lexer, LexerConfig, Token

logger = logging.getLogger(__name__)

PROMPT = "> "
QUIT_COMMAND = ":quit"


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared context for kum subcommands.

    Stores the lexer configuration and verbosity.
    """

    def __init__(self) -> None:
        self.config: LexerConfig = LexerConfig()
        self.verbose: bool = False

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.INFO
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )

    def make_lexer(self) -> Lexer:
        logger.debug(
            "lexer config: alphabet=%r case_insensitive=%s operators=%s",
            self.config.alphabet,
            self.config.case_insensitive,
            self.config.operators,
        )
        return Lexer(self.config)


pass_context = click.make_pass_decorator(Context, ensure=True)


def format_token(token: Token, locations: bool = False) -> str:
    """Render a token for display, optionally prefixed with its row:col."""
    if locations and token.location is not None:
        return f"{token.location}\t{token!r}"
    return repr(token)


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "--variant",
    type=click.Choice(sorted(PRESETS), case_sensitive=False),
    default=None,
    help="Lexer dialect (default: from KUM_LEXER_VARIANT, else full)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(version=__version__, prog_name="kum")
@pass_context
def main(ctx: Context, variant: Optional[str], verbose: bool) -> None:
    """
    Tokenize Kum source code.

    The full dialect accepts Latin and Cyrillic identifiers (any case)
    and arithmetic operators. The reduced dialect accepts lowercase
    Cyrillic identifiers only and no operators.
    """
    ctx.verbose = verbose
    ctx.setup_logging()
    try:
        ctx.config = LexerConfig.preset(variant) if variant else LexerConfig.from_env()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="KUM_LEXER_*") from e


# =============================================================================
# Repl Command
# =============================================================================

@main.command()
@click.option(
    "--locations", "-l",
    is_flag=True,
    help="Prefix each token with its row:col",
)
@pass_context
def repl(ctx: Context, locations: bool) -> None:
    """
    Tokenize lines read interactively.

    Each line is tokenized on its own. Errors are printed and the loop
    continues. Enter ':quit' or send end of input to leave.
    """
    lexer = ctx.make_lexer()
    while True:
        click.echo(PROMPT, nl=False)
        line = sys.stdin.readline()
        if not line:
            click.echo()
            break

        line = line.rstrip("\r\n")
        if line.strip() == QUIT_COMMAND:
            break

        try:
            tokens = lexer.tokenize(line)
        except KumError as e:
            click.echo(format_error(e, ctx.verbose))
            continue

        logger.debug("%d token(s)", len(tokens))
        for token in tokens:
            click.echo(format_token(token, locations))


# =============================================================================
# Tokenize Command
# =============================================================================

@main.command("tokenize")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--locations", "-l",
    is_flag=True,
    help="Prefix each token with its row:col",
)
@pass_context
def tokenize_file(ctx: Context, input_file: Path, locations: bool) -> None:
    """
    Tokenize a source file and print its tokens.

    INPUT_FILE is the Kum source file to read (UTF-8).
    """
    try:
        # newline="" keeps \r\n so it lexes as one line break
        with input_file.open(encoding="utf-8-sig", newline="") as f:
            source = f.read()
        logger.debug("read %d character(s) from %s", len(source), input_file)

        tokens = ctx.make_lexer().tokenize(source)
        for token in tokens:
            click.echo(format_token(token, locations))

        logger.debug("%d token(s)", len(tokens))
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


if __name__ == "__main__":
    main()
