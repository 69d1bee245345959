"""
Unified CLI Error Handling
==========================

Provides consistent error reporting and exit codes for the kum command.
"""

import logging
import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from kum.errors import KumError, LexerError

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Standard exit codes for the kum command."""
    SUCCESS = 0
    LEX_ERROR = 1        # Source could not be tokenized
    INVALID_ARGS = 2     # Invalid arguments or unreadable files
    INTERNAL_ERROR = 3   # Unexpected internal error


def format_error(error: KumError, verbose: bool = False) -> str:
    """
    Render a toolchain error for display.

    Lexer errors get the source line and caret in verbose mode; otherwise
    the plain two-line diagnostic is used.
    """
    if verbose and isinstance(error, LexerError):
        return error.format_report()
    return str(error)


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for kum subcommands.

    Formats the error message, optionally prints the traceback for
    internal errors in verbose mode, and exits with the matching code.

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, KumError):
        click.echo(format_error(error, verbose), err=True)
        sys.exit(ExitCode.LEX_ERROR)

    elif isinstance(error, (click.BadParameter, ValueError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        logger.debug("unexpected error", exc_info=error)
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exception(type(error), error, error.__traceback__)
        sys.exit(ExitCode.INTERNAL_ERROR)
