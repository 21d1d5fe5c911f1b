"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the CLI tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    TRANSLATION_ERROR = 1  # Syntax error or premature end of input
    INVALID_ARGS = 2       # Invalid arguments or missing files
    INTERNAL_ERROR = 3     # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for all CLI tools.

    Prints the diagnostic to stderr and exits with the matching exit code.
    In verbose mode, translation errors also show their source location and
    internal errors print a traceback.

    Args:
        error: The exception that was raised
        verbose: If True, print locations and tracebacks

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from cradle.control.errors import TranslationError
    from cradle.errors import CradleError

    if isinstance(error, TranslationError):
        # Already formatted as "Error: ... ."
        click.echo(error.describe() if verbose else str(error), err=True)
        sys.exit(ExitCode.TRANSLATION_ERROR)

    elif isinstance(error, CradleError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.TRANSLATION_ERROR)

    elif isinstance(error, (click.BadParameter, ValueError)):
        # Invalid arguments or configuration
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        # Unexpected internal error
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
