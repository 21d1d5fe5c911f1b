"""
cradlec - Control-Construct Translator Command-Line Interface
=============================================================

Reads a program from a file or standard input and writes the generated
instructions to a file or standard output.

Usage Examples
--------------
Translate standard input to standard output:
    $ printf 'iaee' | cradlec

Translate a file:
    $ cradlec prog.txt -o prog.asm

Verbose mode (debug log and error locations on stderr):
    $ cradlec -v prog.txt

Custom label prefix:
    $ cradlec --label-prefix _L prog.txt

The input is read byte by byte with no whitespace skipping, so a trailing
newline in a file is itself a token. A program must end with the
terminator 'e'.
"""

import logging
from typing import BinaryIO, Optional, TextIO

import click

from cradle import __version__
from cradle.cli.errors import handle_cli_exception
from cradle.control import TranslatorOptions, translate_stream


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
        force=True,
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.File("rb"),
    default="-",
)
@click.option(
    "-o", "--output",
    type=click.File("w"),
    default="-",
    help="Output file (default: stdout)",
)
@click.option(
    "--label-prefix",
    type=str,
    default=None,
    help="Prefix for generated labels (default: L, or $CRADLE_LABEL_PREFIX)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug log, error locations, tracebacks)",
)
@click.version_option(version=__version__, prog_name="cradlec")
def main(
    input_file: BinaryIO,
    output: TextIO,
    label_prefix: Optional[str],
    verbose: bool,
) -> None:
    """
    Translate a control-construct program into assembly mnemonics.

    INPUT_FILE is the program to translate (default: standard input).

    \b
    Statements (one character per token):
        i <cond> <block> [l <block>] e    if / else
        w <cond> <block> e                while
        p <block> e                       loop forever
        r <block> u <cond>                repeat until
        f <name> = <expr> <expr> <block> e
        d <expr> <block> e                count down in ECX
        a..z (other)                      a bare name

    \b
    Examples:
        printf 'iaee' | cradlec
        cradlec prog.txt -o prog.asm
    """
    setup_logging(verbose)

    name = getattr(input_file, "name", None)
    filename = name if isinstance(name, str) else "<stdin>"

    try:
        overrides = {"filename": filename}
        if label_prefix is not None:
            overrides["label_prefix"] = label_prefix
        options = TranslatorOptions.from_env(**overrides)

        result = translate_stream(input_file, output, options)
        logger.debug(
            f"{result.filename}: {result.line_count} lines, "
            f"{result.label_count} labels"
        )

    except Exception as e:
        # Whatever was emitted before the error stays in the output
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
