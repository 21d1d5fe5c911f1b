"""
Cradle - One-Pass Control-Construct Translator
==============================================

This package translates a tiny block-structured language straight into
assembly-like mnemonics, generating code while it parses. It exists to
show how if/else, while, loop, repeat-until, for and do constructs can
be compiled in one pass with a single character of lookahead.

Main Components
---------------
- **control**: the translator (character source, label allocator,
  emitter, grammar)
- **cli**: the cradlec command-line tool

Quick Start
-----------
    >>> from cradle import translate
    >>> print(translate("waee"))

Or from the shell:
    $ printf 'waee' | cradlec
"""

__version__ = "1.0.0"

from cradle.errors import CradleError, SourceLocation
from cradle.control import (
    TranslationError,
    TranslatorOptions,
    translate,
    translate_file,
)


__all__ = [
    "__version__",
    "CradleError",
    "SourceLocation",
    "TranslationError",
    "TranslatorOptions",
    "translate",
    "translate_file",
]
