"""
Control-Construct Translator
============================

A single-pass, syntax-directed translator for a tiny block-structured
language. Each input character is one token; code is emitted while
parsing, with one character of lookahead and no syntax tree.

Pipeline
--------
    Input → CharacterSource → Translator → Emitter → Output

Usage
-----
>>> from cradle.control import translate
>>> translate("ae")
'\\tA\\n\\tEND\\n'

Statements
----------
- i <cond> <block> [l <block>] e   if / else
- w <cond> <block> e               while
- p <block> e                      loop forever
- r <block> u <cond>               repeat until
- f <name> = <expr> <expr> <block> e   counted for
- d <expr> <block> e               decrement-and-branch loop
- any other letter                 a bare name
"""

from cradle.control.compiler import (
    TranslationResult,
    TranslatorOptions,
    translate,
    translate_file,
    translate_stream,
)
from cradle.control.emitter import Emitter
from cradle.control.errors import (
    ExpectedError,
    InputExhaustedError,
    InvalidNameError,
    TranslationError,
    UnexpectedCharacterError,
)
from cradle.control.labels import LabelAllocator
from cradle.control.source import CharacterSource
from cradle.control.translator import StatementKind, Translator


__all__ = [
    # Front door
    "translate",
    "translate_file",
    "translate_stream",
    "TranslatorOptions",
    "TranslationResult",
    # Components
    "CharacterSource",
    "LabelAllocator",
    "Emitter",
    "Translator",
    "StatementKind",
    # Errors
    "TranslationError",
    "InputExhaustedError",
    "ExpectedError",
    "UnexpectedCharacterError",
    "InvalidNameError",
]
