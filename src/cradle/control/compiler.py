"""
Translator Front Door
=====================

Convenience entry points that wire a CharacterSource, a LabelAllocator and
a Translator together.

    Input stream → CharacterSource → Translator → Emitter → Output sink

Usage
-----
Command line:
    $ echo -n iaee | cradlec

Programmatic:
    >>> from cradle.control import translate
    >>> translate("iaee")
    '\\t<condition>\\n\\tJZ L0\\n\\tA\\n\\tL0:\\tEND\\n'

Error Handling
--------------
The first error aborts the run. Text already written to the sink stays
there; translate() additionally attaches it to the exception as
``partial_output`` since its sink is private.
"""

import io
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from cradle.control.errors import TranslationError
from cradle.control.labels import LabelAllocator
from cradle.control.source import CharacterSource, Stream
from cradle.control.translator import Translator


logger = logging.getLogger(__name__)


@dataclass
class TranslatorOptions:
    """
    Translator configuration options.

    Attributes:
        filename: Name of the input, used in diagnostics
        label_prefix: Text placed before every label number
        first_label: Number of the first label allocated
    """
    filename: str = "<input>"
    label_prefix: str = "L"
    first_label: int = 0

    def __post_init__(self):
        if not self.label_prefix:
            raise ValueError("label_prefix must not be empty")
        if self.first_label < 0:
            raise ValueError(f"first_label must be >= 0, got {self.first_label}")

    @classmethod
    def from_env(cls, **overrides) -> "TranslatorOptions":
        """
        Create TranslatorOptions from environment variables.

        Environment variables (all optional):
            CRADLE_LABEL_PREFIX: label prefix (default "L")
            CRADLE_FIRST_LABEL: first label number (default 0)

        Keyword arguments override both the environment and the defaults.
        """
        values = {}
        if "CRADLE_LABEL_PREFIX" in os.environ:
            values["label_prefix"] = os.environ["CRADLE_LABEL_PREFIX"]
        if "CRADLE_FIRST_LABEL" in os.environ:
            raw = os.environ["CRADLE_FIRST_LABEL"]
            try:
                values["first_label"] = int(raw)
            except ValueError:
                raise ValueError(f"CRADLE_FIRST_LABEL must be an integer, got {raw!r}") from None
        values.update(overrides)
        return cls(**values)

    def make_labels(self) -> LabelAllocator:
        return LabelAllocator(self.label_prefix, self.first_label)


@dataclass
class TranslationResult:
    """
    Result of a translation.

    Attributes:
        filename: Input name
        success: True if the program translated completely
        output: Emitted text (empty when writing to an external sink)
        label_count: Number of labels allocated
        line_count: Number of complete instruction lines emitted
    """
    filename: str = ""
    success: bool = False
    output: str = ""
    label_count: int = 0
    line_count: int = 0


def translate_stream(
    stream: Stream,
    sink: TextIO,
    options: Optional[TranslatorOptions] = None,
) -> TranslationResult:
    """
    Translate a program from a readable stream into a text sink.

    Args:
        stream: Binary or text stream holding the program
        sink: Writable text stream for the generated code
        options: Translator configuration (uses defaults if None)

    Returns:
        TranslationResult with label and line counts

    Raises:
        TranslationError: On the first syntax error
    """
    options = options or TranslatorOptions()
    source = CharacterSource(stream, options.filename)
    translator = Translator(source, sink, options.make_labels())
    translator.program()

    logger.info(
        f"Translated {options.filename}: {translator.labels.count} labels, "
        f"{translator.emitter.lines_emitted} lines"
    )
    return TranslationResult(
        filename=options.filename,
        success=True,
        label_count=translator.labels.count,
        line_count=translator.emitter.lines_emitted,
    )


def translate(source: str, options: Optional[TranslatorOptions] = None) -> str:
    """
    Translate an in-memory program and return the generated code.

    Raises:
        TranslationError: On the first syntax error, with ``partial_output``
            set to the code emitted before it
    """
    sink = io.StringIO()
    try:
        translate_stream(io.StringIO(source), sink, options)
    except TranslationError as e:
        e.partial_output = sink.getvalue()
        raise
    return sink.getvalue()


def translate_file(
    filepath: str | Path,
    options: Optional[TranslatorOptions] = None,
) -> TranslationResult:
    """
    Translate a program file.

    The input is read as bytes, one character per byte.

    Raises:
        TranslationError: On the first syntax error
        FileNotFoundError: If the file does not exist
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {filepath}")

    if options is None:
        options = TranslatorOptions(filename=str(path))

    sink = io.StringIO()
    with path.open("rb") as stream:
        try:
            result = translate_stream(stream, sink, options)
        except TranslationError as e:
            e.partial_output = sink.getvalue()
            raise
    result.output = sink.getvalue()
    return result
