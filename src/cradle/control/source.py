"""
Character Source
================

A byte-at-a-time reader over an input stream with a single lookahead slot.

The translator never tokenizes: each input character is one token, and no
whitespace or newlines are skipped. The source therefore only needs to
expose the current character (look), move to the next one (advance), and
two small conveniences built on top of them (match and get_name).

The lookahead is primed at construction, so it is always valid while the
source is alive. Running out of input while advancing is fatal.

Example Usage
-------------
>>> from cradle.control.source import CharacterSource
>>> src = CharacterSource.from_string("ab")
>>> src.look()
'a'
>>> src.get_name()
'A'
>>> src.look()
'b'
"""

import io
import string
from typing import BinaryIO, TextIO, Union

from cradle.errors import SourceLocation
from cradle.control.errors import (
    InputExhaustedError,
    InvalidNameError,
    UnexpectedCharacterError,
)


Stream = Union[BinaryIO, TextIO]


class CharacterSource:
    """
    Lookahead reader over a binary or text stream.

    Bytes are decoded one per character using Latin-1, so every byte
    corresponds to exactly one character. Text streams are read as-is.

    Attributes:
        filename: Name of the input (for error messages)
    """

    # Characters accepted by get_name()
    NAME_CHARS = string.ascii_letters

    def __init__(self, stream: Stream, filename: str = "<input>"):
        """
        Open the source and prime the lookahead.

        Args:
            stream: Readable stream supporting read(1)
            filename: Name of the input (for error messages)

        Raises:
            InputExhaustedError: If the stream is empty
        """
        self.filename = filename
        self._stream = stream
        self._look = ""
        self._consumed = 0

        # Position of the lookahead character
        self._line = 1
        self._column = 0

        self._read()

    @classmethod
    def from_string(cls, text: str, filename: str = "<input>") -> "CharacterSource":
        """Create a source over in-memory text."""
        return cls(io.StringIO(text), filename)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def look(self) -> str:
        """Return the current lookahead character without consuming it."""
        return self._look

    def advance(self) -> None:
        """
        Consume the lookahead and read the next character into it.

        Raises:
            InputExhaustedError: If no further input is available
        """
        self._consumed += 1
        self._read()

    def match(self, expected: str) -> None:
        """
        Consume the lookahead if it is `expected`, fail otherwise.

        Raises:
            UnexpectedCharacterError: If the lookahead differs
        """
        if self._look != expected:
            raise UnexpectedCharacterError(expected, self._look, self.location)
        self.advance()

    def get_name(self) -> str:
        """
        Read a single-letter name and return it in uppercase.

        Raises:
            InvalidNameError: If the lookahead is not an ASCII letter
        """
        char = self._look
        if char not in self.NAME_CHARS:
            raise InvalidNameError(char, self.location)
        self.advance()
        return char.upper()

    # =========================================================================
    # Position Tracking
    # =========================================================================

    @property
    def location(self) -> SourceLocation:
        """Location of the current lookahead character."""
        return SourceLocation(self.filename, self._line, self._column)

    @property
    def consumed(self) -> int:
        """Number of characters consumed so far."""
        return self._consumed

    def _read(self) -> None:
        chunk = self._stream.read(1)
        if not chunk:
            # Point just past the last character we saw
            if self._look == "\n":
                end = SourceLocation(self.filename, self._line + 1, 1)
            else:
                end = SourceLocation(self.filename, self._line, self._column + 1)
            raise InputExhaustedError(end)
        if isinstance(chunk, bytes):
            chunk = chunk.decode("latin-1")

        # The previous lookahead was a newline: this character starts a line
        if self._look == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        self._look = chunk
