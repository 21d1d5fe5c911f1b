"""
Translator Error Hierarchy
==========================

Every error raised while translating is fatal: the first one aborts the
whole run. Nothing in the grammar catches these; they propagate to the
caller (normally the cradlec CLI), which prints the diagnostic and exits.

Exception Hierarchy
-------------------
TranslationError (base, "Error: <detail>.")
├── InputExhaustedError - advance() found no more input
└── ExpectedError ("Error: <what> expected.")
    ├── UnexpectedCharacterError - match() found a different character
    └── InvalidNameError - a name was required but the lookahead is not a letter

Output already written to the sink before the error is never retracted.
When the error passes through cradle.control.compiler.translate(), the text
emitted so far is attached as ``partial_output``.
"""

from typing import NoReturn, Optional

from cradle.errors import CradleError, SourceLocation


# =============================================================================
# Base Translation Exception
# =============================================================================

class TranslationError(CradleError):
    """
    Base exception for all translation errors.

    Attributes:
        message: The error detail, without the "Error: " prefix
        location: Where in the input the error occurred (optional)
        partial_output: Text emitted before the error (set by translate())
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
    ):
        self.message = message
        self.location = location
        self.partial_output: Optional[str] = None
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"Error: {self.message}."

    def describe(self) -> str:
        """
        Format the diagnostic with its source location on a second line.

            Error: e expected.
              at prog.txt:1:4
        """
        if self.location is None:
            return str(self)
        return f"{self}\n  at {self.location}"


class InputExhaustedError(TranslationError):
    """
    The input ended while the translator still needed a character.

    Reaching the end of the stream is never a normal end state: every
    construct, including the outermost program, must be closed by an
    explicit terminator character.
    """

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__("Unexpected end of input", location=location)


# =============================================================================
# "X expected" Errors
# =============================================================================

class ExpectedError(TranslationError):
    """
    A specific token was required at the current position.

    Attributes:
        expected: Description of what was required ("e", "=", "Name", "End")
    """

    def __init__(self, expected: str, location: Optional[SourceLocation] = None):
        self.expected = expected
        super().__init__(f"{expected} expected", location=location)


class UnexpectedCharacterError(ExpectedError):
    """
    match() found a lookahead different from the required character.

    Attributes:
        found: The character actually under the lookahead
    """

    def __init__(
        self,
        expected: str,
        found: str,
        location: Optional[SourceLocation] = None,
    ):
        self.found = found
        super().__init__(expected, location=location)


class InvalidNameError(ExpectedError):
    """
    A name was required but the lookahead is not an ASCII letter.

    Attributes:
        found: The offending lookahead character
    """

    def __init__(self, found: str, location: Optional[SourceLocation] = None):
        self.found = found
        super().__init__("Name", location=location)


# =============================================================================
# Reporting Helpers
# =============================================================================

def abort(detail: str, location: Optional[SourceLocation] = None) -> NoReturn:
    """Report an error and stop translating."""
    raise TranslationError(detail, location=location)


def expected(what: str, location: Optional[SourceLocation] = None) -> NoReturn:
    """Report what was expected and stop translating."""
    raise ExpectedError(what, location=location)
