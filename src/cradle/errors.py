"""
Cradle Error Hierarchy
======================

This module defines the root of the exception hierarchy for the whole
package. All exceptions inherit from CradleError, allowing callers to
catch every translator-related error with a single except clause.

Exception Hierarchy
-------------------
CradleError (base)
└── TranslationError (see cradle.control.errors)
    ├── InputExhaustedError - ran out of input mid-construct
    └── ExpectedError - a specific token was required
        ├── UnexpectedCharacterError - match() saw the wrong character
        └── InvalidNameError - a name was required

Error messages follow the classic one-line format:
    Error: <detail>.
    Error: <token> expected.
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class CradleError(Exception):
    """
    Base exception for all cradle errors.

        try:
            translate("iaee")
        except CradleError as e:
            print(e)
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the input stream for error reporting.

    Attributes:
        filename: Name of the source (or "<input>" for in-memory input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"
