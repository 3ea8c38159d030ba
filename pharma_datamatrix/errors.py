"""
Error types for the Data Matrix reader.

Exceptions are raised for conditions the caller must act on (bad
invocation, unreadable image, exhausted decode strategies, malformed
identifiers). Parse problems inside a payload are never raised; they are
attached to the record as ``ParseError`` annotations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Error and warning codes attached to parsed records."""
    UNKNOWN_AI = "UNKNOWN_AI"
    TRUNCATED_DATA = "TRUNCATED_DATA"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_DATE = "INVALID_DATE"
    INVALID_CHECK_DIGIT = "INVALID_CHECK_DIGIT"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    DUPLICATE_AI = "DUPLICATE_AI"
    PARSE_ERROR = "PARSE_ERROR"


@dataclass
class ParseError:
    """Represents a parsing error or warning."""
    code: str
    message: str
    at_index: Optional[int] = None
    ai: Optional[str] = None


class PharmaDataMatrixError(Exception):
    """Base class for all errors raised by this package."""


class UsageError(PharmaDataMatrixError):
    """Bad command line invocation (missing or nonexistent image)."""


class ProcessingError(PharmaDataMatrixError):
    """The source image could not be read or opened."""


class DecodeFailure(PharmaDataMatrixError):
    """No decode strategy produced a valid Data Matrix symbol."""

    def __init__(self, message: str = "Decode failed", attempts=()):
        super().__init__(message)
        self.attempts = tuple(attempts)


class InvalidFormat(PharmaDataMatrixError, ValueError):
    """An identifier does not have the expected shape (e.g. GTIN length)."""


class InvalidDate(PharmaDataMatrixError, ValueError):
    """A YYMMDD value does not name a real calendar date."""
