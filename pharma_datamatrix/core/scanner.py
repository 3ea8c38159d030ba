"""
Cursor-based Application Identifier scanner.

Walks a GS1 element string left to right:

    01 00349281589058 17 131028 10 0U42275AA
    ^cursor=0         ^16       ^24

At each position the two-character AI is looked up in AI_CATALOG. Fixed
length values are sliced off and the cursor advances past them; a terminal
(variable length) value takes the remainder of the string. Scanning stops
at the first unknown AI, at a fixed value that is truncated or not numeric,
or after a terminal value. The reason for an early stop is kept on the
scanner as a ParseError; nothing is yielded for the offending field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .ai_catalog import AI_CODE_LENGTH, AIDefinition, get_definition
from ..errors import ErrorCode, ParseError
from ..validators.validators import validate_numeric


@dataclass
class Cursor:
    """Read position within a payload."""
    text: str
    position: int = 0

    @property
    def remaining(self) -> int:
        return len(self.text) - self.position

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.text)

    def peek(self, length: int) -> str:
        return self.text[self.position:self.position + length]

    def take(self, length: int) -> str:
        value = self.peek(length)
        self.position += len(value)
        return value

    def take_rest(self) -> str:
        value = self.text[self.position:]
        self.position = len(self.text)
        return value


@dataclass(frozen=True)
class ScannedElement:
    """One AI and its value, with its span in the payload."""
    definition: AIDefinition
    value: str
    start_index: int
    end_index: int

    @property
    def ai(self) -> str:
        return self.definition.ai


class AIScanner:
    """
    Iterates the (AI, value) elements of a payload.

    Usage:
        scanner = AIScanner(payload)
        for element in scanner:
            ...
        if scanner.stop_reason: ...
    """

    def __init__(self, payload: str, start: int = 0):
        self.cursor = Cursor(payload, start)
        self.stop_reason: Optional[ParseError] = None

    def __iter__(self) -> Iterator[ScannedElement]:
        cursor = self.cursor
        while not cursor.exhausted:
            start = cursor.position
            ai = cursor.peek(AI_CODE_LENGTH)
            definition = get_definition(ai)

            if definition is None:
                self._stop(ErrorCode.UNKNOWN_AI, f"Unrecognised AI {ai!r}", start, ai)
                return

            if definition.terminal:
                cursor.take(AI_CODE_LENGTH)
                value = cursor.take_rest()
                yield ScannedElement(definition, value, start, cursor.position)
                return

            needed = AI_CODE_LENGTH + definition.fixed_length
            if cursor.remaining < needed:
                self._stop(
                    ErrorCode.TRUNCATED_DATA,
                    f"AI({ai}) needs {definition.fixed_length} characters, "
                    f"only {cursor.remaining - AI_CODE_LENGTH} left",
                    start,
                    ai,
                )
                return

            value = cursor.peek(needed)[AI_CODE_LENGTH:]
            if definition.numeric and not validate_numeric(value, definition.fixed_length).valid:
                self._stop(
                    ErrorCode.INVALID_FORMAT,
                    f"AI({ai}) value {value!r} is not numeric",
                    start,
                    ai,
                )
                return

            cursor.take(needed)
            yield ScannedElement(definition, value, start, cursor.position)

    def _stop(self, code: ErrorCode, message: str, at_index: int, ai: str) -> None:
        self.stop_reason = ParseError(
            code=code.value, message=message, at_index=at_index, ai=ai
        )
