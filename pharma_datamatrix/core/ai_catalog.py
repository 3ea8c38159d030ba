"""
Application Identifier catalog.

Dispatch table from two-character AI code to its field descriptor. Fixed
length AIs carry their value length; terminal AIs are variable length and
consume the rest of the payload, since no separator convention is assumed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

AI_CODE_LENGTH = 2


@dataclass(frozen=True)
class AIDefinition:
    """Definition of a GS1 Application Identifier recognised by the scanner."""
    ai: str
    title: str
    field: str  # ParsedRecord attribute the value is stored in
    fixed_length: Optional[int]  # None if variable
    numeric: bool = False

    @property
    def terminal(self) -> bool:
        """Variable-length AIs take everything that follows them."""
        return self.fixed_length is None


AI_CATALOG: Dict[str, AIDefinition] = {
    "01": AIDefinition(
        ai="01",
        title="GTIN",
        field="gtin",
        fixed_length=14,
        numeric=True,
    ),
    "17": AIDefinition(
        ai="17",
        title="USE BY or EXPIRY",
        field="expiration_date_raw",
        fixed_length=6,
        numeric=True,
    ),
    "10": AIDefinition(
        ai="10",
        title="BATCH/LOT",
        field="lot_number",
        fixed_length=None,
    ),
    "21": AIDefinition(
        ai="21",
        title="SERIAL",
        field="serial_number",
        fixed_length=None,
    ),
}


def get_definition(ai: str) -> Optional[AIDefinition]:
    return AI_CATALOG.get(ai)
