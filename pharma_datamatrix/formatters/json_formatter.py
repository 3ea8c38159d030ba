"""
JSON Formatter for parsed records

Provides clean JSON output with:
- Human-readable field names
- Absent fields omitted
- Optional raw payload and error/warning annotations
"""

from __future__ import annotations

import json
from typing import Any, Dict

from ..core.parser import ParsedRecord, parse_gs1


# Record attribute to human-readable name, in output order
FIELD_NAMES = {
    "gtin": "GTIN Code",
    "ndc": "NDC",
    "expiration_date": "Expiry Date",
    "expiration_date_raw": "Expiry Date (YYMMDD)",
    "lot_number": "Batch/Lot Number",
    "serial_number": "Serial Number",
}


def record_to_dict(
    record: ParsedRecord,
    include_raw: bool = False,
    include_issues: bool = False,
) -> Dict[str, Any]:
    """
    Build a name->value dict from a parsed record.

    Args:
        record: Result of parse_gs1()
        include_raw: Add the original payload under "Raw"
        include_issues: Add "Errors"/"Warnings" lists when non-empty
    """
    output: Dict[str, Any] = {}

    if include_raw:
        output["Raw"] = record.raw

    for attr, name in FIELD_NAMES.items():
        value = getattr(record, attr)
        if value is not None:
            output[name] = value

    if include_issues:
        if record.errors:
            output["Errors"] = [f"[{e.code}] {e.message}" for e in record.errors]
        if record.warnings:
            output["Warnings"] = [f"[{w.code}] {w.message}" for w in record.warnings]

    return output


def record_to_json(record: ParsedRecord, indent: int = 2, **kwargs: Any) -> str:
    """Format a parsed record as JSON text (see record_to_dict for kwargs)."""
    return json.dumps(record_to_dict(record, **kwargs), ensure_ascii=False, indent=indent)


def parse_gs1_to_dict(payload: str, **kwargs: Any) -> Dict[str, Any]:
    """Parse a payload and return the human-readable dict."""
    return record_to_dict(parse_gs1(payload), **kwargs)


def parse_gs1_to_json(payload: str, **kwargs: Any) -> str:
    """
    Parse a payload and return clean JSON.

    Example:
        >>> print(parse_gs1_to_json("010034928158905817131028100U42275AA"))
        {
          "GTIN Code": "00349281589058",
          "NDC": "49281-5890-58",
          "Expiry Date": "October 28, 2013",
          "Expiry Date (YYMMDD)": "131028",
          "Batch/Lot Number": "0U42275AA"
        }
    """
    return record_to_json(parse_gs1(payload), **kwargs)
