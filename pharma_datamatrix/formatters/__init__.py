"""
Output formatters for parsed records.
"""

from .json_formatter import (
    FIELD_NAMES,
    record_to_dict,
    record_to_json,
    parse_gs1_to_dict,
    parse_gs1_to_json,
)

__all__ = [
    "FIELD_NAMES",
    "record_to_dict",
    "record_to_json",
    "parse_gs1_to_dict",
    "parse_gs1_to_json",
]
