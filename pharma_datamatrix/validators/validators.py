"""
GS1 Validation Functions

Validation helpers used by the record parser:
- Check digit validation (Mod10 for GTIN-14)
- Numeric field validation
- Lot/serial character set validation (CSET82)

Based on GS1 General Specifications.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


# GS1 Character Sets
CSET82 = frozenset(
    '!"%&\'()*+,-./0123456789:;<=>?'
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ_'
    'abcdefghijklmnopqrstuvwxyz'
)

NUMERIC = frozenset('0123456789')


def calculate_check_digit_mod10(digits: str) -> int:
    """
    Calculate GS1 Mod10 check digit.

    Algorithm (GS1 General Specifications):
    1. From right to left, alternate multipliers 3 and 1
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    Args:
        digits: Numeric string without check digit

    Returns:
        Calculated check digit (0-9)
    """
    if not digits or not digits.isdigit():
        raise ValueError("Input must be a non-empty numeric string")

    total = 0
    for i, digit in enumerate(reversed(digits)):
        multiplier = 3 if i % 2 == 0 else 1
        total += int(digit) * multiplier

    return (10 - (total % 10)) % 10


def validate_check_digit(value: str) -> ValidationResult:
    """
    Validate the trailing GS1 check digit of a numeric key (GTIN-8/12/13/14).

    Args:
        value: The complete value including check digit

    Returns:
        ValidationResult with check digit status in meta
    """
    result = ValidationResult(valid=True)

    if not value or not value.isdigit():
        result.valid = False
        result.errors.append("Value must be numeric for check digit validation")
        return result

    if len(value) < 2:
        result.valid = False
        result.errors.append("Value too short for check digit validation")
        return result

    provided_check = int(value[-1])
    calculated_check = calculate_check_digit_mod10(value[:-1])

    result.meta['calculated_check_digit'] = calculated_check
    result.meta['provided_check_digit'] = provided_check
    result.meta['check_digit_valid'] = (provided_check == calculated_check)

    if provided_check != calculated_check:
        result.valid = False
        result.errors.append(
            f"Check digit mismatch: expected {calculated_check}, got {provided_check}"
        )

    return result


def validate_numeric(value: str, fixed_length: Optional[int] = None) -> ValidationResult:
    """
    Validate a numeric field, optionally of an exact length.
    """
    result = ValidationResult(valid=True)

    if not value:
        result.valid = False
        result.errors.append("Value is empty")
        return result

    if not all(c in NUMERIC for c in value):
        result.valid = False
        result.errors.append("Value contains non-numeric characters")
        return result

    if fixed_length is not None and len(value) != fixed_length:
        result.valid = False
        result.errors.append(f"Length must be exactly {fixed_length}, got {len(value)}")

    return result


def validate_cset82(value: str) -> ValidationResult:
    """
    Check a variable-length value against the GS1 CSET82 character set.

    Characters outside the set are reported as warnings only; lot and
    serial values are recorded verbatim either way.
    """
    result = ValidationResult(valid=True)
    invalid_chars = set(value) - CSET82
    if invalid_chars:
        result.valid = False
        result.warnings.append(
            f"Characters outside GS1 CSET82: {''.join(sorted(invalid_chars))!r}"
        )
    return result

