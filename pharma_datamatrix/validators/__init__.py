"""
Validation modules for the GS1 record parser.
"""

from .validators import (
    validate_check_digit,
    validate_numeric,
    validate_cset82,
    calculate_check_digit_mod10,
    ValidationResult,
    CSET82,
    NUMERIC,
)

__all__ = [
    "validate_check_digit",
    "validate_numeric",
    "validate_cset82",
    "calculate_check_digit_mod10",
    "ValidationResult",
    "CSET82",
    "NUMERIC",
]
