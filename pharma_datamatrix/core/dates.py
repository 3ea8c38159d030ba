"""
Expiration date handling for AI (17) values.

YYMMDD century rule:
- YY <= cutoff (default 30): 20YY
- YY >  cutoff:              19YY

DD=00 follows the GS1 convention and means the last day of the month.
Any other impossible calendar date raises InvalidDate instead of rolling
over into a neighbouring month.
"""

from __future__ import annotations

from calendar import monthrange
from datetime import date
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from ..errors import InvalidDate

DEFAULT_CENTURY_CUTOFF = 30

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def resolve_century(yy: int, cutoff: int = DEFAULT_CENTURY_CUTOFF) -> int:
    """Map a two-digit year to a four-digit year using the sliding window."""
    return 2000 + yy if yy <= cutoff else 1900 + yy


def resolve_expiration(yymmdd: str, cutoff: int = DEFAULT_CENTURY_CUTOFF) -> date:
    """
    Convert a 6-digit YYMMDD value to a date.

    Raises:
        InvalidDate: value is not 6 digits or names no real date
    """
    if len(yymmdd) != 6 or not yymmdd.isdigit():
        raise InvalidDate(f"Expected 6 digits YYMMDD, got {yymmdd!r}")

    yy = int(yymmdd[0:2])
    mm = int(yymmdd[2:4])
    dd = int(yymmdd[4:6])
    year = resolve_century(yy, cutoff)

    if mm < 1 or mm > 12:
        raise InvalidDate(f"Invalid month {mm:02d} in {yymmdd!r}")

    max_day = monthrange(year, mm)[1]
    if dd == 0:
        dd = max_day
    elif dd > max_day:
        raise InvalidDate(f"Day {dd} invalid for month {mm} in year {year}")

    return date(year, mm, dd)


def format_expiration(yymmdd: str, cutoff: int = DEFAULT_CENTURY_CUTOFF) -> str:
    """
    Format YYMMDD as a human-readable date, e.g. "131028" -> "October 28, 2013".

    Input that is not exactly 6 characters is returned unchanged.

    Raises:
        InvalidDate: 6 characters that do not name a real date
    """
    if not yymmdd or len(yymmdd) != 6:
        return yymmdd

    value = resolve_expiration(yymmdd, cutoff)
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def expiry_status(
    expiration: Union[date, str, None],
    near_months: int = 6,
    today: Optional[date] = None,
) -> str:
    """
    Returns: Valid, Near Expiry, Expired, Unknown

    ``expiration`` may be a date or a raw YYMMDD string.
    """
    if expiration is None:
        return "Unknown"
    if isinstance(expiration, str):
        try:
            expiration = resolve_expiration(expiration)
        except InvalidDate:
            return "Unknown"

    today = today or date.today()
    if expiration < today:
        return "Expired"
    if expiration <= today + relativedelta(months=near_months):
        return "Near Expiry"
    return "Valid"
