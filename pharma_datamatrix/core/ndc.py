"""
GTIN-14 to NDC conversion.

Pharmaceutical GTINs embed the 10-digit NDC behind a 3-digit prefix
(packaging indicator + "03" company prefix), followed by the check digit:

    GTIN 00349281589058 -> drop "003" -> 49281 5890 58 -> NDC 49281-5890-58

Only the 5-4-2 labeler/product/package layout is produced. 4-4-2 and 5-3-2
NDCs cannot be told apart from the GTIN alone and are not detected.
"""

from __future__ import annotations

from typing import List

from ..errors import InvalidFormat

GTIN_LENGTH = 14
PREFIX_LENGTH = 3
LABELER_LENGTH = 5
PRODUCT_LENGTH = 4
PACKAGE_LENGTH = 2


def gtin_to_ndc(gtin: str) -> str:
    """
    Convert a 14-digit GTIN to an NDC in LLLLL-PPPP-SS form.

    Raises:
        InvalidFormat: gtin is not exactly 14 digits
    """
    if not gtin or len(gtin) != GTIN_LENGTH:
        raise InvalidFormat(
            f"Invalid GTIN format. Expected {GTIN_LENGTH} digits, got {gtin!r}"
        )
    if not gtin.isdigit():
        raise InvalidFormat(f"Invalid GTIN format. Non-numeric characters in {gtin!r}")

    body = gtin[PREFIX_LENGTH:]
    labeler = body[:LABELER_LENGTH]
    product = body[LABELER_LENGTH:LABELER_LENGTH + PRODUCT_LENGTH]
    package = body[LABELER_LENGTH + PRODUCT_LENGTH:]

    return f"{labeler}-{product}-{package}"


def ndc_search_queries(ndc: str) -> List[str]:
    """
    OpenFDA search expressions for an NDC, most specific first.

    1. exact product NDC
    2. labeler-product (package code dropped)
    3. labeler prefix wildcard
    """
    digits = ndc.replace("-", "")
    labeler = digits[:LABELER_LENGTH]
    product = digits[LABELER_LENGTH:LABELER_LENGTH + PRODUCT_LENGTH]
    return [
        f'product_ndc:"{ndc}"',
        f'product_ndc:"{labeler}-{product}"',
        f"product_ndc:{labeler}*",
    ]
