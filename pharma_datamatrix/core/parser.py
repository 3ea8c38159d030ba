"""
GS1 Data Matrix Record Parser

Turns the text decoded from a pharmaceutical GS1 Data Matrix into a
structured record:

    010034928158905817131028100U42275AA
    (01) GTIN        00349281589058  -> NDC 49281-5890-58
    (17) Expiry      131028          -> October 28, 2013
    (10) Batch/Lot   0U42275AA

Parsing never raises for bad payload content. Whatever was extracted before
a problem is returned, and the problem is recorded in ``errors`` or
``warnings`` on the record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .dates import DEFAULT_CENTURY_CUTOFF, format_expiration
from .ndc import gtin_to_ndc
from .scanner import AIScanner, ScannedElement
from ..errors import ErrorCode, InvalidDate, ParseError
from ..validators.validators import validate_check_digit, validate_cset82

logger = logging.getLogger(__name__)

GS1_DATAMATRIX_SYMBOLOGY = "]d2"


@dataclass
class ParseOptions:
    """
    Configuration options for parsing.

    Attributes:
        century_cutoff: Two-digit years up to this value are 20YY, above are 19YY
        verify_check_digit: Warn when the GTIN check digit does not match
        strip_symbology: Drop a leading "]d2" symbology identifier
    """
    century_cutoff: int = DEFAULT_CENTURY_CUTOFF
    verify_check_digit: bool = True
    strip_symbology: bool = False


@dataclass
class ParsedRecord:
    """
    Structured identification record for one payload.

    Attributes:
        raw: Original payload
        gtin: 14-digit GTIN from AI (01)
        ndc: NDC derived from gtin, LLLLL-PPPP-SS
        expiration_date_raw: YYMMDD from AI (17)
        expiration_date: Human-readable form of expiration_date_raw
        lot_number: AI (10) value
        serial_number: AI (21) value
        errors: Problems that prevented a field from being extracted
        warnings: Non-blocking observations (check digit, charset, ...)
    """
    raw: str
    gtin: Optional[str] = None
    ndc: Optional[str] = None
    expiration_date_raw: Optional[str] = None
    expiration_date: Optional[str] = None
    lot_number: Optional[str] = None
    serial_number: Optional[str] = None
    errors: List[ParseError] = field(default_factory=list)
    warnings: List[ParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'raw': self.raw,
            'gtin': self.gtin,
            'ndc': self.ndc,
            'expiration_date_raw': self.expiration_date_raw,
            'expiration_date': self.expiration_date,
            'lot_number': self.lot_number,
            'serial_number': self.serial_number,
            'errors': [
                {
                    'code': e.code,
                    'message': e.message,
                    'at_index': e.at_index,
                    'ai': e.ai,
                }
                for e in self.errors
            ],
            'warnings': [
                {
                    'code': w.code,
                    'message': w.message,
                    'at_index': w.at_index,
                    'ai': w.ai,
                }
                for w in self.warnings
            ],
        }


class FieldExtractor:
    """
    Collects scanned elements into record fields.

    Derived values (NDC, formatted expiry) are computed here, so they are
    only ever set alongside the field they come from.
    """

    def __init__(self, options: ParseOptions):
        self.options = options
        self.fields: Dict[str, Optional[str]] = {}
        self.errors: List[ParseError] = []
        self.warnings: List[ParseError] = []

    def accept(self, element: ScannedElement) -> bool:
        """
        Record one element. Returns False when scanning should stop.
        """
        name = element.definition.field
        if name in self.fields:
            self.warnings.append(ParseError(
                code=ErrorCode.DUPLICATE_AI.value,
                message=f"AI({element.ai}) repeated; keeping the first value",
                at_index=element.start_index,
                ai=element.ai,
            ))
            return False

        if element.ai == "01":
            self._extract_gtin(element)
        elif element.ai == "17":
            self._extract_expiry(element)
        else:
            self._extract_text(element)
        return True

    def _extract_gtin(self, element: ScannedElement) -> None:
        ndc = gtin_to_ndc(element.value)
        self.fields["gtin"] = element.value
        self.fields["ndc"] = ndc

        if self.options.verify_check_digit:
            check = validate_check_digit(element.value)
            if not check.valid:
                self.warnings.append(ParseError(
                    code=ErrorCode.INVALID_CHECK_DIGIT.value,
                    message="; ".join(check.errors),
                    at_index=element.start_index,
                    ai=element.ai,
                ))

    def _extract_expiry(self, element: ScannedElement) -> None:
        self.fields["expiration_date_raw"] = element.value
        try:
            self.fields["expiration_date"] = format_expiration(
                element.value, self.options.century_cutoff
            )
        except InvalidDate as exc:
            self.errors.append(ParseError(
                code=ErrorCode.INVALID_DATE.value,
                message=str(exc),
                at_index=element.start_index,
                ai=element.ai,
            ))

    def _extract_text(self, element: ScannedElement) -> None:
        self.fields[element.definition.field] = element.value
        charset = validate_cset82(element.value)
        if not charset.valid:
            self.warnings.append(ParseError(
                code=ErrorCode.INVALID_CHARACTERS.value,
                message="; ".join(charset.warnings),
                at_index=element.start_index,
                ai=element.ai,
            ))

    def build(self, raw: str) -> ParsedRecord:
        return ParsedRecord(
            raw=raw,
            errors=list(self.errors),
            warnings=list(self.warnings),
            **self.fields,
        )


def parse_gs1(payload: str, options: Optional[ParseOptions] = None) -> ParsedRecord:
    """
    Parse a GS1 element string without separators into a ParsedRecord.

    Recognised AIs: (01) GTIN, (17) expiry, (10) batch/lot, (21) serial.
    (10) and (21) take the remainder of the payload.

    Args:
        payload: Decoded barcode text
        options: Parse options (defaults used if None)

    Returns:
        ParsedRecord; check ``errors``/``warnings`` for partial results
    """
    options = options or ParseOptions()
    extractor = FieldExtractor(options)

    start = 0
    if options.strip_symbology and payload.startswith(GS1_DATAMATRIX_SYMBOLOGY):
        start = len(GS1_DATAMATRIX_SYMBOLOGY)

    try:
        scanner = AIScanner(payload, start=start)
        for element in scanner:
            if not extractor.accept(element):
                break
        if scanner.stop_reason is not None:
            extractor.errors.append(scanner.stop_reason)
    except Exception as exc:
        logger.warning("Error parsing GS1 data %r: %s", payload, exc, exc_info=True)
        extractor.errors.append(ParseError(
            code=ErrorCode.PARSE_ERROR.value,
            message=str(exc),
        ))

    record = extractor.build(payload)
    logger.debug(
        "Parsed %r: gtin=%s expiry=%s lot=%s errors=%d",
        payload, record.gtin, record.expiration_date_raw,
        record.lot_number, len(record.errors),
    )
    return record
