"""
Core parsing modules for the GS1 record parser.
"""

from .parser import parse_gs1, ParseOptions, ParsedRecord, FieldExtractor
from .scanner import AIScanner, Cursor, ScannedElement
from .ai_catalog import AI_CATALOG, AIDefinition
from .ndc import gtin_to_ndc, ndc_search_queries
from .dates import format_expiration, resolve_expiration, resolve_century, expiry_status

__all__ = [
    "parse_gs1",
    "ParseOptions",
    "ParsedRecord",
    "FieldExtractor",
    "AIScanner",
    "Cursor",
    "ScannedElement",
    "AI_CATALOG",
    "AIDefinition",
    "gtin_to_ndc",
    "ndc_search_queries",
    "format_expiration",
    "resolve_expiration",
    "resolve_century",
    "expiry_status",
]
