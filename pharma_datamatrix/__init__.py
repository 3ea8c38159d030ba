"""
GS1 Data Matrix Reader for Pharmaceutical Packaging

Decodes a GS1 Data Matrix from a photograph, trying a fixed sequence of
preprocessing recipes and rotations, and turns the payload into a record
with GTIN, NDC, expiration date, lot and serial number.
"""

from .core.parser import parse_gs1, ParseOptions, ParsedRecord
from .core.ndc import gtin_to_ndc, ndc_search_queries
from .core.dates import format_expiration, resolve_expiration, expiry_status
from .decode.pipeline import (
    DecodePipeline,
    DecodeOutcome,
    DecodeAttempt,
    PipelineState,
    DEFAULT_STRATEGIES,
    decode_image,
)
from .errors import (
    ErrorCode,
    ParseError,
    PharmaDataMatrixError,
    UsageError,
    ProcessingError,
    DecodeFailure,
    InvalidFormat,
    InvalidDate,
)
from .formatters.json_formatter import (
    record_to_dict,
    record_to_json,
    parse_gs1_to_dict,
    parse_gs1_to_json,
)
from .lookup import lookup_ndc, LookupResult
from .settings import DEFAULT_SETTINGS, load_settings

__version__ = "1.0.0"
__all__ = [
    "parse_gs1",
    "ParseOptions",
    "ParsedRecord",
    "gtin_to_ndc",
    "ndc_search_queries",
    "format_expiration",
    "resolve_expiration",
    "expiry_status",
    "DecodePipeline",
    "DecodeOutcome",
    "DecodeAttempt",
    "PipelineState",
    "DEFAULT_STRATEGIES",
    "decode_image",
    "ErrorCode",
    "ParseError",
    "PharmaDataMatrixError",
    "UsageError",
    "ProcessingError",
    "DecodeFailure",
    "InvalidFormat",
    "InvalidDate",
    "record_to_dict",
    "record_to_json",
    "parse_gs1_to_dict",
    "parse_gs1_to_json",
    "lookup_ndc",
    "LookupResult",
    "DEFAULT_SETTINGS",
    "load_settings",
]
