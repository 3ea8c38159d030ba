"""
Symbol reading via zxing-cpp.

Text is requested in plain mode so GS1 payloads come back as the raw
element string ("0100349281589058...") rather than the bracketed
human-readable form ("(01)00349281589058...").
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import numpy as np
import zxingcpp

from .preprocess import open_image
from .recipes import DecodeOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymbolResult:
    """One symbol reported by the reader."""
    text: str
    is_valid: bool
    format: str = ""


def _friendly_format(fmt_obj) -> str:
    return str(fmt_obj).replace("BarcodeFormat.", "")


def read_symbols(image_bytes: bytes, options: DecodeOptions) -> List[SymbolResult]:
    """
    Decode all symbols in an encoded image.

    Invalid (checksum/format error) symbols are returned too, flagged with
    ``is_valid=False``, so callers decide what to accept.
    """
    arr = np.asarray(open_image(image_bytes).convert("L"))

    kwargs = {
        "text_mode": zxingcpp.TextMode.Plain,
        "return_errors": True,
    }
    if options.try_harder is not None:
        kwargs["try_rotate"] = options.try_harder
        kwargs["try_downscale"] = options.try_harder
    if options.symbology is not None:
        kwargs["formats"] = getattr(zxingcpp.BarcodeFormat, options.symbology)

    results = zxingcpp.read_barcodes(arr, **kwargs)

    symbols = [
        SymbolResult(
            text=r.text or "",
            is_valid=bool(r.valid),
            format=_friendly_format(r.format),
        )
        for r in list(results)[:options.max_symbols]
    ]
    logger.debug(
        "Reader found %d symbol(s), %d valid",
        len(symbols), sum(1 for s in symbols if s.is_valid),
    )
    return symbols
