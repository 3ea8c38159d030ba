"""
Preprocessing recipes and decode options.

A recipe is a fixed chain of filters applied to the photograph before it is
handed to the symbol reader, in this order:

    grayscale -> median (denoise) -> linear (gain*v + bias) -> sharpen
    -> threshold (optional) -> rotate (per attempt)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DATA_MATRIX = "DataMatrix"


@dataclass(frozen=True)
class PreprocessRecipe:
    """
    Named filter chain.

    Attributes:
        name: Catalog name
        median_size: Median filter window (odd), 0 to skip
        gain: Linear contrast multiplier
        bias: Linear contrast offset
        sharpen_sigma: Unsharp mask radius; None uses the mild default sharpen
        threshold: Binarisation level (0-255); None keeps grey levels
    """
    name: str
    median_size: int = 3
    gain: float = 1.0
    bias: float = 0.0
    sharpen_sigma: Optional[float] = None
    threshold: Optional[int] = None


@dataclass(frozen=True)
class DecodeOptions:
    """
    Options passed to the symbol reader.

    Attributes:
        symbology: Restrict detection to one format; None accepts any
        try_harder: Spend more effort (rotations, downscaling); None leaves
            the reader's own setting
        max_symbols: Upper bound on symbols returned per image; None keeps all
    """
    symbology: Optional[str] = DATA_MATRIX
    try_harder: Optional[bool] = True
    max_symbols: Optional[int] = 10


STANDARD = PreprocessRecipe(
    name="standard",
    median_size=3,
    gain=1.6,
    bias=-30,
)

ENHANCED = PreprocessRecipe(
    name="enhanced",
    median_size=5,
    gain=2.0,
    bias=-50,
    sharpen_sigma=1.5,
    threshold=128,
)

DATA_MATRIX_OPTIONS = DecodeOptions()

# Unprocessed fallback: reader defaults, any format, every symbol
DEFAULT_OPTIONS = DecodeOptions(symbology=None, try_harder=None, max_symbols=None)
