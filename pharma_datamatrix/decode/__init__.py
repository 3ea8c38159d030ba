"""
Data Matrix decode pipeline: preprocessing, symbol reading, strategy fallback.
"""

from .recipes import (
    PreprocessRecipe,
    DecodeOptions,
    STANDARD,
    ENHANCED,
    DATA_MATRIX_OPTIONS,
    DEFAULT_OPTIONS,
)
from .preprocess import apply_recipe, open_image, rotate
from .reader import SymbolResult, read_symbols
from .pipeline import (
    DecodePipeline,
    DecodeAttempt,
    DecodeOutcome,
    PipelineState,
    Acceptance,
    DEFAULT_STRATEGIES,
    decode_image,
)

__all__ = [
    "PreprocessRecipe",
    "DecodeOptions",
    "STANDARD",
    "ENHANCED",
    "DATA_MATRIX_OPTIONS",
    "DEFAULT_OPTIONS",
    "apply_recipe",
    "open_image",
    "rotate",
    "SymbolResult",
    "read_symbols",
    "DecodePipeline",
    "DecodeAttempt",
    "DecodeOutcome",
    "PipelineState",
    "Acceptance",
    "DEFAULT_STRATEGIES",
    "decode_image",
]
