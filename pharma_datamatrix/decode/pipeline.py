"""
Decode fallback pipeline.

Runs a fixed, ordered list of decode attempts against one photograph and
stops at the first accepted symbol:

    1. standard          standard recipe, upright, first symbol must be valid
    2. enhanced          enhanced recipe (binarised), upright, same rule
    3. standard-rot90    standard recipe rotated 90/180/270 degrees,
       standard-rot180   first valid symbol among all returned
       standard-rot270
    4. original          unprocessed bytes, reader defaults, first valid symbol

Order matters: cheaper recipes come first and only the first accepted
result is reported, with no ranking across attempts. Attempts are
evaluated one at a time; a failing attempt (filter or reader error) is
logged and counts as "no result". Only an unreadable source image aborts
the run, with ProcessingError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .preprocess import apply_recipe, open_image
from .reader import SymbolResult, read_symbols
from .recipes import (
    DATA_MATRIX_OPTIONS,
    DEFAULT_OPTIONS,
    ENHANCED,
    STANDARD,
    DecodeOptions,
    PreprocessRecipe,
)
from ..errors import DecodeFailure, ProcessingError

logger = logging.getLogger(__name__)

Preprocessor = Callable[[bytes, PreprocessRecipe, int], bytes]
SymbolReader = Callable[[bytes, DecodeOptions], List[SymbolResult]]


class PipelineState(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


class Acceptance(str, Enum):
    """How an attempt picks a result from the symbols it read."""
    FIRST_SYMBOL = "first_symbol"  # only the first symbol, if valid
    FIRST_VALID = "first_valid"    # first valid symbol anywhere in the list


@dataclass(frozen=True)
class DecodeAttempt:
    """
    One strategy entry.

    ``recipe=None`` hands the original bytes to the reader untouched.
    """
    name: str
    recipe: Optional[PreprocessRecipe]
    rotation: int = 0
    options: DecodeOptions = DATA_MATRIX_OPTIONS
    acceptance: Acceptance = Acceptance.FIRST_VALID

    def select(self, symbols: Sequence[SymbolResult]) -> Optional[SymbolResult]:
        if not symbols:
            return None
        if self.acceptance is Acceptance.FIRST_SYMBOL:
            return symbols[0] if symbols[0].is_valid else None
        return next((s for s in symbols if s.is_valid), None)


DEFAULT_STRATEGIES: Tuple[DecodeAttempt, ...] = (
    DecodeAttempt("standard", STANDARD, 0, acceptance=Acceptance.FIRST_SYMBOL),
    DecodeAttempt("enhanced", ENHANCED, 0, acceptance=Acceptance.FIRST_SYMBOL),
    DecodeAttempt("standard-rot90", STANDARD, 90),
    DecodeAttempt("standard-rot180", STANDARD, 180),
    DecodeAttempt("standard-rot270", STANDARD, 270),
    DecodeAttempt("original", None, 0, options=DEFAULT_OPTIONS),
)


@dataclass
class DecodeOutcome:
    """
    Tagged result of a pipeline run.

    Attributes:
        state: SUCCEEDED or EXHAUSTED
        text: Accepted payload (SUCCEEDED only)
        attempt: Name of the attempt that produced ``text``
        attempts_tried: Names of attempts evaluated, in order
    """
    state: PipelineState
    text: Optional[str] = None
    attempt: Optional[str] = None
    attempts_tried: List[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.SUCCEEDED

    def raise_for_failure(self) -> str:
        """Return the payload, or raise DecodeFailure if nothing was accepted."""
        if not self.succeeded or self.text is None:
            raise DecodeFailure("Decode failed", attempts=self.attempts_tried)
        return self.text


class DecodePipeline:
    """
    Evaluates decode strategies in order until one is accepted.

    The preprocessing and reading capabilities are injectable; by default
    Pillow and zxing-cpp are used.
    """

    def __init__(
        self,
        strategies: Sequence[DecodeAttempt] = DEFAULT_STRATEGIES,
        preprocess: Preprocessor = apply_recipe,
        read: SymbolReader = read_symbols,
        validate_source: bool = True,
    ):
        self.strategies = tuple(strategies)
        self.preprocess = preprocess
        self.read = read
        self.validate_source = validate_source

    def decode(self, image_bytes: bytes) -> DecodeOutcome:
        """
        Decode the payload of a photographed Data Matrix symbol.

        Raises:
            ProcessingError: the source image cannot be opened
        """
        if self.validate_source:
            open_image(image_bytes)

        state = PipelineState.PENDING
        tried: List[str] = []
        accepted: Optional[SymbolResult] = None
        pending = iter(self.strategies)

        while state is PipelineState.PENDING:
            attempt = next(pending, None)
            if attempt is None:
                state = PipelineState.EXHAUSTED
                continue

            tried.append(attempt.name)
            accepted = self._run_attempt(attempt, image_bytes)
            if accepted is not None:
                state = PipelineState.SUCCEEDED

        if state is PipelineState.SUCCEEDED:
            logger.info("Decoded with strategy %s after %d attempt(s)", tried[-1], len(tried))
            return DecodeOutcome(
                state=state,
                text=accepted.text,
                attempt=tried[-1],
                attempts_tried=tried,
            )

        logger.info("No valid symbol after %d attempt(s)", len(tried))
        return DecodeOutcome(state=state, attempts_tried=tried)

    def _run_attempt(self, attempt: DecodeAttempt, image_bytes: bytes) -> Optional[SymbolResult]:
        try:
            if attempt.recipe is None:
                buffer = image_bytes
            else:
                buffer = self.preprocess(image_bytes, attempt.recipe, attempt.rotation)
            symbols = self.read(buffer, attempt.options)
        except Exception as exc:
            logger.debug("Attempt %s failed: %s", attempt.name, exc, exc_info=True)
            return None

        selected = attempt.select(symbols)
        logger.debug(
            "Attempt %s: %d symbol(s), %s",
            attempt.name, len(symbols), "accepted" if selected else "rejected",
        )
        return selected


def decode_image(
    path: Union[str, Path],
    pipeline: Optional[DecodePipeline] = None,
) -> DecodeOutcome:
    """
    Read an image file and run the decode pipeline on it.

    Raises:
        ProcessingError: the file cannot be read or is not an image
    """
    try:
        image_bytes = Path(path).read_bytes()
    except OSError as exc:
        raise ProcessingError(f"Cannot read {path}: {exc}") from exc

    return (pipeline or DecodePipeline()).decode(image_bytes)
