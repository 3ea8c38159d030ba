"""
Image preprocessing with Pillow.

Every call starts from the original encoded bytes and returns a fresh PNG
buffer, so attempts never share pixel data.
"""

from __future__ import annotations

import io
import logging
from typing import List

from PIL import Image, ImageFilter, UnidentifiedImageError

from .recipes import PreprocessRecipe
from ..errors import ProcessingError

logger = logging.getLogger(__name__)

ROTATIONS = (0, 90, 180, 270)

# Clockwise rotation by angle
_TRANSPOSE = {
    90: Image.Transpose.ROTATE_270,
    180: Image.Transpose.ROTATE_180,
    270: Image.Transpose.ROTATE_90,
}


def open_image(image_bytes: bytes) -> Image.Image:
    """
    Decode image bytes into a loaded Pillow image.

    Raises:
        ProcessingError: bytes are not a readable raster image
    """
    try:
        img = Image.open(io.BytesIO(image_bytes))
        img.load()
    except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as exc:
        raise ProcessingError(f"Cannot open image: {exc}") from exc
    return img


def _linear_lut(gain: float, bias: float) -> List[int]:
    return [min(255, max(0, int(round(gain * v + bias)))) for v in range(256)]


def _threshold_lut(level: int) -> List[int]:
    return [255 if v >= level else 0 for v in range(256)]


def rotate(img: Image.Image, angle: int) -> Image.Image:
    if angle not in ROTATIONS:
        raise ValueError(f"Unsupported rotation {angle}; expected one of {ROTATIONS}")
    if angle == 0:
        return img
    return img.transpose(_TRANSPOSE[angle])


def apply_recipe(image_bytes: bytes, recipe: PreprocessRecipe, rotation: int = 0) -> bytes:
    """
    Run a recipe over the source image and return the result as PNG bytes.
    """
    img = open_image(image_bytes).convert("L")

    if recipe.median_size:
        img = img.filter(ImageFilter.MedianFilter(recipe.median_size))

    if recipe.gain != 1.0 or recipe.bias:
        img = img.point(_linear_lut(recipe.gain, recipe.bias))

    if recipe.sharpen_sigma is None:
        img = img.filter(ImageFilter.SHARPEN)
    else:
        img = img.filter(ImageFilter.UnsharpMask(radius=recipe.sharpen_sigma))

    if recipe.threshold is not None:
        img = img.point(_threshold_lut(recipe.threshold))

    img = rotate(img, rotation)

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    logger.debug(
        "Applied recipe %s (rotation %d): %dx%d",
        recipe.name, rotation, img.width, img.height,
    )
    return buffer.getvalue()
