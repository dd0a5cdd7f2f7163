"""Pillow adapter.

Pillow works with 8-bit gamma encoded sRGB, so float colors are quantized on
the way out and alpha defaults to opaque when the source has none.
"""

from __future__ import annotations

import logging
from typing import Tuple, Union

import numpy as np
from PIL import Image, ImageColor

from ..colors.color_base import ColorBase
from ..colors.srgb import Srgb8, Srgba8, Srgb32, Srgba32
from ..conversions import np_convert
from ..types.format_type import FormatType, UNORM8_MAX

logger = logging.getLogger(__name__)

SRGB_CLASSES = (Srgb8, Srgba8, Srgb32, Srgba32)
PIL_MODES = ("RGB", "RGBA")

PilColor = Union[Tuple[int, int, int], Tuple[int, int, int, int]]


def _check_mode(mode: str) -> str:
    if mode not in PIL_MODES:
        raise ValueError(f"Unsupported Pillow mode {mode!r}; expected one of {PIL_MODES}")
    return mode


def to_pil_color(color: ColorBase, mode: str = "RGBA") -> PilColor:
    """
    Convert an sRGB color into a Pillow color tuple.

    Args:
        color: Srgb8, Srgba8, Srgb32 or Srgba32
        mode: "RGBA" (alpha appended, opaque when absent) or "RGB"

    Returns:
        Tuple of 8-bit components in r, g, b[, a] order.
    """
    if not isinstance(color, SRGB_CLASSES):
        raise TypeError(f"Pillow colors are built from sRGB colors, got {type(color).__name__}")
    _check_mode(mode)
    rgba = color.to_srgba8()
    if mode == "RGB":
        if rgba.a != UNORM8_MAX:
            logger.debug("dropping alpha %d converting %r to an RGB Pillow color", rgba.a, color)
        return (rgba.r, rgba.g, rgba.b)
    return (rgba.r, rgba.g, rgba.b, rgba.a)


def from_pil_color(value: Union[str, PilColor]) -> Union[Srgb8, Srgba8]:
    """
    Build a color from a Pillow color tuple or color string.

    Strings go through :func:`PIL.ImageColor.getrgb` ("#ff8000", "red",
    "hsl(0, 100%, 50%)", ...). Three components give an Srgb8, four an Srgba8.
    """
    if isinstance(value, str):
        value = ImageColor.getrgb(value)
    components = tuple(value)
    if len(components) == 3:
        return Srgb8(*components)
    if len(components) == 4:
        return Srgba8(*components)
    raise ValueError(f"Pillow colors have 3 or 4 components, got {len(components)}")


def swatch(color: ColorBase, size: Tuple[int, int] = (16, 16), mode: str = "RGBA") -> Image.Image:
    """Image of ``size`` filled with ``color``."""
    return Image.new(_check_mode(mode), size, to_pil_color(color, mode))


def image_from_array(
    array: np.ndarray,
    from_space: str = "srgb",
    input_type: FormatType = FormatType.INT,
    mode: str = "RGBA",
) -> Image.Image:
    """
    Build a Pillow image from an ``(height, width, channels)`` array in any space.

    The array is converted with :func:`acolor.conversions.np_convert` to 8-bit
    sRGB(A) first.
    """
    arr = np.asarray(array)
    if arr.ndim != 3:
        raise ValueError(f"Expected a (height, width, channels) array, got shape {arr.shape}")
    target = "srgba" if _check_mode(mode) == "RGBA" else "srgb"
    pixels = np_convert(arr, from_space, target, input_type, FormatType.INT)  # type: ignore[arg-type]
    # uint8 (h, w, 3) and (h, w, 4) arrays map to RGB and RGBA
    return Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))


__all__ = ["to_pil_color", "from_pil_color", "swatch", "image_from_array"]
