from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np

Scalar = Union[int, float, np.float32]
ScalarVector = Tuple[Scalar, ...]
ColorSpace = Literal["srgb", "srgba", "linear_srgb", "linear_srgba", "oklab", "oklch"]
BaseSpace = Literal["srgb", "linear_srgb", "oklab", "oklch"]

ALPHA_SPACES = {"srgba", "linear_srgba"}
HUE_SPACES = {"oklch"}
COLOR_SPACES = ("srgb", "srgba", "linear_srgb", "linear_srgba", "oklab", "oklch")

# Conversion chain; every space reaches every other by walking it.
SPACE_CHAIN: Tuple[BaseSpace, ...] = ("srgb", "linear_srgb", "oklab", "oklch")


def has_alpha_channel(color_space: str) -> bool:
    return color_space.lower() in ALPHA_SPACES


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space is a polar (hue-based) space.

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES


def base_space(color_space: str) -> BaseSpace:
    """
    Strip the alpha suffix from a color space name.

    Args:
        color_space: Color space string, e.g. "linear_srgba"
    Returns:
        The matching opaque space, e.g. "linear_srgb"
    Raises:
        ValueError: if the space is unknown
    """
    space = color_space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown color space: {color_space!r}")
    if space in ALPHA_SPACES:
        return space[:-1]  # type: ignore[return-value]
    return space  # type: ignore[return-value]
