"""Perceptual color classes: Oklab and its polar form Oklch (D65 whitepoint)."""

import math
from typing import ClassVar, Tuple

import numpy as np

from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ApproxEq, ColorBase, build_registry, channel

_F = np.float32


class _LinearChannels:
    """red/green/blue of a perceptual color are its linear sRGB components."""
    __slots__ = ()

    def red(self):
        return self.to_linear_srgb32().r  # type: ignore[attr-defined]

    def green(self):
        return self.to_linear_srgb32().g  # type: ignore[attr-defined]

    def blue(self):
        return self.to_linear_srgb32().b  # type: ignore[attr-defined]


class Oklab32(_LinearChannels, ColorBase, ApproxEq):
    """
    Oklab color, three float32 components.

    - l: perceived lightness
    - a: distance along the greenish cyan to purplish red axis
    - b: distance along the sky blue to mustard yellow axis
    """
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "oklab"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("l", "a", "b")

    L_MIN: ClassVar[float] = 0.0
    L_MAX: ClassVar[float] = 100.0
    A_MIN: ClassVar[float] = -0.5
    A_MAX: ClassVar[float] = 0.5
    B_MIN: ClassVar[float] = -0.5
    B_MAX: ClassVar[float] = 0.5

    # lightness only has a lower bound when clamping
    minima: ClassVar[Tuple[float, ...]] = (_F(L_MIN), _F(A_MIN), _F(B_MIN))
    maxima: ClassVar[Tuple[float, ...]] = (_F(math.inf), _F(A_MAX), _F(B_MAX))

    l = channel(0, "Perceived lightness.")
    a = channel(1, "Green/red axis.")
    b = channel(2, "Blue/yellow axis.")

    def luminosity(self):
        return self.l


class Oklch32(_LinearChannels, ColorBase, ApproxEq):
    """
    Oklch color, the polar form of Oklab.

    - l: perceived lightness
    - c: chroma
    - h: hue angle in degrees, 0 along +a (purplish red), 90 along +b (mustard yellow)

    Distances are measured after converting to Oklab, so hues on either side of
    0 degrees are close.
    """
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "oklch"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("l", "c", "h")

    L_MIN: ClassVar[float] = 0.0
    L_MAX: ClassVar[float] = 100.0
    C_MIN: ClassVar[float] = 0.0
    C_MAX: ClassVar[float] = 0.5
    H_MIN: ClassVar[float] = 0.0
    H_MAX: ClassVar[float] = 360.0

    minima: ClassVar[Tuple[float, ...]] = (_F(L_MIN), _F(C_MIN), _F(H_MIN))
    maxima: ClassVar[Tuple[float, ...]] = (_F(L_MAX), _F(C_MAX), _F(H_MAX))

    l = channel(0, "Perceived lightness.")
    c = channel(1, "Chroma.")
    h = channel(2, "Hue angle in degrees.")

    def luminosity(self):
        return self.l

    def hue(self):
        return self.h


oklab_tuple_to_class = build_registry(
    Oklab32,
    Oklch32,
)
