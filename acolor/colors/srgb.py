from typing import ClassVar, Tuple

import numpy as np

from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ApproxEq, ColorBase, WithAlpha, build_registry, channel

_ONE = np.float32(1.0)
_ZERO = np.float32(0.0)


class _RGB:
    """Component accessors shared by the sRGB family."""
    __slots__ = ()

    r = channel(0, "Red component.")
    g = channel(1, "Green component.")
    b = channel(2, "Blue component.")


class _RGBA(_RGB):
    __slots__ = ()

    a = channel(3, "Alpha component; linear, never gamma encoded.")


class Srgb8(_RGB, ColorBase):
    """Gamma encoded sRGB, 8 bits per component."""
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "srgb"
    format_type: ClassVar[FormatType] = FormatType.INT
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    minima: ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)


class Srgba8(_RGBA, ColorBase, WithAlpha):
    """Gamma encoded sRGB with alpha, 8 bits per component."""
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "srgba"
    format_type: ClassVar[FormatType] = FormatType.INT
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    minima: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)


class Srgb32(_RGB, ColorBase, ApproxEq):
    """Gamma encoded sRGB, float32 components in ``[0, 1]``."""
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "srgb"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    minima: ClassVar[Tuple[float, ...]] = (_ZERO, _ZERO, _ZERO)
    maxima: ClassVar[Tuple[float, ...]] = (_ONE, _ONE, _ONE)


class Srgba32(_RGBA, ColorBase, WithAlpha, ApproxEq):
    """Gamma encoded sRGB with alpha, float32 components in ``[0, 1]``."""
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "srgba"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    minima: ClassVar[Tuple[float, ...]] = (_ZERO, _ZERO, _ZERO, _ZERO)
    maxima: ClassVar[Tuple[float, ...]] = (_ONE, _ONE, _ONE, _ONE)


class LinearSrgb32(_RGB, ColorBase, ApproxEq):
    """Linear light sRGB. Components may leave ``[0, 1]`` after conversions."""
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "linear_srgb"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    minima: ClassVar[Tuple[float, ...]] = (_ZERO, _ZERO, _ZERO)
    maxima: ClassVar[Tuple[float, ...]] = (_ONE, _ONE, _ONE)


class LinearSrgba32(_RGBA, ColorBase, WithAlpha, ApproxEq):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "linear_srgba"
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    minima: ClassVar[Tuple[float, ...]] = (_ZERO, _ZERO, _ZERO, _ZERO)
    maxima: ClassVar[Tuple[float, ...]] = (_ONE, _ONE, _ONE, _ONE)


srgb_tuple_to_class = build_registry(
    Srgb8,
    Srgba8,
    Srgb32,
    Srgba32,
    LinearSrgb32,
    LinearSrgba32,
)
