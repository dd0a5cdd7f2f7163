from __future__ import annotations
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, Union, cast
from abc import ABC
from functools import total_ordering

import numpy as np
from numpy import ndarray
from boundednumbers import clamp

from .. import backend as B
from ..conversions.numbers import Unorm8
from ..types.format_type import (
    FormatType,
    UNORM8_MAX,
    HUE_360,
    default_format_dtypes,
    format_classes,
    opaque_alpha,
)
from ..types.color_types import ColorSpace, Scalar, ScalarVector, has_alpha_channel, is_hue_space
from ..utils.num_utils import F32_EPSILON, DEFAULT_MAX_ULPS, abs_diff_eq, relative_eq, ulps_eq


def channel(index: int, doc: str) -> property:
    """Read-only named accessor for one component."""
    def getter(self: ColorBase) -> Scalar:
        return self._value[index]
    return property(getter, doc=doc)


@total_ordering
class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace]
    format_type:  ClassVar[FormatType]
    channels:     ClassVar[Tuple[str, ...]]
    minima:       ClassVar[Tuple[Scalar, ...]]
    maxima:       ClassVar[Tuple[Scalar, ...]]
    # patched in by acolor.colors.color to avoid a circular import
    convert: ClassVar[Callable[..., ColorBase]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *components: Any) -> None:
        if len(components) == 1:
            value = components[0]
            # ---- Handle ColorBase input ----
            if isinstance(value, ColorBase):
                components = value.convert(self.mode, self.format_type).value
            elif isinstance(value, (tuple, list, ndarray)):
                components = tuple(value)

        if len(components) != self.num_channels:
            raise ValueError(
                f"{self.__class__.__name__} expects {self.num_channels} components, got {len(components)}"
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(self._coerce(c) for c in components)

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _coerce(cls, component: Any) -> Scalar:
        if cls.format_type == FormatType.INT:
            return clamp(int(component), 0, UNORM8_MAX)
        return format_classes[cls.format_type](component)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def new(cls, *components: Any):
        """Construct with every component clamped to the documented range."""
        if len(components) == 1 and isinstance(components[0], (tuple, list, ndarray)):
            components = tuple(components[0])
        if len(components) != cls.num_channels:
            raise ValueError(f"{cls.__name__} expects {cls.num_channels} components, got {len(components)}")
        return cls(*(
            clamp(cls._coerce(c), lo, hi) for c, lo, hi in zip(components, cls.minima, cls.maxima)
        ))

    @classmethod
    def from_tuple(cls, values: ScalarVector):
        return cls(*values)

    @classmethod
    def from_array(cls, array: Union[ndarray, ScalarVector]):
        arr = np.asarray(array)
        if arr.shape != (cls.num_channels,):
            raise ValueError(f"{cls.__name__} expects an array of shape ({cls.num_channels},), got {arr.shape}")
        return cls(*arr.tolist())

    @classmethod
    def from_color(cls, other: ColorBase, alpha: Optional[Scalar] = None):
        """
        Convert any color into this class.

        Args:
            other: Source color, of any supported class
            alpha: Alpha for the result, in this class's numeric domain.
                Only meaningful when this class has an alpha channel.
        """
        if not isinstance(other, ColorBase):
            raise TypeError(f"Expected a color, got {type(other).__name__}")
        return other.convert(cls.mode, cls.format_type, alpha=alpha)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return has_alpha_channel(self.mode)

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == cast(ColorBase, other)._value

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < cast(ColorBase, other)._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __iter__(self):
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __array__(self, dtype=None, copy=None) -> ndarray:
        return np.array(self._value, dtype=dtype or default_format_dtypes[self.format_type])

    def to_tuple(self) -> ScalarVector:
        return self._value

    # ------------------ COLOR FAÇADE ------------------
    def red(self) -> Scalar:
        return self._value[0]

    def green(self) -> Scalar:
        return self._value[1]

    def blue(self) -> Scalar:
        return self._value[2]

    def alpha(self) -> Scalar:
        """Alpha component, or the opaque value when the class has none."""
        if self.has_alpha:
            return self._value[3]
        return opaque_alpha[self.format_type]

    def luminosity(self) -> Scalar:
        """Oklab lightness, quantized for 8-bit classes."""
        lightness = self.to_oklab32().l
        if self.format_type == FormatType.INT:
            return int(Unorm8.from_float(lightness))
        return lightness

    def hue(self) -> Scalar:
        """
        Oklch hue in degrees.

        8-bit classes return the hue as a fraction of a full turn quantized to
        a byte, ``Unorm8.from_float(h / 360)``, so 180 degrees gives 128.
        Quantizing the raw degree value instead would saturate every hue
        above 1 degree to 255.
        """
        h = self.to_oklch32().h
        if self.format_type == FormatType.INT:
            return int(Unorm8.from_float(h / HUE_360))
        return h

    def to_array3(self) -> ndarray:
        return np.array(self._value[:3], dtype=default_format_dtypes[self.format_type])

    def to_array4(self) -> ndarray:
        return np.array(self._value[:3] + (self.alpha(),), dtype=default_format_dtypes[self.format_type])

    def to_srgb8(self) -> ColorBase:
        return self.convert("srgb", FormatType.INT)

    def to_srgba8(self, alpha: Optional[int] = None) -> ColorBase:
        return self.convert("srgba", FormatType.INT, alpha=alpha)

    def to_srgb32(self) -> ColorBase:
        return self.convert("srgb", FormatType.FLOAT)

    def to_srgba32(self, alpha: Optional[float] = None) -> ColorBase:
        return self.convert("srgba", FormatType.FLOAT, alpha=alpha)

    def to_linear_srgb32(self) -> ColorBase:
        return self.convert("linear_srgb", FormatType.FLOAT)

    def to_linear_srgba32(self, alpha: Optional[float] = None) -> ColorBase:
        return self.convert("linear_srgba", FormatType.FLOAT, alpha=alpha)

    def to_oklab32(self) -> ColorBase:
        return self.convert("oklab", FormatType.FLOAT)

    def to_oklch32(self) -> ColorBase:
        return self.convert("oklch", FormatType.FLOAT)

    # ------------------ DISTANCE ------------------
    def squared_distance(self, other: ColorBase) -> np.float32:
        """Squared Euclidean distance between both colors in Oklab."""
        if not isinstance(other, ColorBase):
            raise TypeError(f"Expected a color, got {type(other).__name__}")
        mine, theirs = self.to_oklab32().value, other.to_oklab32().value
        total = B.scalar(0.0)
        for x, y in zip(mine, theirs):
            d = B.scalar(x) - B.scalar(y)
            total = total + d * d
        return np.float32(total)

    def distance(self, other: ColorBase) -> np.float32:
        """Perceptual distance (Euclidean in Oklab)."""
        return np.float32(B.sqrt(B.scalar(self.squared_distance(other))))


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    format_type: ClassVar[FormatType]
    value: ScalarVector

    alpha_index: ClassVar[int] = -1

    def with_alpha(self, alpha: Scalar):
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha, clamped to the opaque range of the format.

        Returns:
            New color instance with updated alpha.
        """
        a = clamp(format_classes[self.format_type](alpha), 0, opaque_alpha[self.format_type])
        return self.__class__(*(self.value[:self.alpha_index] + (a,)))  # type: ignore[call-arg]


class ApproxEq(ABC):
    """Approximate comparisons over every component, alpha included."""
    __slots__ = ()

    value: ScalarVector

    def _paired(self, other: Any):
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return zip(self.value, other.value)

    def abs_diff_eq(self, other: Any, epsilon: float = F32_EPSILON) -> bool:
        return all(abs_diff_eq(x, y, epsilon) for x, y in self._paired(other))

    def relative_eq(
        self,
        other: Any,
        epsilon: float = F32_EPSILON,
        max_relative: float = F32_EPSILON,
    ) -> bool:
        return all(relative_eq(x, y, epsilon, max_relative) for x, y in self._paired(other))

    def ulps_eq(self, other: Any, epsilon: float = F32_EPSILON, max_ulps: int = DEFAULT_MAX_ULPS) -> bool:
        return all(ulps_eq(x, y, epsilon, max_ulps) for x, y in self._paired(other))


def build_registry(*classes: type[ColorBase]) -> Dict[Tuple[str, FormatType], type[ColorBase]]:
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
