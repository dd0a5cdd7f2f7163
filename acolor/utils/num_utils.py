"""Small numeric helpers: ordering utilities and float32 approximate comparisons."""

import math
from typing import TypeVar

import numpy as np
from boundednumbers import clamp

T = TypeVar("T")

F32_EPSILON = float(np.finfo(np.float32).eps)
DEFAULT_MAX_ULPS = 4


def min_value(a: T, b: T) -> T:
    """Return the smaller of two comparable values, ``a`` on ties."""
    return b if b < a else a  # type: ignore[operator]


def max_value(a: T, b: T) -> T:
    """Return the larger of two comparable values, ``a`` on ties."""
    return b if b > a else a  # type: ignore[operator]


def f32_bits(value: float) -> int:
    """Bit pattern of ``value`` rounded to float32, as a signed integer."""
    return int(np.array(value, dtype=np.float32).view(np.int32))


def ulps_between(a: float, b: float) -> int:
    """Number of float32 steps between ``a`` and ``b`` (same sign assumed)."""
    return abs(f32_bits(a) - f32_bits(b))


def abs_diff_eq(a: float, b: float, epsilon: float = F32_EPSILON) -> bool:
    return abs(float(a) - float(b)) <= epsilon


def relative_eq(
    a: float,
    b: float,
    epsilon: float = F32_EPSILON,
    max_relative: float = F32_EPSILON,
) -> bool:
    """Relative comparison, falling back to ``epsilon`` near zero."""
    a, b = float(a), float(b)
    if a == b:
        return True
    if math.isinf(a) or math.isinf(b):
        return False
    diff = abs(a - b)
    if diff <= epsilon:
        return True
    largest = max(abs(a), abs(b))
    return diff <= largest * max_relative


def ulps_eq(
    a: float,
    b: float,
    epsilon: float = F32_EPSILON,
    max_ulps: int = DEFAULT_MAX_ULPS,
) -> bool:
    """Compare by distance in float32 representation steps."""
    if abs_diff_eq(a, b, epsilon):
        return True
    if math.isnan(a) or math.isnan(b):
        return False
    if math.copysign(1.0, a) != math.copysign(1.0, b):
        return False
    return ulps_between(a, b) <= max_ulps


__all__ = [
    "clamp",
    "min_value",
    "max_value",
    "F32_EPSILON",
    "DEFAULT_MAX_ULPS",
    "f32_bits",
    "ulps_between",
    "abs_diff_eq",
    "relative_eq",
    "ulps_eq",
]
