from __future__ import annotations

import numpy as np
from numpy import ndarray
from boundednumbers import clamp, clamp01
from boundednumbers.np_functions import clamp01 as np_clamp01

from ..types.format_type import UNORM8_MAX

_F32_MAX = np.float32(UNORM8_MAX)


class Unorm8(int):
    """An 8-bit unsigned integer standing for a float in the inclusive range ``[0, 1]``.

    ``to_float`` divides by 255 in single precision, ``from_float`` rounds to
    the nearest step and saturates anything outside ``[0, 1]``. NaN maps to 0.
    """

    def __new__(cls, value: int):
        return super().__new__(cls, clamp(int(value), 0, UNORM8_MAX))

    def to_float(self) -> np.float32:
        return np.float32(int(self)) / _F32_MAX

    @classmethod
    def from_float(cls, value: float) -> Unorm8:
        x = float(value)
        if x != x:
            return cls(0)
        return cls(int(clamp01(x) * UNORM8_MAX + 0.5))

    def __repr__(self):
        return f"Unorm8({int(self)})"


def np_unorm8_to_float(values) -> ndarray:
    """Vectorized ``Unorm8.to_float``; accepts any integer array in ``0..255``."""
    return np.asarray(values, dtype=np.float32) / _F32_MAX


def np_float_to_unorm8(values) -> ndarray:
    """Vectorized ``Unorm8.from_float``, returning ``uint8``."""
    arr = np.nan_to_num(np.asarray(values, dtype=np.float64), nan=0.0)
    return np.floor(np_clamp01(arr) * UNORM8_MAX + 0.5).astype(np.uint8)
