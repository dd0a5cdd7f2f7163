"""Batches of colors as numpy arrays."""

from __future__ import annotations

from typing import Iterable, List, Optional, Type, TypeVar, Union

import numpy as np
from numpy import ndarray

from ..colors.color_base import ColorBase
from ..conversions import np_convert
from ..types.format_type import default_format_dtypes

C = TypeVar("C", bound=ColorBase)


def to_numpy(colors: Iterable[ColorBase], cls: Optional[Type[ColorBase]] = None) -> ndarray:
    """
    Stack colors into an ``(N, channels)`` array.

    Args:
        colors: Colors to stack. Mixed classes are converted to ``cls``.
        cls: Class whose layout and dtype the array uses. Defaults to the
            class of the first color.
    """
    items = list(colors)
    if cls is None:
        if not items:
            raise ValueError("Cannot infer a color class from an empty sequence")
        cls = type(items[0])
    dtype = default_format_dtypes[cls.format_type]
    if not items:
        return np.empty((0, cls.num_channels), dtype=dtype)
    rows = [c.value if type(c) is cls else cls.from_color(c).value for c in items]
    return np.array(rows, dtype=dtype)


def from_numpy(array: Union[ndarray, List], cls: Type[C]) -> List[C]:
    """Build one ``cls`` instance per row of an ``(..., channels)`` array."""
    arr = np.asarray(array)
    if arr.shape[-1:] != (cls.num_channels,):
        raise ValueError(f"{cls.__name__} expects last dimension to be {cls.num_channels}, got shape {arr.shape}")
    return [cls(*row) for row in arr.reshape(-1, cls.num_channels).tolist()]


def convert_array(
    array: Union[ndarray, List],
    src: Type[ColorBase],
    dst: Type[ColorBase],
    alpha=None,
) -> ndarray:
    """
    Convert a whole ``(..., channels)`` array from ``src``'s layout to ``dst``'s.

    Uses the vectorized conversion path; results match converting each color
    on its own within float32 tolerance.
    """
    out = np_convert(
        np.asarray(array),
        src.mode,
        dst.mode,
        src.format_type,
        dst.format_type,
        alpha=alpha,
    )
    return out.astype(default_format_dtypes[dst.format_type], copy=False)


__all__ = ["to_numpy", "from_numpy", "convert_array"]
