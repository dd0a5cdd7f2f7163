"""
Acolor Color Space Conversions
==============================

Numeric core shared by every color type: 8-bit quantization, the sRGB transfer
functions, the Oklab matrices and the Oklab <-> Oklch polar mapping. Each
operation comes as a scalar function and as a vectorized numpy variant
(``np_`` prefix).

Conversion Functions
--------------------

Quantization:
    Unorm8(byte).to_float()
        0..255 -> [0, 1] (float32 division by 255)
    Unorm8.from_float(x)
        [0, 1] -> 0..255, rounded to nearest, saturating
    np_unorm8_to_float(arr), np_float_to_unorm8(arr)

sRGB transfer:
    linearize(x, gamma=GAMMA), nonlinearize(x, gamma=GAMMA)
    np_linearize(arr, gamma=GAMMA), np_nonlinearize(arr, gamma=GAMMA)

Linear sRGB <-> Oklab:
    linear_srgb_to_oklab(r, g, b), oklab_to_linear_srgb(L, a, b)
    np_linear_srgb_to_oklab(r, g, b), np_oklab_to_linear_srgb(L, a, b)

Oklab <-> Oklch:
    oklab_to_oklch(L, a, b), oklch_to_oklab(L, C, H)
    np_oklab_to_oklch(L, a, b), np_oklch_to_oklab(L, C, H)

High-Level API
--------------
    convert(color, from_space, to_space, input_type, output_type, alpha=None)
        Universal converter on component tuples
    np_convert(color, from_space, to_space, input_type, output_type, alpha=None)
        Vectorized universal converter on (..., channels) arrays

Examples
--------
>>> from acolor.conversions import convert, FormatType
>>> convert((10, 11, 12), "srgb", "oklab", FormatType.INT, FormatType.FLOAT)
>>> import numpy as np
>>> from acolor.conversions import np_convert
>>> np_convert(np.array([[255, 0, 0], [0, 0, 255]]), "srgb", "oklch", "int", "float")
"""

from .numbers import Unorm8, np_unorm8_to_float, np_float_to_unorm8

from .gamma import (
    GAMMA,
    linearize,
    nonlinearize,
    np_linearize,
    np_nonlinearize,
)

from .oklab import (
    linear_srgb_to_oklab,
    oklab_to_linear_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    np_linear_srgb_to_oklab,
    np_oklab_to_linear_srgb,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
)

# High-level API
from .wrapper import convert, np_convert, ColorSpace

# Types and enums
from ..types.format_type import FormatType

__all__ = [
    # Quantization
    'Unorm8',
    'np_unorm8_to_float',
    'np_float_to_unorm8',

    # Transfer functions
    'GAMMA',
    'linearize',
    'nonlinearize',
    'np_linearize',
    'np_nonlinearize',

    # Oklab
    'linear_srgb_to_oklab',
    'oklab_to_linear_srgb',
    'oklab_to_oklch',
    'oklch_to_oklab',
    'np_linear_srgb_to_oklab',
    'np_oklab_to_linear_srgb',
    'np_oklab_to_oklch',
    'np_oklch_to_oklab',

    # High-level API
    'convert',
    'np_convert',
    'ColorSpace',

    # Types
    'FormatType',
]
