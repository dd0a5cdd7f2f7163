"""
Acolor Color Classes
====================

Immutable value classes for the supported color representations.

Features
--------
- Immutable color instances (frozen after initialization)
- Field-wise equality, ordering and hashing
- Clamping constructor ``Type.new(...)`` for the documented ranges
- Conversion between every pair of classes (``to_srgb8()``, ``to_oklch32()``, ...)
- Approximate equality (absolute, relative, ULP based) for float classes
- Alpha channel support with the WithAlpha mixin

Usage
-----
>>> from acolor.colors import Srgb8, Oklch32
>>> color = Srgb8(255, 128, 0)
>>> color.to_oklch32()
>>> color.to_srgba8(128)
>>> Oklch32.new(0.7, 0.1, 359.0).to_srgb8()

Color Classes
-------------
    - Srgb8 / Srgba8: gamma encoded sRGB, 0-255
    - Srgb32 / Srgba32: gamma encoded sRGB, 0.0-1.0
    - LinearSrgb32 / LinearSrgba32: linear light sRGB
    - Oklab32: perceptual lightness and two chromatic axes
    - Oklch32: lightness, chroma and hue in degrees

Notes
-----
- 8-bit classes saturate components to 0..255 on construction
- Float classes store numpy.float32 components and only clamp through ``new``
- Alpha is never gamma encoded; conversions copy or quantize it
"""

from .color_base import ColorBase, WithAlpha, ApproxEq
from .srgb import Srgb8, Srgba8, Srgb32, Srgba32, LinearSrgb32, LinearSrgba32
from .oklab import Oklab32, Oklch32
from .color import color_convert, get_color_class, unified_tuple_to_class


__all__ = [
    'ColorBase',
    'WithAlpha',
    'ApproxEq',
    'Srgb8',
    'Srgba8',
    'Srgb32',
    'Srgba32',
    'LinearSrgb32',
    'LinearSrgba32',
    'Oklab32',
    'Oklch32',
    'color_convert',
    'get_color_class',
    'unified_tuple_to_class',
]
