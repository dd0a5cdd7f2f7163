"""Oklab <-> linear sRGB matrices and the Oklab <-> Oklch polar mapping.

Reference: https://bottosson.github.io/posts/oklab/ (D65 whitepoint).

The forward and inverse transforms are not exact inverses in floating point;
the cube root / cube pair loses a few ULPs per round trip.
"""

from typing import Tuple

import numpy as np
from numpy import ndarray
from boundednumbers.functions import cyclic_wrap_float
from boundednumbers.np_functions import cyclic_wrap_float as np_cyclic_wrap_float

from .. import backend as B
from ..types.format_type import HUE_360

Triplet = Tuple[B.Scalar, B.Scalar, B.Scalar]

# Linear sRGB -> LMS
RGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# LMS cube root -> Oklab
LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# Oklab -> LMS cube root
OKLAB_TO_LMS = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS -> linear sRGB
LMS_TO_RGB = (
    (+4.0767416621, -3.3077115913, +0.2309699292),
    (-1.2684380046, +2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, +1.7076147010),
)


def _mul(m, x, y, z):
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


# === Scalar conversions ===

def linear_srgb_to_oklab(r: B.Scalar, g: B.Scalar, b: B.Scalar) -> Triplet:
    l, m, s = _mul(RGB_TO_LMS, B.scalar(r), B.scalar(g), B.scalar(b))
    return _mul(LMS_TO_OKLAB, B.cbrt(l), B.cbrt(m), B.cbrt(s))


def oklab_to_linear_srgb(L: B.Scalar, a: B.Scalar, b: B.Scalar) -> Triplet:
    l_, m_, s_ = _mul(OKLAB_TO_LMS, B.scalar(L), B.scalar(a), B.scalar(b))
    return _mul(LMS_TO_RGB, l_ * l_ * l_, m_ * m_ * m_, s_ * s_ * s_)


def oklab_to_oklch(L: B.Scalar, a: B.Scalar, b: B.Scalar) -> Triplet:
    """Oklab -> Oklch. H in degrees, wrapped into [0, 360).

    The hue of a pure gray (C == 0) is whatever atan2(0, 0) yields; it carries
    no meaning.
    """
    a, b = B.scalar(a), B.scalar(b)
    C = B.hypot(a, b)
    H = cyclic_wrap_float(B.degrees(B.atan2(b, a)), 0.0, HUE_360)
    # float32 storage would round a hue just below 360 up to 360
    if np.float32(H) == HUE_360:
        H = B.scalar(0.0)
    return B.scalar(L), C, H


def oklch_to_oklab(L: B.Scalar, C: B.Scalar, H: B.Scalar) -> Triplet:
    """Oklch -> Oklab. H in degrees."""
    C = B.scalar(C)
    H_rad = B.radians(B.scalar(H))
    return B.scalar(L), C * B.cos(H_rad), C * B.sin(H_rad)


# === Vectorized conversions ===

def np_linear_srgb_to_oklab(r, g, b) -> ndarray:
    lms = _mul(RGB_TO_LMS, np.asarray(r, dtype=float), np.asarray(g, dtype=float), np.asarray(b, dtype=float))
    return np.stack(_mul(LMS_TO_OKLAB, *(np.cbrt(c) for c in lms)), axis=-1)


def np_oklab_to_linear_srgb(L, a, b) -> ndarray:
    lms_ = _mul(OKLAB_TO_LMS, np.asarray(L, dtype=float), np.asarray(a, dtype=float), np.asarray(b, dtype=float))
    return np.stack(_mul(LMS_TO_RGB, *(c ** 3 for c in lms_)), axis=-1)


def np_oklab_to_oklch(L, a, b) -> ndarray:
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    C = np.hypot(a, b)
    H = np.asarray(np_cyclic_wrap_float(np.degrees(np.arctan2(b, a)), 0.0, HUE_360))
    H = np.where(H.astype(np.float32) == HUE_360, 0.0, H)
    return np.stack(np.broadcast_arrays(np.asarray(L, dtype=float), C, H), axis=-1)


def np_oklch_to_oklab(L, C, H) -> ndarray:
    C = np.asarray(C, dtype=float)
    H_rad = np.radians(np.asarray(H, dtype=float))
    return np.stack(np.broadcast_arrays(np.asarray(L, dtype=float), C * np.cos(H_rad), C * np.sin(H_rad)), axis=-1)
