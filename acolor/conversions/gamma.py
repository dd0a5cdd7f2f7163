"""
sRGB transfer functions.

``linearize`` decodes gamma encoded sRGB into linear light, ``nonlinearize``
encodes linear light back. Both are piecewise: a linear toe below the threshold
and a power curve above it. The exponent is a parameter; ``GAMMA`` (2.4) is used
by every color type.

Values outside ``[0, 1]`` go through the same formulas; no clamping is done.
"""

import numpy as np
from numpy import ndarray

from .. import backend as B

GAMMA = 2.4

LINEARIZE_THRESHOLD = 0.04045
NONLINEARIZE_THRESHOLD = 0.0031308
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055


def linearize(x: B.Scalar, gamma: float = GAMMA) -> B.Scalar:
    """Gamma encoded -> linear."""
    x = B.scalar(x)
    if x >= LINEARIZE_THRESHOLD:
        return B.pow((x + SRGB_OFFSET) / SRGB_SCALE, gamma)
    return x / SRGB_SLOPE


def nonlinearize(x: B.Scalar, gamma: float = GAMMA) -> B.Scalar:
    """Linear -> gamma encoded."""
    x = B.scalar(x)
    if x >= NONLINEARIZE_THRESHOLD:
        return SRGB_SCALE * B.pow(x, 1.0 / gamma) - SRGB_OFFSET
    return SRGB_SLOPE * x


def np_linearize(x, gamma: float = GAMMA) -> ndarray:
    x = np.asarray(x, dtype=float)
    with np.errstate(invalid="ignore"):
        high = np.power((x + SRGB_OFFSET) / SRGB_SCALE, gamma)
    return np.where(x >= LINEARIZE_THRESHOLD, high, x / SRGB_SLOPE)


def np_nonlinearize(x, gamma: float = GAMMA) -> ndarray:
    x = np.asarray(x, dtype=float)
    with np.errstate(invalid="ignore"):
        high = SRGB_SCALE * np.power(x, 1.0 / gamma) - SRGB_OFFSET
    return np.where(x >= NONLINEARIZE_THRESHOLD, high, SRGB_SLOPE * x)
