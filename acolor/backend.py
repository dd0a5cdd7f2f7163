"""Scalar math dispatch for the numeric backends.

``math``  -- Python's math module, double precision intermediates.
``numpy`` -- numpy ufuncs on float64 scalars; results are rounded to float32 once,
             when a color stores them.

Both produce the same results within float32 tolerance. The active backend is
switched by :mod:`acolor.config`; conversion code only calls the functions below.
"""

import math
from typing import Any, Callable, Dict, Literal

import numpy as np

Scalar = Any  # float or numpy.float64
BackendName = Literal["math", "numpy"]

_F64 = np.float64


# === math backend ===

def _math_cbrt(x: float) -> float:
    """Cube root (sign-preserving)."""
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def _math_pow(x: float, exp: float) -> float:
    if x < 0.0 and not float(exp).is_integer():
        return math.nan
    try:
        return math.pow(x, exp)
    except OverflowError:
        return math.inf


def _math_periodic(fn: Callable[[float], float]) -> Callable[[float], float]:
    # math.sin and math.cos reject infinities instead of returning nan
    def op(x: float) -> float:
        return fn(x) if math.isfinite(x) else math.nan
    return op


_MATH_OPS: Dict[str, Callable[..., Scalar]] = {
    "scalar": float,
    "cbrt": _math_cbrt,
    "pow": _math_pow,
    "atan2": math.atan2,
    "hypot": math.hypot,
    "sin": _math_periodic(math.sin),
    "cos": _math_periodic(math.cos),
    "sqrt": math.sqrt,
    "degrees": math.degrees,
    "radians": math.radians,
}


# === numpy backend ===

def _np_pow(x: Scalar, exp: float) -> Scalar:
    with np.errstate(invalid="ignore", over="ignore"):
        return np.power(_F64(x), _F64(exp))


def _np_sqrt(x: Scalar) -> Scalar:
    with np.errstate(invalid="ignore"):
        return np.sqrt(_F64(x))


_NUMPY_OPS: Dict[str, Callable[..., Scalar]] = {
    "scalar": _F64,
    "cbrt": lambda x: np.cbrt(_F64(x)),
    "pow": _np_pow,
    "atan2": lambda y, x: np.arctan2(_F64(y), _F64(x)),
    "hypot": lambda x, y: np.hypot(_F64(x), _F64(y)),
    "sin": lambda x: np.sin(_F64(x)),
    "cos": lambda x: np.cos(_F64(x)),
    "sqrt": _np_sqrt,
    "degrees": lambda x: np.degrees(_F64(x)),
    "radians": lambda x: np.radians(_F64(x)),
}

_BACKENDS: Dict[str, Dict[str, Callable[..., Scalar]]] = {
    "math": _MATH_OPS,
    "numpy": _NUMPY_OPS,
}

_active: Dict[str, Callable[..., Scalar]] = _MATH_OPS
_active_name: BackendName = "math"


def activate(name: BackendName) -> None:
    """Route every dispatched operation to the named backend."""
    global _active, _active_name
    try:
        _active = _BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown numeric backend: {name!r}") from None
    _active_name = name


def active_backend() -> BackendName:
    return _active_name


# === Dispatched operations ===

def scalar(x: Scalar) -> Scalar:
    """Coerce a component into the backend's working precision."""
    return _active["scalar"](x)


def cbrt(x: Scalar) -> Scalar:
    return _active["cbrt"](x)


def pow(x: Scalar, exp: float) -> Scalar:
    return _active["pow"](x, exp)


def atan2(y: Scalar, x: Scalar) -> Scalar:
    return _active["atan2"](y, x)


def hypot(x: Scalar, y: Scalar) -> Scalar:
    return _active["hypot"](x, y)


def sin(x: Scalar) -> Scalar:
    return _active["sin"](x)


def cos(x: Scalar) -> Scalar:
    return _active["cos"](x)


def sqrt(x: Scalar) -> Scalar:
    return _active["sqrt"](x)


def degrees(x: Scalar) -> Scalar:
    return _active["degrees"](x)


def radians(x: Scalar) -> Scalar:
    return _active["radians"](x)
