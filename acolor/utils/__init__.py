from .num_utils import (
    clamp,
    min_value,
    max_value,
    F32_EPSILON,
    DEFAULT_MAX_ULPS,
    f32_bits,
    ulps_between,
    abs_diff_eq,
    relative_eq,
    ulps_eq,
)

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
