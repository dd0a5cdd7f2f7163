import math

import numpy as np

from acolor.utils import (
    clamp,
    min_value,
    max_value,
    f32_bits,
    ulps_between,
    abs_diff_eq,
    relative_eq,
    ulps_eq,
    F32_EPSILON,
)


def test_min_max_clamp():
    assert min_value(2, 5) == 2
    assert min_value(5, 2) == 2
    assert min_value(2.0, 5.0) == 2.0

    assert max_value(2, 5) == 5
    assert max_value(5, 2) == 5
    assert max_value(2.0, 5.0) == 5.0

    assert clamp(3, 2, 5) == 3
    assert clamp(3.0, 2.0, 5.0) == 3.0
    assert clamp(1, 2, 5) == 2
    assert clamp(7, 2, 5) == 5


def test_min_max_prefer_first_on_ties():
    a, b = [1], [1]
    assert min_value(a, b) is a
    assert max_value(a, b) is a


def test_f32_bits():
    assert f32_bits(0.0) == 0
    assert f32_bits(1.0) == 0x3F800000
    assert f32_bits(-0.0) == -(2 ** 31)


def test_ulps_between():
    one = np.float32(1.0)
    assert ulps_between(one, one) == 0
    assert ulps_between(one, np.nextafter(one, np.float32(2.0))) == 1
    assert ulps_between(1.0, 1.0 + 4 * F32_EPSILON) == 4


def test_scalar_comparisons():
    assert abs_diff_eq(1.0, 1.0 + F32_EPSILON / 2)
    assert not abs_diff_eq(1.0, 1.1)
    assert relative_eq(1000.0, 1000.0001, max_relative=1e-6)
    assert not relative_eq(math.inf, 1.0)
    assert relative_eq(math.inf, math.inf)
    assert ulps_eq(0.5, 0.5 + F32_EPSILON, epsilon=0.0)
    assert not ulps_eq(1.0, -1.0)
    assert not ulps_eq(math.nan, math.nan)
