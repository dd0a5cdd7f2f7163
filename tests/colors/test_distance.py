import math

import numpy as np
import pytest

from acolor.colors import Srgb8, Srgb32, Oklab32, Oklch32


def test_distance_to_self_is_zero(backend):
    for c in (Oklab32(0.5, 0.1, -0.1), Oklch32(0.5, 0.1, 200.0), Srgb8(10, 200, 30)):
        assert c.squared_distance(c) == 0.0
        assert c.distance(c) == 0.0


def test_oklab_squared_distance(backend):
    a = Oklab32(0.5, 0.1, 0.1)
    b = Oklab32(0.6, 0.1, 0.2)
    assert abs(float(a.squared_distance(b)) - 0.02) < 1e-6
    assert abs(float(a.distance(b)) - math.sqrt(0.02)) < 1e-6
    assert isinstance(a.distance(b), np.float32)


def test_distance_is_symmetric(backend):
    a = Oklab32(0.3, -0.2, 0.05)
    b = Oklch32(0.8, 0.1, 300.0)
    assert abs(float(a.distance(b)) - float(b.distance(a))) < 1e-7


def test_oklch_distance_handles_hue_wraparound(backend):
    a = Oklch32(0.7, 0.1, 359.0)
    b = Oklch32(0.7, 0.1, 1.0)
    # chord between two points 2 degrees apart on a circle of radius 0.1
    expected = 2 * 0.1 * math.sin(math.radians(1.0))
    assert abs(float(a.distance(b)) - expected) < 1e-5
    assert a.distance(b) < Oklch32(0.7, 0.1, 10.0).distance(b)


def test_distance_across_classes(backend):
    assert float(Srgb8(255, 0, 0).distance(Srgb32(1.0, 0.0, 0.0))) < 1e-6
    assert Srgb8(255, 0, 0).distance(Srgb8(0, 0, 255)) > Srgb8(255, 0, 0).distance(Srgb8(255, 64, 0))


def test_backends_agree():
    from acolor.config import use_backend

    a, b = Srgb8(12, 200, 99), Srgb8(250, 3, 180)
    with use_backend("math"):
        d_math = float(a.distance(b))
    with use_backend("numpy"):
        d_numpy = float(a.distance(b))
    assert abs(d_math - d_numpy) < 1e-5


def test_distance_requires_a_color():
    with pytest.raises(TypeError):
        Oklab32(0.5, 0.0, 0.0).distance((0.5, 0.0, 0.0))
