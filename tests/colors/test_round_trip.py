import numpy as np

from acolor.colors import Srgb8, Srgba8, Srgb32, Srgba32, LinearSrgb32, LinearSrgba32, Oklab32, Oklch32
from acolor.conversions import Unorm8
from ..samples import srgb8_grid, srgb32_samples


def _close(c, expected, tol):
    return all(abs(float(x) - float(y)) <= tol for x, y in zip(c.value, expected.value))


def test_srgb8_alpha_round_trip_is_exact():
    for rgb in srgb8_grid:
        c = Srgb8(*rgb)
        assert c.to_srgba8(255).to_srgb8() == c
        rgba = Srgba8(*rgb, 77)
        assert rgba.to_srgb8().to_srgba8(rgba.a) == rgba


def test_srgb32_alpha_round_trip_is_exact():
    for rgb in srgb32_samples:
        c = Srgb32(*rgb)
        assert c.to_srgba32(1.0).to_srgb32() == c
        assert Srgba32(*rgb, 0.4).to_srgb32().to_srgba32(0.4) == Srgba32(*rgb, 0.4)
    c = LinearSrgb32(0.1, 0.2, 0.3)
    assert c.to_linear_srgba32(1.0).to_linear_srgb32() == c


def test_srgb8_survives_every_space(backend):
    for rgb in srgb8_grid:
        c = Srgb8(*rgb)
        assert c.to_oklab32().to_srgb8() == c
        assert c.to_oklch32().to_srgb8() == c
        assert c.to_linear_srgb32().to_srgb8() == c
        assert c.to_srgb32().to_srgb8() == c


def test_srgba8_survives_every_space(backend):
    c = Srgba8(0xA, 0xB, 0xC, 0xD)
    assert c.to_srgb8().to_srgba8(0xD) == c
    assert c.to_srgb32().to_srgba8(0xD) == c
    assert c.to_srgba32().to_srgba8() == c
    assert c.to_linear_srgb32().to_srgba8(0xD) == c
    assert c.to_linear_srgba32().to_srgba8() == c
    assert c.to_oklab32().to_srgba8(0xD) == c
    assert c.to_oklch32().to_srgba8(0xD) == c


def test_srgb32_through_oklab_is_close(backend):
    for rgb in srgb32_samples:
        c = Srgb32(*rgb)
        assert _close(c.to_oklab32().to_srgb32(), c, 1e-5)
        assert _close(c.to_oklch32().to_srgb32(), c, 1e-5)
        assert _close(c.to_linear_srgb32().to_srgb32(), c, 1e-5)


def test_srgb32_through_8_bits(backend):
    c = Srgb32(0.1, 0.2, 0.3)
    assert c.to_srgb8().to_srgb32().relative_eq(c, max_relative=0.02)
    assert c.to_srgba8(255).to_srgb32().relative_eq(c, max_relative=0.02)


def test_linear_srgb32_round_trips(backend):
    c = LinearSrgb32(0.1, 0.2, 0.3)
    assert c.to_srgb8().to_linear_srgb32().relative_eq(c, max_relative=8e-3)
    assert c.to_srgb32().to_linear_srgb32().relative_eq(c, max_relative=1e-5)
    assert c.to_oklab32().to_linear_srgb32().relative_eq(c, max_relative=1e-5)
    assert c.to_oklch32().to_linear_srgb32().relative_eq(c, max_relative=1e-5)

    a = LinearSrgba32(0.1, 0.2, 0.3, 0.4)
    assert a.to_linear_srgb32().to_linear_srgba32(0.4) == a
    assert a.to_oklab32().to_linear_srgba32(0.4).relative_eq(a, max_relative=1e-5)


def test_oklab32_round_trips(backend):
    c = Oklab32.new(0.7, -0.1, 0.1)
    assert c.to_srgb8().to_oklab32().relative_eq(c, max_relative=3e-3)
    assert c.to_srgb32().to_oklab32().relative_eq(c, max_relative=1e-5)
    assert c.to_linear_srgba32(1.0).to_oklab32().relative_eq(c, max_relative=1e-5)
    assert c.to_oklch32().to_oklab32().relative_eq(c, max_relative=1e-5)


def test_oklch32_round_trips(backend):
    c = Oklch32.new(0.7, 0.15, 2.5)
    assert c.to_srgb8().to_oklch32().relative_eq(c, max_relative=0.1)
    assert c.to_srgb32().to_oklch32().relative_eq(c, max_relative=2e-4)
    assert c.to_oklab32().to_oklch32().relative_eq(c, max_relative=1e-5)


def test_oklch_hue_wraps_near_360(backend):
    h = Oklch32.new(70, 0.1, 359.0).to_oklab32().to_oklch32().h
    assert 0.0 <= h < 360.0
    assert abs(float(h) - 359.0) < 1e-3


def test_concrete_scenario():
    c = Srgb8(0x0A, 0x0B, 0x0C)
    f = c.to_srgb32()
    assert f == Srgb32(10 / 255.0, 11 / 255.0, 12 / 255.0)
    assert f == Srgb32(Unorm8(10).to_float(), Unorm8(11).to_float(), Unorm8(12).to_float())
    assert f.to_srgba8(13) == Srgba8(10, 11, 12, 13)
    assert c.to_srgba8(0xD) == Srgba8(0xA, 0xB, 0xC, 0xD)
    assert c.to_srgba32(0.7) == Srgba32(*f.value, 0.7)


def test_alpha_never_transformed(backend):
    c = Srgba32(0.1, 0.2, 0.3, 0.4)
    assert c.to_linear_srgba32().a == np.float32(0.4)
    assert c.to_linear_srgba32().to_srgba32().a == np.float32(0.4)
    assert c.to_srgba8().a == Unorm8.from_float(0.4)

    b = Srgba8(200, 100, 50, 13)
    assert b.to_linear_srgba32().a == Unorm8(13).to_float()
    assert b.to_srgba32().to_srgba8().a == 13


def test_random_srgb32_through_oklab_stays_within_bound(backend):
    rng = np.random.default_rng(2024)
    for rgb in rng.random((1000, 3), dtype=np.float32):
        c = Srgb32(*rgb)
        assert _close(c.to_oklab32().to_srgb32(), c, 1e-5), c

    # dark components sit on the steep part of the transfer curve
    for rgb in [(0.05, 0.95, 0.55), (0.01, 0.02, 0.9), (0.045, 0.0, 0.3)]:
        c = Srgb32(*rgb)
        assert _close(c.to_oklab32().to_srgb32(), c, 1e-5), c


def test_oklch_hue_never_stored_as_360(backend):
    h = Oklab32(0.7, 0.1, -1e-9).to_oklch32().h
    assert 0.0 <= h < 360.0
