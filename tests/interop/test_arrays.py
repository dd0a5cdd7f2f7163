import numpy as np
import pytest

from acolor.colors import Srgb8, Srgba8, Srgb32, Oklab32
from acolor.interop import to_numpy, from_numpy, convert_array
from ..samples import srgb8_grid


def test_to_numpy_stacks_colors():
    arr = to_numpy([Srgb8(1, 2, 3), Srgb8(4, 5, 6)])
    assert arr.dtype == np.uint8
    assert arr.tolist() == [[1, 2, 3], [4, 5, 6]]


def test_to_numpy_converts_mixed_classes():
    arr = to_numpy([Srgb8(255, 0, 0), Srgb32(0.0, 0.0, 1.0)], cls=Srgb32)
    assert arr.dtype == np.float32
    assert arr.tolist() == [[1.0, 0.0, 0.0], [0.0, 0.0, 1.0]]


def test_to_numpy_empty():
    assert to_numpy([], cls=Srgba8).shape == (0, 4)
    with pytest.raises(ValueError):
        to_numpy([])


def test_from_numpy():
    colors = [Srgba8(1, 2, 3, 4), Srgba8(5, 6, 7, 8)]
    assert from_numpy(to_numpy(colors), Srgba8) == colors
    assert from_numpy(np.zeros((2, 2, 3)), Oklab32) == [Oklab32(0.0, 0.0, 0.0)] * 4
    with pytest.raises(ValueError):
        from_numpy(np.zeros((2, 4)), Srgb8)


def test_convert_array_matches_per_color_conversion():
    grid = np.array(srgb8_grid, dtype=np.uint8)
    lab = convert_array(grid, Srgb8, Oklab32)
    assert lab.dtype == np.float32
    for row, rgb in zip(lab[::61], srgb8_grid[::61]):
        assert np.allclose(row, Srgb8(*rgb).to_oklab32().value, atol=1e-6)

    assert np.array_equal(convert_array(lab, Oklab32, Srgb8), grid)


def test_convert_array_alpha():
    out = convert_array(np.array([[1, 2, 3]]), Srgb8, Srgba8, alpha=128)
    assert out.dtype == np.uint8
    assert out.tolist() == [[1, 2, 3, 128]]
