import numpy as np
import pytest
from pathlib import Path
import sys

# Add repo root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from mandelgrid.errors import InvalidDimension, InvalidIterLimit, InvalidRatio
from mandelgrid.generate import generate, plane_axes
from mandelgrid.iterators import STANDARD_THRESHOLD, escape_iteration
from mandelgrid.viewport import Viewport


def test_small_viewport_mapping():
    """4x2 viewport: dx = 0.625, dy = 1.25, top-left at (-1.25, -1.25)."""
    vp = Viewport(width=4, height=2, center_x=0.0, center_y=0.0, ratio=2.5, iter_limit=10)
    xs, ys = plane_axes(vp)

    np.testing.assert_allclose(xs, [-1.25, -0.625, 0.0, 0.625])
    np.testing.assert_allclose(ys, [-1.25, 0.0])

    grid = generate(vp)
    assert grid.shape == (2, 4)
    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            assert grid[j][i] == escape_iteration(0.0, 0.0, x, y, 10)


def test_small_viewport_values():
    vp = Viewport(width=4, height=2, ratio=2.5, iter_limit=10)
    grid = generate(vp)
    np.testing.assert_array_equal(grid, [[0, 1, 1, 1], [10, 10, 10, 2]])


@pytest.mark.parametrize("width,height,iter_limit", [(1, 1, 5), (7, 3, 0), (12, 9, 30)])
def test_shape_and_range(width, height, iter_limit):
    vp = Viewport(width=width, height=height, center_x=-0.5, center_y=0.1, ratio=3.0, iter_limit=iter_limit)
    grid = generate(vp)

    assert len(grid) == height
    for row in grid:
        assert len(row) == width
    assert grid.min() >= 0
    assert grid.max() <= iter_limit


def test_zero_iter_limit_is_all_zero():
    grid = generate(Viewport(width=6, height=4, iter_limit=0))
    assert not grid.any()


def test_symmetric_about_real_axis():
    # dy = 0.125 is exact, so row j and row height-j sample conjugate points
    vp = Viewport(width=20, height=16, ratio=2.0, center_x=-0.5, iter_limit=60)
    grid = generate(vp)
    for j in range(1, vp.height):
        np.testing.assert_array_equal(grid[j], grid[vp.height - j])


def test_centered_on_center():
    vp = Viewport(width=10, height=10, center_x=-0.75, center_y=0.25, ratio=1.0)
    xs, ys = plane_axes(vp)
    assert xs[vp.width // 2] == pytest.approx(-0.75)
    assert ys[vp.height // 2] == pytest.approx(0.25)


def test_default_viewport():
    grid = generate()
    assert grid.shape == (100, 180)
    # (0, 0) sits at column 90, row 50 and never escapes
    assert grid[50][90] == 100


def test_threshold_changes_grid():
    ref = generate(Viewport(width=30, height=20, iter_limit=40))
    std = generate(Viewport(width=30, height=20, iter_limit=40, threshold=STANDARD_THRESHOLD))
    assert (std >= ref).all()
    assert (std > ref).any()


def test_julia_mode():
    c = complex(-0.4, 0.6)
    vp = Viewport(width=8, height=6, ratio=3.0, iter_limit=50, julia_c=c)
    assert vp.mode == "julia"
    xs, ys = plane_axes(vp)
    grid = generate(vp)
    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            assert grid[j][i] == escape_iteration(x, y, c.real, c.imag, 50)


def test_generate_is_deterministic():
    vp = Viewport(width=25, height=15, center_x=-0.7, ratio=0.5, iter_limit=80)
    np.testing.assert_array_equal(generate(vp), generate(vp))


@pytest.mark.parametrize(
    "kwargs,exc",
    [
        (dict(width=0), InvalidDimension),
        (dict(height=-3), InvalidDimension),
        (dict(ratio=0.0), InvalidRatio),
        (dict(ratio=-1.0), InvalidRatio),
        (dict(iter_limit=-1), InvalidIterLimit),
    ],
)
def test_invalid_viewport_rejected(kwargs, exc):
    with pytest.raises(exc):
        generate(Viewport(**kwargs))
