import numpy as np
import pytest

from splinekit import Point, SingularSystem
from splinekit.fitting import prepare_knots, fit_cubic
from splinekit.fitting.knots import KnotSet


def test_cubic_three_points():
    knots = prepare_knots([(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)])
    b, c, d = fit_cubic(knots)
    assert np.allclose(b, [1.5, 0.0])
    assert np.allclose(c, [0.0, -1.5])
    assert np.allclose(d, [-0.5, 0.5])


def test_cubic_two_points_is_a_line():
    knots = prepare_knots([(0.0, 1.0), (4.0, 3.0)])
    b, c, d = fit_cubic(knots)
    assert np.array_equal(b, [0.5])
    assert np.array_equal(c, [0.0])
    assert np.array_equal(d, [0.0])


def test_cubic_natural_ends(irregular_points):
    knots = prepare_knots(irregular_points)
    b, c, d = fit_cubic(knots)
    h = knots.h
    assert c[0] == 0.0
    # second derivative at the last knot: 2c + 6d*h on the last segment
    assert abs(2.0 * c[-1] + 6.0 * d[-1] * h[-1]) < 1e-12


def test_cubic_is_c2(irregular_points):
    knots = prepare_knots(irregular_points)
    b, c, d = fit_cubic(knots)
    y, h = knots.y, knots.h
    for i in range(len(b) - 1):
        value = y[i] + b[i] * h[i] + c[i] * h[i] ** 2 + d[i] * h[i] ** 3
        slope = b[i] + 2.0 * c[i] * h[i] + 3.0 * d[i] * h[i] ** 2
        curvature = 2.0 * c[i] + 6.0 * d[i] * h[i]
        assert np.isclose(value, y[i + 1])
        assert np.isclose(slope, b[i + 1])
        assert np.isclose(curvature, 2.0 * c[i + 1])


def test_cubic_zero_pivot_raises():
    # unsorted knots with x[2] == x[0] put a zero on the diagonal
    x = np.array([0.0, 1.0, 0.0])
    y = np.array([0.0, 1.0, 0.0])
    h = np.diff(x)
    knots = KnotSet(
        points=tuple(Point(a, b) for a, b in zip(x, y)),
        x=x, y=y, h=h, secants=np.diff(y) / h,
    )
    with pytest.raises(SingularSystem) as info:
        fit_cubic(knots)
    assert info.value.index == 1
