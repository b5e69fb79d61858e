import numpy as np
import pytest

from splinekit import Point, InsufficientPoints, DegenerateKnotSpacing
from splinekit.fitting import prepare_knots
from splinekit.fitting.knots import sort_points, check_spacing


def test_prepare_knots_sorts_copy():
    points = [Point(0.0, 5.0), Point(-10.0, 1.0), Point(10.0, 9.0)]
    snapshot = list(points)
    knots = prepare_knots(points)

    assert points == snapshot
    assert knots.points == (Point(-10.0, 1.0), Point(0.0, 5.0), Point(10.0, 9.0))
    assert np.array_equal(knots.x, [-10.0, 0.0, 10.0])
    assert np.array_equal(knots.y, [1.0, 5.0, 9.0])
    assert np.array_equal(knots.h, [10.0, 10.0])
    assert np.allclose(knots.secants, [0.4, 0.4])
    assert knots.size == 3


def test_prepare_knots_arrays_are_read_only():
    knots = prepare_knots([(0.0, 0.0), (1.0, 1.0)])
    for arr in (knots.x, knots.y, knots.h, knots.secants):
        with pytest.raises(ValueError):
            arr[0] = 42.0


def test_prepare_knots_preconditions():
    with pytest.raises(InsufficientPoints):
        prepare_knots([(0.0, 0.0)])
    with pytest.raises(DegenerateKnotSpacing):
        prepare_knots([(1.0, 0.0), (0.0, 0.0), (1.0, 3.0)])


def test_sort_points_is_stable():
    a, b = Point(1.0, 0.0), Point(1.0, 1.0)
    assert sort_points([b, Point(0.0, 0.0), a]) == [Point(0.0, 0.0), b, a]


def test_check_spacing_reports_first_duplicate():
    with pytest.raises(DegenerateKnotSpacing) as info:
        check_spacing(np.array([0.0, 1.0, 1.0, 2.0, 2.0]))
    assert info.value.index == 2
    assert np.array_equal(check_spacing(np.array([0.0, 0.5, 2.0])), [0.5, 1.5])
