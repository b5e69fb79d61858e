import pytest

from splinekit import build, SplineError, InsufficientPoints, DegenerateKnotSpacing, SingularSystem


def test_errors_are_value_errors():
    for cls in (SplineError, InsufficientPoints, DegenerateKnotSpacing, SingularSystem):
        assert issubclass(cls, ValueError)
    for cls in (InsufficientPoints, DegenerateKnotSpacing, SingularSystem):
        assert issubclass(cls, SplineError)


@pytest.mark.parametrize("points", [[], [(1.0, 2.0)]])
def test_build_with_too_few_points(points, model_name):
    with pytest.raises(InsufficientPoints, match="at least 2 points") as info:
        build(points, model_name)
    assert info.value.count == len(points)


def test_build_with_duplicate_x(model_name):
    with pytest.raises(DegenerateKnotSpacing) as info:
        build([(0.0, 0.0), (1.0, 1.0), (0.0, 2.0)], model_name)
    assert info.value.x == 0.0
    assert info.value.index == 1


def test_duplicate_x_caught_as_value_error():
    with pytest.raises(ValueError):
        build([(5.0, 0.0), (5.0, 1.0)], "linear")


@pytest.mark.parametrize("bad_x", [float("nan"), float("inf"), float("-inf")])
def test_build_with_non_finite_x(bad_x):
    with pytest.raises(DegenerateKnotSpacing) as info:
        build([(0.0, 0.0), (bad_x, 1.0), (2.0, 2.0)], "cubic")
    assert info.value.index == 1


def test_messages():
    assert "got 1" in str(InsufficientPoints(1))
    assert "x=3.0" in str(DegenerateKnotSpacing(3.0, 2))
    assert "row 4" in str(SingularSystem(4))
