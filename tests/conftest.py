import pytest

from splinekit import Point

DEMO = [(-300.0, 0.0), (-150.0, 100.0), (0.0, -100.0), (150.0, 100.0), (300.0, 0.0)]

# uneven spacing, mixed signs
IRREGULAR = [(-3.5, 2.0), (-1.0, -0.5), (0.25, 4.0), (2.0, 1.0), (7.0, -3.0), (8.5, 0.0)]


@pytest.fixture
def demo_points():
    return [Point(x, y) for x, y in DEMO]


@pytest.fixture
def irregular_points():
    return [Point(x, y) for x, y in IRREGULAR]


@pytest.fixture(params=["linear", "quadratic", "cubic"])
def model_name(request):
    return request.param
