from __future__ import annotations
from typing import NamedTuple, Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float


class Point(NamedTuple):
    """An immutable (x, y) control point."""
    x: float
    y: float


PointLike = Union[Point, Tuple[Scalar, Scalar], Sequence[Scalar], ndarray]


def to_point(point: PointLike) -> Point:
    """
    Convert a point-like value to a Point.

    Args:
        point: Point, 2-tuple/list, or 1-D array of length 2

    Returns:
        Point with float coordinates
    """
    if isinstance(point, Point):
        return point
    if isinstance(point, ndarray):
        if point.ndim != 1:
            raise ValueError("Point array must be 1-dimensional.")
        point = point.tolist()
    elif isinstance(point, (str, bytes)) or not isinstance(point, Sequence):
        raise TypeError(f"Unsupported point type: {type(point).__name__}")
    if len(point) != 2:
        raise ValueError(f"A point needs exactly 2 coordinates, got {len(point)}")
    x, y = point
    return Point(float(x), float(y))


def to_points(points: Sequence[PointLike]) -> list[Point]:
    """Normalize a sequence of point-likes. Always returns a new list."""
    if isinstance(points, ndarray):
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"Point array must have shape (N, 2), got {points.shape}")
        return [Point(float(x), float(y)) for x, y in points.tolist()]
    return [to_point(p) for p in points]


def points_to_arrays(points: Sequence[Point]) -> Tuple[np.ndarray, np.ndarray]:
    """Split points into float64 x and y arrays."""
    xs = np.array([p.x for p in points], dtype=np.float64)
    ys = np.array([p.y for p in points], dtype=np.float64)
    return xs, ys
