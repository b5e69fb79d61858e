"""
Knot preparation shared by every fitter.

Sorts a copy of the input by x, checks the construction preconditions and
precomputes the segment widths and secant slopes.
"""
from __future__ import annotations
from typing import NamedTuple, Sequence, Tuple
import numpy as np

from ..errors import InsufficientPoints, DegenerateKnotSpacing
from ..types.point_types import Point, PointLike, to_points, points_to_arrays


class KnotSet(NamedTuple):
    points: Tuple[Point, ...]
    x: np.ndarray
    y: np.ndarray
    h: np.ndarray
    secants: np.ndarray

    @property
    def size(self) -> int:
        return len(self.points)


def _freeze(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def sort_points(points: Sequence[Point]) -> list[Point]:
    """Stable sort by x. Equal x's keep their input order."""
    return sorted(points, key=lambda p: p.x)


def check_finite(x: np.ndarray) -> None:
    """Reject NaN/inf x-coordinates. The reported index is in input order."""
    bad = np.flatnonzero(~np.isfinite(x))
    if bad.size:
        raise DegenerateKnotSpacing(float(x[bad[0]]), int(bad[0]))


def check_spacing(x: np.ndarray) -> np.ndarray:
    """
    Validate sorted knot x's and return the segment widths.

    Args:
        x: Finite knot x-coordinates, sorted ascending

    Returns:
        h[i] = x[i+1] - x[i]

    Raises:
        DegenerateKnotSpacing: on a zero-width segment
    """
    h = np.diff(x)
    zero = np.flatnonzero(h == 0.0)
    if zero.size:
        i = int(zero[0]) + 1
        raise DegenerateKnotSpacing(float(x[i]), i)
    return h


def prepare_knots(points: Sequence[PointLike]) -> KnotSet:
    """
    Sort and validate control points.

    Args:
        points: Unordered control points; left untouched

    Returns:
        KnotSet with read-only arrays

    Raises:
        InsufficientPoints: fewer than 2 points
        DegenerateKnotSpacing: duplicate or non-finite x
    """
    pts = to_points(points)
    if len(pts) < 2:
        raise InsufficientPoints(len(pts))

    # NaN never compares, so check finiteness before trusting the sort.
    check_finite(points_to_arrays(pts)[0])

    ordered = sort_points(pts)
    x, y = points_to_arrays(ordered)
    h = check_spacing(x)
    secants = np.diff(y) / h
    return KnotSet(
        points=tuple(ordered),
        x=_freeze(x),
        y=_freeze(y),
        h=_freeze(h),
        secants=_freeze(secants),
    )


__all__ = ['KnotSet', 'prepare_knots', 'sort_points', 'check_finite', 'check_spacing']
