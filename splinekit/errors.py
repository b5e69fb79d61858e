"""
Construction errors raised while fitting a curve.

All of them derive from ValueError, so callers that only care about
"bad input" can catch that.
"""
from typing import Optional


class SplineError(ValueError):
    """Base class for curve construction failures."""


class InsufficientPoints(SplineError):
    """Fewer than two points were supplied."""

    def __init__(self, count: int, required: int = 2):
        self.count = count
        self.required = required
        super().__init__(f"Need at least {required} points to interpolate, got {count}")


class DegenerateKnotSpacing(SplineError):
    """Two consecutive knots share an x-coordinate, or an x is not finite."""

    def __init__(self, x: float, index: Optional[int] = None):
        self.x = x
        self.index = index
        where = f" at sorted index {index}" if index is not None else ""
        super().__init__(f"x values must be distinct and finite, got x={x!r}{where}")


class SingularSystem(SplineError):
    """Zero pivot in the tridiagonal forward sweep."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Zero pivot in cubic spline system at row {index}")


__all__ = ['SplineError', 'InsufficientPoints', 'DegenerateKnotSpacing', 'SingularSystem']
