"""
Piecewise quadratic fitting.

Each segment is a + b*dx + c*dx**2. The first segment starts as a plain
secant (c[0] = 0), then every following segment inherits the slope the
previous one ends with and takes whatever curvature makes it hit its right
knot. The result is C1 at every interior knot but not C2, and it is not
the unique quadratic interpolant: the joins are smooth, nothing more.
"""
from __future__ import annotations
from typing import Tuple
import numpy as np

from .knots import KnotSet


def fit_quadratic(knots: KnotSet) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Run the slope-matching recurrence.

    Args:
        knots: Prepared knots, at least 2

    Returns:
        (b, c, d) with d all zero
    """
    y, h = knots.y, knots.h
    m = knots.size - 1
    b = np.zeros(m)
    c = np.zeros(m)

    b[0] = knots.secants[0]
    for i in range(m - 1):
        # slope at the right end of segment i
        b[i + 1] = b[i] + 2.0 * c[i] * h[i]
        c[i + 1] = (y[i + 2] - y[i + 1] - b[i + 1] * h[i + 1]) / (h[i + 1] * h[i + 1])

    return b, c, np.zeros(m)


__all__ = ['fit_quadratic']
