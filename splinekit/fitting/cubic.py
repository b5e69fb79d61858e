"""
Natural cubic spline fitting.

Solves the tridiagonal system for the quadratic coefficients c with a
Thomas-style forward/backward sweep. Natural ends: c is zero at the first
and last knot, so the second derivative vanishes there.
"""
from __future__ import annotations
from typing import Tuple
import numpy as np

from ..errors import SingularSystem
from .knots import KnotSet


def _forward_sweep(knots: KnotSet) -> Tuple[np.ndarray, np.ndarray]:
    """
    Eliminate the sub-diagonal.

    Returns:
        (mu, z), both of length n; mu[0] = z[0] = 0 and the last rows stay 0

    Raises:
        SingularSystem: if a pivot is exactly zero
    """
    x, h, secants = knots.x, knots.h, knots.secants
    n = knots.size

    alpha = np.zeros(n)
    alpha[1:n - 1] = 3.0 * (secants[1:] - secants[:-1])

    mu = np.zeros(n)
    z = np.zeros(n)
    for i in range(1, n - 1):
        pivot = 2.0 * (x[i + 1] - x[i - 1]) - h[i - 1] * mu[i - 1]
        if pivot == 0.0:
            raise SingularSystem(i)
        mu[i] = h[i] / pivot
        z[i] = (alpha[i] - h[i - 1] * z[i - 1]) / pivot
    return mu, z


def fit_cubic(knots: KnotSet) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Fit a natural cubic spline.

    Args:
        knots: Prepared knots, at least 2

    Returns:
        (b, c, d) coefficient arrays of length n-1
    """
    h, secants = knots.h, knots.secants
    n = knots.size
    mu, z = _forward_sweep(knots)

    c_internal = np.zeros(n)
    b = np.zeros(n - 1)
    c = np.zeros(n - 1)
    d = np.zeros(n - 1)
    for j in range(n - 2, -1, -1):
        c_internal[j] = z[j] - mu[j] * c_internal[j + 1]
        c[j] = c_internal[j]
        b[j] = secants[j] - h[j] * (c_internal[j + 1] + 2.0 * c_internal[j]) / 3.0
        d[j] = (c_internal[j + 1] - c_internal[j]) / (3.0 * h[j])

    return b, c, d


__all__ = ['fit_cubic']
