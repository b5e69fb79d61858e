from __future__ import annotations
from typing import Tuple
import numpy as np

from .knots import KnotSet


def fit_linear(knots: KnotSet) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Straight lines between consecutive knots: b is the secant slope, c = d = 0."""
    m = knots.size - 1
    return knots.secants.copy(), np.zeros(m), np.zeros(m)


__all__ = ['fit_linear']
