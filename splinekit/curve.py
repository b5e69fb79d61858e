"""
Fitted piecewise polynomial curve.

A Curve is immutable once built. Segment i covers [x[i], x[i+1]] and
evaluates a[i] + b[i]*dx + c[i]*dx**2 + d[i]*dx**3 with dx = x - x[i];
terms above the model's degree are skipped, not just zero.

Out-of-range policy:
- LINEAR keeps the end segment's slope (BoundType.IGNORE on x).
- QUADRATIC and CUBIC clamp x to the knot range (BoundType.CLAMP), so the
  curve is flat at the first/last knot's y past either end.
"""
from __future__ import annotations
from bisect import bisect_left
from typing import Optional, Sequence, Tuple, Union
import numpy as np

from boundednumbers import BoundType, boundtype_to_function, bound_type_to_np_function
from .errors import InsufficientPoints
from .types.model_type import ModelLike, SplineModel, to_model, model_degrees, extrapolation_bound_types
from .types.point_types import Point, PointLike, to_points

ArrayLike = Union[float, Sequence[float], np.ndarray]


def _readonly(values: ArrayLike) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    arr.flags.writeable = False
    return arr


class Curve:
    """
    Result of fitting a spline model to a set of knots.

    Build it with splinekit.build(); the constructor trusts its inputs
    apart from shape checks.
    """

    __slots__ = ('_model', '_degree', '_bound_type', '_knots',
                 '_x', '_a', '_b', '_c', '_d',
                 '_xk', '_ak', '_bk', '_ck', '_dk')

    def __init__(self,
                 model: ModelLike,
                 knots: Sequence[PointLike],
                 a: ArrayLike,
                 b: ArrayLike,
                 c: ArrayLike,
                 d: ArrayLike):
        knots = tuple(to_points(knots))
        n = len(knots)
        if n == 0:
            raise InsufficientPoints(0, required=1)

        self._model = to_model(model)
        self._degree = model_degrees[self._model]
        self._bound_type = extrapolation_bound_types[self._model]
        self._knots = knots
        self._x = _readonly([p.x for p in knots])
        self._a = _readonly(a)
        self._b = _readonly(b)
        self._c = _readonly(c)
        self._d = _readonly(d)

        if self._a.shape != (n,):
            raise ValueError(f"a must have {n} entries, got shape {self._a.shape}")
        for name, arr in (("b", self._b), ("c", self._c), ("d", self._d)):
            if arr.shape != (n - 1,):
                raise ValueError(f"{name} must have {n - 1} entries, got shape {arr.shape}")

        # plain float copies for the scalar path
        self._xk = self._x.tolist()
        self._ak = self._a.tolist()
        self._bk = self._b.tolist()
        self._ck = self._c.tolist()
        self._dk = self._d.tolist()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def model(self) -> SplineModel:
        return self._model

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def knots(self) -> Tuple[Point, ...]:
        return self._knots

    @property
    def segment_count(self) -> int:
        return len(self._knots) - 1

    @property
    def coefficients(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """(a, b, c, d) as read-only arrays."""
        return self._a, self._b, self._c, self._d

    @property
    def x_range(self) -> Tuple[float, float]:
        return self._xk[0], self._xk[-1]

    # ------------------------------------------------------------------
    # Scalar evaluation
    # ------------------------------------------------------------------
    def segment_index(self, x: float) -> int:
        """Smallest i with x <= x[i+1], clamped to a valid segment."""
        last = max(len(self._xk) - 2, 0)
        i = bisect_left(self._xk, x) - 1
        return min(max(i, 0), last)

    def _segment_value(self, i: int, dx: float) -> float:
        y = self._ak[i] + self._bk[i] * dx
        if self._degree >= 2:
            y += self._ck[i] * dx * dx
        if self._degree >= 3:
            y += self._dk[i] * dx * dx * dx
        return y

    def _extrapolate(self, x: float) -> float:
        x0, xn = self._xk[0], self._xk[-1]
        if x < x0:
            return self._ak[0] + self._bk[0] * (x - x0)
        return self._ak[-1] + self._bk[-1] * (x - xn)

    def evaluate(self, x: float) -> float:
        """
        Evaluate the curve at x.

        Never raises for real input; NaN in gives NaN out.

        Args:
            x: Query coordinate, inside or outside the knot range

        Returns:
            Curve value at x
        """
        x = float(x)
        xk, ak = self._xk, self._ak
        if len(xk) == 1:
            return ak[0]

        x0, xn = xk[0], xk[-1]
        if x < x0 or x > xn:
            if self._bound_type is BoundType.IGNORE:
                return self._extrapolate(x)
            x = boundtype_to_function[self._bound_type](x, x0, xn)
        if x == x0:
            return ak[0]
        if x == xn:
            return ak[-1]

        i = self.segment_index(x)
        return self._segment_value(i, x - xk[i])

    __call__ = evaluate

    # ------------------------------------------------------------------
    # Vectorized evaluation
    # ------------------------------------------------------------------
    def evaluate_many(self, xs: ArrayLike) -> np.ndarray:
        """
        Evaluate the curve at every x in xs.

        Gives the same values as calling evaluate() element by element.

        Args:
            xs: Scalar or array-like of query coordinates

        Returns:
            float64 array with the shape of xs
        """
        xq = np.asarray(xs, dtype=np.float64)
        shape = xq.shape
        xq = xq.reshape(-1)
        n = len(self._xk)
        if n == 1:
            return np.full(shape, self._ak[0])

        x0, xn = self._xk[0], self._xk[-1]
        xb = bound_type_to_np_function[self._bound_type](xq, x0, xn)

        idx = np.clip(np.searchsorted(self._x, xb, side="left") - 1, 0, n - 2)
        dx = xb - self._x[idx]
        y = self._a[idx] + self._b[idx] * dx
        if self._degree >= 2:
            y = y + self._c[idx] * dx * dx
        if self._degree >= 3:
            y = y + self._d[idx] * dx * dx * dx

        if self._bound_type is BoundType.IGNORE:
            above = xb > xn
            if np.any(above):
                y[above] = self._a[-1] + self._b[-1] * (xb[above] - xn)
        y[xb == x0] = self._a[0]
        y[xb == xn] = self._a[-1]
        return y.reshape(shape)

    def sample(self,
               resolution: int,
               x_min: Optional[float] = None,
               x_max: Optional[float] = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Sample the curve as a polyline.

        Args:
            resolution: Number of steps; resolution + 1 points are returned
            x_min: Left end, defaults to the first knot's x
            x_max: Right end, defaults to the last knot's x

        Returns:
            (xs, ys) arrays
        """
        if isinstance(resolution, bool) or not isinstance(resolution, (int, np.integer)) or resolution < 1:
            raise ValueError(f"resolution must be a positive integer, got {resolution!r}")
        x_min = float(self._xk[0] if x_min is None else x_min)
        x_max = float(self._xk[-1] if x_max is None else x_max)

        step = (x_max - x_min) / resolution
        xs = x_min + step * np.arange(resolution + 1, dtype=np.float64)
        return xs, self.evaluate_many(xs)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        if self is other:
            return True
        return (self._model is other._model
                and self._knots == other._knots
                and all(np.array_equal(mine, theirs, equal_nan=True)
                        for mine, theirs in zip(self.coefficients, other.coefficients)))

    def __hash__(self) -> int:
        return hash((self._model, self._knots))

    def __repr__(self) -> str:
        return f"Curve(model={self._model.value!r}, knots={len(self._knots)})"


__all__ = ['Curve']
