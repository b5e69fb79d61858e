"""
Interpolation engine: fit a spline model to control points.
"""
from __future__ import annotations
import logging
from typing import Optional, Sequence

from .curve import Curve
from .defaults import DEFAULT_MODEL
from .fitting import get_fitter, prepare_knots
from .types.model_type import ModelLike, SplineModel, to_model
from .types.point_types import PointLike

logger = logging.getLogger(__name__)


def build(points: Sequence[PointLike], model: ModelLike = DEFAULT_MODEL) -> Curve:
    """
    Fit a curve through the given points.

    The input is copied and sorted by x; it is never modified.

    Args:
        points: Unordered control points, at least 2 with distinct x
        model: "linear", "quadratic" or "cubic" (natural spline)

    Returns:
        An immutable Curve

    Raises:
        InsufficientPoints: fewer than 2 points
        DegenerateKnotSpacing: two points share an x, or an x is not finite
        SingularSystem: zero pivot while solving the cubic system
    """
    model = to_model(model)
    fitter = get_fitter(model)
    knots = prepare_knots(points)
    b, c, d = fitter(knots)
    curve = Curve(model, knots.points, knots.y, b, c, d)
    logger.debug(f"Built {model.value} curve through {knots.size} knots")
    return curve


class InterpolationEngine:
    """Stateless builder holding a default model."""

    __slots__ = ('default_model',)

    def __init__(self, default_model: ModelLike = DEFAULT_MODEL):
        self.default_model: SplineModel = to_model(default_model)

    def build(self, points: Sequence[PointLike], model: Optional[ModelLike] = None) -> Curve:
        """Fit with `model`, or the engine's default model when omitted."""
        return build(points, self.default_model if model is None else model)

    def __repr__(self) -> str:
        return f"InterpolationEngine(default_model={self.default_model.value!r})"


__all__ = ['build', 'InterpolationEngine']
