from .point_types import Point, PointLike, to_point, to_points, points_to_arrays
from .model_type import (
    SplineModel,
    ModelLike,
    to_model,
    model_degrees,
    extrapolation_bound_types,
    display_names,
)

__all__ = [
    "Point", "PointLike", "to_point", "to_points", "points_to_arrays",
    "SplineModel", "ModelLike", "to_model",
    "model_degrees", "extrapolation_bound_types", "display_names",
]
