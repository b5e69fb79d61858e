# No dependencies beyond boundednumbers
from enum import Enum
from typing import Union
from boundednumbers import BoundType


class SplineModel(str, Enum):
    LINEAR = "linear"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"


ModelLike = Union[SplineModel, str]

model_degrees = {
    SplineModel.LINEAR: 1,
    SplineModel.QUADRATIC: 2,
    SplineModel.CUBIC: 3,
}

# Linear keeps its trend past the end knots, the others flatten out.
extrapolation_bound_types = {
    SplineModel.LINEAR: BoundType.IGNORE,
    SplineModel.QUADRATIC: BoundType.CLAMP,
    SplineModel.CUBIC: BoundType.CLAMP,
}

display_names = {
    SplineModel.LINEAR: "Linear",
    SplineModel.QUADRATIC: "Quadratic",
    SplineModel.CUBIC: "Cubic",
}


def to_model(model: ModelLike) -> SplineModel:
    """
    Normalize a model given as enum member or string.

    Args:
        model: SplineModel member or one of "linear", "quadratic", "cubic"
            (case-insensitive)

    Returns:
        The matching SplineModel
    """
    if isinstance(model, SplineModel):
        return model
    if isinstance(model, str):
        try:
            return SplineModel(model.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown spline model: {model!r} "
                f"(expected one of {[m.value for m in SplineModel]})"
            ) from None
    raise TypeError(f"Unsupported model type: {type(model).__name__}")
