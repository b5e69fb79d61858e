"""
Coefficient fitters, one per spline model.
"""
from typing import Callable, Dict, Tuple
import numpy as np

from ..types.model_type import SplineModel, ModelLike, to_model
from .knots import KnotSet, prepare_knots
from .linear import fit_linear
from .quadratic import fit_quadratic
from .cubic import fit_cubic

Coefficients = Tuple[np.ndarray, np.ndarray, np.ndarray]
Fitter = Callable[[KnotSet], Coefficients]

FITTERS: Dict[SplineModel, Fitter] = {
    SplineModel.LINEAR: fit_linear,
    SplineModel.QUADRATIC: fit_quadratic,
    SplineModel.CUBIC: fit_cubic,
}


def get_fitter(model: ModelLike) -> Fitter:
    """Look up the coefficient fitter for a model."""
    model = to_model(model)
    try:
        return FITTERS[model]
    except KeyError:
        raise ValueError(f"No fitter registered for model {model!r}") from None


__all__ = [
    'FITTERS', 'Fitter', 'Coefficients', 'get_fitter',
    'KnotSet', 'prepare_knots',
    'fit_linear', 'fit_quadratic', 'fit_cubic',
]
