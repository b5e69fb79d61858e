"""
splinekit - Piecewise Polynomial Interpolation
==============================================

Fits a curve through an unordered set of 2-D control points and evaluates
it anywhere, including outside the knot range.

Models
------
- linear: straight segments, extrapolates with the end slopes
- quadratic: C1 slope-matching quadratics, flat past the ends
- cubic: natural cubic spline (C2), flat past the ends

Quick Start
-----------
>>> from splinekit import build, SplineModel
>>>
>>> curve = build([(0, 5), (-10, 1), (10, 9)], SplineModel.CUBIC)
>>> curve.evaluate(-10)
1.0
>>> xs, ys = curve.sample(100)

Modules
-------
- engine: build() and InterpolationEngine
- curve: the immutable Curve and its evaluators
- fitting: per-model coefficient fitters
- editor: headless state for an interactive editor
- errors: construction failures
"""

from .types import Point, SplineModel
from .errors import SplineError, InsufficientPoints, DegenerateKnotSpacing, SingularSystem
from .curve import Curve
from .engine import build, InterpolationEngine
from .editor import EditorState
from .logging_config import setup_logging

__version__ = "1.0.0"

__all__ = [
    # Data
    "Point", "SplineModel", "Curve",

    # Engine
    "build", "InterpolationEngine",

    # Errors
    "SplineError", "InsufficientPoints", "DegenerateKnotSpacing", "SingularSystem",

    # Front-end state
    "EditorState",

    # Logging
    "setup_logging",

    # Version
    "__version__",
]
