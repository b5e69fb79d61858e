"""
Defaults shared by the engine and the editor state.
"""
from .types.model_type import SplineModel

DEFAULT_MODEL = SplineModel.CUBIC

# Samples per rendered polyline (resolution + 1 points).
DEFAULT_RESOLUTION = 400

# Pixel radius for picking an existing control point.
PICK_RADIUS = 15.0

DEMO_POINTS = (
    (-300.0, 0.0),
    (-150.0, 100.0),
    (0.0, -100.0),
    (150.0, 100.0),
    (300.0, 0.0),
)

KEY_BINDINGS = {
    "h": "toggle_control_points",
    "r": "reset",
    "c": "clear",
    "1": SplineModel.LINEAR,
    "2": SplineModel.QUADRATIC,
    "3": SplineModel.CUBIC,
}

INSTRUCTIONS = (
    "Click - Add Point",
    "Click+Drag - Move Point",
    "H - Toggle Control Points",
    "R - Reset Points",
    "C - Clear Points",
    "1 - Linear Spline",
    "2 - Quadratic Spline",
    "3 - Cubic Spline (Natural)",
)
