"""
Editor State
============
Caller-owned state for an interactive spline editor.

A GUI layer forwards mouse and key events here and draws what
`polyline()` and `control_points` return. Nothing in this module renders
or touches a window.

Classes:
    EditorState: control points, selected model, drag state and the
        current curve.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import List, Optional, Tuple

import numpy as np

from ..curve import Curve
from ..defaults import DEFAULT_MODEL, DEFAULT_RESOLUTION, PICK_RADIUS, DEMO_POINTS, KEY_BINDINGS, INSTRUCTIONS
from ..engine import build
from ..errors import DegenerateKnotSpacing, SplineError
from ..types.model_type import ModelLike, SplineModel, to_model, display_names
from ..types.point_types import Point

logger = logging.getLogger(__name__)


def _demo_points() -> List[Point]:
    return [Point(x, y) for x, y in DEMO_POINTS]


@dataclass
class EditorState:
    control_points: List[Point] = field(default_factory=_demo_points)
    model: SplineModel = DEFAULT_MODEL
    curve: Optional[Curve] = None
    dragging_point: Optional[int] = None
    show_control_points: bool = True
    resolution: int = DEFAULT_RESOLUTION
    pick_radius: float = PICK_RADIUS
    last_error: Optional[SplineError] = None

    def __post_init__(self) -> None:
        self.model = to_model(self.model)
        self.control_points = [Point(float(p[0]), float(p[1])) for p in self.control_points]

    @classmethod
    def default(cls) -> EditorState:
        """Demo points, cubic model, curve already built."""
        state = cls()
        state.update()
        return state

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------
    def pick(self, x: float, y: float) -> Optional[int]:
        """Index of the first control point closer than pick_radius, if any."""
        for i, p in enumerate(self.control_points):
            if math.hypot(p.x - x, p.y - y) < self.pick_radius:
                return i
        return None

    def press(self, x: float, y: float) -> Optional[int]:
        """
        Start dragging a nearby point, or add a new one.

        Returns:
            Index of the point being dragged, or None if a point was added
            (or rejected because its x is already taken).
        """
        idx = self.pick(x, y)
        if idx is not None:
            self.dragging_point = idx
            return idx

        if any(p.x == x for p in self.control_points):
            self.last_error = DegenerateKnotSpacing(float(x))
            logger.warning(f"Ignoring point ({x}, {y}): x is already used by another control point")
            return None

        self.control_points.append(Point(float(x), float(y)))
        return None

    def move(self, x: float, y: float) -> None:
        if self.dragging_point is not None:
            self.control_points[self.dragging_point] = Point(float(x), float(y))

    def release(self) -> None:
        self.dragging_point = None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def select_model(self, model: ModelLike) -> None:
        self.model = to_model(model)

    def toggle_control_points(self) -> None:
        self.show_control_points = not self.show_control_points

    def reset(self) -> None:
        """Restore the demo points."""
        self.control_points = _demo_points()
        self.dragging_point = None
        logger.info("Control points reset.")

    def clear(self) -> None:
        self.control_points.clear()
        self.dragging_point = None

    def handle_key(self, key: str) -> bool:
        """
        Apply the action bound to `key`.

        Returns:
            True if the key is bound, False otherwise
        """
        action = KEY_BINDINGS.get(key.lower())
        if action is None:
            return False
        if isinstance(action, SplineModel):
            self.select_model(action)
        else:
            getattr(self, action)()
        return True

    # ------------------------------------------------------------------
    # Curve
    # ------------------------------------------------------------------
    def update(self) -> Optional[Curve]:
        """
        Rebuild the curve from the current points and model.

        With fewer than 2 points the curve is dropped. If the fit fails the
        previous curve is kept and the error is stored in `last_error`.
        """
        if len(self.control_points) < 2:
            self.curve = None
            self.last_error = None
            return None
        try:
            self.curve = build(self.control_points, self.model)
        except SplineError as e:
            self.last_error = e
            logger.warning(f"Keeping previous curve: {e}")
        else:
            self.last_error = None
        return self.curve

    def polyline(self) -> Optional[Tuple[np.ndarray, np.ndarray]]:
        """Curve sampled across the control points' x-range, or None."""
        if self.curve is None or len(self.control_points) < 2:
            return None
        xs = [p.x for p in self.control_points]
        return self.curve.sample(self.resolution, min(xs), max(xs))

    def status_lines(self) -> List[str]:
        return [*INSTRUCTIONS, f"Current Type: {display_names[self.model]}"]


__all__ = ['EditorState']
