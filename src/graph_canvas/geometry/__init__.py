"""Pure 2D geometry helpers."""

from graph_canvas.geometry.angles import (
    DEFAULT_LOOP_ANGLE,
    angle,
    arc_sweep,
    largest_angular_space,
    normalize_angle,
    rotate_point,
)
from graph_canvas.geometry.types import Point

__all__ = [
    "DEFAULT_LOOP_ANGLE",
    "Point",
    "angle",
    "arc_sweep",
    "largest_angular_space",
    "normalize_angle",
    "rotate_point",
]
