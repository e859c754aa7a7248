"""Fully resolved shape descriptions handed to the drawing primitives.

No field here holds a style function; callers resolve ``GraphOptions``
before building a shape.
"""

from __future__ import annotations

from dataclasses import dataclass

from graph_canvas.geometry.types import Point


@dataclass(frozen=True)
class Stroke:
    color: str
    width: float


@dataclass(frozen=True)
class Text:
    content: str
    font_size: float
    color: str = "black"
    font_weight: str = "bold"


@dataclass(frozen=True)
class Circle:
    at: Point
    radius: float
    color: str = "black"
    stroke: Stroke | None = None
    text: Text | None = None


@dataclass(frozen=True)
class Square:
    """An axis-aligned rectangle whose top-left corner is ``at``."""

    at: Point
    width: float
    height: float
    color: str = "black"
    stroke: Stroke | None = None
    text: Text | None = None


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    width: float
    color: str = "black"


@dataclass(frozen=True)
class Triangle:
    point1: Point
    point2: Point
    point3: Point
    color: str = "black"


@dataclass(frozen=True)
class Arc:
    """A stroked circular arc, angles in radians."""

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    width: float
    color: str = "black"
    anticlockwise: bool = False


@dataclass(frozen=True)
class Arrow:
    """A straight edge: a shaft from ``start`` and an arrowhead ending at ``end``."""

    start: Point
    end: Point
    width: float
    color: str = "black"
    bidirectional: bool = False


@dataclass(frozen=True)
class UTurnArrow:
    """A self-loop anchored at ``center`` and opening toward ``angle``.

    ``spacing`` is the half-width between the outgoing and return lanes,
    ``up_distance`` how far the loop reaches out, and ``down_distance`` how
    much the return lane is shortened to leave room for the arrowhead.
    """

    spacing: float
    center: Point
    up_distance: float
    down_distance: float
    angle: float
    line_width: float
    color: str = "black"


Shape = Circle | Square | Line | Triangle | Arc | Arrow | UTurnArrow
