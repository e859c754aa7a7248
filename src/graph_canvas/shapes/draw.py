"""Shape drawing primitives built on raw surface path operations.

``ShapeDrawer`` binds one surface and exposes a draw function per shape.
The composite arrows derive their points from ``angle`` and
``rotate_point`` only; everything they paint goes through ``line`` and
``triangle`` plus a single raw arc.
"""

from __future__ import annotations

import math

from graph_canvas.geometry.angles import angle as direction
from graph_canvas.geometry.angles import rotate_point
from graph_canvas.geometry.types import Point
from graph_canvas.renderers.base import Surface
from graph_canvas.shapes.types import Arc, Arrow, Circle, Line, Shape, Square, Text, Triangle, UTurnArrow

ARROW_HEAD_HEIGHT: float = 25
U_TURN_HEAD_HEIGHT: float = 22
# Ratio between arrowhead height and the half-width of its base.
HEAD_ASPECT: float = 1.75


def _head_base(epicenter: Point, theta: float, half_width: float) -> tuple[Point, Point]:
    """Two base points of an arrowhead, perpendicular to ``theta`` at ``epicenter``."""
    dx = half_width * math.cos(theta + math.pi / 2)
    dy = half_width * math.sin(theta + math.pi / 2)
    return epicenter.offset(dx, dy), epicenter.offset(-dx, -dy)


class ShapeDrawer:
    """Draws fully resolved shape descriptions onto a surface."""

    def __init__(self, surface: Surface) -> None:
        self.surface = surface

    def draw(self, shape: Shape) -> None:
        """Dispatch ``shape`` to the primitive that draws its type."""
        match shape:
            case Circle():
                self.circle(shape)
            case Square():
                self.square(shape)
            case Line():
                self.line(shape)
            case Triangle():
                self.triangle(shape)
            case Arc():
                self.arc(shape)
            case Arrow():
                self.arrow(shape)
            case UTurnArrow():
                self.u_turn_arrow(shape)
            case _:
                raise ValueError(f"Unsupported shape: {type(shape).__name__}")

    # ─── Axiomatic shapes ────────────────────────────────────────────────────

    def circle(self, shape: Circle) -> None:
        s = self.surface
        s.begin_path()
        s.arc(shape.at.x, shape.at.y, shape.radius, 0, 2 * math.pi)
        s.fill(shape.color)
        if shape.stroke is not None:
            s.stroke(shape.stroke.color, shape.stroke.width)
        if shape.text is not None:
            self._label(shape.text, shape.at)
        s.close_path()

    def square(self, shape: Square) -> None:
        s = self.surface
        s.begin_path()
        s.rect(shape.at.x, shape.at.y, shape.width, shape.height)
        s.fill(shape.color)
        if shape.stroke is not None:
            s.stroke(shape.stroke.color, shape.stroke.width)
        if shape.text is not None:
            self._label(shape.text, shape.at.offset(shape.width / 2, shape.height / 2))
        s.close_path()

    def line(self, shape: Line) -> None:
        s = self.surface
        s.begin_path()
        s.move_to(shape.start.x, shape.start.y)
        s.line_to(shape.end.x, shape.end.y)
        s.stroke(shape.color, shape.width)
        s.close_path()

    def triangle(self, shape: Triangle) -> None:
        s = self.surface
        s.begin_path()
        s.move_to(shape.point1.x, shape.point1.y)
        s.line_to(shape.point2.x, shape.point2.y)
        s.line_to(shape.point3.x, shape.point3.y)
        s.fill(shape.color)
        s.close_path()

    def arc(self, shape: Arc) -> None:
        s = self.surface
        s.begin_path()
        s.arc(shape.center.x, shape.center.y, shape.radius, shape.start_angle, shape.end_angle, shape.anticlockwise)
        s.stroke(shape.color, shape.width)
        s.close_path()

    def _label(self, text: Text, at: Point) -> None:
        self.surface.fill_text(text.content, at.x, at.y, text.font_size, text.font_weight, text.color)

    # ─── Composite shapes ────────────────────────────────────────────────────

    def arrow(self, shape: Arrow) -> None:
        """Shaft from ``start`` to the epicenter, arrowhead from there to ``end``."""
        theta = direction(shape.start, shape.end)
        epicenter = shape.end.offset(
            -ARROW_HEAD_HEIGHT * math.cos(theta),
            -ARROW_HEAD_HEIGHT * math.sin(theta),
        )
        left, right = _head_base(epicenter, theta, ARROW_HEAD_HEIGHT / HEAD_ASPECT)

        self.line(Line(start=shape.start, end=epicenter, width=shape.width, color=shape.color))
        self.triangle(Triangle(point1=shape.end, point2=left, point3=right, color=shape.color))

    def u_turn_arrow(self, shape: UTurnArrow) -> None:
        """Loop out of ``center`` along ``angle`` and back, ending in an arrowhead.

        The template is laid out facing angle 0 and every point is rotated
        about ``center``; the return lane runs back toward the centre so its
        arrowhead points along ``angle + pi``.
        """
        c = shape.center
        theta = shape.angle
        spacing = shape.spacing
        up = shape.up_distance
        down = shape.down_distance
        half_width = U_TURN_HEAD_HEIGHT / HEAD_ASPECT

        def place(dx: float, dy: float) -> Point:
            return rotate_point(c.offset(dx, dy), c, theta)

        out_from = place(0, -spacing)
        out_to = place(up, -spacing)
        back_from = place(up, spacing)
        back_to = place(up - down, spacing)
        arc_center = place(up, 0)

        epicenter = back_to.offset(half_width * math.cos(theta), half_width * math.sin(theta))
        tip = place(up - down - half_width, spacing)
        left, right = _head_base(epicenter, theta, half_width)

        self.triangle(Triangle(point1=tip, point2=left, point3=right, color=shape.color))
        self.line(Line(start=out_from, end=out_to, width=shape.line_width, color=shape.color))
        self.line(Line(start=back_from, end=back_to, width=shape.line_width, color=shape.color))
        self.arc(
            Arc(
                center=arc_center,
                radius=spacing,
                start_angle=math.pi / 2 + theta,
                end_angle=-math.pi / 2 + theta,
                width=shape.line_width,
                color=shape.color,
                anticlockwise=True,
            )
        )
