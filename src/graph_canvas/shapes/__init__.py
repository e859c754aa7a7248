"""Shape descriptions and the primitives that draw them."""

from graph_canvas.shapes.draw import ARROW_HEAD_HEIGHT, U_TURN_HEAD_HEIGHT, ShapeDrawer
from graph_canvas.shapes.types import Arc, Arrow, Circle, Line, Shape, Square, Stroke, Text, Triangle, UTurnArrow

__all__ = [
    "ARROW_HEAD_HEIGHT",
    "U_TURN_HEAD_HEIGHT",
    "Arc",
    "Arrow",
    "Circle",
    "Line",
    "Shape",
    "ShapeDrawer",
    "Square",
    "Stroke",
    "Text",
    "Triangle",
    "UTurnArrow",
]
