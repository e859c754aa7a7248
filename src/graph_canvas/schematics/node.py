"""Node schematic: a node resolved into a drawable circle."""

from __future__ import annotations

from graph_canvas.geometry.types import Point
from graph_canvas.options import GraphOptions, resolve
from graph_canvas.shapes.types import Circle, Stroke, Text
from graph_canvas.store import Node


def build_node_schematic(node: Node, options: GraphOptions) -> Circle:
    return Circle(
        at=Point(node.x, node.y),
        radius=resolve(options.node_size, node),
        color=resolve(options.node_color, node),
        stroke=Stroke(
            color=resolve(options.node_border_color, node),
            width=resolve(options.node_border_size, node),
        ),
        text=Text(
            content=resolve(options.node_text, node),
            font_size=resolve(options.node_text_size, node),
            color=resolve(options.node_text_color, node),
            font_weight=resolve(options.node_text_weight, node),
        ),
    )
