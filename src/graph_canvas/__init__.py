"""graph-canvas: node-and-edge diagrams with self-loop and bidirectional edge geometry."""

from __future__ import annotations

import math

from graph_canvas.config import RenderConfig
from graph_canvas.geometry.types import Point
from graph_canvas.interaction import InteractionController
from graph_canvas.options import Computed, Constant, GraphOptions, resolve
from graph_canvas.render import Diagram, render_store
from graph_canvas.renderers.canvas import TextSurface
from graph_canvas.renderers.charset import CharSet
from graph_canvas.renderers.svg import SvgSurface
from graph_canvas.schematics.edge import LANE_SPACING, LOOP_UP_DISTANCE, build_edge_schematic
from graph_canvas.store import Edge, GraphStore, Node

__all__ = [
    "Computed",
    "Constant",
    "Diagram",
    "Edge",
    "GraphOptions",
    "GraphStore",
    "InteractionController",
    "Node",
    "Point",
    "RenderConfig",
    "build_edge_schematic",
    "render_graph",
    "resolve",
]


def _margin(store: GraphStore, options: GraphOptions) -> float:
    """Room around the outermost node centres for node discs and loops."""
    widest = max(
        resolve(options.node_size, n) + resolve(options.node_border_size, n) for n in store.nodes
    )
    return max(widest, LOOP_UP_DISTANCE + LANE_SPACING) + LANE_SPACING


def render_graph(store: GraphStore, options: GraphOptions | None = None, config: RenderConfig | None = None) -> str:
    """Render the current contents of ``store`` to a text or SVG string.

    Args:
        store: The diagram to draw.
        options: Style options; defaults to ``GraphOptions()``.
        config: Output format and scaling; defaults to ``RenderConfig()``.

    Returns:
        The rendered output, or an empty string if the store has no nodes.
    """
    options = options or GraphOptions()
    config = config or RenderConfig()
    if store.node_count() == 0:
        return ""

    margin = config.margin if config.margin is not None else _margin(store, options)
    nodes = store.nodes
    min_x = min(n.x for n in nodes) - margin
    min_y = min(n.y for n in nodes) - margin
    max_x = max(n.x for n in nodes) + margin
    max_y = max(n.y for n in nodes) + margin

    if config.format == "svg":
        surface = SvgSurface(max_x - min_x, max_y - min_y, origin_x=min_x, origin_y=min_y)
    else:
        surface = TextSurface(
            width=math.ceil((max_x - min_x) / config.scale) + 1,
            height=math.ceil((max_y - min_y) / (config.scale * 2)) + 1,
            charset=CharSet.Unicode if config.unicode else CharSet.Ascii,
            scale=config.scale,
            origin=Point(min_x, min_y),
        )
    render_store(store, surface, options)
    return surface.to_string()
