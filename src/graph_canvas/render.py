"""Diagram rendering: clear the surface, draw every edge, draw every node on top."""

from __future__ import annotations

import logging

from graph_canvas.options import GraphOptions
from graph_canvas.renderers.base import Surface
from graph_canvas.schematics.edge import build_edge_schematic
from graph_canvas.schematics.node import build_node_schematic
from graph_canvas.shapes.draw import ShapeDrawer
from graph_canvas.store import GraphStore

logger = logging.getLogger(__name__)


def render_store(store: GraphStore, surface: Surface, options: GraphOptions) -> None:
    """Draw one full frame of ``store`` onto ``surface``."""
    drawer = ShapeDrawer(surface)
    nodes = store.nodes
    edges = store.edges

    surface.clear()
    for edge in edges:
        drawer.draw(build_edge_schematic(edge, nodes, edges, options))
    for node in nodes:
        drawer.draw(build_node_schematic(node, options))
    logger.debug("rendered %d node(s), %d edge(s)", len(nodes), len(edges))


class Diagram:
    """Keeps a surface in step with a store.

    After ``attach`` every store mutation marks the diagram dirty. With
    ``auto_render`` the frame is redrawn at once; otherwise the owner calls
    ``render_if_dirty`` when it is ready to paint.
    """

    def __init__(
        self,
        store: GraphStore,
        surface: Surface,
        options: GraphOptions | None = None,
        auto_render: bool = True,
    ) -> None:
        self.store = store
        self.surface = surface
        self.options = options or GraphOptions()
        self.dirty = True
        self.frames = 0
        self.auto_render = auto_render

    def attach(self) -> None:
        self.store.subscribe(self._on_change)
        self.render()

    def detach(self) -> None:
        self.store.unsubscribe(self._on_change)

    def mark_dirty(self) -> None:
        self.dirty = True

    def _on_change(self) -> None:
        self.mark_dirty()
        if self.auto_render:
            self.render()

    def render_if_dirty(self) -> bool:
        """Render only when a change is pending; returns whether a frame was drawn."""
        if not self.dirty:
            return False
        self.render()
        return True

    def render(self) -> None:
        render_store(self.store, self.surface, self.options)
        self.dirty = False
        self.frames += 1
