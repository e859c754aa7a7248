"""Pointer interaction: double-click to add nodes, press-move-release to drag."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from graph_canvas.options import GraphOptions
from graph_canvas.store import GraphStore, Node

logger = logging.getLogger(__name__)


@dataclass
class DragSession:
    node_id: int


class InteractionController:
    """Translates pointer events into store mutations.

    Holds at most one active drag; it is set on press over a node and
    cleared on release or cancel.
    """

    def __init__(self, store: GraphStore, options: GraphOptions | None = None) -> None:
        self.store = store
        self.options = options or GraphOptions()
        self.active_drag: DragSession | None = None

    def double_click(self, x: float, y: float) -> Node:
        return self.store.add_node(x=x, y=y)

    def press(self, x: float, y: float) -> Node | None:
        node = self.store.node_at(x, y, self.options)
        if node is not None:
            self.active_drag = DragSession(node_id=node.id)
            logger.debug("drag started on node %s", node.label)
        return node

    def move(self, x: float, y: float) -> None:
        if self.active_drag is None:
            return
        if self.store.get_node(self.active_drag.node_id) is None:
            logger.debug("dropping drag of removed node %s", self.active_drag.node_id)
            self.active_drag = None
            return
        self.store.move_node(self.active_drag.node_id, x, y)

    def release(self) -> None:
        self.active_drag = None

    def cancel(self) -> None:
        """Drop the drag when the press is lost (pointer left the surface)."""
        self.active_drag = None

    @property
    def dragging(self) -> bool:
        return self.active_drag is not None
