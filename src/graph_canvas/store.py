"""Diagram store: the node and edge collections plus their mutation API.

Nodes are indexed by label in a ``networkx.MultiDiGraph``; parallel edges
are kept as separate keys so duplicates are not merged. Every mutating
method emits an explicit change signal to subscribers once the collection
is consistent again.
"""

from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Callable, Hashable
from dataclasses import dataclass

import networkx as nx

from graph_canvas.options import GraphOptions, resolve

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


@dataclass
class Node:
    """A positioned diagram vertex. ``id`` is fixed; ``x``/``y`` move on drag."""

    id: int
    x: float
    y: float
    label: Hashable


@dataclass(frozen=True)
class Edge:
    """A directed reference between two node labels."""

    from_label: Hashable
    to_label: Hashable

    def reversed(self) -> Edge:
        return Edge(self.to_label, self.from_label)


class GraphStore:
    """Ordered nodes and edges of one diagram."""

    def __init__(self) -> None:
        self.digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        self._listeners: list[Listener] = []
        self._edge_seq = itertools.count()

    # ─── Change signal ───────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ─── Snapshots ───────────────────────────────────────────────────────────

    @property
    def nodes(self) -> list[Node]:
        """Nodes in insertion order."""
        return [data for _, data in self.digraph.nodes(data="data")]

    @property
    def edges(self) -> list[Edge]:
        """Edges in insertion order."""
        ordered = sorted(self.digraph.edges(keys=True, data=True), key=lambda e: e[3]["seq"])
        return [data["data"] for _, _, _, data in ordered]

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    # ─── Nodes ───────────────────────────────────────────────────────────────

    def _next_id(self, free_label: bool = False) -> int:
        """Smallest id from ``len(nodes) + 1`` up that is unused, and unused as a label if asked."""
        used = {n.id for n in self.nodes}
        candidate = len(used) + 1
        while candidate in used or (free_label and candidate in self.digraph):
            candidate += 1
        return candidate

    def add_node(
        self,
        x: float = 100,
        y: float = 100,
        label: Hashable | None = None,
        id: int | None = None,
    ) -> Node:
        """Create a node; ``id`` defaults to the next free integer, ``label`` to the id.

        Raises:
            ValueError: If the id or label is already taken.
        """
        node_id = self._next_id(free_label=label is None) if id is None else id
        if any(n.id == node_id for n in self.nodes):
            raise ValueError(f"Duplicate node id {node_id}")
        node_label = node_id if label is None else label
        if node_label in self.digraph:
            raise ValueError(f"Duplicate node label {node_label!r}")

        node = Node(id=node_id, x=x, y=y, label=node_label)
        self.digraph.add_node(node_label, data=node)
        logger.debug("added node %s at (%s, %s)", node_label, x, y)
        self._changed()
        return node

    def get_node(self, id: int) -> Node | None:
        return next((n for n in self.nodes if n.id == id), None)

    def get_node_by_label(self, label: Hashable) -> Node | None:
        if label not in self.digraph:
            return None
        return self.digraph.nodes[label]["data"]

    def node_at(self, x: float, y: float, options: GraphOptions) -> Node | None:
        """First node whose drawn disc (radius ``options.node_size``) strictly contains ``(x, y)``."""
        return next(
            (n for n in self.nodes if math.hypot(n.x - x, n.y - y) < resolve(options.node_size, n)),
            None,
        )

    def move_node(self, id: int, x: float, y: float) -> None:
        node = self.get_node(id)
        if node is None:
            return
        node.x = x
        node.y = y
        self._changed()

    def remove_node(self, id: int) -> None:
        """Remove a node and every edge that touches it."""
        node = self.get_node(id)
        if node is None:
            return
        incident = set(self.digraph.in_edges(node.label, keys=True)) | set(self.digraph.out_edges(node.label, keys=True))
        dropped = len(incident)
        self.digraph.remove_node(node.label)
        logger.debug("removed node %s and %d incident edge(s)", node.label, dropped)
        self._changed()

    # ─── Edges ───────────────────────────────────────────────────────────────

    def add_edge(self, from_label: Hashable, to_label: Hashable) -> Edge:
        """Connect two existing nodes.

        Raises:
            ValueError: If either label names no node.
        """
        for label in (from_label, to_label):
            if label not in self.digraph:
                raise ValueError(f"Unknown node label {label!r}")
        edge = Edge(from_label, to_label)
        self.digraph.add_edge(from_label, to_label, data=edge, seq=next(self._edge_seq))
        logger.debug("added edge %s -> %s", from_label, to_label)
        self._changed()
        return edge

    def remove_edge(self, edge: Edge) -> None:
        """Remove every edge with exactly ``edge``'s (from, to) pair."""
        if not self.digraph.has_edge(edge.from_label, edge.to_label):
            return
        keys = list(self.digraph[edge.from_label][edge.to_label])
        self.digraph.remove_edges_from((edge.from_label, edge.to_label, k) for k in keys)
        logger.debug("removed %d edge(s) %s -> %s", len(keys), edge.from_label, edge.to_label)
        self._changed()

    def clear(self) -> None:
        self.digraph.clear()
        self._changed()
