"""Edge schematic builder.

Turns one edge plus the current node and edge collections into the shape
that should be drawn for it: a straight ``Arrow`` clipped short of the
destination node (shifted sideways when the reverse edge also exists), or a
``UTurnArrow`` for a self-loop, opened toward the emptiest direction around
its node.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Sequence

from graph_canvas.geometry.angles import angle, largest_angular_space
from graph_canvas.geometry.types import Point
from graph_canvas.options import GraphOptions, resolve
from graph_canvas.shapes.types import Arrow, UTurnArrow
from graph_canvas.store import Edge, Node

# ─── Geometry constants ──────────────────────────────────────────────────────

NODE_CLEARANCE: float = 10
LANE_SPACING: float = 12
LOOP_UP_DISTANCE: float = 80
LOOP_DOWN_DISTANCE: float = 25


def _index(nodes: Sequence[Node]) -> dict[Hashable, Node]:
    index: dict[Hashable, Node] = {}
    for node in nodes:
        index.setdefault(node.label, node)
    return index


def _endpoints(edge: Edge, index: dict[Hashable, Node]) -> tuple[Node, Node]:
    """Resolve both labels of ``edge``.

    Raises:
        KeyError: If a label names no node; the store guarantees this cannot happen.
    """
    return index[edge.from_label], index[edge.to_label]


def _position(node: Node) -> Point:
    return Point(node.x, node.y)


def is_bidirectional(edge: Edge, nodes: Sequence[Node], edges: Sequence[Edge]) -> bool:
    """True when some edge runs between the same two nodes in the opposite direction."""
    index = _index(nodes)
    src, dst = _endpoints(edge, index)
    if src is dst:
        return False
    for other in edges:
        o_src, o_dst = _endpoints(other, index)
        if o_src is dst and o_dst is src:
            return True
    return False


def occupied_directions(node: Node, nodes: Sequence[Node], edges: Sequence[Edge]) -> list[Point]:
    """Far endpoints of every non-loop edge touching ``node``."""
    index = _index(nodes)
    points: list[Point] = []
    for other in edges:
        src, dst = _endpoints(other, index)
        if src is dst:
            continue
        if src is node:
            points.append(_position(dst))
        elif dst is node:
            points.append(_position(src))
    return points


def _straight(edge: Edge, src: Node, dst: Node, bidirectional: bool, options: GraphOptions) -> Arrow:
    clearance = resolve(options.node_size, dst) + NODE_CLEARANCE
    theta = angle(_position(src), _position(dst))

    start = _position(src)
    end = Point(dst.x - clearance * math.cos(theta), dst.y - clearance * math.sin(theta))

    if bidirectional:
        dx = LANE_SPACING * math.cos(theta + math.pi / 2)
        dy = LANE_SPACING * math.sin(theta + math.pi / 2)
        start = start.offset(dx, dy)
        end = end.offset(dx, dy)

    return Arrow(
        start=start,
        end=end,
        width=resolve(options.edge_width, edge),
        color=resolve(options.edge_color, edge),
        bidirectional=bidirectional,
    )


def _self_loop(edge: Edge, node: Node, nodes: Sequence[Node], edges: Sequence[Edge], options: GraphOptions) -> UTurnArrow:
    center = _position(node)
    return UTurnArrow(
        spacing=LANE_SPACING,
        center=center,
        up_distance=LOOP_UP_DISTANCE,
        down_distance=LOOP_DOWN_DISTANCE,
        angle=largest_angular_space(center, occupied_directions(node, nodes, edges)),
        line_width=resolve(options.edge_width, edge),
        color=resolve(options.edge_color, edge),
    )


def build_edge_schematic(
    edge: Edge,
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    options: GraphOptions,
) -> Arrow | UTurnArrow:
    """Build the drawable shape for ``edge``.

    Args:
        edge: The edge to draw.
        nodes: Every node in the diagram; edges resolve against their labels.
        edges: Every edge in the diagram, ``edge`` included.
        options: Style options; edge fields resolve against ``edge``, the
            node size against the destination node.

    Returns:
        A ``UTurnArrow`` when both labels resolve to the same node, else an
        ``Arrow`` whose ``end`` sits ``node_size + 10`` short of the
        destination centre.

    Raises:
        KeyError: If ``edge`` or any edge consulted references a missing label.
    """
    src, dst = _endpoints(edge, _index(nodes))
    if src is dst:
        return _self_loop(edge, src, nodes, edges, options)
    return _straight(edge, src, dst, is_bidirectional(edge, nodes, edges), options)
