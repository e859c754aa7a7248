"""Builders that turn store records into drawable shapes."""

from graph_canvas.schematics.edge import (
    LANE_SPACING,
    LOOP_DOWN_DISTANCE,
    LOOP_UP_DISTANCE,
    NODE_CLEARANCE,
    build_edge_schematic,
    is_bidirectional,
    occupied_directions,
)
from graph_canvas.schematics.node import build_node_schematic

__all__ = [
    "LANE_SPACING",
    "LOOP_DOWN_DISTANCE",
    "LOOP_UP_DISTANCE",
    "NODE_CLEARANCE",
    "build_edge_schematic",
    "build_node_schematic",
    "is_bidirectional",
    "occupied_directions",
]
