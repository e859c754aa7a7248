"""Tests for options — constant-or-computed style values."""

from __future__ import annotations

import pytest

from graph_canvas.options import Computed, Constant, GraphOptions, resolve, style
from graph_canvas.store import Edge, Node


class TestResolve:
    def test_constant_ignores_context(self):
        assert resolve(Constant(5), object()) == 5

    def test_computed_receives_context(self):
        n = Node(id=7, x=0, y=0, label="x")
        assert resolve(Computed(lambda node: node.id * 2), n) == 14

    def test_rejects_raw_values(self):
        with pytest.raises(TypeError):
            resolve(5, None)


class TestStyle:
    def test_wraps_constants_and_callables(self):
        assert style("red") == Constant("red")
        assert isinstance(style(len), Computed)

    def test_style_values_pass_through(self):
        c = Constant(3)
        assert style(c) is c


class TestGraphOptions:
    def test_defaults(self):
        options = GraphOptions()
        n = Node(id=1, x=0, y=0, label="hub")
        e = Edge("hub", "hub")
        assert resolve(options.node_size, n) == 35
        assert resolve(options.node_border_size, n) == 8
        assert resolve(options.node_color, n) == "white"
        assert resolve(options.node_text, n) == "hub"
        assert resolve(options.node_text_size, n) == 24
        assert resolve(options.edge_color, e) == "black"
        assert resolve(options.edge_width, e) == 10

    def test_create_wraps_overrides(self):
        options = GraphOptions.create(node_size=20, edge_color=lambda e: "red")
        assert options.node_size == Constant(20)
        assert resolve(options.edge_color, Edge("a", "b")) == "red"
        assert options.node_color == Constant("white")

    def test_create_rejects_unknown_fields(self):
        with pytest.raises(ValueError, match="node_radius"):
            GraphOptions.create(node_radius=3)
