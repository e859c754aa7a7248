"""Tests for render and the text/SVG surfaces."""

from __future__ import annotations

import pytest

from graph_canvas import Diagram, GraphOptions, GraphStore, RenderConfig, render_graph
from graph_canvas.geometry import Point
from graph_canvas.renderers import CharSet, RecordingSurface, SvgSurface, TextSurface

# ─── Helpers ──────────────────────────────────────────────────────────────────


def two_node_store() -> GraphStore:
    store = GraphStore()
    store.add_node(x=0, y=0, label="A")
    store.add_node(x=100, y=0, label="B")
    store.add_edge("A", "B")
    return store


# ─── Diagram ──────────────────────────────────────────────────────────────────


class TestDiagram:
    def test_frame_order(self):
        """The surface is cleared, edges are drawn, then nodes on top."""
        surface = RecordingSurface()
        Diagram(two_node_store(), surface).render()
        ops = surface.ops()
        assert ops[0] == "clear"
        last_edge_op = max(i for i, op in enumerate(ops) if op == "move_to")
        node_arcs = [i for i, (op, args) in enumerate(surface.calls) if op == "arc" and args[2] == 35]
        assert len(node_arcs) == 2
        assert min(node_arcs) > last_edge_op

    def test_attach_redraws_on_mutation(self):
        store = two_node_store()
        surface = RecordingSurface()
        diagram = Diagram(store, surface)
        diagram.attach()
        assert diagram.frames == 1
        store.move_node(1, 10, 10)
        assert diagram.frames == 2
        assert not diagram.dirty
        diagram.detach()
        store.move_node(1, 20, 20)
        assert diagram.frames == 2

    def test_redraw_after_node_removal(self):
        store = two_node_store()
        surface = RecordingSurface()
        Diagram(store, surface).attach()
        store.remove_node(2)
        surface.reset()
        Diagram(store, surface).render()
        assert surface.calls_named("fill_text") == [("A", 0, 0, 24, "bold", "black")]

    def test_deferred_rendering(self):
        """Without auto_render a mutation only marks the diagram dirty."""
        store = two_node_store()
        diagram = Diagram(store, RecordingSurface(), auto_render=False)
        diagram.attach()
        assert diagram.render_if_dirty() is False
        store.move_node(1, 10, 10)
        store.move_node(1, 20, 20)
        assert diagram.dirty
        assert diagram.frames == 1
        assert diagram.render_if_dirty() is True
        assert diagram.frames == 2
        assert diagram.render_if_dirty() is False

    def test_mark_dirty(self):
        diagram = Diagram(GraphStore(), RecordingSurface())
        diagram.render()
        diagram.mark_dirty()
        assert diagram.dirty


# ─── render_graph ─────────────────────────────────────────────────────────────


class TestRenderGraph:
    def test_empty_store(self):
        assert render_graph(GraphStore()) == ""

    def test_text_output(self):
        out = render_graph(two_node_store())
        assert "A" in out
        assert "B" in out
        assert "─" in out
        assert out.endswith("\n")
        assert all(line == line.rstrip() for line in out.split("\n"))

    def test_ascii_output(self):
        out = render_graph(two_node_store(), config=RenderConfig(unicode=False))
        assert "─" not in out
        assert "-" in out

    def test_svg_output(self):
        out = render_graph(two_node_store(), GraphOptions.create(edge_color="red"), RenderConfig(format="svg"))
        assert out.startswith("<svg")
        assert out.rstrip().endswith("</svg>")
        assert ">A</text>" in out
        assert 'stroke="red"' in out

    def test_self_loop_renders(self):
        store = two_node_store()
        store.add_edge("B", "B")
        assert "B" in render_graph(store)

    def test_unknown_format_rejected(self):
        with pytest.raises(ValueError):
            RenderConfig(format="png")


# ─── Text surface ─────────────────────────────────────────────────────────────


class TestTextSurface:
    def _surface(self) -> TextSurface:
        return TextSurface(10, 5, CharSet.Ascii, scale=1)

    def test_horizontal_stroke(self):
        s = self._surface()
        s.begin_path()
        s.move_to(0, 0)
        s.line_to(9, 0)
        s.stroke("black", 1)
        assert s.to_string().split("\n")[0] == "-" * 10

    def test_vertical_stroke(self):
        s = self._surface()
        s.begin_path()
        s.move_to(2, 0)
        s.line_to(2, 8)
        s.stroke("black", 1)
        assert [s.get(2, row) for row in range(5)] == ["|"] * 5

    def test_diagonal_stroke(self):
        s = TextSurface(5, 5, CharSet.Unicode, scale=1)
        s.begin_path()
        s.move_to(0, 0)
        s.line_to(4, 8)
        s.stroke("black", 1)
        assert s.get(0, 0) == "╲"
        assert s.get(4, 4) == "╲"

    def test_fill_and_erase(self):
        s = self._surface()
        s.begin_path()
        s.rect(0, 0, 4, 4)
        s.fill("black")
        assert s.get(0, 0) == "#"
        assert s.get(4, 1) == "#"
        assert s.get(0, 2) == " "
        s.fill("white")
        assert s.get(0, 0) == " "

    def test_centred_text(self):
        s = self._surface()
        s.fill_text("AB", 4, 0, 12, "bold", "black")
        assert (s.get(3, 0), s.get(4, 0)) == ("A", "B")

    def test_clear(self):
        s = self._surface()
        s.write_str(0, 0, "xyz")
        s.clear()
        assert s.to_string() == "\n"

    def test_origin_shifts_cells(self):
        s = TextSurface(10, 5, scale=10, origin=Point(-50, -20))
        assert s.to_cell(-50, -20) == (0, 0)
        assert s.to_cell(0, 0) == (5, 1)

    def test_rejects_non_positive_scale(self):
        with pytest.raises(ValueError):
            TextSurface(1, 1, scale=0)


# ─── SVG surface ──────────────────────────────────────────────────────────────


class TestSvgSurface:
    def test_full_circle_splits_arc(self):
        s = SvgSurface(100, 100)
        s.begin_path()
        s.arc(50, 50, 10, 0, 6.283185307179586)
        s.fill("white")
        (element,) = s.elements
        assert element.count(" A ") == 2
        assert element.startswith('<path d="M 60 50')

    def test_text_is_escaped(self):
        s = SvgSurface(10, 10)
        s.fill_text("a<b", 5, 5, 12, "bold", "black")
        assert "a&lt;b" in s.elements[0]

    def test_empty_path_paints_nothing(self):
        s = SvgSurface(10, 10)
        s.begin_path()
        s.stroke("black", 1)
        assert s.elements == []
