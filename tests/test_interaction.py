"""Tests for interaction — double-click placement and drag sessions."""

from __future__ import annotations

from graph_canvas.interaction import InteractionController
from graph_canvas.options import GraphOptions
from graph_canvas.store import GraphStore


def make_controller() -> tuple[InteractionController, GraphStore]:
    store = GraphStore()
    store.add_node(x=100, y=100, label="A")
    return InteractionController(store), store


class TestDoubleClick:
    def test_adds_node_at_pointer(self):
        ctl, store = make_controller()
        n = ctl.double_click(250, 40)
        assert (n.x, n.y) == (250, 40)
        assert store.node_count() == 2

    def test_label_already_used_as_number(self):
        """Double-clicking next to a node explicitly labelled 2 still adds a node."""
        store = GraphStore()
        store.add_node(x=0, y=0, label=2)
        n = InteractionController(store).double_click(200, 200)
        assert n.label != 2
        assert store.node_count() == 2


class TestDrag:
    def test_hit_radius_follows_node_size(self):
        """A press outside a small drawn circle does not start a drag."""
        store = GraphStore()
        store.add_node(x=100, y=100, label="A")
        ctl = InteractionController(store, GraphOptions.create(node_size=20))
        assert ctl.press(125, 100) is None
        assert ctl.press(115, 100).label == "A"

    def test_press_move_release(self):
        ctl, store = make_controller()
        assert ctl.press(110, 95).label == "A"
        assert ctl.dragging
        ctl.move(300, 200)
        a = store.get_node(1)
        assert (a.x, a.y) == (300, 200)
        ctl.release()
        assert not ctl.dragging
        ctl.move(0, 0)
        assert (a.x, a.y) == (300, 200)

    def test_press_on_empty_space(self):
        ctl, store = make_controller()
        assert ctl.press(500, 500) is None
        assert ctl.active_drag is None
        ctl.move(1, 1)
        assert store.get_node(1).x == 100

    def test_cancel_clears_session(self):
        ctl, _ = make_controller()
        ctl.press(100, 100)
        ctl.cancel()
        assert ctl.active_drag is None

    def test_removed_node_drops_session(self):
        """Moving after the dragged node is deleted neither raises nor recreates it."""
        ctl, store = make_controller()
        ctl.press(100, 100)
        store.remove_node(1)
        ctl.move(10, 10)
        assert ctl.active_drag is None
        assert store.node_count() == 0
