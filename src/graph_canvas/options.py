"""Style options whose fields are either constants or per-item functions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, fields
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Constant(Generic[T]):
    value: T


@dataclass(frozen=True)
class Computed(Generic[T]):
    """A value computed from the node or edge being styled."""

    fn: Callable[[Any], T]


StyleValue = Constant[T] | Computed[T]


def resolve(option: StyleValue[T], context: Any) -> T:
    """Return the effective value of ``option`` for ``context``."""
    match option:
        case Constant(value=value):
            return value
        case Computed(fn=fn):
            return fn(context)
    raise TypeError(f"Not a style value: {option!r}")


def style(value: T | Callable[[Any], T] | StyleValue[T]) -> StyleValue[T]:
    """Wrap a raw constant or callable as a style value."""
    if isinstance(value, (Constant, Computed)):
        return value
    if callable(value):
        return Computed(value)
    return Constant(value)


def _default_node_text(node: Any) -> str:
    return str(node.label)


@dataclass(frozen=True)
class GraphOptions:
    """Per-node and per-edge style configuration.

    Node fields resolve against a ``Node``, edge fields against an ``Edge``.
    """

    node_size: StyleValue[float] = Constant(35)
    node_border_size: StyleValue[float] = Constant(8)
    node_color: StyleValue[str] = Constant("white")
    node_border_color: StyleValue[str] = Constant("black")
    node_text: StyleValue[str] = field(default_factory=lambda: Computed(_default_node_text))
    node_text_size: StyleValue[float] = Constant(24)
    node_text_color: StyleValue[str] = Constant("black")
    node_text_weight: StyleValue[str] = Constant("bold")
    edge_color: StyleValue[str] = Constant("black")
    edge_width: StyleValue[float] = Constant(10)

    @classmethod
    def create(cls, **overrides: Any) -> GraphOptions:
        """Build options from raw constants or callables.

        Raises:
            ValueError: If an override names no option field.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown graph option(s): {', '.join(unknown)}")
        return cls(**{name: style(value) for name, value in overrides.items()})
