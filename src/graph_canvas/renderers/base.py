"""Drawing surface protocol."""

from __future__ import annotations

from typing import Protocol


class Surface(Protocol):
    """Raw path operations that every drawing surface must implement.

    The model follows a 2D canvas context: a current path is built with
    ``move_to``/``line_to``/``arc``/``rect`` and then painted with ``fill``
    or ``stroke``. Angles are radians, y grows downward.
    """

    def clear(self) -> None:
        """Erase everything drawn so far."""
        ...

    def begin_path(self) -> None: ...

    def close_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None: ...

    def rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def fill(self, color: str) -> None: ...

    def stroke(self, color: str, width: float) -> None: ...

    def fill_text(
        self,
        content: str,
        x: float,
        y: float,
        font_size: float,
        font_weight: str,
        color: str,
    ) -> None:
        """Draw ``content`` centred horizontally and vertically on ``(x, y)``."""
        ...
