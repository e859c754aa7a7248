"""Surface that records every call instead of painting."""

from __future__ import annotations

from dataclasses import dataclass, field

Call = tuple[str, tuple]


@dataclass
class RecordingSurface:
    """A display list of surface calls, in order."""

    calls: list[Call] = field(default_factory=list)

    def _record(self, op: str, *args: object) -> None:
        self.calls.append((op, args))

    def ops(self) -> list[str]:
        return [op for op, _ in self.calls]

    def calls_named(self, op: str) -> list[tuple]:
        return [args for name, args in self.calls if name == op]

    def reset(self) -> None:
        self.calls.clear()

    def clear(self) -> None:
        self._record("clear")

    def begin_path(self) -> None:
        self._record("begin_path")

    def close_path(self) -> None:
        self._record("close_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        self._record("arc", x, y, radius, start_angle, end_angle, anticlockwise)

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("rect", x, y, width, height)

    def fill(self, color: str) -> None:
        self._record("fill", color)

    def stroke(self, color: str, width: float) -> None:
        self._record("stroke", color, width)

    def fill_text(
        self,
        content: str,
        x: float,
        y: float,
        font_size: float,
        font_weight: str,
        color: str,
    ) -> None:
        self._record("fill_text", content, x, y, font_size, font_weight, color)
