"""SVG surface — writes surface path operations as SVG elements."""

from __future__ import annotations

import math
from xml.sax.saxutils import escape, quoteattr

from graph_canvas.geometry.angles import arc_sweep


def _fmt(v: float) -> str:
    text = f"{v:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


class SvgSurface:
    """Accumulates SVG ``<path>`` and ``<text>`` elements for one document."""

    def __init__(self, width: float, height: float, origin_x: float = 0, origin_y: float = 0) -> None:
        self.width = width
        self.height = height
        self.origin_x = origin_x
        self.origin_y = origin_y
        self.elements: list[str] = []
        self._d: list[str] = []
        self._has_point = False

    def clear(self) -> None:
        self.elements = []
        self.begin_path()

    def begin_path(self) -> None:
        self._d = []
        self._has_point = False

    def close_path(self) -> None:
        if self._has_point:
            self._d.append("Z")

    def move_to(self, x: float, y: float) -> None:
        self._d.append(f"M {_fmt(x)} {_fmt(y)}")
        self._has_point = True

    def line_to(self, x: float, y: float) -> None:
        cmd = "L" if self._has_point else "M"
        self._d.append(f"{cmd} {_fmt(x)} {_fmt(y)}")
        self._has_point = True

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        sweep = arc_sweep(start_angle, end_angle, anticlockwise)
        self.line_to(x + radius * math.cos(start_angle), y + radius * math.sin(start_angle))
        # SVG cannot express a full turn in one arc command; split into halves at most.
        pieces = max(1, math.ceil(abs(sweep) / math.pi - 1e-9))
        sweep_flag = 1 if sweep > 0 else 0
        for i in range(1, pieces + 1):
            theta = start_angle + sweep * i / pieces
            px = x + radius * math.cos(theta)
            py = y + radius * math.sin(theta)
            self._d.append(f"A {_fmt(radius)} {_fmt(radius)} 0 0 {sweep_flag} {_fmt(px)} {_fmt(py)}")

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self._d.append(f"M {_fmt(x)} {_fmt(y)} h {_fmt(width)} v {_fmt(height)} h {_fmt(-width)} Z")
        self._has_point = True

    def fill(self, color: str) -> None:
        if not self._d:
            return
        d = " ".join(self._d)
        self.elements.append(f'<path d="{d}" fill={quoteattr(color)} stroke="none"/>')

    def stroke(self, color: str, width: float) -> None:
        if not self._d:
            return
        d = " ".join(self._d)
        self.elements.append(f'<path d="{d}" fill="none" stroke={quoteattr(color)} stroke-width="{_fmt(width)}"/>')

    def fill_text(
        self,
        content: str,
        x: float,
        y: float,
        font_size: float,
        font_weight: str,
        color: str,
    ) -> None:
        self.elements.append(
            f'<text x="{_fmt(x)}" y="{_fmt(y)}" font-family="Arial" font-size="{_fmt(font_size)}"'
            f" font-weight={quoteattr(font_weight)} fill={quoteattr(color)}"
            f' text-anchor="middle" dominant-baseline="middle">{escape(content)}</text>'
        )

    def to_string(self) -> str:
        view_box = f"{_fmt(self.origin_x)} {_fmt(self.origin_y)} {_fmt(self.width)} {_fmt(self.height)}"
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{_fmt(self.width)}"'
            f' height="{_fmt(self.height)}" viewBox="{view_box}">'
        ]
        lines.extend(f"  {el}" for el in self.elements)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"
