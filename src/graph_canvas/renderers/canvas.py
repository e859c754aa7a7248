"""Text surface — rasterizes surface path operations onto a character grid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from graph_canvas.geometry.angles import arc_sweep
from graph_canvas.geometry.types import Point
from graph_canvas.renderers.charset import BLANK_COLORS, CharSet, InkChars

# Arcs are flattened into chords no wider than this.
ARC_STEP: float = math.pi / 16


@dataclass
class SubPath:
    points: list[Point] = field(default_factory=list)
    closed: bool = False


class TextSurface:
    """A 2D character grid that implements the ``Surface`` protocol.

    World coordinates map to cells through ``origin`` and ``scale``: one
    column spans ``scale`` units, one row twice that, since terminal cells
    are about twice as tall as they are wide.
    """

    def __init__(
        self,
        width: int,
        height: int,
        charset: CharSet = CharSet.Unicode,
        scale: float = 10,
        origin: Point = Point(0, 0),
    ) -> None:
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.width = width
        self.height = height
        self.charset = charset
        self.ink = InkChars.for_charset(charset)
        self.scale = scale
        self.origin = origin
        self.cells: list[list[str]] = [[" "] * width for _ in range(height)]
        self._path: list[SubPath] = []

    # ─── Grid ────────────────────────────────────────────────────────────────

    def to_cell(self, x: float, y: float) -> tuple[int, int]:
        col = round((x - self.origin.x) / self.scale)
        row = round((y - self.origin.y) / (self.scale * 2))
        return col, row

    def get(self, col: int, row: int) -> str:
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.cells[row][col]
        return " "

    def set(self, col: int, row: int, c: str) -> None:
        if 0 <= row < self.height and 0 <= col < self.width:
            self.cells[row][col] = c

    def write_str(self, col: int, row: int, s: str) -> None:
        for i, ch in enumerate(s):
            self.set(col + i, row, ch)

    def to_string(self) -> str:
        lines = []
        for row in self.cells:
            line = "".join(row).rstrip()
            lines.append(line)
        out = "\n".join(lines)
        trimmed = out.rstrip("\n")
        return trimmed + "\n"

    # ─── Path building ───────────────────────────────────────────────────────

    def clear(self) -> None:
        self.cells = [[" "] * self.width for _ in range(self.height)]
        self._path = []

    def begin_path(self) -> None:
        self._path = []

    def close_path(self) -> None:
        if not self._path or not self._path[-1].points:
            return
        current = self._path[-1]
        current.closed = True
        self._path.append(SubPath(points=[current.points[0]]))

    def move_to(self, x: float, y: float) -> None:
        self._path.append(SubPath(points=[Point(x, y)]))

    def line_to(self, x: float, y: float) -> None:
        if not self._path:
            self._path.append(SubPath())
        self._path[-1].points.append(Point(x, y))

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
        steps = max(1, math.ceil(abs(sweep) / ARC_STEP))
        for i in range(steps + 1):
            theta = start_angle + sweep * i / steps
            self.line_to(x + radius * math.cos(theta), y + radius * math.sin(theta))

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        corners = [Point(x, y), Point(x + width, y), Point(x + width, y + height), Point(x, y + height)]
        self._path.append(SubPath(points=corners, closed=True))
        self._path.append(SubPath(points=[Point(x, y)]))

    # ─── Painting ────────────────────────────────────────────────────────────

    def stroke(self, color: str, width: float) -> None:
        if color in BLANK_COLORS:
            return
        for sub in self._path:
            pts = list(sub.points)
            if sub.closed and len(pts) > 2:
                pts.append(pts[0])
            for a, b in zip(pts, pts[1:]):
                self._segment(a, b)

    def _segment(self, a: Point, b: Point) -> None:
        c0, r0 = self.to_cell(a.x, a.y)
        c1, r1 = self.to_cell(b.x, b.y)
        ch = self.ink.for_slope(c1 - c0, r1 - r0)
        for col, row in _bresenham(c0, r0, c1, r1):
            self.set(col, row, ch)

    def fill(self, color: str) -> None:
        ch = " " if color in BLANK_COLORS else self.ink.fill
        edges: list[tuple[Point, Point]] = []
        for sub in self._path:
            pts = sub.points
            if len(pts) < 3:
                continue
            edges.extend(zip(pts, pts[1:] + pts[:1]))
        if not edges:
            return

        row_height = self.scale * 2
        for row in range(self.height):
            y = self.origin.y + row * row_height
            xs = sorted(
                a.x + (y - a.y) * (b.x - a.x) / (b.y - a.y)
                for a, b in edges
                if (a.y <= y < b.y) or (b.y <= y < a.y)
            )
            for left, right in zip(xs[::2], xs[1::2]):
                first = math.ceil((left - self.origin.x) / self.scale)
                last = math.floor((right - self.origin.x) / self.scale)
                for col in range(first, last + 1):
                    self.set(col, row, ch)

    def fill_text(
        self,
        content: str,
        x: float,
        y: float,
        font_size: float,
        font_weight: str,
        color: str,
    ) -> None:
        col, row = self.to_cell(x, y)
        self.write_str(col - len(content) // 2, row, content)


def _bresenham(c0: int, r0: int, c1: int, r1: int) -> list[tuple[int, int]]:
    """Grid cells on the segment between two cells, endpoints included."""
    cells: list[tuple[int, int]] = []
    dc = abs(c1 - c0)
    dr = -abs(r1 - r0)
    sc = 1 if c0 < c1 else -1
    sr = 1 if r0 < r1 else -1
    err = dc + dr
    col, row = c0, r0
    while True:
        cells.append((col, row))
        if col == c1 and row == r1:
            return cells
        e2 = 2 * err
        if e2 >= dr:
            err += dr
            col += sc
        if e2 <= dc:
            err += dc
            row += sr
