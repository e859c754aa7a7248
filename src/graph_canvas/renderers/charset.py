"""Character sets for the text surface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CharSet(Enum):
    Unicode = "unicode"
    Ascii = "ascii"


@dataclass
class InkChars:
    """Characters used to stroke segments and fill regions on a text grid.

    ``diag_down`` is a segment running right and down the screen,
    ``diag_up`` right and up.
    """

    horizontal: str
    vertical: str
    diag_down: str
    diag_up: str
    fill: str

    @classmethod
    def unicode(cls) -> InkChars:
        return cls(
            horizontal="─",
            vertical="│",
            diag_down="╲",
            diag_up="╱",
            fill="█",
        )

    @classmethod
    def ascii(cls) -> InkChars:
        return cls(
            horizontal="-",
            vertical="|",
            diag_down="\\",
            diag_up="/",
            fill="#",
        )

    @classmethod
    def for_charset(cls, cs: CharSet) -> InkChars:
        if cs == CharSet.Unicode:
            return cls.unicode()
        return cls.ascii()

    def for_slope(self, dx: int, dy: int) -> str:
        """Stroke character for a segment spanning ``dx`` columns and ``dy`` rows."""
        if abs(dy) * 2 <= abs(dx):
            return self.horizontal
        if abs(dx) * 2 <= abs(dy):
            return self.vertical
        if (dx > 0) == (dy > 0):
            return self.diag_down
        return self.diag_up


# Fill colours that paint background rather than ink.
BLANK_COLORS: frozenset[str] = frozenset({"white", "#fff", "#ffffff", "transparent", "none"})
