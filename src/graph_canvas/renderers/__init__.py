"""Drawing surfaces."""

from graph_canvas.renderers.base import Surface
from graph_canvas.renderers.canvas import TextSurface
from graph_canvas.renderers.charset import CharSet, InkChars
from graph_canvas.renderers.recording import RecordingSurface
from graph_canvas.renderers.svg import SvgSurface

__all__ = [
    "CharSet",
    "InkChars",
    "RecordingSurface",
    "Surface",
    "SvgSurface",
    "TextSurface",
]
