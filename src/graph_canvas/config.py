"""Centralized configuration for graph-canvas."""

from __future__ import annotations

from dataclasses import dataclass

FORMATS: tuple[str, ...] = ("text", "svg")


@dataclass
class RenderConfig:
    """Configuration for rendering a diagram to a string."""

    format: str = "text"
    unicode: bool = True
    scale: float = 10
    margin: float | None = None

    def __post_init__(self) -> None:
        if self.format not in FORMATS:
            raise ValueError(f"Unknown format '{self.format}'; use {' or '.join(FORMATS)}")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")
