"""Centralized configuration for gitgraph-drawio."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PALETTE: tuple[str, ...] = ("#1E90FF", "#FF6347", "#32CD32", "#FFD700", "#DA70D6")


@dataclass
class LayoutConfig:
    """Configuration for the layout pass."""

    spacing_x: int = 150
    spacing_y: int = 100
    palette: tuple[str, ...] = DEFAULT_PALETTE

    def color_at(self, index: int) -> str:
        return self.palette[index % len(self.palette)]


@dataclass
class RenderConfig:
    """Configuration for the draw.io emitter."""

    node_size: int = 50
    modified: str | None = None  # ISO timestamp; None means "now"
    pretty: bool = True
