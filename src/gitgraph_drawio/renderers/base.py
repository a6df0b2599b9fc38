"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from gitgraph_drawio.ir.graph import GraphModel


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, model: GraphModel) -> str:
        """Render a laid-out graph model to an output string."""
        ...
