"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from gitgraph_drawio.syntax.types import Script


class Parser(Protocol):
    """Protocol that all diagram parsers must implement."""

    def parse(self, src: str) -> Script:
        """Parse source text into a directive Script."""
        ...
