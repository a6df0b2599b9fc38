"""Parser registry — auto-detect diagram type and dispatch to the right parser."""

from __future__ import annotations

import re

from gitgraph_drawio.parsers.gitgraph import GitGraphParser
from gitgraph_drawio.syntax.types import Script

# Header keywords Mermaid uses to declare a diagram type.
KNOWN_TYPES = (
    "gitGraph",
    "flowchart",
    "graph",
    "sequenceDiagram",
    "classDiagram",
    "stateDiagram-v2",
    "stateDiagram",
    "erDiagram",
    "journey",
    "gantt",
    "pie",
    "mindmap",
    "timeline",
)

_KEYWORD_RE = re.compile(r"[A-Za-z][A-Za-z0-9-]*")


def detect_type(src: str) -> str:
    """Detect the diagram type from the first significant line.

    Returns the header keyword when the line starts with one, otherwise
    'gitGraph' so header-less directive lists still parse.
    """
    for line in src.split("\n"):
        line = line.strip()
        if not line or line.startswith("%%"):
            continue
        m = _KEYWORD_RE.match(line)
        if m and m.group(0) in KNOWN_TYPES:
            return m.group(0)
        break
    return "gitGraph"  # default


_PARSERS = {
    "gitGraph": GitGraphParser,
}


def parse(src: str) -> Script:
    """Auto-detect diagram type and parse to a directive Script."""
    diagram_type = detect_type(src)
    parser_cls = _PARSERS.get(diagram_type)
    if parser_cls is None:
        raise ValueError(f"Unsupported diagram type: {diagram_type}")
    return parser_cls().parse(src)
