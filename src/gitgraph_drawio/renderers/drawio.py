"""draw.io renderer — serializes a GraphModel to an ``mxfile`` XML document.

Z-order follows element order: branch labels first, then edges, then commit
nodes on top. Ids, coordinates and colors are taken from the model as-is.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime, timezone

from gitgraph_drawio.config import RenderConfig
from gitgraph_drawio.ir.graph import Branch, CommitNode, Edge, GraphModel

# ─── Constants ──────────────────────────────────────────────────────────────

HOST = "Electron"
AGENT = "MermaidToDrawio"
FILE_VERSION = "21.0.0"
DIAGRAM_ID = "gitgraph-diagram"
DIAGRAM_NAME = "GitGraph"
DEFAULT_EDGE_COLOR = "#000000"

LABEL_X = -120
LABEL_WIDTH = 100
LABEL_HEIGHT = 20

_GRAPH_MODEL_ATTRS: dict[str, str] = {
    "dx": "1000",
    "dy": "1000",
    "grid": "1",
    "gridSize": "10",
    "guides": "1",
    "tooltips": "1",
    "connect": "1",
    "arrows": "1",
    "fold": "1",
    "page": "1",
    "pageScale": "1",
    "pageWidth": "850",
    "pageHeight": "1100",
    "math": "0",
    "shadow": "0",
}

# Circle with the label centred inside.
COMMIT_STYLE = "ellipse;whiteSpace=wrap;html=1;aspect=fixed;strokeWidth=2;fillColor=#FFFFFF;fontStyle=1;fontSize=10;"

# Floating branch name left of lane.
BRANCH_LABEL_STYLE = (
    "text;html=1;strokeColor=none;fillColor=none;align=center;verticalAlign=middle;"
    "whiteSpace=wrap;rounded=0;fontStyle=1;fontSize=14;"
)

# Curved orthogonal edges leaving the right side and entering the left side.
EDGE_STYLE = (
    "edgeStyle=orthogonalEdgeStyle;curved=1;rounded=0;orthogonalLoop=1;jettySize=auto;html=1;strokeWidth=2;"
    "exitX=1;exitY=0.5;exitDx=0;exitDy=0;entryX=0;entryY=0.5;entryDx=0;entryDy=0;"
)


def _num(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def commit_style(commit: CommitNode) -> str:
    style = f"{COMMIT_STYLE}strokeColor={commit.color};"
    if commit.is_merge_node:
        style += f"fillColor={commit.color};fontColor=#FFFFFF;"
    return style


def edge_style(edge: Edge) -> str:
    return f"{EDGE_STYLE}strokeColor={edge.color or DEFAULT_EDGE_COLOR};"


def branch_label_style(branch: Branch) -> str:
    return f"{BRANCH_LABEL_STYLE};fontColor={branch.color};"


class DrawioRenderer:
    """Renders a GraphModel to draw.io XML."""

    def __init__(self, config: RenderConfig | None = None, spacing_y: int = 100) -> None:
        self.config = config or RenderConfig()
        self.spacing_y = spacing_y

    def render(self, model: GraphModel) -> str:
        mxfile = self.build(model)
        if self.config.pretty:
            ET.indent(mxfile, space="  ")
        body = ET.tostring(mxfile, encoding="unicode")
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'

    def build(self, model: GraphModel) -> ET.Element:
        mxfile = ET.Element(
            "mxfile",
            {
                "host": HOST,
                "modified": self.config.modified or datetime.now(timezone.utc).isoformat(),
                "agent": AGENT,
                "version": FILE_VERSION,
                "type": "device",
            },
        )
        diagram = ET.SubElement(mxfile, "diagram", {"id": DIAGRAM_ID, "name": DIAGRAM_NAME})
        graph_model = ET.SubElement(diagram, "mxGraphModel", dict(_GRAPH_MODEL_ATTRS))
        root = ET.SubElement(graph_model, "root")

        ET.SubElement(root, "mxCell", {"id": "0"})
        ET.SubElement(root, "mxCell", {"id": "1", "parent": "0"})

        for branch in model.branches:
            self._branch_label(root, branch)
        for idx, edge in enumerate(model.edges):
            self._edge(root, idx, edge)
        for commit in model.commits:
            self._commit(root, commit)
        return mxfile

    def _branch_label(self, root: ET.Element, branch: Branch) -> None:
        cell = ET.SubElement(
            root,
            "mxCell",
            {
                "id": f"label-{branch.name}",
                "value": branch.name,
                "style": branch_label_style(branch),
                "parent": "1",
                "vertex": "1",
            },
        )
        y = branch.lane_index * self.spacing_y + self.config.node_size / 2 - LABEL_HEIGHT / 2
        ET.SubElement(
            cell,
            "mxGeometry",
            {
                "x": _num(LABEL_X),
                "y": _num(y),
                "width": _num(LABEL_WIDTH),
                "height": _num(LABEL_HEIGHT),
                "as": "geometry",
            },
        )

    def _edge(self, root: ET.Element, idx: int, edge: Edge) -> None:
        cell = ET.SubElement(
            root,
            "mxCell",
            {
                "id": f"edge-{idx}",
                "style": edge_style(edge),
                "parent": "1",
                "source": edge.source_id,
                "target": edge.target_id,
                "edge": "1",
            },
        )
        ET.SubElement(cell, "mxGeometry", {"relative": "1", "as": "geometry"})

    def _commit(self, root: ET.Element, commit: CommitNode) -> None:
        cell = ET.SubElement(
            root,
            "mxCell",
            {
                "id": commit.id,
                "value": commit.label,
                "style": commit_style(commit),
                "parent": "1",
                "vertex": "1",
            },
        )
        size = _num(self.config.node_size)
        ET.SubElement(
            cell,
            "mxGeometry",
            {"x": _num(commit.x), "y": _num(commit.y), "width": size, "height": size, "as": "geometry"},
        )
