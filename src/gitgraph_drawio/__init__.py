"""gitgraph-drawio: Mermaid gitGraph syntax to draw.io diagram XML."""

from gitgraph_drawio.config import LayoutConfig, RenderConfig
from gitgraph_drawio.ir.graph import GraphModel
from gitgraph_drawio.layout.engine import GitGraphLayout
from gitgraph_drawio.parsers import parse
from gitgraph_drawio.renderers.drawio import DrawioRenderer

__all__ = [
    "LayoutConfig",
    "RenderConfig",
    "build_model",
    "convert",
    "parse",
]


def build_model(src: str, config: LayoutConfig | None = None) -> GraphModel:
    """Parse gitGraph source and lay it out.

    Args:
        src: Mermaid gitGraph source string.
        config: Spacing and palette; defaults to LayoutConfig().

    Returns:
        The immutable positioned graph model.
    """
    return GitGraphLayout(config).layout(parse(src))


def convert(src: str, layout: LayoutConfig | None = None, render: RenderConfig | None = None) -> str:
    """Parse gitGraph source and render it to a draw.io XML document.

    Args:
        src: Mermaid gitGraph source string.
        layout: Spacing and palette for the layout pass.
        render: Node size, timestamp and formatting for the emitter.

    Returns:
        The XML document as a string.
    """
    layout = layout or LayoutConfig()
    model = build_model(src, layout)
    return DrawioRenderer(render, spacing_y=layout.spacing_y).render(model)
