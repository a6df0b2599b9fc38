"""Renderers that serialize a GraphModel."""

from gitgraph_drawio.renderers.base import Renderer
from gitgraph_drawio.renderers.drawio import DrawioRenderer

__all__ = ["DrawioRenderer", "Renderer"]
