"""Intermediate representation: graph model and networkx topology view."""

from gitgraph_drawio.ir.graph import Branch, CommitNode, Edge, GraphIR, GraphModel

__all__ = [
    "Branch",
    "CommitNode",
    "Edge",
    "GraphIR",
    "GraphModel",
]
