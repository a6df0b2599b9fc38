"""Graph model — the positioned output of the layout pass.

``GraphModel`` is the immutable hand-off to the emitters: branches in creation
order, commit nodes in creation order, edges in append order. ``GraphIR`` wraps
a model in a networkx MultiDiGraph for topology queries; it never changes the model.
"""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx


@dataclass(frozen=True)
class Branch:
    name: str
    lane_index: int
    color: str
    tip_commit_id: str | None = None


@dataclass(frozen=True)
class CommitNode:
    id: str
    label: str
    x: int
    y: int
    branch: str
    color: str
    is_merge_node: bool = False


@dataclass(frozen=True)
class Edge:
    source_id: str
    target_id: str
    color: str
    is_merge_line: bool = False


@dataclass(frozen=True)
class GraphModel:
    branches: tuple[Branch, ...]
    commits: tuple[CommitNode, ...]
    edges: tuple[Edge, ...]

    def branch(self, name: str) -> Branch | None:
        for b in self.branches:
            if b.name == name:
                return b
        return None

    def commit(self, commit_id: str) -> CommitNode | None:
        for c in self.commits:
            if c.id == commit_id:
                return c
        return None

    def is_empty(self) -> bool:
        return not self.commits


class GraphIR:
    """Topology view over a GraphModel.

    Backed by a MultiDiGraph so a branch merged into itself keeps both edges.
    Node attribute ``data`` holds the CommitNode, edge attribute ``data`` the
    Edge. Endpoints missing from the model are still added by networkx, so
    ``dangling_edges`` compares against the model's own commit ids.
    """

    def __init__(self, model: GraphModel, digraph: nx.MultiDiGraph) -> None:
        self.model = model
        self.digraph = digraph

    @classmethod
    def from_model(cls, model: GraphModel) -> GraphIR:
        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        for commit in model.commits:
            if commit.id not in digraph:
                digraph.add_node(commit.id, data=commit)
        for edge in model.edges:
            digraph.add_edge(edge.source_id, edge.target_id, data=edge)
        return cls(model=model, digraph=digraph)

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def parents(self, commit_id: str) -> list[str]:
        if commit_id not in self.digraph:
            return []
        return list(self.digraph.predecessors(commit_id))

    def children(self, commit_id: str) -> list[str]:
        if commit_id not in self.digraph:
            return []
        return list(self.digraph.successors(commit_id))

    def is_dag(self) -> bool:
        return nx.is_directed_acyclic_graph(self.digraph)

    def topological_order(self) -> list[str] | None:
        try:
            return list(nx.topological_sort(self.digraph))
        except nx.NetworkXUnfeasible:
            return None

    def ancestors(self, commit_id: str) -> set[str]:
        if commit_id not in self.digraph:
            return set()
        return nx.ancestors(self.digraph, commit_id)

    def dangling_edges(self) -> list[Edge]:
        known = {c.id for c in self.model.commits}
        return [e for e in self.model.edges if e.source_id not in known or e.target_id not in known]

    def branch_nodes(self, name: str) -> list[str]:
        return [c.id for c in self.model.commits if c.branch == name]
