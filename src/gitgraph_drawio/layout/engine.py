"""Single-pass gitGraph layout.

Replays directives in source order. Every commit-like directive (commit or
merge) takes the next slot of one step counter shared by all branches, so x
grows strictly in creation order; y comes from the lane of the branch that is
current when the node is made. Lanes and colors are fixed at branch creation.

Bad references never raise: an unknown checkout target is ignored, a merge of
an unknown or empty branch only loses its incoming merge line, and a repeated
``branch`` just switches to the existing branch.
"""

from __future__ import annotations

import logging

from gitgraph_drawio.config import LayoutConfig
from gitgraph_drawio.ir.graph import CommitNode, Edge, GraphModel
from gitgraph_drawio.layout.types import COMMIT_PREFIX, MAIN_BRANCH, MERGE_LABEL, MERGE_PREFIX, BranchState
from gitgraph_drawio.syntax.types import BranchDecl, Checkout, Commit, Directive, Merge, Script, Unrecognized

logger = logging.getLogger(__name__)


class GitGraphLayout:
    """Builder state for one layout pass. Not reusable across scripts."""

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or LayoutConfig()
        self.branches: dict[str, BranchState] = {
            MAIN_BRANCH: BranchState(name=MAIN_BRANCH, lane_index=0, color=self.config.color_at(0)),
        }
        self.current_branch = MAIN_BRANCH
        self.next_lane_index = 1
        self.global_step = 0
        self.commits: list[CommitNode] = []
        self.edges: list[Edge] = []

    # ── Dispatch ──────────────────────────────────────────────────────────────

    def apply(self, directive: Directive) -> None:
        if isinstance(directive, Commit):
            self.commit(directive)
        elif isinstance(directive, BranchDecl):
            self.branch(directive)
        elif isinstance(directive, Checkout):
            self.checkout(directive)
        elif isinstance(directive, Merge):
            self.merge(directive)
        elif isinstance(directive, Unrecognized):
            logger.debug("line %d ignored: %r", directive.index, directive.text)

    def layout(self, script: Script) -> GraphModel:
        for directive in script:
            self.apply(directive)
        return self.result()

    def result(self) -> GraphModel:
        return GraphModel(
            branches=tuple(b.freeze() for b in self.branches.values()),
            commits=tuple(self.commits),
            edges=tuple(self.edges),
        )

    # ── Directives ────────────────────────────────────────────────────────────

    def commit(self, directive: Commit) -> None:
        current = self.branches[self.current_branch]
        commit_id = directive.id or f"{COMMIT_PREFIX}{directive.index}"
        node = self._node(commit_id, directive.tag or commit_id, current, is_merge_node=False)

        if current.tip_commit_id:
            self.edges.append(Edge(source_id=current.tip_commit_id, target_id=commit_id, color=current.color))

        self._append(node, current)

    def branch(self, directive: BranchDecl) -> None:
        name = directive.name
        if name not in self.branches:
            lane = self.next_lane_index
            self.next_lane_index += 1
            self.branches[name] = BranchState(
                name=name,
                lane_index=lane,
                color=self.config.color_at(self.next_lane_index),
                tip_commit_id=self.branches[self.current_branch].tip_commit_id,
            )
            logger.debug("branch %r created on lane %d", name, lane)
        else:
            logger.debug("branch %r already exists; switching to it", name)
        self.current_branch = name

    def checkout(self, directive: Checkout) -> None:
        if directive.name in self.branches:
            self.current_branch = directive.name
        else:
            logger.debug("line %d: checkout of unknown branch %r ignored", directive.index, directive.name)

    def merge(self, directive: Merge) -> None:
        target = self.branches[self.current_branch]
        source = self.branches.get(directive.name)
        merge_id = f"{MERGE_PREFIX}{directive.index}"
        node = self._node(merge_id, MERGE_LABEL, target, is_merge_node=True)

        if target.tip_commit_id:
            self.edges.append(Edge(source_id=target.tip_commit_id, target_id=merge_id, color=target.color))

        if source is not None and source.tip_commit_id:
            self.edges.append(
                Edge(source_id=source.tip_commit_id, target_id=merge_id, color=source.color, is_merge_line=True)
            )
        else:
            logger.debug("line %d: nothing to merge from %r", directive.index, directive.name)

        self._append(node, target)

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _node(self, node_id: str, label: str, owner: BranchState, is_merge_node: bool) -> CommitNode:
        return CommitNode(
            id=node_id,
            label=label,
            x=self.global_step * self.config.spacing_x,
            y=owner.lane_index * self.config.spacing_y,
            branch=owner.name,
            color=owner.color,
            is_merge_node=is_merge_node,
        )

    def _append(self, node: CommitNode, owner: BranchState) -> None:
        self.commits.append(node)
        owner.tip_commit_id = node.id
        self.global_step += 1


def build_model(script: Script, config: LayoutConfig | None = None) -> GraphModel:
    """Run the layout pass over a parsed Script."""
    return GitGraphLayout(config).layout(script)
