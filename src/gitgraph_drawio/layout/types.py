"""Layout types shared by the layout builder."""

from __future__ import annotations

from dataclasses import dataclass

from gitgraph_drawio.ir.graph import Branch

MAIN_BRANCH = "main"
MERGE_LABEL = "Merge"

# Synthetic id prefixes; commits and merges never share a scheme.
COMMIT_PREFIX = "c"
MERGE_PREFIX = "merge-"


@dataclass
class BranchState:
    """Mutable per-branch record owned by the builder during one pass."""

    name: str
    lane_index: int
    color: str
    tip_commit_id: str | None = None

    def freeze(self) -> Branch:
        return Branch(
            name=self.name,
            lane_index=self.lane_index,
            color=self.color,
            tip_commit_id=self.tip_commit_id,
        )
