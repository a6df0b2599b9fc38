"""Layout engine public API."""

from __future__ import annotations

from gitgraph_drawio.layout.engine import GitGraphLayout, build_model
from gitgraph_drawio.layout.types import COMMIT_PREFIX, MAIN_BRANCH, MERGE_LABEL, MERGE_PREFIX, BranchState

__all__ = [
    "COMMIT_PREFIX",
    "MAIN_BRANCH",
    "MERGE_LABEL",
    "MERGE_PREFIX",
    "BranchState",
    "GitGraphLayout",
    "build_model",
]
