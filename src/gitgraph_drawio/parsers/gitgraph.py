"""gitGraph parser — line-oriented regex tokenizer.

Turns Mermaid gitGraph source into the directive types from syntax.types.
There is no nesting in gitGraph: the order of lines is the whole grammar.
"""

from __future__ import annotations

import logging
import re

from gitgraph_drawio.syntax.types import BranchDecl, Checkout, Commit, Directive, Merge, Script, Unrecognized

logger = logging.getLogger(__name__)

# ─── Tokenizer ───────────────────────────────────────────────────────────────

COMMENT_PREFIX = "%%"
HEADER_PREFIX = "gitGraph"

# `id:` has to come before `tag:` to be picked up; only the start is anchored.
_COMMIT_RE = re.compile(r'^commit(\s+id:\s*"([^"]+)")?(\s+tag:\s*"([^"]+)")?')
# Branch names are ASCII word characters and dashes.
_BRANCH_RE = re.compile(r"^branch\s+([\w-]+)", re.ASCII)
_CHECKOUT_RE = re.compile(r"^checkout\s+([\w-]+)", re.ASCII)
_MERGE_RE = re.compile(r"^merge\s+([\w-]+)", re.ASCII)


def significant_lines(src: str) -> list[str]:
    """Strip every line and drop blanks, comments and the gitGraph header."""
    lines = (line.strip() for line in src.split("\n"))
    return [
        line
        for line in lines
        if line and not line.startswith(COMMENT_PREFIX) and not line.startswith(HEADER_PREFIX)
    ]


def tokenize_line(line: str, index: int) -> Directive:
    m = _COMMIT_RE.match(line)
    if m:
        return Commit(index=index, id=m.group(2), tag=m.group(4))
    m = _BRANCH_RE.match(line)
    if m:
        return BranchDecl(index=index, name=m.group(1))
    m = _CHECKOUT_RE.match(line)
    if m:
        return Checkout(index=index, name=m.group(1))
    m = _MERGE_RE.match(line)
    if m:
        return Merge(index=index, name=m.group(1))
    return Unrecognized(index=index, text=line)


class GitGraphParser:
    """Parses gitGraph source into a Script."""

    def parse(self, src: str) -> Script:
        directives = [tokenize_line(line, index) for index, line in enumerate(significant_lines(src))]
        skipped = sum(1 for d in directives if isinstance(d, Unrecognized))
        logger.debug("parsed %d directives (%d unrecognized)", len(directives), skipped)
        return Script(directives=directives)
