"""Directive types for Mermaid gitGraph syntax.

Each non-blank, non-comment source line becomes exactly one directive. The
``index`` field is the line's position after blank, comment and header lines
have been filtered out; synthetic commit and merge ids are derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Commit:
    index: int
    id: str | None = None
    tag: str | None = None


@dataclass(frozen=True)
class BranchDecl:
    index: int
    name: str


@dataclass(frozen=True)
class Checkout:
    index: int
    name: str


@dataclass(frozen=True)
class Merge:
    index: int
    name: str


@dataclass(frozen=True)
class Unrecognized:
    index: int
    text: str


Directive = Union[Commit, BranchDecl, Checkout, Merge, Unrecognized]


@dataclass
class Script:
    """Ordered list of directives parsed from one gitGraph source."""

    directives: list[Directive] = field(default_factory=list)

    def recognized(self) -> list[Directive]:
        return [d for d in self.directives if not isinstance(d, Unrecognized)]

    def __len__(self) -> int:
        return len(self.directives)

    def __iter__(self):
        return iter(self.directives)
