"""gitGraph syntax: directive variants produced by the parser."""

from gitgraph_drawio.syntax.types import BranchDecl, Checkout, Commit, Directive, Merge, Script, Unrecognized

__all__ = [
    "BranchDecl",
    "Checkout",
    "Commit",
    "Directive",
    "Merge",
    "Script",
    "Unrecognized",
]
