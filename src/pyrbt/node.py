"""
Node data model for the red-black tree.

A node owns its two child links and keeps a non-owning back-reference to
its parent, which the balancing code uses to walk upward and to find out
which side of the parent a node sits on.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class Color(IntEnum):
    """Node color. Absent children count as black."""
    BLACK = 0
    RED = 1

    def flipped(self) -> Color:
        return Color.RED if self is Color.BLACK else Color.BLACK

    @property
    def letter(self) -> str:
        return "R" if self is Color.RED else "B"


class Node:
    """One key in the tree."""

    def __init__(self, key: int, color: Color = Color.RED):
        self.key = key
        self.color = color
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None
        self.parent: Optional[Node] = None

    @property
    def is_red(self) -> bool:
        return self.color is Color.RED

    @property
    def is_black(self) -> bool:
        return self.color is Color.BLACK

    def children(self) -> list[Node]:
        """Return the children that are present, left first."""
        return [c for c in (self.left, self.right) if c is not None]

    def __repr__(self) -> str:
        return f"{self.key}{self.color.letter}"


def is_red(node: Optional[Node]) -> bool:
    """True if node is present and red; an absent node counts as black."""
    return node is not None and node.color is Color.RED
