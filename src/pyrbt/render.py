"""
Level-order text dump of a tree, for debugging.

Each node prints as ``<key><R|B>``; an absent child prints as ``--`` so that
rows stay aligned with the slots of a complete binary tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .node import Node

if TYPE_CHECKING:
    from .tree import RBTree

PLACEHOLDER = "--"


def level_rows(tree: RBTree) -> list[list[str]]:
    """
    Return one row of tokens per level, top down.

    Rows stop after the first level in which no node has a child.
    """
    if tree.root is None:
        return []
    rows: list[list[str]] = []
    level: list[Optional[Node]] = [tree.root]
    while True:
        row = []
        below: list[Optional[Node]] = []
        more = False
        for node in level:
            if node is None:
                row.append(PLACEHOLDER)
                below.extend((None, None))
            else:
                row.append(repr(node))
                below.extend((node.left, node.right))
                more = more or node.left is not None or node.right is not None
        rows.append(row)
        if not more:
            return rows
        level = below


def render(tree: RBTree) -> str:
    """Render level_rows as centered lines; gaps halve at each level."""
    blanks = 2 ** tree.max_depth()
    lines = []
    for row in level_rows(tree):
        gap = " " * max(2 * blanks - 2, 1)
        lines.append((" " * blanks + gap.join(row)).rstrip())
        blanks = max(blanks // 2, 1)
    return "\n".join(lines)
