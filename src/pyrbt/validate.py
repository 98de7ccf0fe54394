"""
Structural checks for a red-black tree.

Used by the test suite and by ``RBTree(check=True)`` to verify every
invariant after a mutation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .errors import InvariantError
from .node import Color, Node, is_red

if TYPE_CHECKING:
    from .tree import RBTree


def black_height(node: Optional[Node]) -> int:
    """
    Count black nodes from node down to any absent child position.

    Args:
        node: Subtree root (None counts as an empty subtree)

    Returns:
        Black-height of the subtree, not counting absent children

    Raises:
        InvariantError: Two paths in the subtree disagree
    """
    if node is None:
        return 0
    left = black_height(node.left)
    right = black_height(node.right)
    if left != right:
        raise InvariantError(
            f"black-height mismatch under {node!r}: left {left}, right {right}")
    return left + (1 if node.color is Color.BLACK else 0)


def check_invariants(tree: RBTree) -> int:
    """
    Verify colors, black-heights, key ordering and parent links.

    Args:
        tree: Tree to check

    Returns:
        Black-height of the whole tree (0 when empty)

    Raises:
        InvariantError: Naming the first violation found
    """
    root = tree.root
    if root is None:
        if tree.size != 0:
            raise InvariantError(f"empty tree reports size {tree.size}")
        return 0
    if root.parent is not None:
        raise InvariantError(f"root {root!r} has a parent")
    if root.color is not Color.BLACK:
        raise InvariantError(f"root {root!r} is not black")

    count = _check_subtree(root, None, None)
    if count != tree.size:
        raise InvariantError(f"tree holds {count} nodes but reports size {tree.size}")
    return black_height(root)


def _check_subtree(node: Node, low, high) -> int:
    if node.color not in (Color.RED, Color.BLACK):
        raise InvariantError(f"{node.key!r} has no valid color")
    if (low is not None and node.key <= low) or (high is not None and node.key >= high):
        raise InvariantError(f"{node!r} is out of order (bounds {low!r}, {high!r})")
    if node.is_red and (is_red(node.left) or is_red(node.right)):
        raise InvariantError(f"red node {node!r} has a red child")

    count = 1
    for c, lo, hi in ((node.left, low, node.key), (node.right, node.key, high)):
        if c is None:
            continue
        if c.parent is not node:
            raise InvariantError(f"{c!r} does not point back to its parent {node!r}")
        count += _check_subtree(c, lo, hi)
    return count
