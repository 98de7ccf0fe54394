"""
Red-black tree over unique ordered keys.

Insertion is top-down: on the way to the attachment point every black node
with two red children is split (recolored), and any red-red pair this
creates is fixed on the spot with one or two rotations. Deletion removes the
node holding the key, or its in-order successor after copying the
successor's key up, and repairs the black-height deficit left by a removed
black leaf with a case dispatch on the sibling and parent colors.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, Optional

from .errors import DuplicateKeyError, InvariantError
from .node import Color, Node, is_red
from .validate import check_invariants

logger = logging.getLogger(__name__)


class ConflictCase(Enum):
    """
    Shape of a red-red pair (child c under red parent p under black g).

    The first half of the name is the side of p under g, the second the side
    of c under p.
    """
    LEFT_LEFT = "left-left"
    RIGHT_RIGHT = "right-right"
    LEFT_RIGHT = "left-right"
    RIGHT_LEFT = "right-left"


class DeleteCase(Enum):
    """
    Rebalancing case for a deficit slot after a black leaf was removed.

    NEAR and FAR name the sibling child that is red: the near child sits on
    the same side as the deficit slot, the far child on the other side.
    """
    RED_SIBLING = "red-sibling"
    RED_PARENT_FAR = "red-parent/far-red"
    RED_PARENT_NEAR = "red-parent/near-red"
    RED_PARENT_NONE = "red-parent/no-red"
    BLACK_PARENT_FAR = "black-parent/far-red"
    BLACK_PARENT_NEAR = "black-parent/near-red"
    BLACK_PARENT_NONE = "black-parent/no-red"
    ROOT = "root"


def child(node: Node, left: bool) -> Optional[Node]:
    """Return the left or right child of node."""
    return node.left if left else node.right


def is_left_child(node: Node) -> bool:
    """True if node is the left child of its parent. The node needs a parent."""
    if node.parent is None:
        raise InvariantError(f"{node!r} has no parent")
    return node is node.parent.left


def successor(node: Node) -> Optional[Node]:
    """Return the leftmost node of node's right subtree, or None."""
    current = node.right
    while current is not None and current.left is not None:
        current = current.left
    return current


def classify_conflict(c: Node) -> ConflictCase:
    """Classify the red-red pair formed by c and its parent."""
    p = c.parent
    p_left = is_left_child(p)
    c_left = is_left_child(c)
    if p_left and c_left:
        return ConflictCase.LEFT_LEFT
    elif not p_left and not c_left:
        return ConflictCase.RIGHT_RIGHT
    elif p_left:
        return ConflictCase.LEFT_RIGHT
    return ConflictCase.RIGHT_LEFT


def classify_deficit(parent: Optional[Node], left: bool) -> DeleteCase:
    """
    Classify the deficit in parent's left (or right) child slot.

    Args:
        parent: Node whose child slot is one black node short, or None when
            the deficit has reached the root
        left: True if the deficit is in the left slot

    Returns:
        The rebalancing case to apply
    """
    if parent is None:
        return DeleteCase.ROOT
    sibling = child(parent, not left)
    if sibling is None:
        raise InvariantError(f"deficit under {parent!r} has no sibling")
    if sibling.is_red:
        return DeleteCase.RED_SIBLING
    far_red = is_red(child(sibling, not left))
    near_red = is_red(child(sibling, left))
    if parent.is_red:
        if far_red:
            return DeleteCase.RED_PARENT_FAR
        return DeleteCase.RED_PARENT_NEAR if near_red else DeleteCase.RED_PARENT_NONE
    if far_red:
        return DeleteCase.BLACK_PARENT_FAR
    return DeleteCase.BLACK_PARENT_NEAR if near_red else DeleteCase.BLACK_PARENT_NONE


class RBTree:
    """
    Red-black tree holding unique keys.

    Args:
        keys: Optional keys to insert one at a time, in order
        check: Validate every invariant after each successful mutation
    """

    def __init__(self, keys: Optional[Iterable[int]] = None, check: bool = False):
        self.root: Optional[Node] = None
        self.size = 0
        self.check = check
        if keys is not None:
            for key in keys:
                self.insert(key)

    # Read access

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: object) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[int]:
        """Yield keys in ascending order."""
        stack: list[Node] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.key
            current = current.right

    def __repr__(self) -> str:
        return f"RBTree({self.keys()!r})"

    def keys(self) -> list[int]:
        """Return all keys in ascending order."""
        return list(self)

    def find(self, key) -> Optional[Node]:
        """Return the node holding key, or None."""
        current = self.root
        while current is not None:
            if key == current.key:
                return current
            current = current.right if key > current.key else current.left
        return None

    def min_key(self) -> int:
        if self.root is None:
            raise KeyError("min_key() on an empty tree")
        current = self.root
        while current.left is not None:
            current = current.left
        return current.key

    def max_key(self) -> int:
        if self.root is None:
            raise KeyError("max_key() on an empty tree")
        current = self.root
        while current.right is not None:
            current = current.right
        return current.key

    def max_depth(self) -> int:
        """Height of the tree: 0 when empty, 1 for a lone root."""
        return self._max_depth(self.root)

    def _max_depth(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return max(self._max_depth(node.left), self._max_depth(node.right)) + 1

    # Rotation primitives

    def rotate_left(self, node: Node) -> None:
        """
        Rotate node down to the left; its right child takes its place.

        The right child's former left subtree becomes node's right subtree.
        If node was the root, the new root is forced black.
        """
        pivot = node.right
        if pivot is None:
            raise InvariantError(f"rotate_left({node!r}) needs a right child")
        p = node.parent
        self._replace(node, pivot)

        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.left = node
        node.parent = pivot
        if p is None:
            pivot.color = Color.BLACK

    def rotate_right(self, node: Node) -> None:
        """Mirror of rotate_left: node's left child takes its place."""
        pivot = node.left
        if pivot is None:
            raise InvariantError(f"rotate_right({node!r}) needs a left child")
        p = node.parent
        self._replace(node, pivot)

        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.right = node
        node.parent = pivot
        if p is None:
            pivot.color = Color.BLACK

    def _rotate_toward(self, node: Node, left: bool) -> None:
        """Rotate node down toward its left (or right) side."""
        if left:
            self.rotate_left(node)
        else:
            self.rotate_right(node)

    def _replace(self, node: Node, replacement: Optional[Node]) -> None:
        """Put replacement in node's slot under node's parent (or at the root)."""
        p = node.parent
        if p is None:
            self.root = replacement
        elif node is p.left:
            p.left = replacement
        else:
            p.right = replacement
        if replacement is not None:
            replacement.parent = p

    # Color primitives

    @staticmethod
    def flip(node: Node) -> None:
        """Toggle node's color."""
        node.color = node.color.flipped()

    def recolor_on_split(self, node: Node) -> None:
        """
        Turn a black node with two red children into a red node with two
        black children. The root stays black.

        May leave node red under a red parent; the caller resolves that.
        """
        if not (node.is_black and is_red(node.left) and is_red(node.right)):
            raise InvariantError(f"cannot split {node!r}")
        node.left.color = Color.BLACK
        node.right.color = Color.BLACK
        if node is not self.root:
            node.color = Color.RED

    # Insertion

    def resolve_red_red(self, c: Node) -> ConflictCase:
        """
        Fix a red node c sitting under a red parent.

        The grandparent is black and ends up as a red child of whichever node
        moves into its place; that node turns black. Black-height is
        unchanged.

        Args:
            c: Red node whose parent is also red

        Returns:
            The case that was applied
        """
        p = c.parent
        g = p.parent if p is not None else None
        if g is None or not (c.is_red and p.is_red):
            raise InvariantError(f"no red-red conflict at {c!r}")

        case = classify_conflict(c)
        logger.debug("red-red conflict at %r under %r: %s", c, p, case.value)
        if case is ConflictCase.LEFT_LEFT:
            self.flip(p)
            self.flip(g)
            self.rotate_right(g)
        elif case is ConflictCase.RIGHT_RIGHT:
            self.flip(p)
            self.flip(g)
            self.rotate_left(g)
        elif case is ConflictCase.LEFT_RIGHT:
            self.flip(c)
            self.flip(g)
            self.rotate_left(p)
            self.rotate_right(g)
        else:
            self.flip(c)
            self.flip(g)
            self.rotate_right(p)
            self.rotate_left(g)
        return case

    def insert(self, key: int) -> None:
        """
        Insert key.

        Raises:
            DuplicateKeyError: key is already present. Recoloring done on the
                way down is kept; the tree stays valid.
        """
        node = Node(key)
        if self.root is None:
            node.color = Color.BLACK
            self.root = node
            self.size = 1
            self._after_mutation()
            return

        current = self.root
        while True:
            if current.is_black and is_red(current.left) and is_red(current.right):
                self.recolor_on_split(current)
                if current.is_red and is_red(current.parent):
                    self.resolve_red_red(current)

            if key == current.key:
                raise DuplicateKeyError(key)
            nxt = current.right if key > current.key else current.left
            if nxt is None:
                break
            current = nxt

        if key > current.key:
            current.right = node
        else:
            current.left = node
        node.parent = current
        if current.is_red:
            self.resolve_red_red(node)

        self.size += 1
        self._after_mutation()

    # Deletion

    def delete(self, key: int) -> bool:
        """
        Remove key.

        When the node holding key has a right subtree, its in-order successor
        is the node physically removed; the successor's key is moved into the
        node first, so key always leaves the tree.

        Returns:
            True if key was found and removed, False if it was absent (the
            tree is left untouched)
        """
        current = self.find(key)
        if current is None:
            return False

        target = successor(current)
        if target is None:
            target = current
        else:
            current.key = target.key

        self._detach(target)
        self.size -= 1
        self._after_mutation()
        return True

    def _detach(self, target: Node) -> None:
        """Unlink target, which has at most one child, and repair the tree."""
        if target.left is not None and target.right is not None:
            raise InvariantError(f"cannot detach {target!r}: it has two children")
        only = target.left if target.left is not None else target.right
        parent = target.parent

        if target.is_red:
            if only is not None:
                raise InvariantError(f"red node {target!r} has a single child")
            self._replace(target, None)
        elif only is not None:
            # A black node with one child has a red leaf below it.
            if not only.is_red:
                raise InvariantError(f"black node {target!r} has a single black child")
            self.flip(only)
            self._replace(target, only)
        elif parent is None:
            self.root = None
        else:
            left = is_left_child(target)
            self._replace(target, None)
            self._rebalance(parent, left)

        target.parent = target.left = target.right = None

    def _rebalance(self, parent: Optional[Node], left: bool) -> None:
        """
        Absorb a one-black deficit in parent's left (or right) child slot.

        Every case but BLACK_PARENT_NONE finishes locally; that one recolors
        the sibling red and moves the deficit up to parent's own slot.
        """
        while True:
            case = classify_deficit(parent, left)
            logger.debug("deficit under %r (left=%s): %s", parent, left, case.value)
            if case is DeleteCase.ROOT:
                return

            sibling = child(parent, not left)
            if case is DeleteCase.RED_SIBLING:
                # Turns into one of the red-parent cases.
                self.flip(sibling)
                self.flip(parent)
                self._rotate_toward(parent, left)
                continue

            if case is DeleteCase.RED_PARENT_FAR:
                self.flip(sibling)
                self.flip(parent)
                self.flip(child(sibling, not left))
                self._rotate_toward(parent, left)
            elif case is DeleteCase.RED_PARENT_NEAR:
                self.flip(parent)
                self._rotate_toward(sibling, not left)
                self._rotate_toward(parent, left)
            elif case is DeleteCase.RED_PARENT_NONE:
                self.flip(parent)
                self.flip(sibling)
            elif case is DeleteCase.BLACK_PARENT_FAR:
                self.flip(child(sibling, not left))
                self._rotate_toward(parent, left)
            elif case is DeleteCase.BLACK_PARENT_NEAR:
                self.flip(child(sibling, left))
                self._rotate_toward(sibling, not left)
                self._rotate_toward(parent, left)
            else:
                self.flip(sibling)
                if parent.parent is not None:
                    left = is_left_child(parent)
                parent = parent.parent
                continue
            return

    def _after_mutation(self) -> None:
        if self.check:
            check_invariants(self)
