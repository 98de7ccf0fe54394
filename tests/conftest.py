"""Shared fixtures: build trees from nested shapes and read shapes back.

A shape is ``None`` or a tuple ``("20B", left, right)`` where the token is
the key followed by R or B.
"""

import pytest

from pyrbt import Color, Node, RBTree


def _build(shape, parent=None):
    if shape is None:
        return None, 0
    token, left, right = shape
    node = Node(int(token[:-1]), Color.RED if token[-1] == "R" else Color.BLACK)
    node.parent = parent
    node.left, n_left = _build(left, node)
    node.right, n_right = _build(right, node)
    return node, 1 + n_left + n_right


def make_tree(shape):
    """Build an RBTree with exactly the given shape and colors."""
    tree = RBTree()
    tree.root, tree.size = _build(shape)
    return tree


def shape_of(node):
    if node is None:
        return None
    return (repr(node), shape_of(node.left), shape_of(node.right))


def mirror(shape):
    """Negate every key and swap children: the mirror-image tree."""
    if shape is None:
        return None
    token, left, right = shape
    return (f"{-int(token[:-1])}{token[-1]}", mirror(right), mirror(left))


@pytest.fixture
def build():
    return make_tree


@pytest.fixture
def shape():
    return lambda tree: shape_of(tree.root)


@pytest.fixture
def mirrored():
    return mirror
