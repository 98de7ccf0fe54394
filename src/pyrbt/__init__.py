"""
pyrbt: an in-memory red-black tree over unique ordered keys.

The tree keeps its height within O(log n) by maintaining four coloring
invariants through rotations and recoloring on every insert and delete.
"""

__version__ = "0.1.0"

from .errors import DuplicateKeyError, InvariantError
from .node import Color, Node
from .tree import RBTree, ConflictCase, DeleteCase
from .validate import check_invariants
from .render import level_rows, render

__all__ = [
    "RBTree",
    "Node",
    "Color",
    "ConflictCase",
    "DeleteCase",
    "DuplicateKeyError",
    "InvariantError",
    "check_invariants",
    "level_rows",
    "render",
]
