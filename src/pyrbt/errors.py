"""Exceptions raised by the red-black tree."""


class DuplicateKeyError(KeyError):
    """Raised by insert when the key is already present."""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key {self.key!r} is already in the tree"


class InvariantError(AssertionError):
    """A structural invariant of the tree does not hold.

    Raised by rotation and recoloring primitives whose preconditions are
    broken, and by invariant validation. Seeing one means the tree is
    corrupt, not that the caller passed bad input.
    """
    pass
