"""Structural equality for binary trees."""

from typing import Optional

from .node import Node


def is_identical(a: Optional[Node], b: Optional[Node]) -> bool:
    """Check whether two trees have the same shape and the same values.

    Two empty trees are identical; an empty tree is never identical to a
    non-empty one. Traversal order does not matter, only shape and value
    equality. Recursion depth is bounded by the shorter tree's height.

    Args:
        a: Root of the first tree (None = empty)
        b: Root of the second tree (None = empty)

    Returns:
        True if the trees are structurally identical
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False

    return (a.value == b.value
            and is_identical(a.left, b.left)
            and is_identical(a.right, b.right))
