"""Node data model for BinTreeLib.

The Node is intentionally kept simple - it's a plain data container.
All traversal, comparison and projection logic lives in the other core
modules, which walk nodes top-down through their ``left``/``right`` slots.
"""

from typing import Iterator, Optional


class Node:
    """A single vertex of a binary tree.

    A node exclusively owns its children: no two nodes may share a child
    and the child relation must be acyclic. A tree is identified by its
    root node, and ``None`` stands for the empty tree.

    There is no parent back-reference. Algorithms work top-down and hand
    results back up through return values.

    Only :func:`bintreelib.core.transform.sum_transform` rewrites ``value``;
    every other component treats the tree as read-only.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self,
                 value: int,
                 left: Optional["Node"] = None,
                 right: Optional["Node"] = None):
        """Create a node.

        Args:
            value: Integer payload
            left: Left child (None if absent)
            right: Right child (None if absent)
        """
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Returns:
            True if both children are absent
        """
        return self.left is None and self.right is None

    def children(self) -> Iterator["Node"]:
        """Iterate over present children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        left = self.left.value if self.left is not None else None
        right = self.right.value if self.right is not None else None
        return f"{self.__class__.__name__}(value={self.value!r}, left={left!r}, right={right!r})"
