"""Test fixtures for BinTreeLib consumers.

Tree construction is not part of the library itself; these helpers build
the trees used throughout the test suite and by downstream projects that
want ready-made shapes.
"""

import random
from typing import Optional

from ..core.node import Node


def build_sample_tree() -> Node:
    """Build the reference eight-node tree.

    ::

               1
             /   \\
            2     3
           /     / \\
          4     5   6
               / \\
              7   8

    Returns:
        Root of a freshly built tree (safe to mutate)
    """
    return Node(
        1,
        Node(2, Node(4)),
        Node(3, Node(5, Node(7), Node(8)), Node(6)),
    )


def build_chain(length: int, side: str = "left", start: int = 1) -> Optional[Node]:
    """Build a degenerate tree where every node has one child.

    Built iteratively, so ``length`` may exceed the recursion limit.

    Args:
        length: Number of nodes (0 = empty tree)
        side: Which side children hang from ("left" or "right")
        start: Value of the root; values increase by one per level

    Returns:
        Root of the chain or None
    """
    if side not in ("left", "right"):
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")

    root: Optional[Node] = None
    for value in range(start + length - 1, start - 1, -1):
        node = Node(value)
        setattr(node, side, root)
        root = node
    return root


def build_random_tree(size: int,
                      seed: Optional[int] = None,
                      min_value: int = -50,
                      max_value: int = 50) -> Optional[Node]:
    """Build a random binary tree with exactly ``size`` nodes.

    The left subtree size is drawn uniformly at each node, which gives a
    good mix of balanced, lopsided and chain-like shapes. Values are drawn
    from a small range so duplicates are common.

    Args:
        size: Number of nodes (0 = empty tree)
        seed: Seed for reproducible trees
        min_value: Smallest possible value
        max_value: Largest possible value

    Returns:
        Root of the tree or None
    """
    rng = random.Random(seed)

    def _build(count: int) -> Optional[Node]:
        if count == 0:
            return None
        left_count = rng.randint(0, count - 1)
        value = rng.randint(min_value, max_value)
        return Node(value, _build(left_count), _build(count - 1 - left_count))

    return _build(size)


def copy_tree(root: Optional[Node]) -> Optional[Node]:
    """Deep-copy a tree so the copy shares no nodes with the original."""
    if root is None:
        return None
    return Node(root.value, copy_tree(root.left), copy_tree(root.right))
