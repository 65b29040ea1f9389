"""Postorder sum transform for BinTreeLib.

This is the only component that mutates a tree. Run it after every other
observation of the original values is complete.
"""

from typing import Optional

from .node import Node


def sum_transform(root: Optional[Node]) -> int:
    """Rewrite node values bottom-up and return an aggregate.

    Children are transformed before their parent. Each node's new value is
    the sum of the values returned by its left and right subtree calls (0
    for an absent child), so every leaf becomes 0. Each call returns the
    node's new value plus its original value.

    Note:
        Open question: each call returns a rewritten value plus an
        original one, which looks unintended. The formula is kept exactly
        as observed rather than normalized to a plain sum or to the new
        root value. The usual description of it says the aggregate is not
        the original tree sum, but that is wrong: the mix telescopes, so
        the top-level call returns the original sum of the whole tree and
        each node ends up holding the original sum of its descendants.

        The transform is not idempotent. A second call sees the rewritten
        values and generally returns a different number.

    Args:
        root: Root of the tree (None = empty tree, contributes 0)

    Returns:
        New root value plus the original root value
    """
    if root is None:
        return 0

    left_sum = sum_transform(root.left)
    right_sum = sum_transform(root.right)

    original = root.value
    root.value = left_sum + right_sum
    return root.value + original
