"""High-level API for BinTreeLib.

This module provides simple, functional interfaces for the library's
operations. These functions wrap the object-oriented API (traversers,
projectors, execution plans) for ease of use in simple cases.

Every function accepts ``None`` as the empty tree.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Union

from .core.node import Node
from .core import equality, transform, views
from .core.traverser import parse_order, parse_strategy
from .config import TraversalConfig, TraversalOrder, TraversalStrategy, ViewKind
from .planning import ExecutionPlan

logger = logging.getLogger(__name__)


def traverse(
    root: Optional[Node],
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.RECURSIVE,
    max_nodes: Optional[int] = None,
) -> Iterator[int]:
    """Simple interface for tree traversal.

    The recursive and iterative strategies yield identical sequences for
    every order. The returned iterator is one-shot.

    Args:
        root: Root of the tree (None = empty tree)
        order: Traversal order (inorder, preorder, postorder, level)
        strategy: Implementation strategy (recursive, iterative)
        max_nodes: Stop after this many values (None = unlimited)

    Returns:
        Iterator over node values

    Raises:
        ValueError: If order or strategy is not recognized
        ConfigurationError: If the combination can't be carried out

    Example:
        >>> list(traverse(root, "preorder", "iterative"))
        [1, 2, 4, 3, 5, 7, 8, 6]
    """
    config = TraversalConfig(
        order=parse_order(order),
        strategy=parse_strategy(strategy),
        max_nodes=max_nodes,
    )
    return traverse_with_config(root, config)


def traverse_with_config(root: Optional[Node], config: TraversalConfig) -> Iterator[int]:
    """Traverse a tree as described by a TraversalConfig.

    Args:
        root: Root of the tree (None = empty tree)
        config: Traversal configuration

    Returns:
        Iterator over node values

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    plan = ExecutionPlan(config)
    return plan.execute(root)


def is_identical(a: Optional[Node], b: Optional[Node]) -> bool:
    """Check whether two trees have the same shape and values.

    Example:
        >>> is_identical(root, root)
        True
        >>> is_identical(root, None)
        False
    """
    return equality.is_identical(a, b)


def bottom_view(root: Optional[Node]) -> List[int]:
    """Deepest value per horizontal distance, by ascending distance.

    Example:
        >>> bottom_view(root)
        [4, 7, 5, 8, 6]
    """
    return views.bottom_view(root)


def top_view(root: Optional[Node]) -> List[int]:
    """Shallowest value per horizontal distance, by ascending distance.

    Example:
        >>> top_view(root)
        [4, 2, 1, 3, 6]
    """
    return views.top_view(root)


def view(root: Optional[Node], kind: Union[ViewKind, str] = ViewKind.BOTTOM) -> List[int]:
    """Compute a horizontal view selected by kind.

    Raises:
        ValueError: If kind is not "bottom" or "top"
    """
    return views.HorizontalViewProjector(kind).view(root)


def sum_transform(root: Optional[Node]) -> int:
    """Rewrite the tree bottom-up in place and return the aggregate.

    See :func:`bintreelib.core.transform.sum_transform` for the exact
    formula. Mutates ``root``'s subtree; calling it twice on the same
    tree gives a different result the second time.

    Example:
        >>> sum_transform(root)
        36
        >>> list(traverse(root))
        [0, 4, 35, 0, 15, 0, 26, 0]
    """
    original = root.value if root is not None else None
    result = transform.sum_transform(root)
    if root is not None:
        logger.debug(f"sum_transform: root {original!r} -> {root.value!r}, returned {result}")
    return result


def count_nodes(root: Optional[Node]) -> int:
    """Count nodes in a tree.

    Uses the iterative preorder traverser, so it is safe on trees
    deeper than the recursion limit.
    """
    count = 0
    for _ in traverse(root, TraversalOrder.PREORDER, TraversalStrategy.ITERATIVE):
        count += 1
    return count


def get_leaf_values(root: Optional[Node]) -> List[int]:
    """Get the values of all leaf nodes, left to right."""
    return [
        node.value
        for node in traverse_nodes(root, TraversalOrder.PREORDER, TraversalStrategy.ITERATIVE)
        if node.is_leaf()
    ]


def get_tree_height(root: Optional[Node]) -> int:
    """Get the height of a tree in edges.

    Returns:
        -1 for an empty tree, 0 for a single node
    """
    return len(_levels(root)) - 1


def get_tree_stats(root: Optional[Node]) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"Total nodes: {stats['total_nodes']}")
        >>> print(f"Height: {stats['height']}")
    """
    levels = _levels(root)

    stats = {
        'total_nodes': sum(levels),
        'leaf_nodes': len(get_leaf_values(root)),
        'height': len(levels) - 1,
        'levels': dict(enumerate(levels)),
    }

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


def traverse_nodes(
    root: Optional[Node],
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.RECURSIVE,
) -> Iterator[Node]:
    """Like :func:`traverse` but yields the nodes themselves."""
    plan = ExecutionPlan(TraversalConfig(
        order=parse_order(order),
        strategy=parse_strategy(strategy),
    ))
    return plan.traverser.traverse(root)


# Helper functions

def _levels(root: Optional[Node]) -> List[int]:
    """Count nodes per level, root level first."""
    counts: List[int] = []
    if root is None:
        return counts

    current = [root]
    while current:
        counts.append(len(current))
        current = [child for node in current for child in node.children()]
    return counts
