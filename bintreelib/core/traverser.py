"""Tree traversal strategies for BinTreeLib.

Traversers implement the different algorithms for walking a binary tree.
Every depth-first order comes in two forms that must emit identical
sequences: a recursive one that follows the order definition directly, and
an iterative one that simulates it with an explicit stack.

Recursive forms are bounded by Python's recursion limit. A tree taller than
roughly ``sys.getrecursionlimit()`` raises ``RecursionError``; use the
iterative form for pathologically deep trees.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Dict, Iterator, List, Optional, Tuple, Type, Union

from .node import Node
from ..config import TraversalOrder, TraversalStrategy


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers yield the nodes of a tree in a fixed order. They never
    modify the tree, and all auxiliary state is local to one call of
    :meth:`traverse`.
    """

    order: TraversalOrder
    strategy: TraversalStrategy

    @abstractmethod
    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        """Traverse the tree starting from root.

        Args:
            root: Root of the tree (None = empty tree)

        Yields:
            Nodes in traversal order
        """
        pass

    def values(self, root: Optional[Node]) -> Iterator[int]:
        """Traverse the tree and yield node values instead of nodes."""
        for node in self.traverse(root):
            yield node.value


class RecursiveInorderTraverser(TreeTraverser):
    """Inorder traversal (left, self, right) via recursion."""

    order = TraversalOrder.INORDER
    strategy = TraversalStrategy.RECURSIVE

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield from self.traverse(root.left)
        yield root
        yield from self.traverse(root.right)


class IterativeInorderTraverser(TreeTraverser):
    """Inorder traversal (left, self, right) with an explicit stack.

    A cursor descends left, pushing every node it passes. When the cursor
    runs out, the top of the stack is the next node to emit, after which
    the cursor moves into that node's right subtree.
    """

    order = TraversalOrder.INORDER
    strategy = TraversalStrategy.ITERATIVE

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        stack: List[Node] = []
        current = root

        while stack or current is not None:
            if current is not None:
                stack.append(current)
                current = current.left
            else:
                current = stack.pop()
                yield current
                current = current.right


class RecursivePreorderTraverser(TreeTraverser):
    """Preorder traversal (self, left, right) via recursion."""

    order = TraversalOrder.PREORDER
    strategy = TraversalStrategy.RECURSIVE

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield root
        yield from self.traverse(root.left)
        yield from self.traverse(root.right)


class IterativePreorderTraverser(TreeTraverser):
    """Preorder traversal (self, left, right) with an explicit stack.

    The right child is pushed before the left one so the left subtree
    is popped, and therefore emitted, first.
    """

    order = TraversalOrder.PREORDER
    strategy = TraversalStrategy.ITERATIVE

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return

        stack: List[Node] = [root]
        while stack:
            node = stack.pop()
            yield node

            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


class RecursivePostorderTraverser(TreeTraverser):
    """Postorder traversal (left, right, self) via recursion."""

    order = TraversalOrder.POSTORDER
    strategy = TraversalStrategy.RECURSIVE

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield from self.traverse(root.left)
        yield from self.traverse(root.right)
        yield root


class IterativePostorderTraverser(TreeTraverser):
    """Postorder traversal (left, right, self) with an explicit stack.

    Popping nodes and pushing left before right records the tree in
    (self, right, left) order, which is postorder reversed. Nothing is
    emitted until the stack is exhausted.
    """

    order = TraversalOrder.POSTORDER
    strategy = TraversalStrategy.ITERATIVE

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return

        stack: List[Node] = [root]
        recorded: List[Node] = []

        while stack:
            node = stack.pop()
            recorded.append(node)

            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)

        yield from reversed(recorded)


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first traversal, level by level, left to right.

    Queue based; there is no recursive counterpart.
    """

    order = TraversalOrder.LEVEL_ORDER
    strategy = TraversalStrategy.ITERATIVE

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return

        queue: Deque[Node] = deque([root])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children())


_TRAVERSERS: Dict[Tuple[TraversalOrder, TraversalStrategy], Type[TreeTraverser]] = {
    (cls.order, cls.strategy): cls
    for cls in (
        RecursiveInorderTraverser,
        IterativeInorderTraverser,
        RecursivePreorderTraverser,
        IterativePreorderTraverser,
        RecursivePostorderTraverser,
        IterativePostorderTraverser,
        LevelOrderTraverser,
    )
}

_ORDER_ALIASES = {
    'inorder': TraversalOrder.INORDER,
    'in': TraversalOrder.INORDER,
    'preorder': TraversalOrder.PREORDER,
    'pre': TraversalOrder.PREORDER,
    'postorder': TraversalOrder.POSTORDER,
    'post': TraversalOrder.POSTORDER,
    'level': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
}

_STRATEGY_ALIASES = {
    'recursive': TraversalStrategy.RECURSIVE,
    'rec': TraversalStrategy.RECURSIVE,
    'iterative': TraversalStrategy.ITERATIVE,
    'iter': TraversalStrategy.ITERATIVE,
    'stack': TraversalStrategy.ITERATIVE,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from string or enum.

    Raises:
        ValueError: If order name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in _ORDER_ALIASES:
        return _ORDER_ALIASES[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse a traversal strategy from string or enum.

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


# Factory function for creating traversers by name
def create_traverser(order: Union[TraversalOrder, str],
                     strategy: Union[TraversalStrategy, str] = TraversalStrategy.RECURSIVE
                     ) -> TreeTraverser:
    """Create a traverser instance by order and strategy.

    Args:
        order: Traversal order (inorder, preorder, postorder, level)
        strategy: Implementation strategy (recursive, iterative)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If a name is not recognized or the combination
            has no implementation
    """
    key = (parse_order(order), parse_strategy(strategy))
    if key not in _TRAVERSERS:
        raise ValueError(
            f"No {key[1].value} implementation of {key[0].value} traversal"
        )
    return _TRAVERSERS[key]()
