"""Configuration system for BinTreeLib.

This module defines how users specify a traversal: which order to walk
the tree in, which implementation strategy to use, and optional limits.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class TraversalOrder(Enum):
    """Which order nodes are emitted in."""
    INORDER = "inorder"         # Left, self, right
    PREORDER = "preorder"       # Self, left, right
    POSTORDER = "postorder"     # Left, right, self
    LEVEL_ORDER = "level"       # Level by level, left to right


class TraversalStrategy(Enum):
    """How a traversal order is implemented.

    Both strategies produce identical sequences for the same order.
    """
    RECURSIVE = "recursive"     # Native call-stack recursion
    ITERATIVE = "iterative"     # Explicit LIFO/FIFO auxiliary structure


class ViewKind(Enum):
    """Which horizontal projection to compute."""
    BOTTOM = "bottom"           # Deepest node per horizontal distance
    TOP = "top"                 # Shallowest node per horizontal distance


# Orders that only have a queue-based (iterative) form
ITERATIVE_ONLY_ORDERS = frozenset({TraversalOrder.LEVEL_ORDER})


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    The ExecutionPlan validates this configuration and picks the
    matching traverser.
    """

    order: TraversalOrder = TraversalOrder.INORDER
    strategy: TraversalStrategy = TraversalStrategy.RECURSIVE

    # Stop after emitting this many values (None = unlimited)
    max_nodes: Optional[int] = None

    # Convenience constructors for common configurations

    @classmethod
    def recursive(cls, order: TraversalOrder = TraversalOrder.INORDER) -> 'TraversalConfig':
        """Create config for the recursive form of an order."""
        return cls(order=order, strategy=TraversalStrategy.RECURSIVE)

    @classmethod
    def iterative(cls, order: TraversalOrder = TraversalOrder.INORDER) -> 'TraversalConfig':
        """Create config for the explicit-stack form of an order."""
        return cls(order=order, strategy=TraversalStrategy.ITERATIVE)

    @classmethod
    def level_order(cls) -> 'TraversalConfig':
        """Create config for breadth-first traversal."""
        return cls(order=TraversalOrder.LEVEL_ORDER, strategy=TraversalStrategy.ITERATIVE)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if (isinstance(self.order, TraversalOrder)
                and self.order in ITERATIVE_ONLY_ORDERS
                and self.strategy == TraversalStrategy.RECURSIVE):
            errors.append(f"{self.order.value} order has no recursive form")

        if self.max_nodes is not None:
            if not isinstance(self.max_nodes, int) or isinstance(self.max_nodes, bool):
                errors.append(f"max_nodes must be an int, got {self.max_nodes!r}")
            elif self.max_nodes <= 0:
                errors.append("max_nodes must be positive")

        return errors
