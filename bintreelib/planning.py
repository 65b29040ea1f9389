"""Execution planning for BinTreeLib.

The ExecutionPlan validates a TraversalConfig up front and assembles the
traverser that will carry it out, so configuration mistakes surface before
any node is visited.
"""

import logging
from typing import Any, Dict, Iterator, Optional

from .core.node import Node
from .core.traverser import TreeTraverser, create_traverser
from .config import TraversalConfig

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a traversal configuration can't be carried out."""
    pass


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. A plan can be executed any number of times; each call
    to :meth:`execute` returns a fresh one-shot iterator.
    """

    def __init__(self, config: TraversalConfig):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()

        # Track execution state
        self.nodes_processed = 0

        logger.debug(f"Execution plan ready: {self.get_summary()}")

    def _select_traverser(self) -> TreeTraverser:
        """Select the traverser matching order and strategy.

        Returns:
            TreeTraverser instance
        """
        try:
            return create_traverser(self.config.order, self.config.strategy)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    def _check_limits(self, emitted: int) -> bool:
        """Check if another value may be emitted.

        Args:
            emitted: Values already emitted by the current run

        Returns:
            True if we should continue, False if limits reached
        """
        max_nodes = self.config.max_nodes
        return max_nodes is None or emitted < max_nodes

    def execute(self, root: Optional[Node]) -> Iterator[int]:
        """Execute the traversal plan.

        Args:
            root: Root node to start traversal from (None = empty tree)

        Yields:
            Node values in the configured order
        """
        emitted = 0
        self.nodes_processed = 0

        for node in self.traverser.traverse(root):
            if not self._check_limits(emitted):
                break
            emitted += 1
            # Reports the most recently advanced run
            self.nodes_processed = emitted
            yield node.value

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'order': self.config.order.value,
            'strategy': self.config.strategy.value,
            'max_nodes': self.config.max_nodes,
            'traverser': self.traverser.__class__.__name__,
        }
