"""BinTreeLib - Binary Tree Traversal and Projection Library.

BinTreeLib walks binary trees in deterministic orders and computes a few
classic projections over them:

━━━━━━━━━━━━━━━━━━━━━━━━━━
Traversal (recursive or iterative, identical output):
    from bintreelib import traverse
    list(traverse(root, "inorder", "iterative"))

Structure and views:
    from bintreelib import is_identical, bottom_view, top_view

In-place rewrite (mutates the tree):
    from bintreelib import sum_transform
━━━━━━━━━━━━━━━━━━━━━━━━━━

All operations are synchronous and single-threaded. ``None`` is the
empty tree everywhere.
"""

__version__ = "0.1.0"

from .core.node import Node
from .core.traverser import (
    TreeTraverser,
    RecursiveInorderTraverser,
    IterativeInorderTraverser,
    RecursivePreorderTraverser,
    IterativePreorderTraverser,
    RecursivePostorderTraverser,
    IterativePostorderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .core.views import HorizontalViewProjector

# Configuration and planning
from .config import (
    TraversalConfig,
    TraversalOrder,
    TraversalStrategy,
    ViewKind,
)
from .planning import ExecutionPlan, ConfigurationError

# High-level API
from .api import (
    traverse,
    traverse_with_config,
    traverse_nodes,
    is_identical,
    bottom_view,
    top_view,
    view,
    sum_transform,
    count_nodes,
    get_leaf_values,
    get_tree_height,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'Node',
    'TreeTraverser',
    'RecursiveInorderTraverser',
    'IterativeInorderTraverser',
    'RecursivePreorderTraverser',
    'IterativePreorderTraverser',
    'RecursivePostorderTraverser',
    'IterativePostorderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'HorizontalViewProjector',
    # Config
    'TraversalConfig',
    'TraversalOrder',
    'TraversalStrategy',
    'ViewKind',
    'ExecutionPlan',
    'ConfigurationError',
    # API
    'traverse',
    'traverse_with_config',
    'traverse_nodes',
    'is_identical',
    'bottom_view',
    'top_view',
    'view',
    'sum_transform',
    'count_nodes',
    'get_leaf_values',
    'get_tree_height',
    'get_tree_stats',
]
