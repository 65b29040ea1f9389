"""Core algorithms for BinTreeLib.

This package contains the node model and the algorithms that walk it:
traversers, structural equality, horizontal views and the sum transform.
"""

from .node import Node
from .traverser import (
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
from .equality import is_identical
from .views import HorizontalViewProjector, bottom_view, top_view
from .transform import sum_transform

__all__ = [
    "Node",
    "TreeTraverser",
    "RecursiveInorderTraverser",
    "IterativeInorderTraverser",
    "RecursivePreorderTraverser",
    "IterativePreorderTraverser",
    "RecursivePostorderTraverser",
    "IterativePostorderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "is_identical",
    "HorizontalViewProjector",
    "bottom_view",
    "top_view",
    "sum_transform",
]
