#!/usr/bin/env python3
"""
Basic usage of BinTreeLib.

This example demonstrates:
- Every traversal order in both strategies
- Structural equality
- Bottom and top views
- The in-place sum transform (run last, it rewrites the tree)
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import (
    traverse,
    is_identical,
    bottom_view,
    top_view,
    sum_transform,
    get_tree_stats,
)
from bintreelib.testing import build_sample_tree


def main():
    root = build_sample_tree()

    print("Traversals:")
    for order in ("inorder", "preorder", "postorder"):
        for strategy in ("recursive", "iterative"):
            values = list(traverse(root, order, strategy))
            print(f"  {order:<10} {strategy:<10} {values}")
    print(f"  {'level':<10} {'iterative':<10} {list(traverse(root, 'level', 'iterative'))}")

    print(f"\nIdentical to itself: {is_identical(root, root)}")
    print(f"Identical to empty:  {is_identical(root, None)}")

    print(f"\nBottom view: {bottom_view(root)}")
    print(f"Top view:    {top_view(root)}")

    stats = get_tree_stats(root)
    print(f"\nNodes: {stats['total_nodes']}, leaves: {stats['leaf_nodes']}, height: {stats['height']}")

    # Mutates the tree, so it goes last
    result = sum_transform(root)
    print(f"\nSum transform returned {result}")
    print(f"Rewritten inorder: {list(traverse(root))}")


if __name__ == "__main__":
    main()
