"""Testing utilities for BinTreeLib consumers."""

from .fixtures import build_sample_tree, build_chain, build_random_tree, copy_tree

__all__ = ['build_sample_tree', 'build_chain', 'build_random_tree', 'copy_tree']
