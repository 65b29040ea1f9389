"""Tests for structural equality."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import Node, is_identical
from bintreelib.testing import build_random_tree, build_sample_tree, copy_tree


def test_both_empty():
    assert is_identical(None, None)


def test_empty_vs_present():
    root = build_sample_tree()
    assert not is_identical(root, None)
    assert not is_identical(None, root)


@pytest.mark.parametrize("seed", range(10))
def test_reflexive(seed):
    root = build_random_tree(20, seed=seed)
    assert is_identical(root, root)


@pytest.mark.parametrize("seed", range(10))
def test_copy_is_identical(seed):
    root = build_random_tree(20, seed=seed)
    assert is_identical(root, copy_tree(root))
    assert is_identical(copy_tree(root), root)


def test_value_difference_deep_in_tree():
    other = build_sample_tree()
    other.right.left.right.value = 80

    assert not is_identical(build_sample_tree(), other)


def test_shape_difference():
    """Same values, mirrored placement."""
    assert not is_identical(Node(1, Node(2)), Node(1, None, Node(2)))


def test_extra_leaf():
    other = build_sample_tree()
    other.left.right = Node(9)

    assert not is_identical(build_sample_tree(), other)


def test_same_traversal_different_shape():
    """Trees with equal inorder sequences are still compared by shape."""
    a = Node(2, Node(1), Node(3))
    b = Node(1, None, Node(2, None, Node(3)))

    assert not is_identical(a, b)


def test_single_nodes():
    assert is_identical(Node(5), Node(5))
    assert not is_identical(Node(5), Node(6))
