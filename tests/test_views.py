"""Tests for horizontal bottom and top views.

Covers the tie-break rules: bottom view lets the later preorder visit win
a level tie, top view keeps the first node recorded.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import (
    Node,
    HorizontalViewProjector,
    ViewKind,
    bottom_view,
    top_view,
    view,
)
from bintreelib.testing import build_chain, build_random_tree, build_sample_tree


class TestProjection:
    """Distance/level bookkeeping on the reference tree."""

    def test_bottom_projection(self):
        projection = HorizontalViewProjector(ViewKind.BOTTOM).project(build_sample_tree())

        assert projection == {
            -2: (4, 2),
            -1: (7, 3),
            0: (5, 2),
            1: (8, 3),
            2: (6, 2),
        }

    def test_top_projection(self):
        projection = HorizontalViewProjector(ViewKind.TOP).project(build_sample_tree())

        assert projection == {
            -2: (4, 2),
            -1: (2, 1),
            0: (1, 0),
            1: (3, 1),
            2: (6, 2),
        }

    def test_kind_from_string(self):
        assert HorizontalViewProjector("top").kind == ViewKind.TOP

    def test_kind_is_case_insensitive(self):
        assert HorizontalViewProjector("TOP").kind == ViewKind.TOP
        assert view(build_sample_tree(), "Bottom") == [4, 7, 5, 8, 6]

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            HorizontalViewProjector("side")


def test_reference_views():
    root = build_sample_tree()
    assert bottom_view(root) == [4, 7, 5, 8, 6]
    assert top_view(root) == [4, 2, 1, 3, 6]


def test_empty_tree():
    assert bottom_view(None) == []
    assert top_view(None) == []


def test_single_node():
    assert bottom_view(Node(9)) == [9]
    assert top_view(Node(9)) == [9]


def test_level_tie_bottom_prefers_later_visit():
    """2's right child and 3's left child share distance 0 and level 2."""
    root = Node(1, Node(2, None, Node(5)), Node(3, Node(6)))

    assert bottom_view(root) == [2, 6, 3]


def test_level_tie_top_prefers_first_visit():
    """Two nodes tie at distance 0, level 2; the root still wins, and
    neither tied node replaces it."""
    root = Node(1, Node(2, None, Node(5)), Node(3, Node(6)))

    assert top_view(root) == [2, 1, 3]


def _tied_at_distance_two() -> Node:
    #        1
    #      /   \
    #     2     3
    #      \   /
    #       4 7
    #        \ \
    #         5 8
    #          \ \
    #           6 9
    # 6 and 9 both land on distance 2, level 4; 6 is visited first.
    return Node(1,
                Node(2, None, Node(4, None, Node(5, None, Node(6)))),
                Node(3, Node(7, None, Node(8, None, Node(9)))))


def test_top_view_keeps_first_of_tied_nodes():
    assert top_view(_tied_at_distance_two()) == [2, 1, 3, 6]


def test_bottom_view_keeps_last_of_tied_nodes():
    assert bottom_view(_tied_at_distance_two()) == [2, 7, 8, 9]


def test_top_view_shallower_later_node_replaces():
    """5 reaches distance 1 at level 3 before 3 is visited at level 1."""
    projection = HorizontalViewProjector(ViewKind.TOP).project(_tied_at_distance_two())

    assert projection[1] == (3, 1)
    assert projection[0] == (1, 0)


def test_bottom_view_shallower_later_node_does_not_replace():
    root = Node(1,
                Node(2, None, Node(3, None, Node(4, None, Node(5)))),
                Node(9))

    assert bottom_view(root) == [2, 3, 4, 5]
    assert top_view(root) == [2, 1, 9, 5]


def test_chains_are_fully_visible():
    left = build_chain(5, side="left")
    right = build_chain(5, side="right")

    assert bottom_view(left) == [5, 4, 3, 2, 1]
    assert top_view(left) == [5, 4, 3, 2, 1]
    assert bottom_view(right) == [1, 2, 3, 4, 5]
    assert top_view(right) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("seed", range(10))
def test_views_cover_same_distances(seed):
    root = build_random_tree(30, seed=seed)
    bottom = HorizontalViewProjector(ViewKind.BOTTOM).project(root)
    top = HorizontalViewProjector(ViewKind.TOP).project(root)

    assert sorted(bottom) == sorted(top)
    for distance in bottom:
        assert bottom[distance][1] >= top[distance][1]


def test_view_dispatch():
    root = build_sample_tree()
    assert view(root, "bottom") == bottom_view(root)
    assert view(root, ViewKind.TOP) == top_view(root)
