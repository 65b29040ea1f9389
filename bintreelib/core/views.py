"""Horizontal view projections for BinTreeLib.

Every node gets a horizontal distance (root 0, left child -1, right
child +1) and a level (root 0, child = parent + 1). A single preorder
pass fills a map keyed by distance with ``(value, level)`` pairs; the view
is the recorded values read back in ascending distance order.

Distances and levels are purely structural, but the preorder visiting
order decides which node wins when two nodes at the same distance share
a level:

- Bottom view replaces on ``level >= recorded level``, so of two tied
  nodes the later visited one (right of the left one) is kept.
- Top view replaces only on ``level < recorded level``, so the first node
  recorded at a distance is kept against ties.

The pass is recursive, so trees taller than the recursion limit raise
``RecursionError``.
"""

from typing import Dict, List, Optional, Tuple, Union

from .node import Node
from ..config import ViewKind


# distance -> (value, level)
Projection = Dict[int, Tuple[int, int]]


class HorizontalViewProjector:
    """Projects a tree onto its horizontal distances.

    Example:
        >>> projector = HorizontalViewProjector(ViewKind.TOP)
        >>> projector.view(root)
        [4, 2, 1, 3, 6]
    """

    def __init__(self, kind: Union[ViewKind, str] = ViewKind.BOTTOM):
        """Initialize projector.

        Args:
            kind: Which view to compute (bottom or top)
        """
        if isinstance(kind, str):
            kind = kind.lower()
        self.kind = ViewKind(kind)

    def _replaces(self, level: int, recorded_level: int) -> bool:
        if self.kind == ViewKind.BOTTOM:
            return level >= recorded_level
        return level < recorded_level

    def project(self, root: Optional[Node]) -> Projection:
        """Build the distance -> (value, level) map for a tree.

        Args:
            root: Root of the tree (None = empty tree)

        Returns:
            Mapping of horizontal distance to the winning (value, level)
        """
        projection: Projection = {}

        def _visit(node: Optional[Node], distance: int, level: int) -> None:
            if node is None:
                return

            recorded = projection.get(distance)
            if recorded is None or self._replaces(level, recorded[1]):
                projection[distance] = (node.value, level)

            _visit(node.left, distance - 1, level + 1)
            _visit(node.right, distance + 1, level + 1)

        _visit(root, 0, 0)
        return projection

    def view(self, root: Optional[Node]) -> List[int]:
        """Compute the view as values ordered by ascending distance."""
        projection = self.project(root)
        return [projection[distance][0] for distance in sorted(projection)]


def bottom_view(root: Optional[Node]) -> List[int]:
    """Deepest node value per horizontal distance, ascending distance.

    Ties in level go to the node visited later in preorder.
    """
    return HorizontalViewProjector(ViewKind.BOTTOM).view(root)


def top_view(root: Optional[Node]) -> List[int]:
    """Shallowest node value per horizontal distance, ascending distance.

    Ties in level go to the node visited first in preorder.
    """
    return HorizontalViewProjector(ViewKind.TOP).view(root)
