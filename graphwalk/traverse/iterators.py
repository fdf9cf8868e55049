"""
Ready-made traversal iterators.

Each iterator is a TraversalEngine bound to one frontier discipline.

Example:
    >>> G = Graph.from_edges([("A", "B"), ("A", "C"), ("B", "D")], directed=True)
    >>> list(BreadthFirstIterator(G, "A"))
    ['A', 'B', 'C', 'D']
    >>> list(DepthFirstIterator(G, "A"))
    ['A', 'C', 'B', 'D']
"""

import math
from typing import Hashable, Optional

from graphwalk.graphs.core import BaseGraph, Edge

from .engine import TraversalEngine
from .strategies import BreadthFirstStrategy, ClosestFirstStrategy, DepthFirstStrategy


class DepthFirstIterator(TraversalEngine):
    """Depth-first traversal; see :class:`DepthFirstStrategy` for ordering."""

    def __init__(
        self,
        graph: BaseGraph,
        start: Optional[Hashable] = None,
        cross_component: Optional[bool] = None,
    ):
        super().__init__(graph, DepthFirstStrategy(), start, cross_component)


class BreadthFirstIterator(TraversalEngine):
    """Breadth-first traversal in FIFO discovery order."""

    def __init__(
        self,
        graph: BaseGraph,
        start: Optional[Hashable] = None,
        cross_component: Optional[bool] = None,
    ):
        super().__init__(graph, BreadthFirstStrategy(), start, cross_component)


class ClosestFirstIterator(TraversalEngine):
    """
    Traversal in non-decreasing order of weighted distance from the root.

    Args:
        graph: Graph with non-negative edge weights.
        start: Root vertex. If None, every component is traversed in turn,
            each measured from its own root.
        radius: Stop once the closest frontier vertex is farther than this.
            A finite radius requires a start vertex.

    Raises:
        ValueError: If a finite radius is combined with cross-component
            traversal, if ``radius`` is negative, or if ``start`` is unknown.
    """

    def __init__(
        self,
        graph: BaseGraph,
        start: Optional[Hashable] = None,
        radius: float = math.inf,
    ):
        if start is None and radius != math.inf:
            raise ValueError("A bounded radius requires a start vertex")
        self._closest = ClosestFirstStrategy(graph, radius)
        super().__init__(graph, self._closest, start, start is None)

    @property
    def radius(self) -> float:
        return self._closest.radius

    def get_shortest_path_length(self, vertex: Hashable) -> float:
        """
        Return the length of the shortest path found so far to ``vertex``.

        The value is final once ``vertex`` has been produced by the iterator.
        Returns inf for vertices not yet seen.
        """
        return self._closest.get_shortest_path_length(vertex)

    def get_spanning_tree_edge(self, vertex: Hashable) -> Optional[Edge]:
        """
        Return the last edge of the best path found so far to ``vertex``.

        Returns None for component roots and unseen vertices.
        """
        return self._closest.get_spanning_tree_edge(vertex)
