"""
Single-pair shortest paths with Dijkstra's algorithm.

DijkstraShortestPath drives a ClosestFirstIterator from the start vertex until
the end vertex is produced (its distance is then final) or the frontier runs
out, optionally bounded by a radius.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import math
from dataclasses import dataclass
from typing import Hashable, List, Optional, Tuple

from graphwalk.graphs.core import BaseGraph, Edge
from graphwalk.graphs.utils import path_vertices
from graphwalk.logging import get_logger
from graphwalk.traverse.iterators import ClosestFirstIterator

logger = get_logger(__name__)


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a shortest path search.

    Attributes:
        edges: Edges from start to end in order, or None if no path exists.
        length: Total weight of the path, or inf if no path exists.
    """

    edges: Optional[Tuple[Edge, ...]]
    length: float

    @property
    def found(self) -> bool:
        return self.edges is not None


NO_PATH = PathResult(None, math.inf)


class DijkstraShortestPath:
    """
    Shortest path between two vertices, computed eagerly on construction.

    An instance is only good for a single search; after construction, query
    ``path_edges``, ``path_length``, ``path_vertices`` or ``result``.

    Args:
        graph: Graph with non-negative edge weights.
        start: Vertex at which the path should start.
        end: Vertex at which the path should end.
        radius: Limit on path length, or inf for an unbounded search.

    Raises:
        ValueError: If start or end is not in graph, if radius is negative,
            or if a negative edge weight is met during the search.

    Complexity: O(E log V) using a binary heap.

    Example:
        >>> G = Graph()
        >>> G.add_edge("A", "B", 1.0)
        >>> G.add_edge("B", "C", 2.0)
        >>> DijkstraShortestPath(G, "A", "C").path_length
        3.0
    """

    def __init__(
        self,
        graph: BaseGraph,
        start: Hashable,
        end: Hashable,
        radius: float = math.inf,
    ):
        if not graph.has_vertex(start):
            raise ValueError(f"Start vertex {start!r} not in graph")
        if not graph.has_vertex(end):
            raise ValueError(f"End vertex {end!r} not in graph")

        # The search stops at end, so not every edge would otherwise be seen
        for edge in graph.edges():
            weight = graph.edge_weight(edge)
            if weight < 0:
                raise ValueError(
                    f"Dijkstra requires non-negative weights. "
                    f"Found negative weight {weight} on {edge!r}"
                )

        self._graph = graph
        self._start = start
        self._end = end
        self._result = NO_PATH

        iterator = ClosestFirstIterator(graph, start, radius=radius)
        for vertex in iterator:
            if vertex == end:
                edges = self._create_edge_list(iterator, end)
                self._result = PathResult(
                    tuple(edges), iterator.get_shortest_path_length(end)
                )
                break

        logger.debug(
            "Shortest path %r -> %r (radius=%s): length=%s",
            start,
            end,
            radius,
            self._result.length,
        )

    @property
    def result(self) -> PathResult:
        return self._result

    @property
    def path_edges(self) -> Optional[List[Edge]]:
        """Edges making up the path found, or None if no path exists."""
        if self._result.edges is None:
            return None
        return list(self._result.edges)

    @property
    def path_length(self) -> float:
        """Length of the path found, or inf if no path exists."""
        return self._result.length

    @property
    def path_vertices(self) -> Optional[List[Hashable]]:
        """Vertices of the path found from start to end, or None."""
        return path_vertices(self._graph, self._start, self._result.edges)

    @staticmethod
    def find_path_between(
        graph: BaseGraph, start: Hashable, end: Hashable
    ) -> Optional[List[Edge]]:
        """
        Find the shortest path via a single call.

        For a radius-limited search, or to get the path length, use the
        constructor instead.

        Returns:
            List of edges, or None if no path exists.
        """
        return DijkstraShortestPath(graph, start, end).path_edges

    def _create_edge_list(
        self, iterator: ClosestFirstIterator, end: Hashable
    ) -> List[Edge]:
        edges = []
        vertex = end
        while True:
            edge = iterator.get_spanning_tree_edge(vertex)
            if edge is None:
                break
            edges.append(edge)
            vertex = self._graph.opposite_vertex(edge, vertex)
        edges.reverse()
        return edges


def find_path_between(
    graph: BaseGraph, start: Hashable, end: Hashable
) -> Optional[List[Edge]]:
    """Module-level alias of :meth:`DijkstraShortestPath.find_path_between`."""
    return DijkstraShortestPath.find_path_between(graph, start, end)
