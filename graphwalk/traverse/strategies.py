"""
Frontier disciplines: depth-first, breadth-first and closest-first.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS), 22.3 (DFS) and 24.3 (Dijkstra).
"""

import heapq
import itertools
import math
from collections import deque
from typing import Deque, Dict, Hashable, List, Optional, Set, Tuple

from graphwalk.graphs.core import BaseGraph, Edge

from .engine import Signal, TraversalStrategy


class DepthFirstStrategy(TraversalStrategy):
    """
    Stack frontier.

    Siblings come off the stack in reverse discovery order. A pending vertex
    reached again is pushed again, so it is produced as a child of the most
    recent vertex that reaches it and every subtree is finished before its
    siblings. Stale stack entries are skipped lazily.
    """

    def __init__(self):
        self._stack: List[Hashable] = []
        self._visited: Set[Hashable] = set()

    def on_vertex_discovered(self, vertex: Hashable, edge: Optional[Edge]) -> None:
        self._stack.append(vertex)

    def on_edge_observed(self, vertex: Hashable, edge: Edge) -> Signal:
        if vertex not in self._visited:
            self._stack.append(vertex)
        return Signal.CONTINUE

    def is_exhausted(self) -> bool:
        while self._stack and self._stack[-1] in self._visited:
            self._stack.pop()
        return not self._stack

    def select_next(self) -> Hashable:
        self.is_exhausted()
        vertex = self._stack.pop()
        self._visited.add(vertex)
        return vertex


class BreadthFirstStrategy(TraversalStrategy):
    """FIFO queue frontier; vertices at depth k come before depth k+1."""

    def __init__(self):
        self._queue: Deque[Hashable] = deque()

    def on_vertex_discovered(self, vertex: Hashable, edge: Optional[Edge]) -> None:
        self._queue.append(vertex)

    def is_exhausted(self) -> bool:
        return not self._queue

    def select_next(self) -> Hashable:
        return self._queue.popleft()


class ClosestFirstStrategy(TraversalStrategy):
    """
    Binary-heap frontier keyed by tentative distance from the component root.

    Every discovered vertex records its best known distance and the edge that
    achieved it (its spanning tree edge). Relaxation happens both on discovery
    and when an edge reaches a vertex that is still on the frontier. Once a
    vertex is produced its distance and tree edge are final. Ties are broken
    by insertion order.

    Args:
        graph: Graph whose edge weights are used.
        radius: Vertices farther than this from the root are never produced.

    Raises:
        ValueError: If ``radius`` is negative, or (while traversing) if an
            edge with negative weight is met.

    Complexity: O(E log V) with lazy deletion of superseded heap entries.
    """

    def __init__(self, graph: BaseGraph, radius: float = math.inf):
        if radius < 0:
            raise ValueError(f"Radius must be non-negative, got {radius}")
        self._graph = graph
        self.radius = radius
        self._heap: List[Tuple[float, int, Hashable]] = []
        self._counter = itertools.count()
        self._distance: Dict[Hashable, float] = {}
        self._tree_edge: Dict[Hashable, Optional[Edge]] = {}
        self._finalized: Set[Hashable] = set()

    def get_shortest_path_length(self, vertex: Hashable) -> float:
        """Return the best known distance to ``vertex`` (inf if unseen)."""
        return self._distance.get(vertex, math.inf)

    def get_spanning_tree_edge(self, vertex: Hashable) -> Optional[Edge]:
        """Return the edge through which ``vertex`` was best reached (None for roots)."""
        return self._tree_edge.get(vertex)

    def is_finalized(self, vertex: Hashable) -> bool:
        return vertex in self._finalized

    def on_vertex_discovered(self, vertex: Hashable, edge: Optional[Edge]) -> None:
        if edge is None:
            self._relax(vertex, None, 0.0)
        else:
            weight = self._weight(edge)
            self._relax(vertex, edge, self._candidate(vertex, edge, weight))

    def on_edge_observed(self, vertex: Hashable, edge: Edge) -> Signal:
        # a finalized endpoint still has its weight checked
        weight = self._weight(edge)
        if vertex not in self._finalized:
            candidate = self._candidate(vertex, edge, weight)
            if candidate < self._distance.get(vertex, math.inf):
                self._relax(vertex, edge, candidate)
        return Signal.CONTINUE

    def is_exhausted(self) -> bool:
        heap = self._heap
        while heap:
            dist, _, vertex = heap[0]
            if vertex in self._finalized or dist > self._distance[vertex]:
                heapq.heappop(heap)
            else:
                return False
        return True

    def select_next(self) -> Hashable:
        self.is_exhausted()
        _, _, vertex = heapq.heappop(self._heap)
        self._finalized.add(vertex)
        return vertex

    def _weight(self, edge: Edge) -> float:
        weight = self._graph.edge_weight(edge)
        if weight < 0:
            raise ValueError(
                f"Closest-first traversal requires non-negative weights. "
                f"Found negative weight {weight} on {edge!r}"
            )
        return weight

    def _candidate(self, vertex: Hashable, edge: Edge, weight: float) -> float:
        source = self._graph.opposite_vertex(edge, vertex)
        return self._distance[source] + weight

    def _relax(self, vertex: Hashable, edge: Optional[Edge], distance: float) -> None:
        self._distance[vertex] = distance
        self._tree_edge[vertex] = edge
        if distance <= self.radius:
            heapq.heappush(self._heap, (distance, next(self._counter), vertex))
