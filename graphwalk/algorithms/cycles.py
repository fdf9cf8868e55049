"""
Cycle detection on directed graphs.

The CycleProbe strategy runs a depth-first traversal while keeping the
backtracking path from the root to the most recently produced vertex. An edge
that leads back onto that path closes a cycle through every path vertex from
the matched position to the tail.

Back edges alone miss vertices whose only cycles close through a vertex that
has already been backtracked over, so the probe also keeps Tarjan lowlinks on
the same path: a backtracked vertex whose lowlink equals its own discovery
index closes a strongly connected component, and every vertex of a component
with more than one member (or with a self loop) lies on a cycle.

References:
    - Tarjan, R. E. "Depth-first search and linear graph algorithms" (1972).
"""

from typing import Dict, FrozenSet, Hashable, List, Optional, Set

from graphwalk.graphs.core import BaseGraph, Edge
from graphwalk.logging import get_logger
from graphwalk.traverse.engine import Signal, TraversalEngine, TraversalStrategy
from graphwalk.traverse.strategies import DepthFirstStrategy

logger = get_logger(__name__)


class CycleProbe(TraversalStrategy):
    """
    Depth-first strategy that probes for cycles.

    The whole path is backtracked as soon as the frontier runs dry, which
    closes the last strongly connected components of every connected
    component before the engine moves on to the next root.

    Args:
        graph: Directed graph being traversed.
        cycle_set: Set receiving cycle vertices (collection mode). If None the
            probe runs in boolean mode and aborts at the first cycle.
        target: In boolean mode, only a cycle closing back onto this vertex
            aborts the traversal. None accepts any cycle.

    Attributes:
        cycle_detected: True once boolean mode found a cycle.
        components: Strongly connected components found to contain cycles.
    """

    def __init__(
        self,
        graph: BaseGraph,
        cycle_set: Optional[Set[Hashable]] = None,
        target: Optional[Hashable] = None,
    ):
        self._graph = graph
        self._frontier = DepthFirstStrategy()
        self._cycle_set = cycle_set
        self._target = target

        self._path: List[Hashable] = []
        self._path_index: Dict[Hashable, int] = {}

        self._discovery: Dict[Hashable, int] = {}
        self._lowlink: Dict[Hashable, int] = {}
        self._open: List[Hashable] = []
        self._open_set: Set[Hashable] = set()

        self.cycle_detected = False
        self.components: List[FrozenSet[Hashable]] = []

    @property
    def path(self) -> List[Hashable]:
        """Copy of the current backtracking path, root first."""
        return list(self._path)

    def on_vertex_discovered(self, vertex: Hashable, edge: Optional[Edge]) -> None:
        self._frontier.on_vertex_discovered(vertex, edge)

    def is_exhausted(self) -> bool:
        if not self._frontier.is_exhausted():
            return False
        while self._path:
            self._finish(self._path.pop())
        return True

    def select_next(self) -> Hashable:
        vertex = self._frontier.select_next()

        # backtrack
        while self._path and not self._graph.has_edge(self._path[-1], vertex):
            self._finish(self._path.pop())

        self._path_index[vertex] = len(self._path)
        self._path.append(vertex)

        self._discovery[vertex] = self._lowlink[vertex] = len(self._discovery)
        self._open.append(vertex)
        self._open_set.add(vertex)
        return vertex

    def on_edge_observed(self, vertex: Hashable, edge: Edge) -> Signal:
        self._frontier.on_edge_observed(vertex, edge)

        i = self._path_index.get(vertex, -1)
        if i > -1:
            if self._cycle_set is None:
                if self._target is None or vertex == self._target:
                    self.cycle_detected = True
                    logger.debug("Cycle detected through %r", vertex)
                    return Signal.ABORT
            else:
                self._cycle_set.update(self._path[i:])

        if vertex in self._open_set:
            tail = self._path[-1]
            self._lowlink[tail] = min(self._lowlink[tail], self._discovery[vertex])

        return Signal.CONTINUE

    def _finish(self, vertex: Hashable) -> None:
        del self._path_index[vertex]
        if self._path:
            parent = self._path[-1]
            self._lowlink[parent] = min(self._lowlink[parent], self._lowlink[vertex])

        if self._lowlink[vertex] != self._discovery[vertex]:
            return

        members = []
        while True:
            member = self._open.pop()
            self._open_set.discard(member)
            members.append(member)
            if member == vertex:
                break

        if len(members) > 1 or self._graph.has_edge(vertex, vertex):
            component = frozenset(members)
            self.components.append(component)
            if self._cycle_set is not None:
                self._cycle_set.update(component)


class CycleDetector:
    """
    Detects cycles in a directed graph.

    Example:
        >>> G = Graph.from_edges([(1, 2), (2, 3), (3, 1), (3, 4)], directed=True)
        >>> detector = CycleDetector(G)
        >>> detector.detect_cycles()
        True
        >>> sorted(detector.find_cycles())
        [1, 2, 3]
        >>> detector.detect_cycles_containing_vertex(4)
        False

    Raises:
        ValueError: If the graph is undirected.
    """

    def __init__(self, graph: BaseGraph):
        if not graph.directed:
            raise ValueError("Cycle detection requires a directed graph")
        self._graph = graph

    def detect_cycles(self) -> bool:
        """
        Performs yes/no cycle detection on the entire graph.

        Returns:
            True iff the graph contains at least one cycle.
        """
        return self._execute(None, None).cycle_detected

    def detect_cycles_containing_vertex(self, vertex: Hashable) -> bool:
        """
        Performs yes/no cycle detection on an individual vertex.

        Returns:
            True iff ``vertex`` lies on at least one cycle.

        Raises:
            ValueError: If vertex is not in graph.
        """
        return self._execute(None, vertex).cycle_detected

    def find_cycles(self) -> FrozenSet[Hashable]:
        """
        Finds the vertex set of all cycles.

        Returns:
            Every vertex that participates in at least one cycle.
        """
        cycle_set: Set[Hashable] = set()
        self._execute(cycle_set, None)
        return frozenset(cycle_set)

    def find_cycles_containing_vertex(self, vertex: Hashable) -> FrozenSet[Hashable]:
        """
        Finds the vertex set of all cycles through a particular vertex.

        Returns:
            Every vertex sharing at least one cycle with ``vertex`` (including
            ``vertex`` itself), or an empty set if ``vertex`` is on no cycle.

        Raises:
            ValueError: If vertex is not in graph.
        """
        probe = self._execute(set(), vertex)
        for component in probe.components:
            if vertex in component:
                return component
        return frozenset()

    def _execute(
        self, cycle_set: Optional[Set[Hashable]], vertex: Optional[Hashable]
    ) -> CycleProbe:
        if vertex is not None and not self._graph.has_vertex(vertex):
            raise ValueError(f"Vertex {vertex!r} not in graph")

        probe = CycleProbe(self._graph, cycle_set, target=vertex)
        engine = TraversalEngine(self._graph, probe, start=vertex)

        for _ in engine:
            pass

        logger.debug(
            "Cycle probe from %r finished: aborted=%s, cyclic components=%d",
            vertex,
            engine.aborted,
            len(probe.components),
        )
        return probe
