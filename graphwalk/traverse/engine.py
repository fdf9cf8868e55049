"""
Generic traversal engine.

The engine owns the traversal state machine (seen-set, component boundaries,
cross-component restarts and listener dispatch) and delegates the frontier
discipline to a TraversalStrategy. Depth-first, breadth-first and
closest-first orderings, as well as cycle probing, are all strategies plugged
into the same engine.

Protocol:
    - ``has_next()`` reports whether another vertex can be produced.
    - ``next()`` produces it, fires events, and expands its edges: unseen
      neighbors go to ``strategy.on_vertex_discovered``, already seen ones to
      ``strategy.on_edge_observed``.
    - A strategy returning ``Signal.ABORT`` stops the traversal; the engine
      then reports ``aborted`` and ``has_next()`` is False.
"""

from enum import Enum
from typing import Hashable, Iterator, List, Optional, Set

from graphwalk.graphs.core import BaseGraph, Edge
from graphwalk.logging import get_logger

from .events import TraversalListener

logger = get_logger(__name__)


class Signal(Enum):
    """Result of an edge observation."""

    CONTINUE = "continue"
    ABORT = "abort"


class ComponentState(Enum):
    """Where the engine stands relative to connected component boundaries."""

    BEFORE_COMPONENT = "before_component"
    WHILE_IN_COMPONENT = "while_in_component"
    AFTER_COMPONENT = "after_component"
    STOPPED = "stopped"


class TraversalExhaustedError(StopIteration):
    """
    Raised by ``next()`` when the traversal has no vertices left.

    Being a StopIteration, it ends ``for`` loops and lets the builtin
    ``next(engine, default)`` return its default. Like any StopIteration,
    letting it escape from inside a generator body turns it into a
    RuntimeError (PEP 479); check ``has_next()`` there instead.
    """


class TraversalStrategy:
    """
    Frontier discipline plugged into a TraversalEngine.

    Implementations own the frontier. The engine guarantees that
    ``on_vertex_discovered`` is called at most once per vertex, and that
    ``select_next`` is only called when ``is_exhausted()`` is False.
    """

    def on_vertex_discovered(self, vertex: Hashable, edge: Optional[Edge]) -> None:
        """
        Add a newly seen vertex to the frontier.

        Args:
            vertex: The unseen vertex.
            edge: Edge it was reached through, or None for a component root.
        """
        raise NotImplementedError

    def on_edge_observed(self, vertex: Hashable, edge: Edge) -> Signal:
        """
        React to an edge leading to an already seen vertex.

        Args:
            vertex: The seen vertex at the far end of ``edge``.
            edge: The edge being examined.

        Returns:
            ``Signal.ABORT`` to stop the traversal, else ``Signal.CONTINUE``.
        """
        return Signal.CONTINUE

    def select_next(self) -> Hashable:
        """Remove and return the next vertex of the frontier."""
        raise NotImplementedError

    def is_exhausted(self) -> bool:
        """Return True when the frontier holds no producible vertex."""
        raise NotImplementedError


class TraversalEngine:
    """
    Lazy, single-use traversal over a graph.

    Args:
        graph: Graph (or Subgraph) to traverse. It must not be mutated while
            the traversal is active.
        strategy: Frontier discipline.
        start: Vertex to start from. If None, the first unseen vertex in
            ``graph.vertices()`` order is used.
        cross_component: Whether to continue into other connected components
            once the current one is exhausted. Defaults to ``start is None``.

    Raises:
        ValueError: If ``start`` is not a vertex of ``graph``.

    Example:
        >>> G = Graph.from_edges([("A", "B"), ("B", "C")], directed=True)
        >>> list(TraversalEngine(G, DepthFirstStrategy(), start="A"))
        ['A', 'B', 'C']
    """

    def __init__(
        self,
        graph: BaseGraph,
        strategy: TraversalStrategy,
        start: Optional[Hashable] = None,
        cross_component: Optional[bool] = None,
    ):
        if start is not None and not graph.has_vertex(start):
            raise ValueError(f"Start vertex {start!r} not in graph")
        if cross_component is None:
            cross_component = start is None

        self._graph = graph
        self._strategy = strategy
        self._cross_component = cross_component
        self._pending_start = start
        self._seen: Set[Hashable] = set()
        self._listeners: List[TraversalListener] = []
        self._root_cursor: Optional[Iterator[Hashable]] = None
        self._roots_taken = 0
        self._state = ComponentState.AFTER_COMPONENT
        self.aborted = False

    @property
    def graph(self) -> BaseGraph:
        return self._graph

    @property
    def strategy(self) -> TraversalStrategy:
        return self._strategy

    @property
    def cross_component(self) -> bool:
        return self._cross_component

    @property
    def state(self) -> ComponentState:
        return self._state

    def is_seen(self, vertex: Hashable) -> bool:
        """Return True if ``vertex`` has been visited or is on the frontier."""
        return vertex in self._seen

    def add_traversal_listener(self, listener: TraversalListener) -> None:
        """Register a listener; listeners are notified in registration order."""
        self._listeners.append(listener)

    def remove_traversal_listener(self, listener: TraversalListener) -> None:
        """Unregister a listener. Raises ValueError if it is not registered."""
        self._listeners.remove(listener)

    def has_next(self) -> bool:
        """
        Return whether another vertex can be produced.

        When the current component is exhausted this fires
        ``component_finished`` (once), then either seeds the next component
        root (cross-component traversal) or reports the end of the traversal.
        """
        if self._state is ComponentState.STOPPED:
            return False

        if self._pending_start is not None:
            self._start_component(self._pending_start)
            self._pending_start = None
            return True

        if not self._strategy.is_exhausted():
            return True

        if self._state is ComponentState.WHILE_IN_COMPONENT:
            self._state = ComponentState.AFTER_COMPONENT
            logger.debug("Connected component %d finished", self._roots_taken)
            for listener in self._listeners:
                listener.component_finished()

        if self._cross_component or self._roots_taken == 0:
            root = self._next_unseen_vertex()
            if root is not None:
                self._start_component(root)
                return True

        return False

    def next(self) -> Hashable:
        """
        Produce the next vertex of the traversal.

        Returns:
            The next vertex in traversal order.

        Raises:
            TraversalExhaustedError: If ``has_next()`` is False.
        """
        if not self.has_next():
            raise TraversalExhaustedError("Traversal has no more vertices")

        if self._state is ComponentState.BEFORE_COMPONENT:
            self._state = ComponentState.WHILE_IN_COMPONENT
            logger.debug("Connected component %d started", self._roots_taken)
            for listener in self._listeners:
                listener.component_started()

        vertex = self._strategy.select_next()
        for listener in self._listeners:
            listener.vertex_visited(vertex)

        self._expand(vertex)
        return vertex

    def __iter__(self) -> "TraversalEngine":
        return self

    def __next__(self) -> Hashable:
        return self.next()

    def _start_component(self, root: Hashable) -> None:
        self._roots_taken += 1
        self._state = ComponentState.BEFORE_COMPONENT
        self._discover(root, None)

    def _next_unseen_vertex(self) -> Optional[Hashable]:
        if self._root_cursor is None:
            self._root_cursor = iter(self._graph.vertices())
        for vertex in self._root_cursor:
            if vertex not in self._seen:
                return vertex
        return None

    def _discover(self, vertex: Hashable, edge: Optional[Edge]) -> None:
        self._seen.add(vertex)
        self._strategy.on_vertex_discovered(vertex, edge)

    def _expand(self, vertex: Hashable) -> None:
        for edge in self._graph.edges_of(vertex):
            opposite = self._graph.opposite_vertex(edge, vertex)

            for listener in self._listeners:
                listener.edge_visited(edge)

            if opposite not in self._seen:
                self._discover(opposite, edge)
            elif self._strategy.on_edge_observed(opposite, edge) is Signal.ABORT:
                self._state = ComponentState.STOPPED
                self.aborted = True
                logger.debug("Traversal aborted at edge %r", edge)
                return
