"""
Core graph data structures.

Provides the Edge type, the mutable Graph class (directed or undirected,
optionally weighted) and the GraphListener callback interface used to
observe structural changes. Vertices are returned in sorted order and
incident edges are sorted by their opposite endpoint for deterministic
behavior.
"""

from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from graphwalk.logging import get_logger

logger = get_logger(__name__)


def _vertex_key(vertex: Hashable) -> str:
    return str(vertex)


@dataclass(frozen=True, eq=False)
class Edge:
    """
    A graph edge between two vertices.

    Edges compare and hash by identity, so two parallel edges between the
    same endpoints are distinct objects. For undirected graphs ``source`` and
    ``target`` simply name the two endpoints in the order they were added.

    Attributes:
        source: First endpoint (tail for directed graphs).
        target: Second endpoint (head for directed graphs).
        weight: Numeric edge weight (default 1.0).
    """

    source: Hashable
    target: Hashable
    weight: float = 1.0

    def __repr__(self) -> str:
        return f"Edge({self.source!r}, {self.target!r}, weight={self.weight!r})"


class GraphListener:
    """
    Callback interface for structural changes of a graph.

    Subclasses override the notifications they care about; every method is a
    no-op by default. Notifications are delivered synchronously, after the
    change has been applied, in listener registration order.
    """

    def vertex_added(self, vertex: Hashable) -> None:
        pass

    def vertex_removed(self, vertex: Hashable) -> None:
        pass

    def edge_added(self, edge: Edge) -> None:
        pass

    def edge_removed(self, edge: Edge) -> None:
        pass


class BaseGraph:
    """
    Read-only graph interface shared by Graph and its views.

    Concrete graphs implement ``directed``, ``vertices``, ``edges``,
    ``edges_of`` and ``has_vertex``; everything else is derived from those.
    Traversals and algorithms only rely on this interface.
    """

    directed: bool = False

    def vertices(self) -> List[Hashable]:
        raise NotImplementedError

    def edges(self) -> List[Edge]:
        raise NotImplementedError

    def edges_of(self, vertex: Hashable) -> List[Edge]:
        raise NotImplementedError

    def has_vertex(self, vertex: Hashable) -> bool:
        raise NotImplementedError

    def edge_source(self, edge: Edge) -> Hashable:
        return edge.source

    def edge_target(self, edge: Edge) -> Hashable:
        return edge.target

    def edge_endpoints(self, edge: Edge) -> Tuple[Hashable, Hashable]:
        return edge.source, edge.target

    def edge_weight(self, edge: Edge) -> float:
        return edge.weight

    def opposite_vertex(self, edge: Edge, vertex: Hashable) -> Hashable:
        """
        Return the endpoint of ``edge`` that is not ``vertex``.

        Raises:
            ValueError: If ``vertex`` is not an endpoint of ``edge``.
        """
        if vertex == edge.source:
            return edge.target
        if vertex == edge.target:
            return edge.source
        raise ValueError(f"Vertex {vertex!r} is not an endpoint of {edge!r}")

    def get_all_edges(self, u: Hashable, v: Hashable) -> List[Edge]:
        """
        Return every edge connecting u to v (in either direction if undirected).

        Returns an empty list when either vertex is missing.
        """
        if not self.has_vertex(u) or not self.has_vertex(v):
            return []
        result = []
        for edge in self.edges_of(u):
            if self.directed:
                if edge.source == u and edge.target == v:
                    result.append(edge)
            elif self.opposite_vertex(edge, u) == v:
                result.append(edge)
        return result

    def get_edge(self, u: Hashable, v: Hashable) -> Optional[Edge]:
        """Return one edge connecting u to v, or None if there is none."""
        edges = self.get_all_edges(u, v)
        return edges[0] if edges else None

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        """Return True if an edge connects u to v."""
        return self.get_edge(u, v) is not None

    def degree_of(self, vertex: Hashable) -> int:
        """Return the number of edges reported by ``edges_of(vertex)``."""
        return len(self.edges_of(vertex))

    def __contains__(self, vertex: Hashable) -> bool:
        return self.has_vertex(vertex)

    def __len__(self) -> int:
        return len(self.vertices())


class Graph(BaseGraph):
    """
    Mutable graph with adjacency-list representation.

    Supports directed and undirected graphs with weighted edges. For a
    directed graph ``edges_of(v)`` returns the outgoing edges of ``v``; for an
    undirected graph it returns every incident edge.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.
        allow_loops: If False, ``add_edge(v, v)`` raises ValueError.
        allow_multiple_edges: If False, adding a second edge between the same
            (ordered, if directed) pair raises ValueError.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(deg(u)) when multiple edges are disallowed, else O(1)
        - edges_of: O(deg(v)); the sorted order is cached until v changes
        - has_edge / get_all_edges: O(1) plus the number of parallel edges
        - remove_vertex: O(sum of degrees of its neighbors)
    """

    def __init__(
        self,
        directed: bool = False,
        allow_loops: bool = True,
        allow_multiple_edges: bool = False,
    ):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
            allow_loops: Whether self-loops may be added.
            allow_multiple_edges: Whether parallel edges may be added.
        """
        self.directed = directed
        self.allow_loops = allow_loops
        self.allow_multiple_edges = allow_multiple_edges
        # vertex -> outgoing (directed) or incident (undirected) edges
        self._out: Dict[Hashable, List[Edge]] = {}
        # vertex -> incoming edges; only maintained for directed graphs
        self._in: Dict[Hashable, List[Edge]] = {}
        # vertex -> opposite endpoint -> connecting edges, in insertion order
        self._adjacent: Dict[Hashable, Dict[Hashable, List[Edge]]] = {}
        # vertex -> edges_of(vertex), dropped whenever its edges change
        self._sorted: Dict[Hashable, List[Edge]] = {}
        self._edges: Dict[Edge, None] = {}
        self._listeners: List[GraphListener] = []

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple],
        directed: bool = False,
        vertices: Iterable[Hashable] = (),
    ) -> "Graph":
        """
        Build a graph from ``(u, v)`` or ``(u, v, weight)`` tuples.

        Args:
            edges: Edge tuples to add in order.
            directed: If True, the graph is directed.
            vertices: Extra vertices to add (e.g. isolated ones).

        Returns:
            The new graph.

        Example:
            >>> G = Graph.from_edges([("A", "B", 2.0), ("B", "C")], directed=True)
            >>> len(G.edges())
            2
        """
        graph = cls(directed=directed)
        for vertex in vertices:
            graph.add_vertex(vertex)
        for spec in edges:
            graph.add_edge(*spec)
        return graph

    # ------------------------------------------------------------------
    # Listeners

    def add_listener(self, listener: GraphListener) -> None:
        """Register a listener for structural change notifications."""
        self._listeners.append(listener)

    def remove_listener(self, listener: GraphListener) -> None:
        """Unregister a listener. Raises ValueError if it is not registered."""
        self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Mutation

    def add_vertex(self, vertex: Hashable) -> bool:
        """
        Add a vertex to the graph.

        Args:
            vertex: Hashable vertex identifier.

        Returns:
            True if the vertex was added, False if it was already present.
        """
        if vertex in self._out:
            return False
        self._out[vertex] = []
        self._adjacent[vertex] = {}
        if self.directed:
            self._in[vertex] = []
        for listener in self._listeners:
            listener.vertex_added(vertex)
        return True

    def add_edge(self, u: Hashable, v: Hashable, weight: float = 1.0) -> Edge:
        """
        Add an edge from u to v, adding missing endpoints first.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Edge weight (default 1.0).

        Returns:
            The newly created Edge.

        Raises:
            ValueError: If the edge is a loop and loops are disallowed, or if
                an edge already connects u to v and multiple edges are
                disallowed.
        """
        if u == v and not self.allow_loops:
            raise ValueError(f"Loops are not allowed: ({u!r}, {v!r})")
        if not self.allow_multiple_edges and self.has_edge(u, v):
            raise ValueError(f"Edge ({u!r}, {v!r}) already exists")

        self.add_vertex(u)
        self.add_vertex(v)

        edge = Edge(u, v, weight)
        self._edges[edge] = None
        self._link(u, v, edge)
        if self.directed:
            self._in[v].append(edge)
        elif u != v:
            self._link(v, u, edge)

        for listener in self._listeners:
            listener.edge_added(edge)
        return edge

    def remove_edge(self, edge: Edge) -> None:
        """
        Remove an edge from the graph.

        Raises:
            KeyError: If the edge is not in the graph.
        """
        if edge not in self._edges:
            raise KeyError(f"Edge {edge!r} not in graph")

        del self._edges[edge]
        u, v = edge.source, edge.target
        self._unlink(u, v, edge)
        if self.directed:
            self._in[v].remove(edge)
        elif u != v:
            self._unlink(v, u, edge)

        for listener in self._listeners:
            listener.edge_removed(edge)

    def remove_vertex(self, vertex: Hashable) -> None:
        """
        Remove a vertex and every edge touching it.

        Raises:
            KeyError: If the vertex is not in the graph.
        """
        if vertex not in self._out:
            raise KeyError(f"Vertex {vertex!r} not in graph")

        touching = list(self._out[vertex])
        if self.directed:
            touching.extend(e for e in self._in[vertex] if e.source != vertex)
        for edge in touching:
            self.remove_edge(edge)

        del self._out[vertex]
        del self._adjacent[vertex]
        self._sorted.pop(vertex, None)
        if self.directed:
            del self._in[vertex]

        logger.debug("Removed vertex %r and %d edges", vertex, len(touching))
        for listener in self._listeners:
            listener.vertex_removed(vertex)

    def _link(self, vertex: Hashable, opposite: Hashable, edge: Edge) -> None:
        self._out[vertex].append(edge)
        self._adjacent[vertex].setdefault(opposite, []).append(edge)
        self._sorted.pop(vertex, None)

    def _unlink(self, vertex: Hashable, opposite: Hashable, edge: Edge) -> None:
        self._out[vertex].remove(edge)
        parallel = self._adjacent[vertex][opposite]
        parallel.remove(edge)
        if not parallel:
            del self._adjacent[vertex][opposite]
        self._sorted.pop(vertex, None)

    # ------------------------------------------------------------------
    # Queries

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._out

    def vertices(self) -> List[Hashable]:
        """
        Return list of all vertices in sorted order.

        Returns:
            Vertices sorted by their string representation.
        """
        return sorted(self._out.keys(), key=_vertex_key)

    def edges(self) -> List[Edge]:
        """Return list of all edges in insertion order."""
        return list(self._edges)

    def edges_of(self, vertex: Hashable) -> List[Edge]:
        """
        Return the edges leaving ``vertex`` (incident edges if undirected).

        Edges are sorted by the string representation of their opposite
        endpoint; parallel edges keep their insertion order.

        Raises:
            KeyError: If vertex is not in graph.
        """
        if vertex not in self._out:
            raise KeyError(f"Vertex {vertex!r} not in graph")
        ordered = self._sorted.get(vertex)
        if ordered is None:
            ordered = sorted(
                self._out[vertex],
                key=lambda e: _vertex_key(self.opposite_vertex(e, vertex)),
            )
            self._sorted[vertex] = ordered
        return list(ordered)

    def incoming_edges_of(self, vertex: Hashable) -> List[Edge]:
        """
        Return the edges entering ``vertex``.

        For undirected graphs this is the same as ``edges_of``.

        Raises:
            KeyError: If vertex is not in graph.
        """
        if not self.directed:
            return self.edges_of(vertex)
        if vertex not in self._in:
            raise KeyError(f"Vertex {vertex!r} not in graph")
        return sorted(self._in[vertex], key=lambda e: _vertex_key(e.source))

    def contains_edge(self, edge: Edge) -> bool:
        """Return True if this exact Edge object belongs to the graph."""
        return edge in self._edges

    def get_all_edges(self, u: Hashable, v: Hashable) -> List[Edge]:
        if u not in self._adjacent or v not in self._adjacent:
            return []
        return list(self._adjacent[u].get(v, ()))

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        return u in self._adjacent and v in self._adjacent[u]

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, vertices={len(self._out)}, edges={len(self._edges)})"
