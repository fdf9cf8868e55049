"""
Subgraph views.

A Subgraph restricts a base graph to a subset of its vertices and edges
without copying the base. The view registers itself as a GraphListener on the
base graph so that it stays consistent when the base is mutated.
"""

from typing import Hashable, Iterable, List, Optional, Set

from graphwalk.logging import get_logger

from .core import BaseGraph, Edge, Graph, GraphListener

logger = get_logger(__name__)


class _SubgraphSync(GraphListener):
    """Forwards base graph notifications to the owning Subgraph."""

    def __init__(self, subgraph: "Subgraph"):
        self._subgraph = subgraph

    def vertex_added(self, vertex: Hashable) -> None:
        if self._subgraph._induced_vertices:
            self._subgraph._vertex_set.add(vertex)

    def vertex_removed(self, vertex: Hashable) -> None:
        self._subgraph._vertex_set.discard(vertex)

    def edge_added(self, edge: Edge) -> None:
        sub = self._subgraph
        if (
            sub._induced_edges
            and edge.source in sub._vertex_set
            and edge.target in sub._vertex_set
        ):
            sub._edge_set.add(edge)

    def edge_removed(self, edge: Edge) -> None:
        self._subgraph._edge_set.discard(edge)


class Subgraph(BaseGraph):
    """
    Read-only view of a base graph restricted to given vertices and edges.

    Args:
        base: The graph to view.
        vertex_subset: Vertices to include. None includes every base vertex,
            and vertices later added to the base are included as well.
        edge_subset: Edges to include. None includes every base edge whose
            endpoints are both included, and matching edges later added to
            the base are included as well. Edges with an endpoint outside the
            vertex subset are dropped.

    Raises:
        ValueError: If a vertex or edge of a subset does not belong to the base.

    Example:
        >>> G = Graph.from_edges([("v1", "v2"), ("v2", "v3"), ("v3", "v1")])
        >>> sub = Subgraph(G, {"v1", "v2"})
        >>> len(sub.edges())
        1
    """

    def __init__(
        self,
        base: Graph,
        vertex_subset: Optional[Iterable[Hashable]] = None,
        edge_subset: Optional[Iterable[Edge]] = None,
    ):
        self._base = base
        self.directed = base.directed
        self._induced_vertices = vertex_subset is None
        self._induced_edges = edge_subset is None

        if vertex_subset is None:
            self._vertex_set: Set[Hashable] = set(base.vertices())
        else:
            self._vertex_set = set(vertex_subset)
            missing = [v for v in self._vertex_set if not base.has_vertex(v)]
            if missing:
                raise ValueError(f"Vertices {missing!r} are not in the base graph")

        candidates = base.edges() if edge_subset is None else list(edge_subset)
        self._edge_set: Set[Edge] = set()
        for edge in candidates:
            if not base.contains_edge(edge):
                raise ValueError(f"Edge {edge!r} is not in the base graph")
            if edge.source in self._vertex_set and edge.target in self._vertex_set:
                self._edge_set.add(edge)

        self._sync = _SubgraphSync(self)
        base.add_listener(self._sync)
        logger.debug(
            "Created subgraph with %d vertices and %d edges",
            len(self._vertex_set),
            len(self._edge_set),
        )

    @property
    def base(self) -> Graph:
        """The underlying graph."""
        return self._base

    def detach(self) -> None:
        """Stop following changes of the base graph."""
        self._base.remove_listener(self._sync)

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._vertex_set

    def vertices(self) -> List[Hashable]:
        return [v for v in self._base.vertices() if v in self._vertex_set]

    def edges(self) -> List[Edge]:
        return [e for e in self._base.edges() if e in self._edge_set]

    def edges_of(self, vertex: Hashable) -> List[Edge]:
        if vertex not in self._vertex_set:
            raise KeyError(f"Vertex {vertex!r} not in subgraph")
        return [e for e in self._base.edges_of(vertex) if e in self._edge_set]

    def get_all_edges(self, u: Hashable, v: Hashable) -> List[Edge]:
        if u not in self._vertex_set or v not in self._vertex_set:
            return []
        return [e for e in self._base.get_all_edges(u, v) if e in self._edge_set]

    def contains_edge(self, edge: Edge) -> bool:
        return edge in self._edge_set

    def __repr__(self) -> str:
        return (
            f"Subgraph(vertices={len(self._vertex_set)}, "
            f"edges={len(self._edge_set)}, base={self._base!r})"
        )
