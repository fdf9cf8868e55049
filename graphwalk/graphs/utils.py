"""
Utility functions for graphs.

Provides helpers for vertex indexing, dense adjacency matrices and turning
edge paths into vertex sequences.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .core import BaseGraph, Edge


def vertex_index_map(
    vertices: Iterable[Hashable],
) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from vertices to indices 0..n-1.

    Vertices are sorted by string representation for deterministic ordering.

    Args:
        vertices: Iterable of hashable vertices.

    Returns:
        Tuple of (vertex_to_index dict, index_to_vertex list).

    Example:
        >>> vertex_to_idx, idx_to_vertex = vertex_index_map(['c', 'a', 'b'])
        >>> vertex_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_vertex
        ['a', 'b', 'c']
    """
    ordered = sorted(set(vertices), key=lambda x: str(x))
    vertex_to_index = {vertex: idx for idx, vertex in enumerate(ordered)}
    return vertex_to_index, ordered


def adjacency_matrix(
    graph: BaseGraph, vertices: Optional[Sequence[Hashable]] = None
) -> np.ndarray:
    """
    Build the dense weighted adjacency matrix of a graph.

    ``A[i, j]`` is the summed weight of all edges from vertex i to vertex j
    (both directions for undirected graphs). Vertices outside ``vertices``
    are ignored.

    Args:
        graph: Graph or Subgraph.
        vertices: Optional vertices to include (defaults to all vertices).
            They are re-sorted through :func:`vertex_index_map`.

    Returns:
        (n, n) float array in vertex index order.

    Example:
        >>> G = Graph.from_edges([("A", "B", 2.0)])
        >>> adjacency_matrix(G)
        array([[0., 2.],
               [2., 0.]])
    """
    if vertices is None:
        vertices = graph.vertices()
    vertex_to_idx, _ = vertex_index_map(vertices)
    n = len(vertex_to_idx)

    A = np.zeros((n, n))
    for edge in graph.edges():
        u, v = graph.edge_endpoints(edge)
        if u not in vertex_to_idx or v not in vertex_to_idx:
            continue
        i, j = vertex_to_idx[u], vertex_to_idx[v]
        weight = graph.edge_weight(edge)
        A[i, j] += weight
        if not graph.directed and i != j:
            A[j, i] += weight

    return A


def path_vertices(
    graph: BaseGraph, start: Hashable, edges: Optional[Sequence[Edge]]
) -> Optional[List[Hashable]]:
    """
    Convert an edge path beginning at ``start`` into its vertex sequence.

    Args:
        graph: Graph the edges belong to.
        start: First vertex of the path.
        edges: Edges in path order, or None for "no path".

    Returns:
        List of vertices from start to the last vertex (inclusive), or None
        if ``edges`` is None.

    Raises:
        ValueError: If consecutive edges do not share an endpoint.

    Example:
        >>> G = Graph.from_edges([("A", "B"), ("B", "C")], directed=True)
        >>> path_vertices(G, "A", G.edges())
        ['A', 'B', 'C']
    """
    if edges is None:
        return None

    path = [start]
    current = start
    for edge in edges:
        current = graph.opposite_vertex(edge, current)
        path.append(current)
    return path
