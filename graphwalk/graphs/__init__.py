"""
Graph data structures for graphwalk.

This package provides the graph abstraction every traversal and algorithm
works against:
- Edge and Graph (directed or undirected, weighted edges)
- GraphListener callbacks for structural changes
- Subgraph views that stay in sync with their base graph
- Helpers for vertex indexing, adjacency matrices and path conversion
"""

from .core import BaseGraph, Edge, Graph, GraphListener
from .subgraph import Subgraph
from .utils import adjacency_matrix, path_vertices, vertex_index_map

__all__ = [
    "BaseGraph",
    "Edge",
    "Graph",
    "GraphListener",
    "Subgraph",
    "adjacency_matrix",
    "path_vertices",
    "vertex_index_map",
]
