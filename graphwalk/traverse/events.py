"""Traversal listener interface."""

from typing import Hashable

from graphwalk.graphs.core import Edge


class TraversalListener:
    """
    Receives traversal events from a TraversalEngine.

    Events are delivered synchronously, in traversal order, before the engine
    produces its next vertex. Subclasses override the callbacks they need;
    every callback is a no-op by default.
    """

    def component_started(self) -> None:
        """Called before the first vertex of a connected component."""

    def vertex_visited(self, vertex: Hashable) -> None:
        """Called when a vertex is produced by the traversal."""

    def edge_visited(self, edge: Edge) -> None:
        """Called for every edge examined while expanding a vertex."""

    def component_finished(self) -> None:
        """Called once the last vertex of a connected component is expanded."""
