"""
Traversal framework for graphwalk.

A single TraversalEngine drives every traversal; the order in which vertices
are produced is decided by a pluggable TraversalStrategy:
- DepthFirstStrategy (stack)
- BreadthFirstStrategy (FIFO queue)
- ClosestFirstStrategy (heap keyed by weighted distance, optional radius)

Listeners registered on the engine receive component_started, vertex_visited,
edge_visited and component_finished events synchronously.
"""

from .engine import (
    ComponentState,
    Signal,
    TraversalEngine,
    TraversalExhaustedError,
    TraversalStrategy,
)
from .events import TraversalListener
from .iterators import BreadthFirstIterator, ClosestFirstIterator, DepthFirstIterator
from .strategies import BreadthFirstStrategy, ClosestFirstStrategy, DepthFirstStrategy

__all__ = [
    "BreadthFirstIterator",
    "BreadthFirstStrategy",
    "ClosestFirstIterator",
    "ClosestFirstStrategy",
    "ComponentState",
    "DepthFirstIterator",
    "DepthFirstStrategy",
    "Signal",
    "TraversalEngine",
    "TraversalExhaustedError",
    "TraversalListener",
    "TraversalStrategy",
]
