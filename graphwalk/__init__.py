"""graphwalk - graph traversal iterators, cycle detection and shortest paths."""

__version__ = "0.1.0"

# Algorithms
from .algorithms import (
    NO_PATH,
    CycleDetector,
    CycleProbe,
    DijkstraShortestPath,
    PathResult,
    find_path_between,
)

# Graph data structures
from .graphs import (
    BaseGraph,
    Edge,
    Graph,
    GraphListener,
    Subgraph,
    adjacency_matrix,
    path_vertices,
    vertex_index_map,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Traversal framework
from .traverse import (
    BreadthFirstIterator,
    BreadthFirstStrategy,
    ClosestFirstIterator,
    ClosestFirstStrategy,
    ComponentState,
    DepthFirstIterator,
    DepthFirstStrategy,
    Signal,
    TraversalEngine,
    TraversalExhaustedError,
    TraversalListener,
    TraversalStrategy,
)

__all__ = [
    "__version__",
    # Graphs
    "BaseGraph",
    "Edge",
    "Graph",
    "GraphListener",
    "Subgraph",
    "adjacency_matrix",
    "path_vertices",
    "vertex_index_map",
    # Traversal
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
    # Algorithms
    "CycleDetector",
    "CycleProbe",
    "DijkstraShortestPath",
    "NO_PATH",
    "PathResult",
    "find_path_between",
    # Logging
    "configure_logging",
    "get_logger",
    "set_log_level",
]
