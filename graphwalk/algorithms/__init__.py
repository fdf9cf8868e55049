"""
Graph algorithms built on the traversal framework.

- CycleDetector: yes/no cycle detection and cycle vertex sets (directed graphs)
- DijkstraShortestPath: radius-bounded single-pair shortest paths
"""

from .cycles import CycleDetector, CycleProbe
from .shortest import NO_PATH, DijkstraShortestPath, PathResult, find_path_between

__all__ = [
    "CycleDetector",
    "CycleProbe",
    "DijkstraShortestPath",
    "NO_PATH",
    "PathResult",
    "find_path_between",
]
