"""Example: Traversals, cycle detection and shortest paths with graphwalk

Builds a small build-dependency graph and a weighted road network, then walks
them with the traversal iterators and the algorithm facades.
"""

from graphwalk import (
    BreadthFirstIterator,
    CycleDetector,
    DepthFirstIterator,
    DijkstraShortestPath,
    Graph,
    TraversalListener,
)


class ComponentPrinter(TraversalListener):
    """Prints connected component boundaries as they happen."""

    def __init__(self):
        self.count = 0

    def component_started(self):
        self.count += 1
        print(f"  -- component {self.count} started")

    def vertex_visited(self, vertex):
        print(f"     visit {vertex}")

    def component_finished(self):
        print(f"  -- component {self.count} finished")


def example_dependency_cycles():
    """Example: Finding circular imports in a module dependency graph."""
    print("=" * 60)
    print("Example 1: Dependency cycles")
    print("=" * 60)

    deps = Graph(directed=True)
    deps.add_edge("app", "models")
    deps.add_edge("app", "views")
    deps.add_edge("views", "models")
    deps.add_edge("models", "db")
    deps.add_edge("db", "config")
    deps.add_edge("config", "models")  # circular
    deps.add_vertex("scripts")

    print("Depth-first over every component:")
    dfs = DepthFirstIterator(deps)
    dfs.add_traversal_listener(ComponentPrinter())
    for _ in dfs:
        pass

    detector = CycleDetector(deps)
    print(f"Has cycles: {detector.detect_cycles()}")
    print(f"Modules on cycles: {sorted(detector.find_cycles())}")
    print(f"'views' on a cycle: {detector.detect_cycles_containing_vertex('views')}")
    print()


def example_road_network():
    """Example: Shortest and radius-limited routes on a weighted road map."""
    print("=" * 60)
    print("Example 2: Road network")
    print("=" * 60)

    roads = Graph()
    roads.add_edge("Depot", "Mill", 4.0)
    roads.add_edge("Depot", "Ford", 2.0)
    roads.add_edge("Ford", "Mill", 1.0)
    roads.add_edge("Mill", "Harbor", 5.0)
    roads.add_edge("Ford", "Harbor", 8.0)

    print(f"Breadth-first from Depot: {list(BreadthFirstIterator(roads, 'Depot'))}")

    route = DijkstraShortestPath(roads, "Depot", "Harbor")
    print(f"Shortest route: {' -> '.join(route.path_vertices)}")
    print(f"Route length:   {route.path_length}")

    limited = DijkstraShortestPath(roads, "Depot", "Harbor", radius=6.0)
    print(f"Within radius 6: {limited.path_vertices}")
    print()


if __name__ == "__main__":
    example_dependency_cycles()
    example_road_network()
    print("All examples completed.")
