"""Tests for core graph data structures."""

import pytest

from graphwalk.graphs import Edge, Graph, GraphListener


class RecordingListener(GraphListener):
    """Collects structural change notifications."""

    def __init__(self):
        self.events = []

    def vertex_added(self, vertex):
        self.events.append(("vertex_added", vertex))

    def vertex_removed(self, vertex):
        self.events.append(("vertex_removed", vertex))

    def edge_added(self, edge):
        self.events.append(("edge_added", edge))

    def edge_removed(self, edge):
        self.events.append(("edge_removed", edge))


class TestEdge:
    """Tests for the Edge type."""

    def test_edge_fields(self):
        """Test edge endpoints and default weight."""
        e = Edge("A", "B")
        assert e.source == "A"
        assert e.target == "B"
        assert e.weight == 1.0

    def test_edges_compare_by_identity(self):
        """Test that parallel edges are distinct objects."""
        e1 = Edge("A", "B", 2.0)
        e2 = Edge("A", "B", 2.0)
        assert e1 != e2
        assert len({e1, e2}) == 2
        assert e1 == e1


class TestGraph:
    """Tests for the Graph class."""

    def test_empty_graph(self):
        """Test empty graph creation."""
        G = Graph()
        assert G.directed is False
        assert len(G.vertices()) == 0
        assert len(G.edges()) == 0
        assert len(G) == 0

    def test_add_vertex(self):
        """Test adding vertices."""
        G = Graph()
        assert G.add_vertex("A") is True
        assert G.add_vertex("B") is True
        assert G.add_vertex("A") is False
        assert G.vertices() == ["A", "B"]
        assert "A" in G
        assert "Z" not in G

    def test_add_edge_undirected(self):
        """Test that undirected edges connect both ways."""
        G = Graph(directed=False)
        e = G.add_edge("A", "B", 3.0)

        assert G.vertices() == ["A", "B"]
        assert G.edges() == [e]
        assert G.has_edge("A", "B")
        assert G.has_edge("B", "A")
        assert G.edges_of("A") == [e]
        assert G.edges_of("B") == [e]
        assert G.edge_weight(e) == 3.0

    def test_add_edge_directed(self):
        """Test that directed edges connect one way."""
        G = Graph(directed=True)
        e = G.add_edge("A", "B")

        assert G.has_edge("A", "B")
        assert not G.has_edge("B", "A")
        assert G.edges_of("A") == [e]
        assert G.edges_of("B") == []
        assert G.incoming_edges_of("B") == [e]
        assert G.get_edge("A", "B") is e
        assert G.get_edge("B", "A") is None

    def test_has_edge_unknown_vertices(self):
        """Test that has_edge is False rather than an error for unknown vertices."""
        G = Graph()
        G.add_vertex("A")
        assert not G.has_edge("A", "Z")
        assert not G.has_edge("Z", "A")

    def test_deterministic_edges_of(self):
        """Test that incident edges are sorted by opposite endpoint."""
        G = Graph(directed=True)
        G.add_edge("A", "Z")
        G.add_edge("A", "M")
        G.add_edge("A", "B")

        targets = [e.target for e in G.edges_of("A")]
        assert targets == ["B", "M", "Z"]

    def test_edges_of_follows_mutation(self):
        """Test that the sorted incident edges track additions and removals."""
        G = Graph()
        ab = G.add_edge("A", "B")
        assert G.edges_of("A") == [ab]

        ac = G.add_edge("C", "A")
        assert G.edges_of("A") == [ab, ac]

        G.remove_edge(ab)
        assert G.edges_of("A") == [ac]
        assert G.edges_of("B") == []

        G.edges_of("A").clear()
        assert G.edges_of("A") == [ac]

    def test_edge_lookup_after_mutation(self):
        """Test has_edge and get_all_edges as parallel edges come and go."""
        G = Graph(allow_multiple_edges=True)
        e1 = G.add_edge("A", "B")
        e2 = G.add_edge("B", "A")
        assert G.get_all_edges("A", "B") == [e1, e2]
        assert G.get_all_edges("B", "A") == [e1, e2]

        G.remove_edge(e1)
        assert G.get_all_edges("A", "B") == [e2]
        assert G.has_edge("A", "B")

        G.remove_edge(e2)
        assert not G.has_edge("A", "B")
        assert not G.has_edge("B", "A")
        assert G.get_edge("A", "B") is None

    def test_directed_lookup_ignores_reverse(self):
        """Test that directed edge lookup only matches the given direction."""
        G = Graph(directed=True)
        e = G.add_edge("A", "B")
        assert G.get_all_edges("A", "B") == [e]
        assert G.get_all_edges("B", "A") == []
        assert not G.has_edge("B", "A")
        assert not G.has_edge("A", "missing")

    def test_edges_of_unknown_vertex(self):
        """Test that edges_of raises KeyError for unknown vertices."""
        G = Graph()
        with pytest.raises(KeyError):
            G.edges_of("A")

    def test_multiple_edges_disallowed(self):
        """Test that parallel edges are rejected by default."""
        G = Graph()
        G.add_edge("A", "B")
        with pytest.raises(ValueError, match="already exists"):
            G.add_edge("B", "A")

    def test_multiple_edges_allowed(self):
        """Test parallel edges when explicitly allowed."""
        G = Graph(directed=True, allow_multiple_edges=True)
        e1 = G.add_edge("A", "B", 1.0)
        e2 = G.add_edge("A", "B", 2.0)
        assert G.get_all_edges("A", "B") == [e1, e2]
        assert G.degree_of("A") == 2

    def test_loops(self):
        """Test self-loops allowed by default and rejected on request."""
        G = Graph(directed=True)
        loop = G.add_edge("A", "A")
        assert G.has_edge("A", "A")
        assert G.edges_of("A") == [loop]

        H = Graph(allow_loops=False)
        with pytest.raises(ValueError, match="Loops"):
            H.add_edge("A", "A")

    def test_undirected_loop_listed_once(self):
        """Test that an undirected self-loop appears once among incident edges."""
        G = Graph()
        loop = G.add_edge("A", "A")
        assert G.edges_of("A") == [loop]
        assert G.opposite_vertex(loop, "A") == "A"

    def test_opposite_vertex(self):
        """Test opposite endpoint lookup."""
        G = Graph()
        e = G.add_edge("A", "B")
        assert G.opposite_vertex(e, "A") == "B"
        assert G.opposite_vertex(e, "B") == "A"
        with pytest.raises(ValueError, match="not an endpoint"):
            G.opposite_vertex(e, "C")

    def test_remove_edge(self):
        """Test edge removal."""
        G = Graph()
        e = G.add_edge("A", "B")
        G.remove_edge(e)
        assert not G.has_edge("A", "B")
        assert G.vertices() == ["A", "B"]
        with pytest.raises(KeyError):
            G.remove_edge(e)

    def test_remove_vertex_removes_touching_edges(self):
        """Test that removing a vertex drops every edge touching it."""
        G = Graph(directed=True)
        G.add_edge("A", "B")
        G.add_edge("B", "C")
        G.add_edge("C", "B")
        G.add_edge("B", "B")

        G.remove_vertex("B")

        assert G.vertices() == ["A", "C"]
        assert G.edges() == []
        assert G.edges_of("A") == []
        assert G.incoming_edges_of("C") == []

    def test_remove_unknown_vertex(self):
        """Test that removing an unknown vertex raises KeyError."""
        G = Graph()
        with pytest.raises(KeyError):
            G.remove_vertex("A")

    def test_from_edges(self):
        """Test construction from edge tuples."""
        G = Graph.from_edges(
            [("A", "B", 2.0), ("B", "C")], directed=True, vertices=["Z"]
        )
        assert G.vertices() == ["A", "B", "C", "Z"]
        assert [G.edge_weight(e) for e in G.edges()] == [2.0, 1.0]

    def test_edge_endpoints(self):
        """Test endpoint accessors."""
        G = Graph(directed=True)
        e = G.add_edge("A", "B")
        assert G.edge_endpoints(e) == ("A", "B")
        assert G.edge_source(e) == "A"
        assert G.edge_target(e) == "B"
        assert G.contains_edge(e)
        assert not G.contains_edge(Edge("A", "B"))


class TestGraphListener:
    """Tests for structural change notifications."""

    def test_add_notifications(self):
        """Test notifications for added vertices and edges."""
        G = Graph()
        listener = RecordingListener()
        G.add_listener(listener)

        e = G.add_edge("A", "B")

        assert listener.events == [
            ("vertex_added", "A"),
            ("vertex_added", "B"),
            ("edge_added", e),
        ]

    def test_remove_vertex_notifications(self):
        """Test that edge removals are notified before the vertex removal."""
        G = Graph()
        e = G.add_edge("A", "B")
        listener = RecordingListener()
        G.add_listener(listener)

        G.remove_vertex("A")

        assert listener.events == [("edge_removed", e), ("vertex_removed", "A")]

    def test_remove_listener(self):
        """Test that removed listeners are no longer notified."""
        G = Graph()
        listener = RecordingListener()
        G.add_listener(listener)
        G.remove_listener(listener)

        G.add_vertex("A")

        assert listener.events == []
        with pytest.raises(ValueError):
            G.remove_listener(listener)
