"""Pytest configuration and shared fixtures for graphwalk tests.

This module provides:
- A deterministic numpy RNG fixture
- Factories for random directed and weighted graphs built from that RNG
- The directed graph used by the traversal scenario tests
"""

import os
from typing import Callable

import numpy as np
import pytest

from graphwalk.graphs import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This keeps random-graph tests reproducible while allowing override for
    debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def random_digraph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for random directed graphs on vertices 0..n-1.

    Each ordered pair (u, v), loops included, becomes an edge with
    probability ``p``.
    """

    def make(n: int = 10, p: float = 0.2) -> Graph:
        G = Graph(directed=True)
        for v in range(n):
            G.add_vertex(v)
        mask = rng.random((n, n)) < p
        for u, v in zip(*np.nonzero(mask)):
            G.add_edge(int(u), int(v))
        return G

    return make


@pytest.fixture
def random_weighted_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for random weighted graphs with integer-valued weights.

    Integer weights keep path sums exact so distance comparisons need no
    tolerance.
    """

    def make(n: int = 10, p: float = 0.3, directed: bool = False) -> Graph:
        G = Graph(directed=directed)
        for v in range(n):
            G.add_vertex(v)
        mask = rng.random((n, n)) < p
        weights = rng.integers(1, 10, size=(n, n))
        for u, v in zip(*np.nonzero(mask)):
            u, v = int(u), int(v)
            if u == v or G.has_edge(u, v):
                continue
            G.add_edge(u, v, float(weights[u, v]))
        return G

    return make


@pytest.fixture
def scenario_graph() -> Graph:
    """Directed graph on vertices "1".."9" plus an isolated "orphan"."""
    G = Graph(directed=True)
    for v in ["1", "2", "3", "4", "5", "6", "7", "8", "9", "orphan"]:
        G.add_vertex(v)
    for u, v in [
        ("1", "2"),
        ("1", "3"),
        ("2", "4"),
        ("3", "5"),
        ("3", "6"),
        ("5", "6"),
        ("5", "7"),
        ("6", "1"),
        ("7", "8"),
        ("7", "9"),
        ("8", "2"),
        ("9", "4"),
    ]:
        G.add_edge(u, v)
    return G
