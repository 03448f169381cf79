"""Pytest configuration and shared fixtures for densegraph tests.

This module provides:
- A deterministic numpy RNG fixture for randomized graph tests
- A factory fixture building random Graph / DiGraph instances
- The small weighted example graphs used across test modules
"""

import os
from typing import Callable

import numpy as np
import pytest

from densegraph import DiGraph, Graph
from densegraph.diagnostics import is_debug_enabled, set_debug_enabled

SCENARIO_EDGES = [
    (0, 1, 1.0),
    (0, 2, 4.0),
    (1, 2, 2.0),
    (1, 3, 1.0),
    (2, 3, 1.0),
]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Keep debug mode changes from leaking between tests."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable:
    """Factory: random_graph(cls, n, p) -> graph with ~p edge density.

    Weights are drawn from {1.0, 2.0, 3.0}; self-loops are skipped.
    """

    def build(cls, n: int = 8, p: float = 0.3):
        g = cls()
        g.add_nodes_from(range(n))
        for i in range(n):
            for j in range(n):
                if i == j or (not g.is_directed() and j < i):
                    continue
                if rng.random() < p:
                    g.add_edge(i, j, float(rng.integers(1, 4)))
        return g

    return build


@pytest.fixture
def weighted_graph() -> Graph:
    """Undirected 4-node weighted example."""
    g = Graph()
    g.add_nodes_from([0, 1, 2, 3])
    g.add_weighted_edges_from(SCENARIO_EDGES)
    return g


@pytest.fixture
def weighted_digraph() -> DiGraph:
    """Directed 4-node weighted example."""
    g = DiGraph()
    g.add_nodes_from([0, 1, 2, 3])
    g.add_weighted_edges_from(SCENARIO_EDGES)
    return g


@pytest.fixture
def sparse_graph() -> Graph:
    """Six nodes, undirected edges (1, 2) and (2, 5)."""
    g = Graph()
    g.add_nodes_from(range(6))
    g.add_edges_from([(1, 2), (2, 5)])
    return g


@pytest.fixture
def sparse_digraph() -> DiGraph:
    """Six nodes, directed edges 1->2 and 2->5."""
    g = DiGraph()
    g.add_nodes_from(range(6))
    g.add_edges_from([(1, 2), (2, 5)])
    return g
