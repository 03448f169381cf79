"""
Single-source shortest paths on the dense adjacency matrix.

Dijkstra's algorithm in its array form: each of the V rounds picks the
closest unvisited node by linear scan and relaxes its matrix row, for
O(V^2) total with no priority queue. Weights must be non-negative; this is
not validated and negative weights give unspecified results.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np

from .logging import get_logger
from .utils import reconstruct_path

if TYPE_CHECKING:
    from .core import BaseGraph

logger = get_logger(__name__)


def single_source_dijkstra(
    graph: "BaseGraph", source: int
) -> Tuple[List[float], List[List[int]]]:
    """
    Shortest distances and paths from source to every node.

    Args:
        graph: Graph or DiGraph with non-negative weights.
        source: Source node index.

    Returns:
        Tuple of:
        - dist: dist[i] is the shortest distance from source to i (inf if
          unreachable)
        - paths: paths[i] lists node indices from source to i, empty if
          unreachable

        If source is not in [0, node_count), every distance is inf and
        every path is empty.

    Complexity: O(V^2) where V is the node count.

    Example:
        >>> g = DiGraph()
        >>> g.add_nodes_from(range(3))
        >>> g.add_edge(0, 1, 1.0)
        >>> g.add_edge(1, 2, 2.0)
        >>> dist, paths = single_source_dijkstra(g, 0)
        >>> dist
        [0.0, 1.0, 3.0]
        >>> paths[2]
        [0, 1, 2]
    """
    n = graph.node_count
    if not 0 <= source < n:
        logger.debug("Dijkstra source %s outside [0, %d)", source, n)
        return [math.inf] * n, [[] for _ in range(n)]

    weights = graph.adjacency_matrix()
    dist = np.full(n, math.inf)
    visited = np.zeros(n, dtype=bool)
    parent: List[Optional[int]] = [None] * n
    dist[source] = 0.0

    for _ in range(n):
        # Closest unvisited node, lowest index on ties
        u = -1
        best = math.inf
        for i in range(n):
            if not visited[i] and dist[i] < best:
                best = dist[i]
                u = i
        if u < 0:
            break
        visited[u] = True

        row = weights[u]
        for v in range(n):
            if visited[v] or not row[v] < math.inf:
                continue
            candidate = dist[u] + row[v]
            if candidate < dist[v]:
                dist[v] = candidate
                parent[v] = u

    distances = [float(d) for d in dist]
    paths = [
        reconstruct_path(parent, i) if distances[i] < math.inf else []
        for i in range(n)
    ]
    return distances, paths


def dijkstra_path(graph: "BaseGraph", source: int, target: int) -> List[int]:
    """
    Shortest path from source to target as a list of node indices.

    Returns an empty list when target is unreachable or either index is
    out of range.

    Example:
        >>> dijkstra_path(g, 0, 2)
        [0, 1, 2]
    """
    _, paths = single_source_dijkstra(graph, source)
    if not 0 <= target < len(paths):
        return []
    return paths[target]


def dijkstra_path_length(graph: "BaseGraph", source: int, target: int) -> float:
    """Shortest distance from source to target (inf if unreachable)."""
    dist, _ = single_source_dijkstra(graph, source)
    if not 0 <= target < len(dist):
        return math.inf
    return dist[target]
