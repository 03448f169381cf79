"""
densegraph - in-memory weighted graphs on a dense adjacency matrix.

This package provides:
- Graph (undirected) and DiGraph (directed) with index-addressed nodes
- Structural predicates (connectivity, bipartiteness, Eulerian rule, ...)
- Dense O(V^2) single-source Dijkstra
- Graph algebra (union, intersection, complement, transitive closure, ...)
- DOT-like text export

Missing edges are represented by positive infinity, so zero and negative
weights remain valid edge weights.
"""

__version__ = "0.1.0"

from .algebra import (
    complement,
    difference,
    intersection,
    reverse,
    subgraph,
    symmetric_difference,
    transitive_closure,
    union,
)
from .core import UNIT_WEIGHT, BaseGraph, DiGraph, Graph
from .export import to_dot, write_dot
from .logging import configure_logging, get_logger, set_log_level
from .shortest import dijkstra_path, dijkstra_path_length, single_source_dijkstra
from .storage import NO_EDGE, AdjacencyMatrix, NodeStore
from .traversal import (
    explore,
    is_bipartite,
    is_connected,
    is_cyclic,
    is_dag,
    is_eulerian,
    is_strongly_connected,
    is_tree,
)
from .utils import reconstruct_path

__all__ = [
    "Graph",
    "DiGraph",
    "BaseGraph",
    "NodeStore",
    "AdjacencyMatrix",
    "NO_EDGE",
    "UNIT_WEIGHT",
    "explore",
    "is_connected",
    "is_strongly_connected",
    "is_bipartite",
    "is_tree",
    "is_dag",
    "is_cyclic",
    "is_eulerian",
    "single_source_dijkstra",
    "dijkstra_path",
    "dijkstra_path_length",
    "reconstruct_path",
    "union",
    "intersection",
    "difference",
    "symmetric_difference",
    "complement",
    "reverse",
    "transitive_closure",
    "subgraph",
    "to_dot",
    "write_dot",
    "get_logger",
    "set_log_level",
    "configure_logging",
]

# Example usage:
# from densegraph import Graph
#
# g = Graph()
# g.add_nodes_from(["a", "b", "c"])
# g.add_edge(0, 1, 2.0)
# g.add_edge(1, 2, 1.0)
# dist, paths = g.single_source_dijkstra(0)  # [0.0, 2.0, 3.0], [[0], [0, 1], [0, 1, 2]]
