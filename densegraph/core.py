"""
Core graph data structures.

Provides Graph (undirected) and DiGraph (directed), both backed by a
NodeStore of labels and a dense AdjacencyMatrix of weights. Nodes are
addressed by their zero-based insertion position; removing a node shifts
later indices down by one.

Graph mirrors every edge write into (v, u) so that the matrix stays
symmetric. DiGraph treats (u, v) and (v, u) independently.

Complexity:
    - add_node: O(1) amortized
    - add_edge / remove_edge / has_edge: O(1) amortized
    - neighbors / degree: O(V)
    - edges / degrees: O(V^2)
    - Memory: O(V^2)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from . import algebra, export, shortest, traversal
from .diagnostics import assert_sentinel_consistent, assert_symmetric, is_debug_enabled
from .logging import get_logger
from .storage import NO_EDGE, AdjacencyMatrix, NodeStore

logger = get_logger(__name__)

UNIT_WEIGHT = 1.0

Edge = Tuple[int, int, float]


class BaseGraph(ABC):
    """
    State and behaviour shared by Graph and DiGraph.

    Attributes:
        node_store: Labels in index order.
        matrix: Edge weights; NO_EDGE (inf) where no edge exists.
    """

    directed: bool = False

    def __init__(self) -> None:
        self.node_store = NodeStore()
        self.matrix = AdjacencyMatrix(dense_limit=0)

    def is_directed(self) -> bool:
        return self.directed

    @property
    def node_count(self) -> int:
        return len(self.node_store)

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.node_count}, "
            f"edges={self.number_of_edges()})"
        )

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------
    def add_node(self, label: Any) -> None:
        """Append a node; its index is the previous node count."""
        self.node_store.append(label)
        self.matrix.reserve(self.node_count)

    def add_nodes_from(self, labels: Iterable[Any]) -> None:
        self.node_store.extend(labels)
        self.matrix.reserve(self.node_count)

    def remove_node(self, idx: int) -> Any:
        """
        Remove the node at idx and return its label.

        Later nodes shift down by one index. The adjacency matrix is left
        as is: rows and columns are not compacted, so edges stored for
        later indices stay where they were.

        Raises:
            IndexError: If idx is not in [0, node_count).
        """
        label = self.node_store.pop(idx)
        logger.debug(
            "Removed node %d; adjacency matrix keeps size %d", idx, self.matrix.size
        )
        return label

    def remove_nodes_from(self, indices: Iterable[int]) -> List[Any]:
        """
        Apply remove_node to each index in the given order.

        Indices are interpreted after the previous removals have shifted
        the node positions; pass them in descending order to remove the
        nodes that were at those positions originally.
        """
        return [self.remove_node(idx) for idx in indices]

    def nodes(self) -> List[Any]:
        """Return node labels in index order."""
        return self.node_store.labels()

    def get_node(self, idx: int) -> Optional[Any]:
        """Return the label at idx, or None if idx is out of range."""
        return self.node_store.get(idx)

    def has_node(self, label: Any) -> bool:
        """True iff some node's label equals label."""
        return label in self.node_store

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------
    def _store(self, u: int, v: int, weight: float) -> None:
        self.matrix.set(u, v, weight)

    def _erase(self, u: int, v: int) -> None:
        self.matrix.clear(u, v)

    def _check_invariants(self) -> None:
        if is_debug_enabled():
            assert_sentinel_consistent(self)

    def add_edge(self, u: int, v: int, weight: float = UNIT_WEIGHT) -> None:
        """
        Add (or overwrite) the edge (u, v).

        Indices are not checked against node_count: an index at or beyond
        it is stored anyway but is unreachable through node-indexed
        queries, and a warning is logged.

        Raises:
            IndexError: If u or v is negative.
        """
        n = self.node_count
        if u >= n or v >= n:
            logger.warning(
                "Edge (%s, %s) references a node index beyond node count %d", u, v, n
            )
        self._store(u, v, float(weight))
        self._check_invariants()

    def add_edges_from(
        self, pairs: Iterable[Tuple[int, int]], weight: float = UNIT_WEIGHT
    ) -> None:
        for u, v in pairs:
            self.add_edge(u, v, weight)

    def add_weighted_edges_from(self, triples: Iterable[Edge]) -> None:
        for u, v, weight in triples:
            self.add_edge(u, v, weight)

    def remove_edge(self, u: int, v: int) -> None:
        """Remove the edge (u, v); a missing edge is ignored."""
        self._erase(u, v)
        self._check_invariants()

    def clear(self) -> None:
        """Remove every node and edge."""
        self.node_store = NodeStore()
        self.matrix = AdjacencyMatrix(dense_limit=0)

    def has_edge(self, u: int, v: int) -> bool:
        """
        True iff (u, v) holds a weight below the NO_EDGE sentinel.

        Bounds are checked against the allocated matrix, not node_count;
        out-of-range indices give False.
        """
        return self.matrix.contains(u, v)

    def weight(self, u: int, v: int) -> float:
        """Stored weight of (u, v), NO_EDGE if there is no edge."""
        return self.matrix.get(u, v)

    def adjacency_matrix(self, size: Optional[int] = None) -> np.ndarray:
        """
        Copy of the weight matrix restricted (or padded) to size x size.

        Args:
            size: Side length; defaults to node_count.
        """
        if size is None:
            size = self.node_count
        return self.matrix.to_array(size)

    def _edge_mask(self) -> np.ndarray:
        return self.adjacency_matrix() < NO_EDGE

    def edges(self) -> List[Edge]:
        """All edges between nodes as (u, v, weight), in row-major order."""
        weights = self.adjacency_matrix()
        rows, cols = np.nonzero(weights < NO_EDGE)
        return [(int(u), int(v), float(weights[u, v])) for u, v in zip(rows, cols)]

    def number_of_edges(self) -> int:
        return len(self.edges())

    def edges_from(self, idx: int) -> List[Edge]:
        """Edges (idx, v, weight) leaving idx."""
        row = self.matrix.row(idx, self.node_count)
        return [(idx, int(v), float(row[v])) for v in np.flatnonzero(row < NO_EDGE)]

    def edges_to(self, idx: int) -> List[Edge]:
        """Edges (u, idx, weight) entering idx."""
        col = self.matrix.column(idx, self.node_count)
        return [(int(u), idx, float(col[u])) for u in np.flatnonzero(col < NO_EDGE)]

    def _sources_of(self, idx: int) -> List[int]:
        col = self.matrix.column(idx, self.node_count)
        return np.flatnonzero(col < NO_EDGE).tolist()

    def _targets_of(self, idx: int) -> List[int]:
        row = self.matrix.row(idx, self.node_count)
        return np.flatnonzero(row < NO_EDGE).tolist()

    @abstractmethod
    def degree(self, idx: int) -> int:
        """Number of edges at idx."""

    @abstractmethod
    def degrees(self) -> List[int]:
        """Degree of every node, in index order."""

    @abstractmethod
    def neighbors(self, idx: int) -> List[int]:
        """Indices adjacent to idx."""

    def copy(self):
        """Independent copy with the same labels and weights."""
        clone = type(self)()
        clone.add_nodes_from(self.nodes())
        clone.matrix = self.matrix.copy()
        return clone

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------
    def is_weighted(self) -> bool:
        """True iff some stored weight differs from the unit weight 1.0."""
        return bool(np.any(self.matrix.stored_weights() != UNIT_WEIGHT))

    def is_complete(self) -> bool:
        """
        True iff every ordered pair (i, j), i != j, inside the populated
        matrix region holds the unit weight.

        This is a property of the populated matrix region: nodes that never
        took part in an edge are not considered.
        """
        return self.matrix.off_diagonal_all_equal(UNIT_WEIGHT)

    def is_connected(self) -> bool:
        return traversal.is_connected(self)

    def is_bipartite(self) -> bool:
        return traversal.is_bipartite(self)

    def is_tree(self) -> bool:
        return traversal.is_tree(self)

    def is_dag(self) -> bool:
        return traversal.is_dag(self)

    def is_cyclic(self) -> bool:
        return traversal.is_cyclic(self)

    def is_eulerian(self) -> bool:
        return traversal.is_eulerian(self)

    # ------------------------------------------------------------------
    # Shortest paths
    # ------------------------------------------------------------------
    def single_source_dijkstra(self, source: int) -> Tuple[List[float], List[List[int]]]:
        return shortest.single_source_dijkstra(self, source)

    def dijkstra_path(self, source: int, target: int) -> List[int]:
        return shortest.dijkstra_path(self, source, target)

    def dijkstra_path_length(self, source: int, target: int) -> float:
        return shortest.dijkstra_path_length(self, source, target)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    def union(self, other: "BaseGraph"):
        return algebra.union(self, other)

    def intersection(self, other: "BaseGraph"):
        return algebra.intersection(self, other)

    def difference(self, other: "BaseGraph"):
        return algebra.difference(self, other)

    def symmetric_difference(self, other: "BaseGraph"):
        return algebra.symmetric_difference(self, other)

    def complement(self):
        return algebra.complement(self)

    def reverse(self):
        return algebra.reverse(self)

    def transitive_closure(self):
        return algebra.transitive_closure(self)

    def subgraph(self, indices: Iterable[int]):
        return algebra.subgraph(self, indices)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def to_dot(self) -> str:
        return export.to_dot(self)


class Graph(BaseGraph):
    """
    Undirected weighted graph.

    Every edge write is mirrored, so has_edge(u, v) == has_edge(v, u) at
    all times.

    Example:
        >>> g = Graph()
        >>> g.add_nodes_from(range(6))
        >>> g.add_edges_from([(1, 2), (2, 5)])
        >>> g.neighbors(2)
        [1, 5]
    """

    directed = False

    def _store(self, u: int, v: int, weight: float) -> None:
        self.matrix.set(u, v, weight)
        self.matrix.set(v, u, weight)

    def _erase(self, u: int, v: int) -> None:
        self.matrix.clear(u, v)
        self.matrix.clear(v, u)

    def _check_invariants(self) -> None:
        if is_debug_enabled():
            assert_sentinel_consistent(self)
            assert_symmetric(self)

    def edges(self) -> List[Edge]:
        """All edges as (u, v, weight) with u <= v, each listed once."""
        return [(u, v, w) for u, v, w in super().edges() if u <= v]

    def neighbors(self, idx: int) -> List[int]:
        """Nodes i with an edge between i and idx, ascending."""
        return self._sources_of(idx)

    def degree(self, idx: int) -> int:
        """Number of incident edges; a self-loop counts once."""
        return len(self.neighbors(idx))

    def degrees(self) -> List[int]:
        return self._edge_mask().sum(axis=1).astype(int).tolist()


class DiGraph(BaseGraph):
    """
    Directed weighted graph.

    Example:
        >>> g = DiGraph()
        >>> g.add_nodes_from(range(6))
        >>> g.add_edges_from([(1, 2), (2, 5)])
        >>> g.out_degree(2), g.in_degree(2)
        (1, 1)
    """

    directed = True

    def predecessors(self, idx: int) -> List[int]:
        """Nodes with an edge into idx, ascending."""
        return self._sources_of(idx)

    def successors(self, idx: int) -> List[int]:
        """Nodes with an edge out of idx, ascending."""
        return self._targets_of(idx)

    def neighbors(self, idx: int) -> List[int]:
        """Same as successors."""
        return self.successors(idx)

    def all_neighbors(self, idx: int) -> List[int]:
        """Predecessors and successors of idx, ascending and deduplicated."""
        return sorted(set(self.predecessors(idx)) | set(self.successors(idx)))

    def in_degree(self, idx: int) -> int:
        return len(self.predecessors(idx))

    def out_degree(self, idx: int) -> int:
        return len(self.successors(idx))

    def degree(self, idx: int) -> int:
        """in_degree + out_degree; a self-loop counts twice."""
        return self.in_degree(idx) + self.out_degree(idx)

    def degrees(self) -> List[int]:
        mask = self._edge_mask()
        return (mask.sum(axis=0) + mask.sum(axis=1)).astype(int).tolist()

    def is_strongly_connected(self) -> bool:
        return traversal.is_strongly_connected(self)

    def sub_digraph(self, indices: Iterable[int]) -> "DiGraph":
        return algebra.subgraph(self, indices)
