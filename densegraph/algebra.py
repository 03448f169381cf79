"""
Graph algebra: operators that build a new graph from one or two operands.

Every operator returns a fresh graph of the operand's class carrying the
first operand's labels; operands are never mutated. Binary operators align
nodes by index (node i of one operand is the same entity as node i of the
other) over the first operand's node range. No matching by label is done.

Weights: union keeps the first operand's weight where it has the edge,
otherwise the second's. Intersection and difference keep the first
operand's weight, symmetric difference the weight of whichever operand has
the edge. Reverse and subgraph carry weights over. Complement and
transitive closure produce unit-weight edges.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, TypeVar

import numpy as np

from .storage import NO_EDGE
from .utils import check_indices

if TYPE_CHECKING:
    from .core import BaseGraph

G = TypeVar("G", bound="BaseGraph")


def _empty_like(graph: G) -> G:
    result = type(graph)()
    result.add_nodes_from(graph.nodes())
    return result


def _check_compatible(graph: "BaseGraph", other: "BaseGraph") -> None:
    if graph.is_directed() != other.is_directed():
        raise ValueError(
            "Cannot combine a directed and an undirected graph: "
            f"{type(graph).__name__} and {type(other).__name__}"
        )


def _combine(
    graph: G, other: "BaseGraph", keep: Callable[[np.ndarray, np.ndarray], np.ndarray]
) -> G:
    """Shared body of the binary operators.

    keep(a, b) receives the two n x n weight matrices and returns the
    weights of the result, NO_EDGE where no edge is kept.
    """
    _check_compatible(graph, other)
    n = graph.node_count
    weights = keep(graph.adjacency_matrix(), other.adjacency_matrix(n))

    result = _empty_like(graph)
    for i, j in zip(*np.nonzero(weights < NO_EDGE)):
        result.add_edge(int(i), int(j), float(weights[i, j]))
    return result


def union(graph: G, other: "BaseGraph") -> G:
    """Edge (i, j) iff either operand has it."""
    return _combine(graph, other, lambda a, b: np.where(a < NO_EDGE, a, b))


def intersection(graph: G, other: "BaseGraph") -> G:
    """Edge (i, j) iff both operands have it."""
    return _combine(
        graph, other, lambda a, b: np.where((a < NO_EDGE) & (b < NO_EDGE), a, NO_EDGE)
    )


def difference(graph: G, other: "BaseGraph") -> G:
    """Edge (i, j) iff graph has it and other does not."""
    return _combine(
        graph, other, lambda a, b: np.where((a < NO_EDGE) & ~(b < NO_EDGE), a, NO_EDGE)
    )


def symmetric_difference(graph: G, other: "BaseGraph") -> G:
    """Edge (i, j) iff exactly one operand has it."""

    def keep(a: np.ndarray, b: np.ndarray) -> np.ndarray:
        in_a = a < NO_EDGE
        in_b = b < NO_EDGE
        return np.where(in_a & ~in_b, a, np.where(in_b & ~in_a, b, NO_EDGE))

    return _combine(graph, other, keep)


def complement(graph: G) -> G:
    """Unit-weight edge (i, j) for every i != j with no edge in graph."""
    n = graph.node_count
    result = _empty_like(graph)
    for i in range(n):
        for j in range(n):
            if i != j and not graph.has_edge(i, j):
                result.add_edge(i, j)
    return result


def reverse(graph: G) -> G:
    """Edge (j, i) for every edge (i, j); a plain copy for undirected graphs."""
    n = graph.node_count
    result = _empty_like(graph)
    for i in range(n):
        for j in range(n):
            if graph.has_edge(i, j):
                result.add_edge(j, i, graph.weight(i, j))
    return result


def transitive_closure(graph: G) -> G:
    """
    Reachability closure: unit-weight edge (i, j) iff j is reachable from i.

    Seeded with the existing edges, then for each intermediate k, (i, j) is
    added whenever (i, k) and (k, j) hold.

    Complexity: O(V^3).
    """
    n = graph.node_count
    reach = graph.adjacency_matrix() < NO_EDGE
    for k in range(n):
        reach |= np.outer(reach[:, k], reach[k, :])

    result = _empty_like(graph)
    for i, j in zip(*np.nonzero(reach)):
        result.add_edge(int(i), int(j))
    return result


def subgraph(graph: G, indices: Iterable[int]) -> G:
    """
    Induced subgraph on the selected node indices.

    Node k of the result is graph node indices[k]; edges between selected
    nodes are kept, renumbered to the new positions.

    Raises:
        IndexError: If an index is outside [0, node_count).

    Example:
        >>> g = Graph()
        >>> g.add_nodes_from(["a", "b", "c"])
        >>> g.add_edge(0, 2)
        >>> sub = subgraph(g, [2, 0])
        >>> sub.nodes(), sub.has_edge(0, 1)
        (['c', 'a'], True)
    """
    selected = check_indices(indices, graph.node_count)

    result = type(graph)()
    result.add_nodes_from(graph.get_node(idx) for idx in selected)
    for a, i in enumerate(selected):
        for b, j in enumerate(selected):
            if graph.has_edge(i, j):
                result.add_edge(a, b, graph.weight(i, j))
    return result
