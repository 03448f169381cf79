"""
Reachability exploration and the structural predicates built on it.

Every traversal-based predicate runs the same depth-first exploration:
a LIFO stack seeded with node 0, popping the most recent index, marking it
visited and pushing its unvisited neighbours. Predicates differ only in the
neighbourhood they explore and in how they judge the outcome.

Because exploration always starts at node 0, the predicates test
reachability from node 0 rather than general multi-component properties.
In particular ``is_cyclic`` reports True when some node is unreachable from
node 0, and ``is_tree`` / ``is_dag`` share one narrow contract. Callers
that need the textbook definitions should not rely on these names.

An empty graph is never explored: it is vacuously connected, bipartite,
a tree, a DAG and Eulerian, and it is not cyclic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional

if TYPE_CHECKING:
    from .core import BaseGraph

Adjacent = Callable[[int], List[int]]
EdgeVisitor = Callable[[int, int], bool]


@dataclass
class Exploration:
    """
    Outcome of one exploration from node 0.

    Attributes:
        visited: visited[i] is True iff node i was reached.
        order: Nodes in the order they were marked visited.
        aborted: True if an edge visitor rejected an edge.
    """

    visited: List[bool]
    order: List[int]
    aborted: bool = False

    @property
    def all_visited(self) -> bool:
        return all(self.visited)


def explore(
    node_count: int, adjacent: Adjacent, on_edge: Optional[EdgeVisitor] = None
) -> Exploration:
    """
    Depth-first exploration from node 0.

    Args:
        node_count: Number of nodes; indices 0..node_count-1 are explored.
        adjacent: Returns the neighbour indices of a node.
        on_edge: Optional callback invoked as on_edge(u, v) for every edge
            examined while expanding u. Returning False stops the
            exploration and marks the result as aborted.

    Returns:
        Exploration with the visited markers and visitation order.

    Complexity: O(V^2) on the dense matrix (each expansion scans a row).

    Example:
        >>> adj = {0: [1], 1: [0], 2: []}
        >>> explore(3, adj.__getitem__).visited
        [True, True, False]
    """
    visited = [False] * node_count
    order: List[int] = []
    if node_count == 0:
        return Exploration(visited=visited, order=order)

    stack = [0]
    while stack:
        u = stack.pop()
        if visited[u]:
            continue
        visited[u] = True
        order.append(u)

        for v in adjacent(u):
            if on_edge is not None and not on_edge(u, v):
                return Exploration(visited=visited, order=order, aborted=True)
            if not visited[v]:
                stack.append(v)

    return Exploration(visited=visited, order=order)


def _forward(graph: "BaseGraph") -> Adjacent:
    """Neighbourhood following edge direction (successors on digraphs)."""
    if graph.is_directed():
        return graph.successors
    return graph.neighbors


def _undirected(graph: "BaseGraph") -> Adjacent:
    """Neighbourhood ignoring edge direction."""
    if graph.is_directed():
        return graph.all_neighbors
    return graph.neighbors


def is_connected(graph: "BaseGraph") -> bool:
    """
    True iff every node is reachable from node 0, ignoring edge direction.

    Example:
        >>> g = Graph()
        >>> g.add_nodes_from("abc")
        >>> g.add_edges_from([(0, 1), (1, 2)])
        >>> is_connected(g)
        True
    """
    return explore(graph.node_count, _undirected(graph)).all_visited


def is_strongly_connected(graph: "BaseGraph") -> bool:
    """True iff every node is reachable from node 0 along edge direction."""
    return explore(graph.node_count, _forward(graph)).all_visited


def is_cyclic(graph: "BaseGraph") -> bool:
    """
    True iff some node is NOT reachable from node 0 along edge direction.

    This is the library's historical contract and is not a general cycle
    test: a cyclic graph in which node 0 reaches everything reports False.
    """
    if graph.node_count == 0:
        return False
    return not explore(graph.node_count, _forward(graph)).all_visited


def _reachable_along_existing_edges(graph: "BaseGraph") -> bool:
    result = explore(graph.node_count, _forward(graph), on_edge=graph.has_edge)
    return not result.aborted and result.all_visited


def is_tree(graph: "BaseGraph") -> bool:
    """
    True iff node 0 reaches every node and each discovery edge exists.

    Note: acyclicity is not checked; see the module docstring.
    """
    return _reachable_along_existing_edges(graph)


def is_dag(graph: "BaseGraph") -> bool:
    """
    Same contract as is_tree.

    Note: this does not detect directed cycles; see the module docstring.
    """
    return _reachable_along_existing_edges(graph)


def is_bipartite(graph: "BaseGraph") -> bool:
    """
    True iff the nodes reachable from node 0 can be 2-coloured.

    Colours are assigned while exploring, ignoring edge direction; an edge
    between two nodes of the same colour (including a self-loop) is a clash.
    """
    n = graph.node_count
    if n == 0:
        return True

    color: List[Optional[int]] = [None] * n
    color[0] = 0

    def paint(u: int, v: int) -> bool:
        if color[v] is None:
            color[v] = 1 - color[u]
            return True
        return color[v] != color[u]

    return not explore(n, _undirected(graph), on_edge=paint).aborted


def is_eulerian(graph: "BaseGraph") -> bool:
    """
    Degree-counting Eulerian rule.

    - No odd-degree node: True.
    - One or two odd-degree nodes: True iff each of them has degree 1.
    - More than two odd-degree nodes: False.

    Connectivity is not considered.
    """
    degrees = graph.degrees()
    odd = [d for d in degrees if d % 2 == 1]
    if not odd:
        return True
    if len(odd) <= 2:
        return all(d == 1 for d in odd)
    return False
