"""
Utility functions for graph algorithms.

Provides helpers for index validation and path reconstruction.
"""

from typing import Iterable, List, Optional


def reconstruct_path(parent: List[Optional[int]], target: int) -> List[int]:
    """
    Reconstruct the path ending at target from a parent list.

    parent[i] is the previous node on the shortest path to i, or None for
    the source and for unreached nodes. The caller decides reachability
    (typically from the distance list); this function only follows the
    parent chain.

    Args:
        parent: Parent pointers indexed by node.
        target: Node to reconstruct the path to.

    Returns:
        List of node indices from the chain's root to target (inclusive).

    Raises:
        ValueError: If the parent chain contains a cycle.

    Example:
        >>> reconstruct_path([None, 0, 1], 2)
        [0, 1, 2]
    """
    path = []
    seen = set()
    current: Optional[int] = target
    while current is not None:
        if current in seen:
            raise ValueError(f"Parent chain for node {target} contains a cycle")
        seen.add(current)
        path.append(current)
        current = parent[current]

    path.reverse()
    return path


def check_indices(indices: Iterable[int], node_count: int) -> List[int]:
    """
    Return indices as a list of ints, all within [0, node_count).

    Raises:
        IndexError: If any index is out of range.
    """
    checked = []
    for idx in indices:
        idx = int(idx)
        if not 0 <= idx < node_count:
            raise IndexError(f"node index out of range: {idx} (node count {node_count})")
        checked.append(idx)
    return checked
