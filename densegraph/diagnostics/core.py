"""Invariant checks for graph storage."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from densegraph.core import BaseGraph


def is_symmetric(graph: "BaseGraph") -> bool:
    """
    Check whether the stored weight at (i, j) equals the one at (j, i).

    Every stored cell is checked, including cells beyond the node count.

    Parameters
    ----------
    graph:
        Graph or DiGraph.

    Returns
    -------
    bool
        True if the weight matrix equals its transpose.
    """
    return not graph.matrix.asymmetric_cells()


def assert_symmetric(graph: "BaseGraph") -> None:
    """
    Assert the undirected mirror invariant.

    Raises
    ------
    ValueError
        If some (i, j) and (j, i) hold different weights.
    """
    cells = graph.matrix.asymmetric_cells()
    if not cells:
        return
    pairs = cells[:5]
    raise ValueError(f"Adjacency matrix is not symmetric at {pairs}")


def assert_sentinel_consistent(graph: "BaseGraph") -> None:
    """
    Assert that no cell holds NaN or -inf.

    Positive infinity is the only non-finite value allowed; it marks a
    missing edge.

    Raises
    ------
    ValueError
        If a NaN or negative infinity is stored.
    """
    cells = graph.matrix.invalid_cells()
    if cells:
        pairs = cells[:5]
        raise ValueError(f"Adjacency matrix holds invalid weights at {pairs}")
