"""
Node and edge storage: NodeStore and AdjacencyMatrix.

Nodes are kept in insertion order and addressed by their current position.
Edges live in a dense square numpy matrix of weights where the sentinel
``NO_EDGE`` (positive infinity) marks the absence of an edge, so zero and
negative weights stay representable.

The square grows geometrically and only for indices below the node count.
Cells at or beyond it (phantom edges) are kept out of band. Reads of cells
never written are not an error and report ``NO_EDGE``.

Complexity:
    - NodeStore.append: O(1) amortized
    - NodeStore.pop: O(V)
    - AdjacencyMatrix.get / contains / clear: O(1)
    - AdjacencyMatrix.set: O(1) amortized over a build of V nodes
    - Memory: O(V^2) for the square plus O(1) per phantom cell
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .logging import get_logger

logger = get_logger(__name__)

NO_EDGE = math.inf


def _check_index(idx: int) -> int:
    """Return idx as a plain int, raising IndexError if it is negative."""
    idx = int(idx)
    if idx < 0:
        raise IndexError(f"node index out of range: {idx}")
    return idx


class NodeStore:
    """
    Ordered collection of node labels.

    A node's index is its current position. Removing node k shifts every
    later node down by one, so indices denote position, not identity.
    """

    def __init__(self) -> None:
        self._labels: List[Any] = []

    def append(self, label: Any) -> None:
        self._labels.append(label)

    def extend(self, labels: Iterable[Any]) -> None:
        for label in labels:
            self.append(label)

    def pop(self, idx: int) -> Any:
        """
        Remove and return the label at idx.

        Raises:
            IndexError: If idx is not in [0, len(self)).
        """
        if not 0 <= idx < len(self._labels):
            raise IndexError(
                f"node index out of range: {idx} (node count {len(self._labels)})"
            )
        return self._labels.pop(idx)

    def get(self, idx: int) -> Optional[Any]:
        """Return the label at idx, or None when idx is out of range."""
        if 0 <= idx < len(self._labels):
            return self._labels[idx]
        return None

    def labels(self) -> List[Any]:
        return list(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._labels)

    def __contains__(self, label: Any) -> bool:
        return any(existing == label for existing in self._labels)

    def __repr__(self) -> str:
        return f"NodeStore({self._labels!r})"


class AdjacencyMatrix:
    """
    Dense weight store keyed by (row, column) node index.

    Cells inside the allocated square live in ``data``. The square grows
    geometrically, so building a graph edge by edge costs O(V^2) overall.
    When ``dense_limit`` is set, writes at or beyond it never grow the square
    and are kept in a small dict instead, so an edge to a far index costs
    O(1) memory.

    Attributes:
        data: Square float64 array of side ``capacity``; ``NO_EDGE`` where
            no edge exists.
        dense_limit: Highest index + 1 allowed to grow the square, or None
            for no limit.
        growths: Number of times the square has been reallocated.
    """

    def __init__(self, size: int = 0, dense_limit: Optional[int] = None) -> None:
        self.data = np.full((size, size), NO_EDGE, dtype=np.float64)
        self.dense_limit = dense_limit
        self.growths = 0
        self._extent = size
        self._overflow: Dict[Tuple[int, int], float] = {}

    @property
    def shape(self) -> tuple:
        return (self._extent, self._extent)

    @property
    def size(self) -> int:
        """Highest index written so far + 1."""
        return self._extent

    @property
    def capacity(self) -> int:
        """Side length of the allocated square."""
        return self.data.shape[0]

    def reserve(self, node_count: int) -> None:
        """Let indices below node_count grow the square on their next write."""
        if self.dense_limit is not None and node_count > self.dense_limit:
            self.dense_limit = node_count

    def grow(self, size: int) -> None:
        """
        Grow the allocated square to at least size x size.

        The new side is the largest of size, twice the current side and
        ``dense_limit``. Out-of-band cells that now fit move into the square.
        """
        current = self.capacity
        if size <= current:
            return
        target = max(size, 2 * current, self.dense_limit or 0)
        pad = target - current
        self.data = np.pad(
            self.data, ((0, pad), (0, pad)), mode="constant", constant_values=NO_EDGE
        )
        self.growths += 1
        for (i, j) in [cell for cell in self._overflow if max(cell) < target]:
            self.data[i, j] = self._overflow.pop((i, j))
        logger.debug("Grew adjacency matrix from %d to %d", current, target)

    def in_bounds(self, i: int, j: int) -> bool:
        n = self._extent
        return 0 <= i < n and 0 <= j < n

    def _is_dense(self, i: int, j: int) -> bool:
        n = self.capacity
        return i < n and j < n

    def get(self, i: int, j: int) -> float:
        """Return the stored weight, or NO_EDGE for a cell never written."""
        if not self.in_bounds(i, j):
            return NO_EDGE
        if self._is_dense(i, j):
            return float(self.data[i, j])
        return self._overflow.get((i, j), NO_EDGE)

    def set(self, i: int, j: int, weight: float) -> None:
        """
        Store weight at (i, j), growing the matrix as needed.

        Raises:
            IndexError: If i or j is negative.
        """
        i = _check_index(i)
        j = _check_index(j)
        needed = max(i, j) + 1
        if needed > self.capacity and (
            self.dense_limit is None or needed <= self.dense_limit
        ):
            self.grow(needed)
        if self._is_dense(i, j):
            self.data[i, j] = weight
        else:
            self._overflow[(i, j)] = float(weight)
        self._extent = max(self._extent, needed)

    def clear(self, i: int, j: int) -> None:
        """Reset (i, j) to NO_EDGE. Never grows the matrix."""
        if not self.in_bounds(i, j):
            return
        if self._is_dense(i, j):
            self.data[i, j] = NO_EDGE
        else:
            self._overflow.pop((i, j), None)

    def contains(self, i: int, j: int) -> bool:
        return self.get(i, j) < NO_EDGE

    def row(self, i: int, n: int) -> np.ndarray:
        """Weights of edges leaving i towards columns 0..n-1."""
        out = np.full(n, NO_EDGE, dtype=np.float64)
        if 0 <= i < self.capacity:
            m = min(n, self.capacity)
            out[:m] = self.data[i, :m]
        for (r, c), w in self._overflow.items():
            if r == i and c < n:
                out[c] = w
        return out

    def column(self, j: int, n: int) -> np.ndarray:
        """Weights of edges from rows 0..n-1 into j."""
        out = np.full(n, NO_EDGE, dtype=np.float64)
        if 0 <= j < self.capacity:
            m = min(n, self.capacity)
            out[:m] = self.data[:m, j]
        for (r, c), w in self._overflow.items():
            if c == j and r < n:
                out[r] = w
        return out

    def to_array(self, n: int) -> np.ndarray:
        """Return an n x n copy, padded with NO_EDGE or truncated as needed."""
        out = np.full((n, n), NO_EDGE, dtype=np.float64)
        m = min(n, self.capacity)
        out[:m, :m] = self.data[:m, :m]
        for (r, c), w in self._overflow.items():
            if r < n and c < n:
                out[r, c] = w
        return out

    def stored_weights(self) -> np.ndarray:
        """Weights of every stored edge, phantom cells included."""
        dense = self.data[self.data < NO_EDGE]
        extra = np.array(
            [w for w in self._overflow.values() if w < NO_EDGE], dtype=np.float64
        )
        return np.concatenate([dense, extra])

    def off_diagonal_all_equal(self, value: float) -> bool:
        """True if every (i, j) with i != j inside ``size`` holds value."""
        e = self._extent
        d = min(e, self.capacity)
        block = self.data[:d, :d]
        if not np.all(block[~np.eye(d, dtype=bool)] == value):
            return False
        expected = e * e - d * d - (e - d)
        found = sum(1 for (i, j), w in self._overflow.items() if i != j and w == value)
        return found == expected

    def asymmetric_cells(self) -> List[Tuple[int, int]]:
        """Cells (i, j) whose weight differs from the one at (j, i)."""
        rows, cols = np.nonzero(self.data != self.data.T)
        cells = list(zip(rows.tolist(), cols.tolist()))
        for (i, j), w in self._overflow.items():
            if self._overflow.get((j, i), NO_EDGE) != w:
                cells.append((i, j))
        return cells

    def invalid_cells(self) -> List[Tuple[int, int]]:
        """Cells holding NaN or negative infinity."""
        bad = np.isnan(self.data) | np.isneginf(self.data)
        rows, cols = np.nonzero(bad)
        cells = list(zip(rows.tolist(), cols.tolist()))
        for cell, w in self._overflow.items():
            if math.isnan(w) or w == -math.inf:
                cells.append(cell)
        return cells

    def copy(self) -> "AdjacencyMatrix":
        clone = AdjacencyMatrix(dense_limit=self.dense_limit)
        clone.data = self.data.copy()
        clone.growths = self.growths
        clone._extent = self._extent
        clone._overflow = dict(self._overflow)
        return clone

    def __repr__(self) -> str:
        return f"AdjacencyMatrix(size={self.size}, capacity={self.capacity})"
