"""Tests for NodeStore and AdjacencyMatrix."""

import math

import numpy as np
import pytest

from densegraph import NO_EDGE, AdjacencyMatrix, NodeStore


class TestNodeStore:
    """Tests for the ordered label store."""

    def test_append_assigns_next_index(self):
        store = NodeStore()
        store.append("a")
        store.append("b")
        assert len(store) == 2
        assert store.get(0) == "a"
        assert store.get(1) == "b"

    def test_extend_is_repeated_append(self):
        store = NodeStore()
        store.extend(iter(["x", "y", "z"]))
        assert store.labels() == ["x", "y", "z"]

    def test_pop_shifts_later_indices(self):
        store = NodeStore()
        store.extend(["a", "b", "c"])
        assert store.pop(0) == "a"
        assert store.get(0) == "b"
        assert store.get(1) == "c"
        assert store.get(2) is None

    @pytest.mark.parametrize("idx", [-1, 3, 10])
    def test_pop_out_of_range(self, idx):
        store = NodeStore()
        store.extend(["a", "b", "c"])
        with pytest.raises(IndexError, match="out of range"):
            store.pop(idx)
        assert len(store) == 3

    def test_get_is_bounds_checked(self):
        store = NodeStore()
        store.append("a")
        assert store.get(-1) is None
        assert store.get(1) is None

    def test_contains_uses_equality(self):
        store = NodeStore()
        store.extend([[1, 2], {"k": 1}])
        assert [1, 2] in store
        assert {"k": 1} in store
        assert [2, 1] not in store

    def test_labels_returns_copy(self):
        store = NodeStore()
        store.append("a")
        labels = store.labels()
        labels.append("b")
        assert len(store) == 1


class TestAdjacencyMatrix:
    """Tests for the dense weight store."""

    def test_empty(self):
        m = AdjacencyMatrix()
        assert m.shape == (0, 0)
        assert m.get(0, 0) == NO_EDGE
        assert not m.contains(0, 0)

    def test_sentinel_is_infinity(self):
        assert NO_EDGE == math.inf

    def test_set_grows_lazily(self):
        m = AdjacencyMatrix()
        m.set(1, 3, 2.0)
        assert m.size == 4
        assert m.get(1, 3) == 2.0
        assert m.get(3, 1) == NO_EDGE
        assert np.all(np.isinf(np.delete(m.data.ravel(), 1 * 4 + 3)))

    def test_zero_and_negative_weights_are_edges(self):
        m = AdjacencyMatrix()
        m.set(0, 1, 0.0)
        m.set(1, 0, -3.0)
        assert m.contains(0, 1)
        assert m.contains(1, 0)

    def test_out_of_range_reads_are_no_edge(self):
        m = AdjacencyMatrix()
        m.set(0, 1, 1.0)
        assert m.get(5, 5) == NO_EDGE
        assert m.get(-1, 0) == NO_EDGE
        assert not m.contains(0, 9)

    def test_negative_write_raises(self):
        m = AdjacencyMatrix()
        with pytest.raises(IndexError, match="out of range"):
            m.set(-1, 0, 1.0)
        assert m.size == 0

    def test_clear_never_grows(self):
        m = AdjacencyMatrix()
        m.set(0, 1, 1.0)
        m.clear(0, 1)
        m.clear(7, 7)
        assert m.size == 2
        assert not m.contains(0, 1)

    def test_row_and_column_are_padded(self):
        m = AdjacencyMatrix()
        m.set(0, 1, 5.0)
        assert m.row(0, 4).tolist() == [math.inf, 5.0, math.inf, math.inf]
        assert m.column(1, 3).tolist() == [5.0, math.inf, math.inf]
        assert m.row(9, 2).tolist() == [math.inf, math.inf]

    def test_to_array_pads_and_truncates(self):
        m = AdjacencyMatrix()
        m.set(2, 0, 1.5)
        assert m.to_array(4).shape == (4, 4)
        assert m.to_array(4)[2, 0] == 1.5
        assert m.to_array(2).shape == (2, 2)

    def test_copy_is_independent(self):
        m = AdjacencyMatrix()
        m.set(0, 1, 1.0)
        clone = m.copy()
        clone.set(1, 0, 2.0)
        assert not m.contains(1, 0)

    def test_negative_write_names_the_index(self):
        m = AdjacencyMatrix()
        with pytest.raises(IndexError, match="node index out of range: -3"):
            m.set(0, -3, 1.0)


class TestAdjacencyMatrixGrowth:
    """Geometric growth of the square and out-of-band phantom cells."""

    def test_growth_is_geometric(self):
        m = AdjacencyMatrix()
        for i in range(1, 256):
            m.set(i - 1, i, 1.0)
        assert m.size == 256
        assert m.capacity >= 256
        # 2, 4, 8, ..., 256
        assert m.growths == 8

    def test_size_tracks_writes_not_capacity(self):
        m = AdjacencyMatrix()
        m.set(0, 4, 1.0)
        m.set(5, 0, 1.0)
        assert m.size == 6
        assert m.capacity == 10
        assert m.shape == (6, 6)
        assert m.get(7, 7) == NO_EDGE

    def test_grow_reaches_dense_limit_at_once(self):
        m = AdjacencyMatrix(dense_limit=100)
        m.set(0, 1, 1.0)
        assert m.capacity == 100
        assert m.size == 2
        assert m.growths == 1

    def test_cells_beyond_dense_limit_stay_out_of_band(self):
        m = AdjacencyMatrix(dense_limit=3)
        m.set(0, 8000, 2.5)
        assert m.capacity == 0
        assert m.size == 8001
        assert m.get(0, 8000) == 2.5
        assert m.contains(0, 8000)
        assert not m.contains(8000, 0)
        m.clear(0, 8000)
        assert not m.contains(0, 8000)

    def test_out_of_band_cells_move_in_on_growth(self):
        m = AdjacencyMatrix(dense_limit=2)
        m.set(0, 5, 2.0)
        m.reserve(6)
        m.set(1, 1, 1.0)
        assert m.capacity == 6
        assert m.data[0, 5] == 2.0
        assert m.get(0, 5) == 2.0

    def test_reserve_without_limit_is_a_no_op(self):
        m = AdjacencyMatrix()
        m.reserve(50)
        assert m.dense_limit is None
        assert m.capacity == 0

    def test_row_column_and_array_include_out_of_band_cells(self):
        m = AdjacencyMatrix(dense_limit=1)
        m.set(0, 2, 4.0)
        m.set(2, 1, 6.0)
        assert m.row(0, 3).tolist() == [math.inf, math.inf, 4.0]
        assert m.column(1, 3).tolist() == [math.inf, math.inf, 6.0]
        assert m.to_array(3)[2, 1] == 6.0
        assert m.row(0, 2).tolist() == [math.inf, math.inf]

    def test_stored_weights_include_out_of_band_cells(self):
        m = AdjacencyMatrix(dense_limit=1)
        m.set(0, 0, 1.0)
        m.set(0, 9, 3.0)
        assert sorted(m.stored_weights().tolist()) == [1.0, 3.0]

    def test_asymmetric_and_invalid_cells(self):
        m = AdjacencyMatrix(dense_limit=2)
        m.set(0, 1, 1.0)
        m.set(1, 0, 1.0)
        m.set(0, 7, 1.0)
        assert m.asymmetric_cells() == [(0, 7)]
        m.set(7, 0, -math.inf)
        assert (7, 0) in m.invalid_cells()

    def test_copy_keeps_out_of_band_cells(self):
        m = AdjacencyMatrix(dense_limit=1)
        m.set(0, 4, 1.0)
        clone = m.copy()
        clone.clear(0, 4)
        assert m.contains(0, 4)
        assert clone.size == 5
        assert clone.dense_limit == 1
