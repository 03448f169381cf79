"""Tests for utility functions."""

import pytest

from densegraph.utils import check_indices, reconstruct_path


class TestReconstructPath:
    def test_chain(self):
        assert reconstruct_path([None, 0, 1, 1], 3) == [0, 1, 3]

    def test_root(self):
        assert reconstruct_path([None, 0], 0) == [0]

    def test_cycle_detected(self):
        with pytest.raises(ValueError, match="cycle"):
            reconstruct_path([1, 0], 0)


class TestCheckIndices:
    def test_valid(self):
        assert check_indices((2, 0, 1), 3) == [2, 0, 1]

    def test_accepts_generators(self):
        assert check_indices(range(3), 3) == [0, 1, 2]

    @pytest.mark.parametrize("bad", [-1, 3])
    def test_out_of_range(self, bad):
        with pytest.raises(IndexError, match="out of range"):
            check_indices([0, bad], 3)
