"""
Tests for the Gauss-Jordan kernels in core/compute/linalg.

Covers both pivoting modes, the empty-row skip, rank counting and
the unguarded backward phase.
"""

import numpy as np
import pytest

from densematrix.core.compute.linalg import (
    backward_reduce_cpu,
    echelon_rank_cpu,
    forward_reduce_cpu,
)
from densematrix.core.compute.tolerances import EPSILON


# ═══════════════════════════════════════════════════════════════════════
# Forward reduction
# ═══════════════════════════════════════════════════════════════════════


class TestForwardReduce:

    def test_unit_diagonal_and_zero_below(self):
        a = np.array([[2.0, 1.0], [1.0, 1.0]])
        forward_reduce_cpu(a)
        np.testing.assert_array_equal(a, [[1.0, 0.5], [0.0, 1.0]])

    def test_fixed_order_keeps_rows(self):
        a = np.array([[1.0, 2.0], [5.0, 1.0]])
        info = forward_reduce_cpu(a, 'none')
        assert info.row_order == (0, 1)
        assert info.pivots == ((0, 0), (1, 1))

    def test_zero_pivot_column_skipped(self):
        a = np.array([[1.0, 2.0], [2.0, 4.0]])
        info = forward_reduce_cpu(a)
        assert info.pivots == ((0, 0),)
        np.testing.assert_array_equal(a, [[1.0, 2.0], [0.0, 0.0]])
        assert np.all(np.isfinite(a))

    def test_zero_pivot_under_non_empty_row_is_divided(self):
        a = np.array([[0.0, 1.0], [1.0, 1.0]])
        info = forward_reduce_cpu(a)
        assert info.pivots[0] == (0, 0)
        assert not np.all(np.isfinite(a))

    def test_empty_leading_row_skipped(self):
        a = np.array([[0.0, 0.0], [1.0, 1.0]])
        info = forward_reduce_cpu(a)
        assert info.pivots == ((1, 1),)
        np.testing.assert_array_equal(a, [[0.0, 0.0], [1.0, 1.0]])
        assert echelon_rank_cpu(a) == 1

    def test_partial_pivoting_swaps_largest(self):
        a = np.array([[1.0, 2.0], [5.0, 1.0]])
        info = forward_reduce_cpu(a, 'partial')
        assert info.row_order == (1, 0)
        assert a[0, 0] == 1.0
        assert a[1, 0] == 0.0

    def test_partial_pivoting_handles_zero_diagonal(self):
        a = np.array([[0.0, 1.0], [1.0, 0.0]])
        info = forward_reduce_cpu(a, 'partial')
        assert info.row_order == (1, 0)
        np.testing.assert_array_equal(a, np.eye(2))

    def test_wide_matrix_only_leading_block_pivots(self):
        a = np.array([[1.0, 2.0, 3.0], [2.0, 4.0, 7.0]])
        info = forward_reduce_cpu(a)
        assert info.pivots == ((0, 0),)
        np.testing.assert_allclose(a[1], [0.0, 0.0, 1.0])

    def test_unknown_pivoting(self):
        with pytest.raises(ValueError, match="pivoting"):
            forward_reduce_cpu(np.eye(2), 'complete')

    def test_empty(self):
        a = np.zeros((0, 0))
        info = forward_reduce_cpu(a)
        assert info.pivots == ()


# ═══════════════════════════════════════════════════════════════════════
# Backward reduction
# ═══════════════════════════════════════════════════════════════════════


class TestBackwardReduce:

    def test_clears_above_diagonal(self):
        a = np.array([[1.0, 0.5, 0.5, 0.0], [0.0, 1.0, -1.0, 2.0]])
        backward_reduce_cpu(a)
        np.testing.assert_array_equal(a, [[1.0, 0.0, 1.0, -1.0], [0.0, 1.0, -1.0, 2.0]])

    def test_zero_diagonal_propagates_non_finite(self):
        a = np.array([[1.0, 2.0], [0.0, 0.0]])
        backward_reduce_cpu(a)
        assert not np.all(np.isfinite(a[0]))

    def test_explicit_pivots_skip_empty_rows(self):
        a = np.array([[1.0, 2.0], [0.0, 0.0]])
        backward_reduce_cpu(a, pivots=[(0, 0)])
        np.testing.assert_array_equal(a, [[1.0, 2.0], [0.0, 0.0]])

    def test_upper_triangular_round_trip(self, rng):
        n = 5
        A = np.triu(rng.standard_normal((n, n))) + 3.0 * np.eye(n)
        a = np.hstack([A, np.eye(n)])
        forward_reduce_cpu(a)
        backward_reduce_cpu(a)
        np.testing.assert_allclose(a[:, :n], np.eye(n), atol=1e-12)
        np.testing.assert_allclose(A @ a[:, n:], np.eye(n), atol=1e-10)


# ═══════════════════════════════════════════════════════════════════════
# Rank counting
# ═══════════════════════════════════════════════════════════════════════


class TestEchelonRank:

    def test_identity(self):
        assert echelon_rank_cpu(np.eye(4)) == 4

    def test_zero(self):
        assert echelon_rank_cpu(np.zeros((3, 5))) == 0

    def test_empty(self):
        assert echelon_rank_cpu(np.zeros((0, 3))) == 0

    def test_entries_within_epsilon_count_as_zero(self):
        a = np.array([[1.0, 0.0], [0.0, EPSILON / 2]])
        assert echelon_rank_cpu(a) == 1

    def test_nan_row_is_not_zero(self):
        a = np.array([[1.0, 0.0], [np.nan, np.nan]])
        assert echelon_rank_cpu(a) == 2

    def test_only_leading_block_inspected(self):
        a = np.array([[1.0, 2.0, 3.0], [0.0, 0.0, 1.0]])
        assert echelon_rank_cpu(a) == 1
