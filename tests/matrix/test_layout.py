"""
Tests for appending, splitting, swapping and transposition.
"""

import numpy as np
import pytest

from densematrix import Matrix
from densematrix.core.exceptions import (
    DimensionError,
    NotSquareError,
    ValidationError,
)

ROWS, COLS = 12, 9


class TestAppendAndSplit:

    def test_append_right_split_round_trip(self):
        a = Matrix.random(ROWS, COLS, seed=1)
        b = Matrix.random(ROWS, 4, seed=2)
        left, right = a.append_right(b).split_at_column(COLS)
        assert left == a
        assert right == b

    def test_append_bottom_split_round_trip(self):
        a = Matrix.random(ROWS, COLS, seed=1)
        b = Matrix.random(5, COLS, seed=2)
        top, bottom = a.append_bottom(b).split_at_row(ROWS)
        assert top == a
        assert bottom == b

    def test_append_right_layout(self):
        a = Matrix.from_linear_array(2, 1, 1, 2)
        b = Matrix.from_linear_array(2, 2, 3, 4, 5, 6)
        assert a.append_right(b).tolist() == [[1.0, 3.0, 4.0], [2.0, 5.0, 6.0]]

    def test_append_right_row_mismatch(self):
        with pytest.raises(DimensionError, match="appending right"):
            Matrix.zero(2, 2).append_right(Matrix.zero(3, 2))

    def test_append_bottom_column_mismatch(self):
        with pytest.raises(DimensionError, match="appending bottom"):
            Matrix.zero(2, 2).append_bottom(Matrix.zero(2, 3))

    def test_split_at_full_width_gives_empty_piece(self):
        a = Matrix.random(3, 4, seed=3)
        left, right = a.split_at_column(4)
        assert left == a
        assert right.shape == (3, 0)

    def test_split_at_full_height_gives_empty_piece(self):
        a = Matrix.random(3, 4, seed=3)
        top, bottom = a.split_at_row(3)
        assert top == a
        assert bottom.shape == (0, 4)

    @pytest.mark.parametrize("point", [0, 5, -1])
    def test_split_column_out_of_range(self, point):
        with pytest.raises(ValidationError):
            Matrix.zero(3, 4).split_at_column(point)

    @pytest.mark.parametrize("point", [0, 4])
    def test_split_row_out_of_range(self, point):
        with pytest.raises(ValidationError):
            Matrix.zero(3, 4).split_at_row(point)

    def test_split_pieces_are_independent(self):
        a = Matrix.identity(3)
        left, _ = a.split_at_column(2)
        left.scale_in_place(5.0)
        assert a.is_identity()


class TestSwap:

    def test_swap_rows_twice_restores(self, rng):
        original = Matrix(rng.standard_normal((ROWS, COLS)))
        m = Matrix(original)
        m.swap_rows_in_place(0, 1)
        assert m != original
        m.swap_rows_in_place(0, 1)
        assert m == original

    def test_swap_rows_copy_matches_in_place(self, rng):
        m1 = Matrix(rng.standard_normal((ROWS, COLS)))
        m2 = Matrix(m1)
        m1.swap_rows_in_place(3, 8)
        m3 = m2.swap_rows(3, 8)
        assert m1 == m3
        np.testing.assert_array_equal(m1.get_row(3), m2.get_row(8))
        np.testing.assert_array_equal(m1.get_row(8), m2.get_row(3))

    def test_swap_same_row_is_noop(self):
        m = Matrix.from_linear_array(2, 2, 1, 2, 3, 4)
        assert m.swap_rows(1, 1) == m

    def test_swap_columns(self):
        m = Matrix.from_linear_array(2, 3, 1, 2, 3, 4, 5, 6)
        assert m.swap_columns(0, 2).tolist() == [[3.0, 2.0, 1.0], [6.0, 5.0, 4.0]]
        m.swap_columns_in_place(0, 1)
        assert m.tolist() == [[2.0, 1.0, 3.0], [5.0, 4.0, 6.0]]

    def test_swap_columns_bounded_by_column_count(self):
        # wide matrix: column index 4 is valid although there are only 2 rows
        m = Matrix.zero(2, 5)
        m.swap_columns_in_place(0, 4)
        with pytest.raises(ValidationError, match="column index"):
            m.swap_columns_in_place(0, 5)

    @pytest.mark.parametrize("row1,row2", [(-1, 0), (0, ROWS)])
    def test_swap_rows_out_of_range(self, row1, row2):
        with pytest.raises(ValidationError, match="row index"):
            Matrix.zero(ROWS, COLS).swap_rows(row1, row2)


class TestTranspose:

    def test_transpose_twice_is_identity_map(self, gaussian_grid):
        m = Matrix(gaussian_grid)
        assert m.transpose().transpose() == m

    def test_transpose_shape_and_values(self):
        m = Matrix.from_linear_array(2, 3, 1, 2, 3, 4, 5, 6)
        t = m.transpose()
        assert t.shape == (3, 2)
        assert t.tolist() == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]

    def test_in_place_matches_copy(self, rng):
        m1 = Matrix(rng.standard_normal((7, 7)))
        m2 = m1.transpose()
        m1.transpose_in_place()
        assert m1 == m2

    def test_in_place_requires_square(self):
        with pytest.raises(NotSquareError):
            Matrix.zero(2, 3).transpose_in_place()
