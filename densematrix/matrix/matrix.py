"""
Dense matrix value type.

A Matrix owns a row-major float64 grid whose shape is fixed at
construction. Every operation comes in a copy-returning form, which leaves
its operands untouched, and where it makes sense an ``*_in_place`` form,
which mutates the receiver and returns None. In-place operations validate
first and write back last, so a failed call leaves the receiver unchanged.

Rank, row-echelon form and inverse are computed lazily by Gauss-Jordan
elimination with a fixed diagonal pivot order and cached on the instance.
Any in-place mutation drops those caches.
"""

from __future__ import annotations

import logging
import numbers
import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.compute.linalg.gauss_jordan import (
    backward_reduce_cpu,
    echelon_rank_cpu,
    forward_reduce_cpu,
)
from densematrix.core.exceptions import (
    DimensionError,
    MatrixIndexError,
    SingularMatrixError,
    ValidationError,
)
from densematrix.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_non_negative,
    check_same_shape,
    check_split_point,
    check_square,
)
from densematrix.matrix._format import render

logger = logging.getLogger(__name__)


def _as_grid(data: ArrayLike) -> NDArray[np.float64]:
    """Convert a rectangular grid to a 2D float64 array."""
    arr = check_array(data, 'data')
    # [] has no rows and therefore no columns
    if arr.ndim == 1 and arr.size == 0:
        arr = arr.reshape(0, 0)
    check_2d(arr, 'data')
    return arr


class Matrix:
    """
    Dense double-precision matrix.

    Construction:
        Matrix(grid)                    # deep copy of a rectangular grid
        Matrix(array, copy=False)       # take ownership of a float64 ndarray
        Matrix(other)                   # value-for-value copy
        Matrix.zero(rows, cols)
        Matrix.identity(order)
        Matrix.from_linear_array(rows, cols, *values)
        Matrix.random(rows, cols, seed=None)

    With ``copy=False`` a 2D float64 ndarray is used as storage directly.
    The caller must not keep using that array afterwards; anything else is
    converted and so copied regardless.

    Caches (row-echelon form, rank, inverse) are dropped by every in-place
    mutation. Not thread safe.
    """

    def __init__(self, data: Matrix | ArrayLike, copy: bool = True):
        if isinstance(data, Matrix):
            grid = data._data.copy()
        elif (not copy and isinstance(data, np.ndarray)
              and data.dtype == np.float64 and data.ndim == 2):
            grid = data
        else:
            grid = _as_grid(data)
            if copy and grid is data:
                grid = grid.copy()
        self._data: NDArray[np.float64] = grid
        self._invalidate()

    @classmethod
    def _wrap(cls, grid: NDArray[np.float64]) -> Matrix:
        """Adopt a freshly allocated array without copying."""
        return cls(grid, copy=False)

    def _invalidate(self) -> None:
        self._echelon: Matrix | None = None
        self._rank: int | None = None
        self._inverse: Matrix | None = None

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_array(cls, data: ArrayLike) -> Matrix:
        """Deep copy of a rectangular grid."""
        return cls(data, copy=True)

    @classmethod
    def zero(cls, rows: int, cols: int) -> Matrix:
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'columns')
        return cls._wrap(np.zeros((rows, cols), dtype=np.float64))

    @classmethod
    def identity(cls, order: int) -> Matrix:
        order = check_dimension(order, 'rows')
        return cls._wrap(np.eye(order, dtype=np.float64))

    @classmethod
    def from_linear_array(cls, rows: int, cols: int, *elements: Any) -> Matrix:
        """
        Build a matrix from row-major values.

        The values may be passed as separate arguments or as one sequence:

            Matrix.from_linear_array(2, 2, 1, 2, 3, 4)
            Matrix.from_linear_array(2, 2, [1, 2, 3, 4])

        Raises:
            ValidationError: If the values are nested or their number is
                not rows * cols
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'columns')
        if len(elements) == 1 and np.ndim(elements[0]) >= 1:
            elements = elements[0]
        flat = check_array(elements, 'elements')
        if flat.ndim != 1:
            raise ValidationError(
                f"elements: expected a flat sequence of values, got shape {flat.shape}"
            )
        if flat.size != rows * cols:
            raise ValidationError(
                f"Invalid number of elements: {flat.size} Expected: {rows * cols}"
            )
        return cls._wrap(flat.reshape(rows, cols).copy())

    @classmethod
    def random(cls, rows: int, cols: int, seed: int | None = None) -> Matrix:
        """Uniform [0, 1) entries; reproducible when a seed is given."""
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'columns')
        rng = np.random.default_rng(seed)
        return cls._wrap(rng.random((rows, cols)))

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return self._data.shape[0]

    @property
    def col_count(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.row_count, self.col_count)

    def get(self, i: int, j: int) -> float:
        """
        Element at row i, column j (zero-based).

        Raises:
            MatrixIndexError: If either index is out of bounds
        """
        i = operator.index(i)
        j = operator.index(j)
        if i < 0 or i >= self.row_count:
            raise MatrixIndexError(f"Invalid row index : {i}")
        if j < 0 or j >= self.col_count:
            raise MatrixIndexError(f"Invalid column index : {j}")
        return float(self._data[i, j])

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = key
        return self.get(i, j)

    def get_row(self, row: int) -> NDArray[np.float64]:
        """Copy of a row; ``row`` is zero-based."""
        row = check_index(row, self.row_count, 'row')
        return self._data[row].copy()

    def get_column(self, column: int) -> NDArray[np.float64]:
        """Copy of a column; ``column`` is zero-based."""
        column = check_index(column, self.col_count, 'column')
        return self._data[:, column].copy()

    def to_numpy(self) -> NDArray[np.float64]:
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    # ------------------------------------------------------------------
    # Equality and display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        # + 0.0 folds -0.0 into 0.0 so equal matrices hash equally
        return hash((self.shape, (self._data + 0.0).tobytes()))

    def __str__(self) -> str:
        return render(self._data)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.row_count}, cols={self.col_count})"

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_zero(self) -> bool:
        return not np.any(self._data)

    def is_square(self) -> bool:
        return self.row_count == self.col_count

    def is_upper_triangular(self, eps: float = 0.0) -> bool:
        """True if every entry below the diagonal is within eps of zero."""
        eps = check_non_negative(eps, 'eps')
        if not self.is_square():
            return False
        return bool(np.all(np.abs(np.tril(self._data, k=-1)) <= eps))

    def is_lower_triangular(self, eps: float = 0.0) -> bool:
        """True if every entry above the diagonal is within eps of zero."""
        eps = check_non_negative(eps, 'eps')
        if not self.is_square():
            return False
        return bool(np.all(np.abs(np.triu(self._data, k=1)) <= eps))

    def is_diagonal(self, eps: float = 0.0) -> bool:
        return self.is_lower_triangular(eps) and self.is_upper_triangular(eps)

    def is_identity(self, eps: float = 0.0) -> bool:
        if not self.is_diagonal(eps):
            return False
        return bool(np.all(np.abs(np.diag(self._data) - 1.0) <= eps))

    def is_orthogonal(self, eps: float = 0.0) -> bool:
        """True if A·Aᵗ is the identity once entries within eps are zeroed."""
        product = self.multiply(self.transpose())
        product.zero_fill_below(eps)
        return product.is_identity(eps)

    # ------------------------------------------------------------------
    # Element-wise transforms
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._data.T.copy())

    def transpose_in_place(self) -> None:
        """
        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.shape, "In-place transpose")
        self._data[...] = self._data.T.copy()
        self._invalidate()

    def zero_fill_below(self, eps: float) -> None:
        """Set every entry with magnitude <= eps to exactly zero."""
        eps = check_non_negative(eps, 'eps')
        self._data[np.abs(self._data) <= eps] = 0.0
        self._invalidate()

    def scale(self, k: float) -> Matrix:
        return Matrix._wrap(self._data * float(k))

    def scale_in_place(self, k: float) -> None:
        self._data *= float(k)
        self._invalidate()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> Matrix:
        check_same_shape(self.shape, other.shape, "addition")
        return Matrix._wrap(self._data + other._data)

    def add_in_place(self, other: Matrix) -> None:
        check_same_shape(self.shape, other.shape, "addition")
        self._data += other._data
        self._invalidate()

    def subtract(self, other: Matrix) -> Matrix:
        check_same_shape(self.shape, other.shape, "subtraction")
        return Matrix._wrap(self._data - other._data)

    def subtract_in_place(self, other: Matrix) -> None:
        check_same_shape(self.shape, other.shape, "subtraction")
        self._data -= other._data
        self._invalidate()

    def element_multiply(self, other: Matrix) -> Matrix:
        check_same_shape(self.shape, other.shape, "element-wise multiplication")
        return Matrix._wrap(self._data * other._data)

    def element_multiply_in_place(self, other: Matrix) -> None:
        check_same_shape(self.shape, other.shape, "element-wise multiplication")
        self._data *= other._data
        self._invalidate()

    def element_divide(self, other: Matrix) -> Matrix:
        """Element-wise quotient; division by zero follows IEEE 754."""
        check_same_shape(self.shape, other.shape, "element-wise division")
        with np.errstate(divide='ignore', invalid='ignore'):
            return Matrix._wrap(self._data / other._data)

    def element_divide_in_place(self, other: Matrix) -> None:
        check_same_shape(self.shape, other.shape, "element-wise division")
        with np.errstate(divide='ignore', invalid='ignore'):
            self._data /= other._data
        self._invalidate()

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self · other.

        Raises:
            DimensionError: If self.col_count != other.row_count
        """
        if other.row_count != self.col_count:
            raise DimensionError(
                f"Given matrix is not compatible with the invoking matrix for "
                f"multiplication: {self.shape} x {other.shape}"
            )
        return Matrix._wrap(self._data @ other._data)

    def multiply_in_place(self, other: Matrix) -> None:
        """
        Replace self with self · other.

        The product must keep the receiver's shape, so other has to be
        col_count x col_count. The product is formed in scratch first.
        """
        check_same_shape(
            (self.col_count, self.col_count), other.shape, "in-place multiplication"
        )
        product = self._data @ other._data
        self._data[...] = product
        self._invalidate()

    def exponentiate(self, power: int) -> Matrix:
        """
        self raised to a non-negative integer power by repeated squaring.

        Raises:
            NotSquareError: If the matrix is not square
            ValidationError: If power is negative or not an integer
        """
        check_square(self.shape, "Exponentiation")
        try:
            power = operator.index(power)
        except TypeError as e:
            raise ValidationError(
                f"power: expected an integer, got {type(power).__name__}"
            ) from e
        if power < 0:
            raise ValidationError(f"Power cannot be negative: {power}")

        product = Matrix.identity(self.row_count)
        square = Matrix(self)
        while power > 0:
            if power & 1:
                product.multiply_in_place(square)
            square.multiply_in_place(square)
            power >>= 1
        return product

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def append_right(self, other: Matrix) -> Matrix:
        """Columns of self followed by columns of other."""
        if other.row_count != self.row_count:
            raise DimensionError(
                f"Given matrix is not compatible with the invoking matrix for "
                f"appending right: expected {self.row_count} rows, got {other.row_count}"
            )
        return Matrix._wrap(np.hstack([self._data, other._data]))

    def append_bottom(self, other: Matrix) -> Matrix:
        """Rows of self followed by rows of other."""
        if other.col_count != self.col_count:
            raise DimensionError(
                f"Given matrix is not compatible with the invoking matrix for "
                f"appending bottom: expected {self.col_count} columns, got {other.col_count}"
            )
        return Matrix._wrap(np.vstack([self._data, other._data]))

    def split_at_column(self, column: int) -> tuple[Matrix, Matrix]:
        """
        Split into the first ``column`` columns and the rest.

        ``column`` is a count in 1..col_count; col_count gives an empty
        right-hand piece.
        """
        column = check_split_point(column, self.col_count, 'column')
        left = Matrix._wrap(self._data[:, :column].copy())
        right = Matrix._wrap(self._data[:, column:].copy())
        return left, right

    def split_at_row(self, row: int) -> tuple[Matrix, Matrix]:
        """Split into the first ``row`` rows and the rest; see split_at_column."""
        row = check_split_point(row, self.row_count, 'row')
        top = Matrix._wrap(self._data[:row].copy())
        bottom = Matrix._wrap(self._data[row:].copy())
        return top, bottom

    def swap_rows(self, row1: int, row2: int) -> Matrix:
        result = Matrix(self)
        result.swap_rows_in_place(row1, row2)
        return result

    def swap_rows_in_place(self, row1: int, row2: int) -> None:
        row1 = check_index(row1, self.row_count, 'row')
        row2 = check_index(row2, self.row_count, 'row')
        self._data[[row1, row2]] = self._data[[row2, row1]]
        self._invalidate()

    def swap_columns(self, col1: int, col2: int) -> Matrix:
        result = Matrix(self)
        result.swap_columns_in_place(col1, col2)
        return result

    def swap_columns_in_place(self, col1: int, col2: int) -> None:
        col1 = check_index(col1, self.col_count, 'column')
        col2 = check_index(col2, self.col_count, 'column')
        self._data[:, [col1, col2]] = self._data[:, [col2, col1]]
        self._invalidate()

    # ------------------------------------------------------------------
    # Elimination
    # ------------------------------------------------------------------

    def convert_to_reduced_row_echelon(self) -> None:
        """
        Forward elimination in place: row-echelon form with unit pivots.

        Pivots are taken from the diagonal in order with no row
        interchange. A row that is empty (within EPSILON) from its diagonal
        to the end of the leading block is left as a zero row; any other
        pivot is divided by, so a zero diagonal entry under a non-empty
        row yields inf/NaN.
        """
        scratch = self._data.copy()
        forward_reduce_cpu(scratch)
        self._data[...] = scratch
        self._invalidate()

    def convert_echelon_to_normal(self) -> None:
        """
        Backward elimination in place: clear every column above its diagonal
        pivot. Expects convert_to_reduced_row_echelon() to have run; a zero
        diagonal entry yields inf/NaN.
        """
        scratch = self._data.copy()
        backward_reduce_cpu(scratch)
        self._data[...] = scratch
        self._invalidate()

    def _row_echelon(self) -> Matrix:
        if self._echelon is None:
            echelon = Matrix(self)
            forward_reduce_cpu(echelon._data)
            self._echelon = echelon
        return self._echelon

    def get_row_echelon_form(self) -> Matrix:
        """Copy of the cached forward-eliminated form of this matrix."""
        return Matrix(self._row_echelon())

    def get_rank(self) -> int:
        """
        Rank from the cached row-echelon form.

        min(rows, cols) less the number of leading rows whose first
        min(rows, cols) entries are all within EPSILON of zero.
        """
        if self._rank is None:
            self._rank = echelon_rank_cpu(self._row_echelon()._data)
        return self._rank

    def get_inverse(self) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination of [A | I].

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If elimination leaves fewer than n
                non-zero rows; nothing is cached in that case
        """
        if self._inverse is None:
            check_square(self.shape, "Inverse")
            n = self.row_count
            if n == 0:
                self._inverse = Matrix.zero(0, 0)
                return Matrix(self._inverse)

            augmented = self.append_right(Matrix.identity(n))
            rank = augmented.get_rank()
            if rank < n:
                raise SingularMatrixError(
                    f"Matrix is singular: rank={rank}, expected={n}",
                    matrix_name='A',
                    rank=rank,
                    expected_rank=n,
                )

            # Phase 2 continues from the echelon form the rank came from
            reduced = augmented._row_echelon()
            backward_reduce_cpu(reduced._data)
            _, inverse = reduced.split_at_column(n)
            logger.debug("inverted %dx%d matrix", n, n)
            self._inverse = inverse
        return Matrix(self._inverse)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self.element_multiply(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self.element_divide(other)
        if isinstance(other, numbers.Real):
            with np.errstate(divide='ignore', invalid='ignore'):
                return Matrix._wrap(self._data / float(other))
        return NotImplemented

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __pow__(self, power: int) -> Matrix:
        return self.exponentiate(power)

    def __neg__(self) -> Matrix:
        return self.scale(-1.0)

    def __iadd__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.add_in_place(other)
        return self

    def __isub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.subtract_in_place(other)
        return self

    def __imul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            self.element_multiply_in_place(other)
        elif isinstance(other, numbers.Real):
            self.scale_in_place(other)
        else:
            return NotImplemented
        return self

    def __imatmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.multiply_in_place(other)
        return self
