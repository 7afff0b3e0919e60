"""
Gauss-Jordan elimination kernels.

Provides the two elimination phases and the rank count on NumPy float64
arrays. Every kernel mutates the array it is given; callers hand in a
scratch copy when the original must survive.

Phase 1 (forward) walks the pivots top to bottom, clears the column below
each pivot and normalizes the pivot row so its leading entry is 1.
Phase 2 (backward) walks the pivots bottom to top and clears the column
above each pivot.

Pivoting modes:
    'none':    fixed diagonal order, pivot i is a[i, i], no row interchange.
               Row i is skipped only when it is empty from column i to the
               end of the leading min(rows, cols) block, so the rank count
               sees it as a zero row. Any other pivot is divided by, however
               small; a zero pivot turns the rows it touches into inf/NaN
               and that propagates into the result.
    'partial': for each of the first min(rows, cols) columns the largest
               magnitude at or below the current pivot row is swapped in;
               columns with nothing above eps are skipped.
"""

from dataclasses import dataclass
from typing import Literal, Sequence
import numpy as np
from numpy.typing import NDArray

from densematrix.core.compute.tolerances import EPSILON


Pivoting = Literal['none', 'partial']
PIVOTING_MODES: tuple[str, ...] = ('none', 'partial')


@dataclass(frozen=True)
class EchelonInfo:
    """
    Bookkeeping from a forward reduction.

    Attributes:
        row_order: Original index of each row after any interchanges
        pivots: (row, column) of every pivot that was normalized
    """
    row_order: tuple[int, ...]
    pivots: tuple[tuple[int, int], ...]


def _eliminate_below(a: NDArray[np.float64], row: int, col: int) -> None:
    # row j += (-a[j, col] / a[row, col]) * row, for every j below
    multipliers = -a[row + 1:, col] / a[row, col]
    a[row + 1:] += multipliers[:, np.newaxis] * a[row]


def forward_reduce_cpu(
    a: NDArray[np.float64],
    pivoting: Pivoting = 'none',
    eps: float = EPSILON,
) -> EchelonInfo:
    """
    Reduce a to row-echelon form in place (Phase 1).

    Args:
        a: 2D float64 array, modified in place
        pivoting: 'none' for fixed diagonal order, 'partial' for row
                  interchange on the largest magnitude
        eps: Structural-zero threshold

    Returns:
        EchelonInfo with the row permutation and the pivot positions
    """
    rows, cols = a.shape
    limit = min(rows, cols)
    order = list(range(rows))
    pivots: list[tuple[int, int]] = []

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if pivoting == 'none':
            for i in range(limit):
                # NaN is never <= eps, so a contaminated row is not skipped
                if np.all(np.abs(a[i, i:limit]) <= eps):
                    continue
                _eliminate_below(a, i, i)
                a[i] *= 1.0 / a[i, i]
                pivots.append((i, i))
        elif pivoting == 'partial':
            row = 0
            for col in range(limit):
                best = row + int(np.argmax(np.abs(a[row:, col])))
                if not abs(a[best, col]) > eps:
                    continue
                if best != row:
                    a[[row, best]] = a[[best, row]]
                    order[row], order[best] = order[best], order[row]
                _eliminate_below(a, row, col)
                a[row] *= 1.0 / a[row, col]
                pivots.append((row, col))
                row += 1
        else:
            raise ValueError(f"Unknown pivoting mode: {pivoting!r}")

    return EchelonInfo(row_order=tuple(order), pivots=tuple(pivots))


def backward_reduce_cpu(
    a: NDArray[np.float64],
    pivots: Sequence[tuple[int, int]] | None = None,
) -> None:
    """
    Clear every column above its pivot in place (Phase 2).

    Args:
        a: Array already in row-echelon form, modified in place
        pivots: Pivot positions from forward_reduce_cpu. None means the
                diagonal of the leading min(rows, cols) block, with no
                zero-pivot guard.
    """
    if pivots is None:
        limit = min(a.shape)
        pivots = [(i, i) for i in range(limit)]

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for row, col in reversed(list(pivots)):
            multipliers = -a[:row, col] / a[row, col]
            a[:row] += multipliers[:, np.newaxis] * a[row]


def echelon_rank_cpu(a: NDArray[np.float64], eps: float = EPSILON) -> int:
    """
    Rank of an array in row-echelon form.

    limit - (rows among the first limit rows whose first limit entries are
    all within eps of zero), where limit = min(rows, cols). NaN entries
    never count as zero.
    """
    limit = min(a.shape)
    if limit == 0:
        return 0
    block = np.abs(a[:limit, :limit]) <= eps
    zero_rows = int(np.sum(np.all(block, axis=1)))
    return limit - zero_rows
