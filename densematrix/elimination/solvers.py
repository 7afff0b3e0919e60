"""
Solver dispatch for Gauss-Jordan elimination.

This module provides the public functions row_reduce(), rank() and
invert(), and backend selection.
"""

import logging
import warnings
from typing import Literal

from numpy.typing import ArrayLike

from densematrix.core.protocols import Backend
from densematrix.elimination.backends.cpu import CPUGaussJordanBackend
from densematrix.elimination.design import EliminationDesign, Operation
from densematrix.elimination.solution import EliminationSolution
from densematrix.matrix import Matrix

logger = logging.getLogger(__name__)


BackendChoice = Literal['cpu']
PivotingChoice = Literal['none', 'partial']


def row_reduce(
    A: Matrix | ArrayLike,
    *,
    pivoting: PivotingChoice = 'none',
    backend: BackendChoice = 'cpu',
) -> EliminationSolution:
    """
    Reduce a matrix to fully reduced row-echelon form.

    Forward elimination followed by backward elimination. With the default
    fixed pivot order a zero diagonal entry is divided by unless its row is
    already empty, and a rank-deficient matrix leaves a zero diagonal entry
    for the backward phase to divide by; either way the solution carries a
    warning and non-finite entries. pivoting='partial' reduces any matrix.

    Args:
        A: Matrix or 2D array-like of finite values
        pivoting: 'none' (fixed diagonal order) or 'partial'
        backend: 'cpu'

    Returns:
        EliminationSolution with the reduced matrix and rank

    Example:
        >>> from densematrix.elimination import row_reduce
        >>> row_reduce([[2.0, 4.0], [1.0, 3.0]]).reduced.tolist()
        [[1.0, 0.0], [0.0, 1.0]]
    """
    return _run(A, 'reduce', pivoting, backend)


def rank(
    A: Matrix | ArrayLike,
    *,
    pivoting: PivotingChoice = 'none',
    backend: BackendChoice = 'cpu',
) -> int:
    """
    Rank counted on the row-echelon form of A.

    min(rows, cols) less the number of leading rows whose first
    min(rows, cols) entries are all within EPSILON of zero.
    """
    return _run(A, 'rank', pivoting, backend).rank


def invert(
    A: Matrix | ArrayLike,
    *,
    pivoting: PivotingChoice = 'none',
    backend: BackendChoice = 'cpu',
) -> EliminationSolution:
    """
    Invert a square matrix by eliminating [A | I].

    With the fixed pivot order a zero diagonal pivot is divided by, so a
    matrix such as [[0, 1], [1, 1]] comes back as an inverse full of
    inf/NaN with a UserWarning. Use pivoting='partial' for such matrices.

    Args:
        A: Square Matrix or 2D array-like of finite values
        pivoting: 'none' (fixed diagonal order) or 'partial'
        backend: 'cpu'

    Returns:
        EliminationSolution whose .inverse holds the inverse

    Raises:
        NotSquareError: If A is not square
        SingularMatrixError: If elimination leaves a zero row

    Example:
        >>> from densematrix.elimination import invert
        >>> invert([[2.0, 1.0], [1.0, 1.0]]).inverse.tolist()
        [[1.0, -1.0], [-1.0, 2.0]]
    """
    return _run(A, 'invert', pivoting, backend)


def _run(
    A: Matrix | ArrayLike,
    operation: Operation,
    pivoting: str,
    backend: BackendChoice,
) -> EliminationSolution:
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = EliminationDesign.build(A, operation=operation, pivoting=pivoting)

    # === Select Backend and Solve ===
    backend_impl = _get_backend(backend)
    logger.debug("%s on %s backend", operation, backend_impl.name)
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, UserWarning, stacklevel=3)

    # === Wrap and Return ===
    return EliminationSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> Backend:
    """
    Select and instantiate the backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice == 'cpu':
        return CPUGaussJordanBackend()
    raise ValueError(f"Unknown backend: {choice!r}. Use 'cpu'.")
