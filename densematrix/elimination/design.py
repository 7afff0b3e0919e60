"""
Elimination Design.

Design holds the validated input of one elimination run: the matrix, what
to compute from it and which pivoting mode to use. Backends read it and
never validate again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.compute.linalg.gauss_jordan import PIVOTING_MODES
from densematrix.core.validation import check_2d, check_array, check_finite, check_square
from densematrix.matrix import Matrix


Operation = Literal['rank', 'reduce', 'invert']
OPERATIONS: tuple[str, ...] = ('rank', 'reduce', 'invert')


@dataclass(frozen=True)
class EliminationDesign:
    """
    Input specification for a Gauss-Jordan run.

    Construction:
        EliminationDesign.build(A, operation='invert')
        EliminationDesign.build(A, operation='rank', pivoting='partial')

    Immutable after construction.
    """
    _A: NDArray[np.floating[Any]]
    _operation: str
    _pivoting: str

    @classmethod
    def build(
        cls,
        A: Matrix | ArrayLike,
        *,
        operation: Operation = 'reduce',
        pivoting: str = 'none',
    ) -> EliminationDesign:
        """
        Validate inputs and build the design.

        Raises:
            ValueError: If operation or pivoting is unknown
            ValidationError: If A is not numeric or contains NaN/Inf
            DimensionError: If A is not 2D
            NotSquareError: If operation is 'invert' and A is not square
        """
        if operation not in OPERATIONS:
            raise ValueError(f"Unknown operation: {operation!r}")
        if pivoting not in PIVOTING_MODES:
            raise ValueError(
                f"Unknown pivoting mode: {pivoting!r}. Use one of {PIVOTING_MODES}"
            )

        if isinstance(A, Matrix):
            arr = A.to_numpy()
        else:
            arr = check_array(A, 'A')
            check_2d(arr, 'A')
        check_finite(arr, 'A')

        if operation == 'invert':
            check_square(arr.shape, "Inverse")

        return cls(_A=arr, _operation=operation, _pivoting=pivoting)

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        return self._A

    @property
    def n_rows(self) -> int:
        return self._A.shape[0]

    @property
    def n_cols(self) -> int:
        return self._A.shape[1]

    @property
    def operation(self) -> str:
        return self._operation

    @property
    def pivoting(self) -> str:
        return self._pivoting

    @property
    def augmented(self) -> bool:
        """Whether the run eliminates [A | I] rather than A."""
        return self._operation == 'invert'

    def working_array(self) -> NDArray[np.float64]:
        """Fresh array the backend may reduce in place."""
        if self.augmented:
            return np.hstack([self._A, np.eye(self.n_rows)])
        return self._A.copy()
