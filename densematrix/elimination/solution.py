"""
Elimination solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from densematrix.core.result import Result
from densematrix.elimination.design import EliminationDesign
from densematrix.matrix import Matrix


@dataclass(frozen=True)
class EliminationParams:
    """
    Parameter payload for a Gauss-Jordan run.

    This is the immutable data computed by backends.

    Attributes:
        reduced: Reduced form of A (row-echelon only for operation='rank')
        inverse: Inverse of A for operation='invert', else None
        rank: Rank counted on the row-echelon form
        row_order: Original index of each row after interchanges
    """
    reduced: NDArray[np.floating[Any]]
    inverse: NDArray[np.floating[Any]] | None
    rank: int
    row_order: tuple[int, ...]


@dataclass
class EliminationSolution:
    """
    User-facing elimination results.

    Wraps the backend Result and hands matrices back as Matrix values.
    """
    _result: Result[EliminationParams]
    _design: EliminationDesign

    @property
    def reduced(self) -> Matrix:
        return Matrix(self._result.params.reduced)

    @property
    def inverse(self) -> Matrix | None:
        inverse = self._result.params.inverse
        if inverse is None:
            return None
        return Matrix(inverse)

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def is_full_rank(self) -> bool:
        return self.rank == min(self._design.n_rows, self._design.n_cols)

    @property
    def row_order(self) -> tuple[int, ...]:
        return self._result.params.row_order

    @property
    def pivoting(self) -> str:
        return self._design.pivoting

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Short human-readable report of the run."""
        lines = [
            "Gauss-Jordan elimination",
            "=" * 40,
            f"Operation:  {self._design.operation}",
            f"Shape:      {self._design.n_rows} x {self._design.n_cols}",
            f"Pivoting:   {self.pivoting}",
            f"Backend:    {self.backend_name}",
            f"Rank:       {self.rank}"
            + ("" if self.is_full_rank else " (deficient)"),
        ]
        if self.timing is not None:
            lines.append(f"Time:       {self.timing['total_seconds']:.6f}s")
        for message in self.warnings:
            lines.append(f"Warning:    {message}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EliminationSolution(operation={self._design.operation!r}, "
            f"rank={self.rank}, backend={self.backend_name!r})"
        )
