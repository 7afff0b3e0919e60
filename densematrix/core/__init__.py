"""
Core infrastructure for densematrix.

Shared by the Matrix value type and the elimination engine.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    result: Generic Result[P] envelope
    compute: Timing and tolerances
"""

from densematrix.core.protocols import Backend
from densematrix.core.result import Result
from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionError,
    NotSquareError,
    MatrixIndexError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Backend",
    "Result",
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "MatrixIndexError",
    "NumericalError",
    "SingularMatrixError",
]
