"""
densematrix: dense double-precision matrices with Gauss-Jordan elimination.

A Matrix value type with element access, arithmetic (copy and in-place
forms), concatenation and splitting, structural predicates, and rank and
inverse computed by Gauss-Jordan elimination with a fixed diagonal pivot
order.

Submodules:
    matrix: The Matrix value type
    elimination: Functional rank/row_reduce/invert API with pivoting
                 modes
    core: Exceptions, validation, result envelope, tolerances
"""

__version__ = "0.1.0"

from densematrix.matrix import Matrix
from densematrix.core.compute.tolerances import EPSILON
from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionError,
    NotSquareError,
    MatrixIndexError,
    NumericalError,
    SingularMatrixError,
)
from densematrix import elimination

__all__ = [
    "__version__",
    "Matrix",
    "EPSILON",
    "elimination",
    "DenseMatrixError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "MatrixIndexError",
    "NumericalError",
    "SingularMatrixError",
]
