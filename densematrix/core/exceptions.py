"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error. Errors raised by argument checks live under
ValidationError; errors discovered while computing live under
NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(DenseMatrixError, ValueError):
    """
    Invalid argument.

    Raised for malformed constructor dimensions, wrong-length flat input,
    out-of-range row/column/split/swap indices and bad tolerances.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible.

    Raised when the shapes of two matrices don't satisfy the contract of
    an operation (addition, multiplication, appending, ...).
    """
    pass


class NotSquareError(DimensionError):
    """
    A square matrix was required.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class MatrixIndexError(DenseMatrixError, IndexError):
    """Single-element access outside the matrix bounds."""
    pass


class NumericalError(DenseMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an inverse is requested but elimination leaves fewer
    non-zero rows than the order of the matrix.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Rank found by elimination, if computed
        expected_rank: Rank required for invertibility (the order)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
