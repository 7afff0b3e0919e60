"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from densematrix.core.exceptions import (
    DimensionError,
    NotSquareError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (ragged grids, mixed types)
    and non-numeric dtypes. Numeric input of any other dtype is converted
    to float64.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating a ragged grid "
            f"or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.iscomplexobj(result):
        raise ValidationError(f"{name}: complex values are not supported")

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row/column count is a non-negative integer.

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    try:
        count = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e
    if count < 0:
        raise ValidationError(f"Invalid number of {name} : {count}")
    return count


def check_index(value: Any, limit: int, name: str) -> int:
    """
    Verify a zero-based row/column index lies in [0, limit).

    Negative indices are rejected rather than wrapped around.

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer or is out of range
    """
    try:
        index = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer index, got {type(value).__name__}"
        ) from e
    if index < 0 or index >= limit:
        raise ValidationError(
            f"Invalid {name} index : {index} (valid range 0..{limit - 1})"
        )
    return index


def check_split_point(value: Any, limit: int, name: str) -> int:
    """
    Verify a split point (a count of leading rows/columns) lies in [1, limit].

    Raises:
        ValidationError: If the split point is out of range
    """
    try:
        point = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer split point, got {type(value).__name__}"
        ) from e
    if point <= 0 or point > limit:
        raise ValidationError(
            f"Invalid {name} split point : {point} (valid range 1..{limit})"
        )
    return point


def check_same_shape(
    shape: tuple[int, int],
    other: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionError: If the shapes differ
    """
    if shape != other:
        raise DimensionError(
            f"Given matrix is not compatible with the invoking matrix for "
            f"{operation}: expected shape {shape}, got {other}"
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a shape is square.

    Raises:
        NotSquareError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{operation} requires a square matrix, got shape {shape}",
            shape=shape,
        )


def check_non_negative(value: float, name: str) -> float:
    """
    Verify a tolerance is a non-negative real number.

    Raises:
        ValidationError: If value is negative or NaN
    """
    value = float(value)
    if not value >= 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return value
