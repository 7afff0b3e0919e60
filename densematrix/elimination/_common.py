"""
Shared checks used by every elimination backend.
"""

import numpy as np
from numpy.typing import NDArray

from densematrix.core.exceptions import SingularMatrixError


def check_invertible(rank: int, order: int) -> None:
    """
    Raises:
        SingularMatrixError: If the augmented elimination found rank < order
    """
    if rank < order:
        raise SingularMatrixError(
            f"Matrix is singular: rank={rank}, expected={order}",
            matrix_name='A',
            rank=rank,
            expected_rank=order,
        )


def non_finite_warnings(**arrays: NDArray[np.floating] | None) -> tuple[str, ...]:
    """One warning per named array that holds NaN or Inf."""
    messages = []
    for name, arr in arrays.items():
        if arr is None or np.all(np.isfinite(arr)):
            continue
        n_nan = int(np.sum(np.isnan(arr)))
        n_inf = int(np.sum(np.isinf(arr)))
        messages.append(
            f"{name} contains non-finite values ({n_nan} NaN, {n_inf} Inf); "
            f"a zero pivot was divided by"
        )
    return tuple(messages)
