"""
CPU reference backend for Gauss-Jordan elimination.

Runs the NumPy kernels on a float64 scratch copy of the design. With
pivoting='none' it computes exactly what Matrix.get_rank() and
Matrix.get_inverse() compute.
"""

import logging
from typing import Any

from densematrix.core.compute.linalg.gauss_jordan import (
    backward_reduce_cpu,
    echelon_rank_cpu,
    forward_reduce_cpu,
)
from densematrix.core.compute.timing import Timer
from densematrix.core.result import Result
from densematrix.elimination._common import check_invertible, non_finite_warnings
from densematrix.elimination.design import EliminationDesign
from densematrix.elimination.solution import EliminationParams

logger = logging.getLogger(__name__)


class CPUGaussJordanBackend:
    """
    CPU backend using NumPy row operations.

    Implements the Backend protocol for EliminationDesign -> EliminationParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: EliminationDesign) -> Result[EliminationParams]:
        """
        Run the elimination described by design.

        Algorithm:
            1. Forward reduction of A (or [A | I] for 'invert')
            2. Rank from the zero rows of the row-echelon form
            3. For 'invert', stop with SingularMatrixError if rank < n
            4. Backward reduction (skipped for 'rank')
            5. For 'invert', split off the right block as the inverse

        Raises:
            SingularMatrixError: If operation is 'invert' and A is singular
        """
        timer = Timer()
        timer.start()

        a = design.working_array()
        n, p = design.n_rows, design.n_cols

        with timer.section('forward'):
            echelon = forward_reduce_cpu(a, design.pivoting)

        with timer.section('rank'):
            rank = echelon_rank_cpu(a)
        logger.debug(
            "forward reduction of %dx%d (%s pivoting): rank %d",
            n, p, design.pivoting, rank,
        )

        if design.augmented:
            check_invertible(rank, n)

        if design.operation != 'rank':
            # Fixed order clears above every diagonal entry, zero or not
            pivots = echelon.pivots if design.pivoting == 'partial' else None
            with timer.section('backward'):
                backward_reduce_cpu(a, pivots)

        if design.augmented:
            reduced, inverse = a[:, :p].copy(), a[:, p:].copy()
        else:
            reduced, inverse = a, None

        timer.stop()

        params = EliminationParams(
            reduced=reduced,
            inverse=inverse,
            rank=rank,
            row_order=echelon.row_order,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'operation': design.operation,
            'pivoting': design.pivoting,
            'rank': rank,
            'n_pivots': len(echelon.pivots),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=non_finite_warnings(reduced=reduced, inverse=inverse),
        )
