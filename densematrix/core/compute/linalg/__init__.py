"""
Linear algebra kernels for densematrix.

All functions follow these conventions:
    - Operate on NumPy float64 arrays
    - Kernels mutate their input; callers pass scratch copies
    - Structural zeros are decided against a fixed tolerance (EPSILON)

Submodules:
    gauss_jordan: forward/backward elimination and echelon rank
"""

from densematrix.core.compute.linalg.gauss_jordan import (
    EchelonInfo,
    PIVOTING_MODES,
    forward_reduce_cpu,
    backward_reduce_cpu,
    echelon_rank_cpu,
)

__all__ = [
    "EchelonInfo",
    "PIVOTING_MODES",
    "forward_reduce_cpu",
    "backward_reduce_cpu",
    "echelon_rank_cpu",
]
