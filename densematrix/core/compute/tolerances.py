"""
Tolerances used by the elimination engine and its validation.

EPSILON is the fixed threshold below which a magnitude counts as a
structural zero during elimination and rank counting. It is deliberately
separate from the caller-supplied ``eps`` accepted by the Matrix
predicates.

CPU_FP64 describes how closely the double-precision elimination is
expected to agree with a LAPACK reference on well-conditioned input.
"""

from dataclasses import dataclass


# Structural-zero threshold for pivots and rank.
EPSILON: float = 1e-10


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-9,
    name='cpu_fp64',
    description='CPU double precision, fixed pivot order',
)
