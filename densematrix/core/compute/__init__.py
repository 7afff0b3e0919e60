"""
Compute utilities: section timing and numerical tolerances.
"""

from densematrix.core.compute.timing import Timer
from densematrix.core.compute.tolerances import (
    EPSILON,
    ToleranceTier,
    CPU_FP64,
)

__all__ = [
    "Timer",
    "EPSILON",
    "ToleranceTier",
    "CPU_FP64",
]
