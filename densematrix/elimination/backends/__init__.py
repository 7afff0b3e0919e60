"""
Elimination backends.

    cpu: NumPy reference implementation
"""

from densematrix.elimination.backends.cpu import CPUGaussJordanBackend

__all__ = [
    "CPUGaussJordanBackend",
]
