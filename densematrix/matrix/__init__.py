"""
Dense matrix value type.

Public API:
    Matrix: owned float64 grid with arithmetic, layout operations,
            predicates and Gauss-Jordan rank/inverse

Example:
    >>> from densematrix.matrix import Matrix
    >>> a = Matrix.from_linear_array(2, 2, 2, 1, 1, 1)
    >>> a.get_inverse().tolist()
    [[1.0, -1.0], [-1.0, 2.0]]
"""

from densematrix.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
