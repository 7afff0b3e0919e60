"""
Gauss-Jordan elimination: rank, reduced row-echelon form and inverse.

Public API:
    row_reduce(A, ...) -> EliminationSolution
    rank(A, ...) -> int
    invert(A, ...) -> EliminationSolution

Each function handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Matrix.get_rank() and Matrix.get_inverse() compute the same thing with
the fixed pivot order and cache it on the matrix; these functions add the
pivoted mode, timing and warnings.

Example:
    >>> from densematrix.elimination import invert
    >>> solution = invert([[4.0, 7.0], [2.0, 6.0]], pivoting='partial')
    >>> solution.rank
    2
"""

from densematrix.elimination.design import EliminationDesign
from densematrix.elimination.solution import EliminationSolution, EliminationParams
from densematrix.elimination.solvers import row_reduce, rank, invert

__all__ = [
    "row_reduce",
    "rank",
    "invert",
    "EliminationDesign",
    "EliminationSolution",
    "EliminationParams",
]
