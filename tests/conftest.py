"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def gaussian_grid(rng):
    """20x30 grid of standard normal values."""
    return rng.standard_normal((20, 30))


@pytest.fixture
def dominant_matrix(rng):
    """
    Diagonally dominant 8x8 matrix.

    Every diagonal pivot stays well away from zero under the fixed pivot
    order, so elimination is stable without row interchange.
    """
    n = 8
    A = rng.standard_normal((n, n)) + 2.0 * n * np.eye(n)
    return Matrix(A)


@pytest.fixture
def singular_matrix():
    """2x2 matrix whose second row is twice the first."""
    return Matrix.from_linear_array(2, 2, 1, 2, 2, 4)
