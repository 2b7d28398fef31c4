"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def matrix_5x5():
    """Square reference matrix used by both QR variants and LUP."""
    return np.array([
        [3.0, 5.0, 0.0, 0.0, 1.0],
        [0.0, 2.0, 3.0, 0.0, 9.0],
        [-1.0, 1.0, 4.0, 2.0, 3.0],
        [6.0, 0.0, -9.0, 1.0, 0.0],
        [-8.0, 3.0, 1.0, -5.0, 2.0],
    ])


@pytest.fixture
def matrix_6x5():
    """Tall reference matrix (more rows than columns)."""
    return np.array([
        [0.0, 2.0, 3.0, 0.0, 9.0],
        [-1.0, 1.0, 4.0, 2.0, 3.0],
        [6.0, 0.0, -9.0, 1.0, 0.0],
        [3.0, 5.0, 0.0, 0.0, 1.0],
        [-8.0, 3.0, 1.0, -5.0, 2.0],
        [-2.0, -1.0, -1.0, 4.0, 6.0],
    ])


@pytest.fixture
def duplicate_column_matrix():
    """Square matrix whose second column repeats the first (rank 2)."""
    return np.array([
        [1.0, 1.0, 0.0],
        [2.0, 2.0, 1.0],
        [3.0, 3.0, 5.0],
    ])
