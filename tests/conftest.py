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
def positive_pairs():
    """Six pairs with a strong positive correlation (scipy reference below)."""
    return [(1, 2), (2, 3), (3, 5), (4, 4), (5, 6), (6, 9)]


@pytest.fixture
def negative_pairs():
    """Eight pairs with a strong negative correlation (scipy reference below)."""
    return [(1, 8), (2, 5), (3, 6), (4, 7), (5, 4), (6, 2), (7, 3), (8, 1)]


@pytest.fixture
def noisy_line(rng):
    """y = 0.8 x + 12 plus integer noise, x drawn from 1..100."""
    x = rng.integers(1, 101, size=40).astype(float)
    y = np.clip(np.round(0.8 * x + 12 + rng.integers(-14, 15, size=40)), 0, 100)
    return x, y
