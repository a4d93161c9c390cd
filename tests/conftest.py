"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyorderstats import from_values


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def unsorted_floats(rng):
    """Null-free float64 data in random order, with ties."""
    values = np.round(rng.standard_normal(101) * 10.0, 1)
    values[7] = values[42]
    return values


@pytest.fixture
def sequence_with_nulls():
    """Integers 1..8 shuffled, with three nulls interleaved."""
    return from_values([5, None, 2, 8, None, 1, 7, 3, None, 6, 4])
