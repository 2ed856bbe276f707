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
def small_comm():
    """Three sites, three species, two groups (A, A, B)."""
    comm = np.array([
        [10, 0, 0],
        [0, 5, 5],
        [0, 0, 10],
    ])
    group = np.array(['A', 'A', 'B'])
    return comm, group


@pytest.fixture
def treatment_comm(rng):
    """
    20 sites in two treatments with clearly different richness.

    'rich' sites draw 200 individuals over 30 equally common species,
    'poor' sites draw 200 individuals dominated by one of 5 species.
    """
    rich = rng.multinomial(200, np.full(30, 1 / 30), size=10)
    p_poor = np.zeros(30)
    p_poor[:5] = [0.8, 0.05, 0.05, 0.05, 0.05]
    poor = rng.multinomial(200, p_poor, size=10)
    comm = np.vstack([rich, poor])
    group = np.array(['rich'] * 10 + ['poor'] * 10)
    return comm, group
