"""
Shared fixtures for ANOVA tests.
"""

import numpy as np
import pytest


@pytest.fixture
def oneway_balanced():
    """3-group balanced design (n=10 each), clear group differences."""
    rng = np.random.default_rng(42)
    n_per_group = 10
    y = np.concatenate([
        rng.normal(10.0, 2.0, n_per_group),
        rng.normal(15.0, 2.0, n_per_group),
        rng.normal(20.0, 2.0, n_per_group),
    ])
    group = np.array(['A'] * n_per_group + ['B'] * n_per_group + ['C'] * n_per_group)
    return y, group


@pytest.fixture
def oneway_unbalanced():
    """3-group unbalanced design (n=5, 12, 8)."""
    rng = np.random.default_rng(7)
    y = np.concatenate([
        rng.normal(3.0, 1.0, 5),
        rng.normal(3.5, 1.0, 12),
        rng.normal(2.0, 1.0, 8),
    ])
    group = np.array(['x'] * 5 + ['y'] * 12 + ['z'] * 8)
    return y, group
