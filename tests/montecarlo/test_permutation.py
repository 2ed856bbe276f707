"""
Tests for the group-label permutation F-test.

Validates:
    - p-value definition count(observed <= permuted) / nperm
    - Seed reproducibility and chunk-size independence
    - Undefined statistics (NaN) handling
    - Input validation
"""

import numpy as np
import pytest

from pymobr.core.exceptions import ValidationError
from pymobr.montecarlo import permutation_ftest
from pymobr.montecarlo.backends import empirical_p_values


class TestPermutationFTest:

    def test_significant_difference(self):
        y = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 11.0, 12.0, 13.0, 14.0, 15.0])
        group = ['a'] * 5 + ['b'] * 5
        result = permutation_ftest({'y': y}, group, nperm=999, seed=42)
        assert result.p_values['y'] < 0.05
        assert result.nperm == 999
        assert result.perm_stats.shape == (999, 1)

    def test_no_difference(self, rng):
        y = rng.normal(0, 1, 40)
        group = ['a'] * 20 + ['b'] * 20
        result = permutation_ftest({'y': y}, group, nperm=999, seed=1)
        assert result.p_values['y'] > 0.05

    def test_p_value_definition(self, rng):
        y = rng.normal(0, 1, 15)
        group = rng.choice(['a', 'b', 'c'], size=15)
        result = permutation_ftest({'y': y}, group, nperm=200, seed=3)
        observed = result.observed['y']
        expected = np.sum(observed <= result.perm_stats[:, 0]) / 200
        assert result.p_values['y'] == expected

    def test_p_values_in_unit_interval(self, rng):
        values = {name: rng.normal(size=24) for name in ('a', 'b', 'c')}
        group = np.repeat(['x', 'y', 'z'], 8)
        result = permutation_ftest(values, group, nperm=50, seed=0)
        for p in result.p_values.values():
            assert 0.0 <= p <= 1.0

    def test_seed_reproducibility(self, rng):
        y = rng.normal(size=12)
        group = np.repeat(['a', 'b', 'c'], 4)
        r1 = permutation_ftest({'y': y}, group, nperm=300, seed=42)
        r2 = permutation_ftest({'y': y}, group, nperm=300, seed=42)
        assert r1.p_values == r2.p_values
        np.testing.assert_array_equal(r1.perm_stats, r2.perm_stats)

    def test_different_seeds_differ(self, rng):
        y = rng.normal(size=12)
        group = np.repeat(['a', 'b', 'c'], 4)
        r1 = permutation_ftest({'y': y}, group, nperm=300, seed=42)
        r2 = permutation_ftest({'y': y}, group, nperm=300, seed=99)
        assert not np.allclose(r1.perm_stats, r2.perm_stats)

    @pytest.mark.parametrize("chunk_size", [1, 7, 1000])
    def test_chunk_size_does_not_change_results(self, rng, chunk_size):
        y = rng.normal(size=10)
        group = np.repeat(['a', 'b'], 5)
        ref = permutation_ftest({'y': y}, group, nperm=100, seed=5, chunk_size=256)
        other = permutation_ftest({'y': y}, group, nperm=100, seed=5, chunk_size=chunk_size)
        np.testing.assert_array_equal(ref.perm_stats, other.perm_stats)

    def test_permuted_labels_keep_group_sizes(self):
        # One group of size 1 holding the only distinct value: the observed
        # F is attained exactly when that value lands alone
        y = np.array([0.0, 0.0, 0.0, 0.0, 1.0])
        group = ['a', 'a', 'a', 'a', 'b']
        result = permutation_ftest({'y': y}, group, nperm=2000, seed=11)
        assert np.isinf(result.observed['y'])
        np.testing.assert_allclose(result.p_values['y'], 0.2, atol=0.03)

    def test_constant_response_gives_nan(self):
        result = permutation_ftest(
            {'y': np.ones(6)}, ['a', 'b'] * 3, nperm=10, seed=0,
        )
        assert np.isnan(result.observed['y'])
        assert np.isnan(result.p_values['y'])

    def test_missing_values_tolerated(self):
        y = np.array([1.0, np.nan, 3.0, 4.0, np.nan, 9.0])
        result = permutation_ftest({'y': y}, ['a', 'a', 'a', 'b', 'b', 'b'], nperm=50, seed=0)
        assert result.perm_stats.shape == (50, 1)

    def test_summary(self):
        result = permutation_ftest(
            {'S': [1.0, 2.0, 3.0, 8.0, 9.0, 7.0]}, ['a'] * 3 + ['b'] * 3, nperm=20, seed=0,
        )
        text = result.summary()
        assert "PERMUTATION F-TEST" in text
        assert "S" in text


class TestEmpiricalPValues:

    def test_nan_permuted_values_never_count(self):
        observed = np.array([1.0])
        perm = np.array([[np.nan], [2.0], [0.5], [np.nan]])
        np.testing.assert_allclose(empirical_p_values(observed, perm), [0.25])

    def test_ties_count(self):
        observed = np.array([2.0])
        perm = np.array([[2.0], [2.0], [1.0], [3.0]])
        np.testing.assert_allclose(empirical_p_values(observed, perm), [0.75])

    def test_nan_observed(self):
        result = empirical_p_values(np.array([np.nan, 1.0]), np.ones((4, 2)))
        assert np.isnan(result[0])
        assert result[1] == 1.0


class TestValidation:

    def test_nperm_zero(self):
        with pytest.raises(ValidationError, match="nperm"):
            permutation_ftest({'y': [1.0, 2.0]}, ['a', 'b'], nperm=0)

    def test_empty_values(self):
        with pytest.raises(ValidationError, match="values"):
            permutation_ftest({}, ['a', 'b'], nperm=10)

    def test_inconsistent_lengths(self):
        with pytest.raises(ValidationError, match="Inconsistent lengths"):
            permutation_ftest({'a': [1.0, 2.0], 'b': [1.0]}, ['x', 'y'], nperm=10)

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="Inf"):
            permutation_ftest({'y': [1.0, np.inf]}, ['x', 'y'], nperm=10)
