"""
Tests for PIE and ENS_PIE.

Validates:
    - Known values (single species, equal abundances, worked example)
    - Per-row normalisation for matrices
    - Zero-total rows give NaN
    - Negative input fails
    - 0 <= PIE < 1 over random communities
"""

import numpy as np
import pytest

from pymobr.core.compute.tolerances import EXACT
from pymobr.core.exceptions import ValidationError
from pymobr.diversity import calc_pie, calc_ens_pie


class TestCalcPie:

    def test_single_species_is_zero(self):
        assert calc_pie([10, 0, 0]) == 0.0

    @pytest.mark.parametrize("k", [2, 3, 7, 50])
    def test_equal_abundances(self, k):
        np.testing.assert_allclose(calc_pie(np.full(k, 4)), 1 - 1 / k, rtol=EXACT.rtol)

    def test_worked_example(self):
        # 1 - (10/20)^2 - (5/20)^2 - (5/20)^2
        np.testing.assert_allclose(calc_pie([10, 5, 5]), 0.625, rtol=EXACT.rtol)

    def test_matrix_rows_independent(self):
        comm = np.array([[10, 0, 0], [0, 5, 5], [0, 0, 10]])
        np.testing.assert_allclose(calc_pie(comm), [0.0, 0.5, 0.0], atol=1e-15)

    def test_scale_invariant(self):
        np.testing.assert_allclose(calc_pie([1, 2, 3]), calc_pie([10, 20, 30]), rtol=EXACT.rtol)

    def test_zero_row_is_nan(self):
        result = calc_pie([[0, 0, 0], [1, 1, 0]])
        assert np.isnan(result[0])
        np.testing.assert_allclose(result[1], 0.5)

    def test_zero_vector_is_nan(self):
        assert np.isnan(calc_pie([0, 0]))

    def test_negative_fails(self):
        with pytest.raises(ValidationError, match="abundances must be non-negative"):
            calc_pie([[1, 2], [3, -1]])

    def test_returns_float_for_vector(self):
        assert isinstance(calc_pie([1, 2]), float)

    def test_bounds_random(self, rng):
        comm = rng.poisson(3.0, size=(200, 15))
        comm[:, 0] += 1  # no empty rows
        pie = calc_pie(comm)
        assert np.all(pie >= 0)
        assert np.all(pie < 1)
        single = np.sum(comm > 0, axis=1) == 1
        np.testing.assert_array_equal(pie == 0, single)


class TestCalcEnsPie:

    @pytest.mark.parametrize("k", [1, 2, 5, 12])
    def test_equal_abundances_gives_k(self, k):
        np.testing.assert_allclose(calc_ens_pie(np.full(k, 3)), k, rtol=EXACT.rtol)

    def test_relation_to_pie(self, rng):
        comm = rng.integers(1, 20, size=(30, 6))
        np.testing.assert_allclose(
            calc_ens_pie(comm), 1 / (1 - calc_pie(comm)), rtol=1e-10
        )

    def test_zero_row_is_nan(self):
        assert np.isnan(calc_ens_pie([[0, 0]])[0])

    def test_negative_fails(self):
        with pytest.raises(ValidationError):
            calc_ens_pie([-1, 2])
