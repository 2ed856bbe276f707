"""
Tests for input validation utilities.

Validates:
    - check_array: conversion, dtype coercion, object rejection
    - check_non_negative, check_finite
    - check_int_at_least / check_number_at_least
    - check_groups: level order and encoding
"""

import numpy as np
import pytest

from pymobr.core.exceptions import DimensionError, ValidationError
from pymobr.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_groups,
    check_int_at_least,
    check_non_negative,
    check_number_at_least,
)


class TestCheckArray:

    def test_int_list_to_float(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64

    def test_bool_to_float(self):
        result = check_array([True, False], "x")
        assert result.dtype == np.float64

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="x"):
            check_array(["a", "b"], "x")

    def test_rejects_mixed_object(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array(np.array([1, "a", None], dtype=object), "x")


class TestCheckNonNegative:

    def test_accepts_zeros(self):
        check_non_negative(np.zeros(3), "comm")

    def test_rejects_negative(self):
        with pytest.raises(ValidationError, match="abundances must be non-negative"):
            check_non_negative(np.array([1.0, -1.0]), "comm")

    def test_ignores_nan(self):
        check_non_negative(np.array([1.0, np.nan]), "comm")


class TestCheckFinite:

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "comm")

    def test_rejects_inf(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([1.0, np.inf]), "comm")


class TestDimensions:

    def test_check_1d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_check_2d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "comm")

    def test_consistent_length(self):
        with pytest.raises(DimensionError, match="a=2, b=3"):
            check_consistent_length(np.zeros(2), np.zeros(3), names=("a", "b"))


class TestScalars:

    def test_int_ok(self):
        assert check_int_at_least(5, 1, "nperm") == 5

    def test_numpy_int_ok(self):
        assert check_int_at_least(np.int64(3), 1, "nperm") == 3

    def test_int_too_small(self):
        with pytest.raises(ValidationError, match="nperm: must be >= 1, got 0"):
            check_int_at_least(0, 1, "nperm")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_int_at_least(10.0, 1, "nperm")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_int_at_least(True, 1, "nperm")

    def test_number_ok(self):
        assert check_number_at_least(2.5, 0, "n_min") == 2.5

    def test_number_negative(self):
        with pytest.raises(ValidationError, match="n_min"):
            check_number_at_least(-1, 0, "n_min")


class TestCheckGroups:

    def test_sorted_levels(self):
        levels, codes = check_groups(['b', 'a', 'b', 'c'], 4, "group")
        assert levels == ('a', 'b', 'c')
        np.testing.assert_array_equal(codes, [1, 0, 1, 2])

    def test_numeric_labels_become_strings(self):
        levels, codes = check_groups([2, 1, 2], 3, "group")
        assert levels == ('1', '2')
        np.testing.assert_array_equal(codes, [1, 0, 1])

    def test_numeric_labels_sort_numerically(self):
        levels, codes = check_groups([2, 10, 1], 3, "group")
        assert levels == ('1', '2', '10')
        np.testing.assert_array_equal(codes, [1, 2, 0])

    def test_float_labels_sort_numerically(self):
        levels, _ = check_groups(np.array([2.5, 10.0, 1.0]), 3, "group")
        assert levels == ('1.0', '2.5', '10.0')

    def test_wrong_length(self):
        with pytest.raises(DimensionError, match="doesn't match"):
            check_groups(['a', 'b'], 3, "group")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            check_groups([['a'], ['b']], 2, "group")

    def test_missing_label_rejected(self):
        with pytest.raises(ValidationError, match="missing"):
            check_groups(['a', None, 'b'], 3, "group")

    def test_categorical_order(self):
        pd = pytest.importorskip("pandas")
        group = pd.Categorical(['low', 'high', 'low'], categories=['low', 'mid', 'high'])
        levels, codes = check_groups(group, 3, "group")
        # unused 'mid' is dropped, category order kept
        assert levels == ('low', 'high')
        np.testing.assert_array_equal(codes, [0, 1, 0])

    def test_categorical_series_order(self):
        pd = pytest.importorskip("pandas")
        group = pd.Series(['z', 'y', 'z'], dtype=pd.CategoricalDtype(['z', 'y']))
        levels, _ = check_groups(group, 3, "group")
        assert levels == ('z', 'y')
