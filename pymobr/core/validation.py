"""
Input validation utilities for pymobr.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymobr.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like (lists, numpy arrays, pandas DataFrames).
    Rejects inputs that result in object or other non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_:
        result = result.astype(np.float64)

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_non_negative(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has no negative entries. NaN entries are ignored.

    Raises:
        ValidationError: If any entry is negative
    """
    negative = array < 0
    if np.any(negative):
        raise ValidationError(
            f"{name}: abundances must be non-negative "
            f"(found {int(np.sum(negative))} negative entries, min={np.nanmin(array)})"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray,
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray, min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of rows.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_int_at_least(value: Any, minimum: int, name: str) -> int:
    """
    Verify value is an integer no smaller than ``minimum``.

    Booleans are rejected even though they subclass int.

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not an integer or is too small
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    if value < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {value}")
    return int(value)


def check_number_at_least(value: Any, minimum: float, name: str) -> float:
    """
    Verify value is a real number no smaller than ``minimum``.

    Raises:
        ValidationError: If value is not a real number or is too small
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a number, got {type(value).__name__} {value!r}"
        )
    if not np.isfinite(value) or value < minimum:
        raise ValidationError(f"{name}: must be a finite number >= {minimum}, got {value}")
    return float(value)


def check_groups(
    group: Any,
    n: int,
    name: str,
) -> tuple[tuple[str, ...], NDArray[np.intp]]:
    """
    Validate a grouping vector and encode it as (levels, codes).

    Level order follows the vector's intrinsic order: the categories of a
    pandas Categorical (or categorical Series), with unused categories
    dropped, otherwise the sorted unique values (numeric labels sort
    numerically). Labels are stored as strings.

    Args:
        group: 1D array-like of labels, one per site
        n: Required length
        name: Parameter name for error messages

    Returns:
        (levels, codes) where codes[i] indexes levels

    Raises:
        DimensionError: If group is not 1D or has the wrong length
        ValidationError: If group contains missing labels
    """
    categories = getattr(getattr(group, 'cat', group), 'categories', None)

    group_arr = np.asarray(group)
    if group_arr.ndim != 1:
        raise DimensionError(f"{name}: expected 1D, got {group_arr.ndim}D")
    if len(group_arr) != n:
        raise DimensionError(
            f"{name}: length {len(group_arr)} doesn't match number of sites {n}"
        )

    for v in group_arr:
        if v is None or (isinstance(v, float) and np.isnan(v)):
            raise ValidationError(f"{name}: contains missing labels")

    labels = np.array([str(v) for v in group_arr])
    present = set(labels.tolist())

    if categories is not None:
        levels = tuple(str(c) for c in categories if str(c) in present)
    else:
        # natural order of the original values, so numbers sort numerically
        try:
            ordered = np.unique(group_arr).tolist()
        except TypeError:
            ordered = sorted(present)
        levels = tuple(dict.fromkeys(str(v) for v in ordered))

    index = {level: i for i, level in enumerate(levels)}
    codes = np.array([index[label] for label in labels], dtype=np.intp)
    return levels, codes
