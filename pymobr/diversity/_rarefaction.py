"""
Individual-based rarefaction (Hurlbert 1971; Heck et al. 1975).

The expected number of species found when n individuals are drawn without
replacement from a site holding N individuals, of which x_i belong to
species i:

    E[S_n] = sum_i [1 - C(N - x_i, n) / C(N, n)]

The binomial ratio is evaluated in log space with gammaln so that large
counts do not overflow. A species with N - x_i < n is certain to be drawn
and contributes exactly 1.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.special import gammaln

from pymobr.core.validation import (
    check_array,
    check_finite,
    check_non_negative,
    check_1d,
    check_2d,
    check_number_at_least,
)
from pymobr.core.exceptions import ValidationError


def _lchoose(n: NDArray, k: float) -> NDArray:
    return gammaln(n + 1.0) - gammaln(k + 1.0) - gammaln(n - k + 1.0)


def _rarefy_one(x: NDArray, total: float, effort: float) -> float:
    if effort == 0:
        return 0.0
    remaining = total - x
    drawn = remaining < effort
    prob_absent = np.zeros_like(x)
    ok = ~drawn
    if np.any(ok):
        prob_absent[ok] = np.exp(_lchoose(remaining[ok], effort) - _lchoose(np.array(total), effort))
    return float(np.sum(1.0 - prob_absent))


def rarefy(
    x: ArrayLike,
    effort: float | ArrayLike,
) -> float | NDArray[np.floating[Any]]:
    """
    Expected species richness of one site at a reduced number of individuals.

    Args:
        x: 1D non-negative abundance vector for one site
        effort: Number of individuals drawn. A scalar returns a float; a
            sequence returns one expected richness per effort (a
            rarefaction curve).

    Returns:
        Expected richness (fractional in general)

    Raises:
        ValidationError: If x has negative entries, or an effort is negative
            or exceeds the total number of individuals in x

    Examples:
        >>> rarefy([10, 5, 5], 20)
        3.0
        >>> rarefy([10, 5, 5], [1, 2, 20])
        array([1.        , 1.65789474, 3.        ])
    """
    arr = check_array(x, "x")
    check_1d(arr, "x")
    check_finite(arr, "x")
    check_non_negative(arr, "x")

    present = arr[arr > 0]
    total = float(np.sum(present))

    efforts = np.atleast_1d(np.asarray(effort, dtype=np.float64))
    if np.any(~np.isfinite(efforts)) or np.any(efforts < 0):
        raise ValidationError(f"effort: must be finite and >= 0, got {effort!r}")
    if np.any(efforts > total):
        raise ValidationError(
            f"effort: {float(np.max(efforts))} exceeds the {total} individuals in x"
        )

    values = np.array([_rarefy_one(present, total, e) for e in efforts])
    if np.ndim(effort) == 0:
        return float(values[0])
    return values


@dataclass(frozen=True)
class RarefiedRichness:
    """
    Rarefied richness for every row of a community matrix.

    Attributes:
        values: Expected richness per row; NaN for excluded rows
        effort: Common number of individuals used, or None if every row
            was excluded
        n_excluded: Number of rows with fewer than n_min individuals
    """
    values: NDArray[np.floating[Any]]
    effort: float | None
    n_excluded: int


def rarefied_richness(comm: ArrayLike, n_min: float) -> RarefiedRichness:
    """
    Rarefy every row of a community matrix to a common effort.

    Rows with fewer than ``n_min`` individuals are excluded (NaN). The
    common effort is the smallest total among the retained rows, and never
    less than ``n_min``; it therefore never exceeds any retained row's total.

    The caller decides how to report excluded rows; nothing is emitted here.

    Args:
        comm: 2D sites x species abundance matrix
        n_min: Minimum number of individuals a row needs to be rarefied

    Returns:
        RarefiedRichness
    """
    arr = check_array(comm, "comm")
    check_2d(arr, "comm")
    check_finite(arr, "comm")
    check_non_negative(arr, "comm")
    n_min = check_number_at_least(n_min, 0, "n_min")

    totals = np.sum(arr, axis=1)
    low = totals < n_min
    values = np.full(arr.shape[0], np.nan)

    if np.all(low):
        return RarefiedRichness(values=values, effort=None, n_excluded=int(np.sum(low)))

    effort = max(n_min, float(np.min(totals[~low])))
    for i in np.flatnonzero(~low):
        values[i] = rarefy(arr[i], effort)

    return RarefiedRichness(values=values, effort=effort, n_excluded=int(np.sum(low)))
