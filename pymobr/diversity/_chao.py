"""
Bias-corrected Chao1 asymptotic richness estimator.

    S_chao1 = S_obs + (N - 1)/N * f1 (f1 - 1) / (2 (f2 + 1))

where f1 and f2 are the numbers of singleton and doubleton species and N
is the number of individuals. This is the "S.chao1" column of vegan's
estimateR(). The estimate is undefined (NaN) for a row without
individuals.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymobr.core.validation import check_array, check_finite, check_non_negative
from pymobr.core.exceptions import DimensionError


def chao1(comm: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Bias-corrected Chao1 richness per site.

    Args:
        comm: Non-negative abundances, 1D (one site) or 2D (sites x species)

    Returns:
        float for 1D input, array of shape (n_sites,) for 2D input

    Examples:
        >>> chao1([1, 1, 2, 5])
        4.444444444444445
    """
    arr = check_array(comm, "comm")
    check_finite(arr, "comm")
    check_non_negative(arr, "comm")
    if arr.ndim not in (1, 2):
        raise DimensionError(
            f"comm: expected 1D or 2D array, got {arr.ndim}D with shape {arr.shape}"
        )

    rows = np.atleast_2d(arr)
    n = np.sum(rows, axis=1)
    s_obs = np.sum(rows > 0, axis=1)
    f1 = np.sum(rows == 1, axis=1)
    f2 = np.sum(rows == 2, axis=1)

    with np.errstate(divide='ignore', invalid='ignore'):
        correction = (n - 1.0) / n * f1 * (f1 - 1.0) / (2.0 * (f2 + 1.0))
    estimate = np.where(n > 0, s_obs + correction, np.nan)

    if arr.ndim == 1:
        return float(estimate[0])
    return estimate
