"""
Probability of Interspecific Encounter (PIE) and its effective number.

PIE is Simpson's evenness index, 1 - sum(p_i^2), where p_i are the relative
abundances of the species in one site. ENS_PIE is the inverse Simpson
index, 1 / sum(p_i^2): the number of equally common species that would
give the same PIE.

Both accept a 1D abundance vector (one site) or a 2D matrix (sites x
species); normalisation is done per row. A site with no individuals has
no defined relative abundances and yields NaN.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymobr.core.validation import check_array, check_non_negative
from pymobr.core.exceptions import DimensionError


def _simpson_concentration(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """sum(p_i^2) per site; NaN where a site total is zero."""
    arr = check_array(x, name)
    check_non_negative(arr, name)
    if arr.ndim not in (1, 2):
        raise DimensionError(
            f"{name}: expected 1D or 2D array, got {arr.ndim}D with shape {arr.shape}"
        )

    total = np.sum(arr, axis=-1, keepdims=True)
    with np.errstate(divide='ignore', invalid='ignore'):
        p = arr / total
    concentration = np.sum(p * p, axis=-1)

    # 0/0 leaves NaN already; make it explicit for rows whose total is 0
    empty = np.squeeze(total, axis=-1) == 0
    return np.where(empty, np.nan, concentration)


def calc_pie(x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Probability of Interspecific Encounter.

    Args:
        x: Non-negative abundances, 1D (one site) or 2D (sites x species)

    Returns:
        float for 1D input, array of shape (n_sites,) for 2D input.
        NaN for sites without individuals.

    Raises:
        ValidationError: If any abundance is negative

    Examples:
        >>> calc_pie([10, 0, 0])
        0.0
        >>> calc_pie([[5, 5], [1, 1]])
        array([0.5, 0.5])
    """
    pie = 1.0 - _simpson_concentration(x, "x")
    return float(pie) if np.ndim(pie) == 0 else pie


def calc_ens_pie(x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Effective number of species under PIE (inverse Simpson index).

    Same input contract as calc_pie(). A site with k equally abundant
    species has ENS_PIE == k.
    """
    concentration = _simpson_concentration(x, "x")
    with np.errstate(divide='ignore', invalid='ignore'):
        ens = 1.0 / concentration
    return float(ens) if np.ndim(ens) == 0 else ens
