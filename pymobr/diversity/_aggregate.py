"""
Pooling of site abundances into group abundances.

A group is treated as one synthetic site whose abundance of each species
is the sum over the sites in that group. Every group-scale metric is
computed from this pooled matrix with the same functions used for sites.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymobr.core.validation import (
    check_array,
    check_2d,
    check_non_negative,
    check_groups,
)


def pool_codes(
    comm: NDArray[np.floating[Any]],
    codes: NDArray[np.intp],
    n_levels: int,
) -> NDArray[np.floating[Any]]:
    """
    Sum rows of an already validated matrix by integer group code.

    Returns:
        (n_levels, n_species) pooled matrix; row k is the sum of the rows
        with code k
    """
    pooled = np.zeros((n_levels, comm.shape[1]), dtype=np.float64)
    np.add.at(pooled, codes, comm)
    return pooled


def pool_by_group(
    comm: ArrayLike,
    group: Any,
) -> tuple[tuple[str, ...], NDArray[np.floating[Any]]]:
    """
    Pool a community matrix by group.

    Args:
        comm: 2D sites x species abundance matrix
        group: One label per site. Output rows follow the level order of
            the grouping vector (categories for a pandas Categorical,
            sorted labels otherwise).

    Returns:
        (levels, pooled) with pooled.shape == (len(levels), n_species)

    Examples:
        >>> levels, pooled = pool_by_group([[10, 0, 0], [0, 5, 5], [0, 0, 10]],
        ...                                ['A', 'A', 'B'])
        >>> levels
        ('A', 'B')
        >>> pooled
        array([[10.,  5.,  5.],
               [ 0.,  0., 10.]])
    """
    arr = check_array(comm, "comm")
    check_2d(arr, "comm")
    check_non_negative(arr, "comm")
    levels, codes = check_groups(group, arr.shape[0], "group")
    return levels, pool_codes(arr, codes, len(levels))
