"""
Common data structures for Monte Carlo methods.

PermutationParams is the parameter payload wrapped by Result[P] and
exposed through PermutationSolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class PermutationParams:
    """
    Parameter payload for a group-label permutation F-test.

    - names: statistic names, one per tested response
    - observed: F on the original labels, shape (k,)
    - perm_stats: F under each relabeling, shape (nperm, k)
    - p_values: count(observed <= perm_stats) / nperm, shape (k,);
      NaN where the observed F is undefined
    """
    names: tuple[str, ...]
    observed: NDArray[np.floating[Any]]
    perm_stats: NDArray[np.floating[Any]]
    p_values: NDArray[np.floating[Any]]
    nperm: int
    levels: tuple[str, ...]
