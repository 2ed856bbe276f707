"""
Solver dispatch for Monte Carlo methods.

Public API:
    permutation_ftest(values, group, ...) -> PermutationSolution
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pymobr.montecarlo.design import PermutationDesign
from pymobr.montecarlo.solution import PermutationSolution
from pymobr.montecarlo.backends.cpu import CPUPermutationBackend


def permutation_ftest(
    values: Mapping[str, Any],
    group: Any,
    nperm: int = 999,
    *,
    seed: int | None = None,
    chunk_size: int = 256,
) -> PermutationSolution:
    """
    Permutation test of one-way ANOVA F statistics against group labels.

    For each of ``nperm`` trials the group labels are shuffled (uniformly,
    without replacement) and the F statistic of every response is refit
    against the shuffled labels. The p-value of a response is the fraction
    of trials whose F is at least the observed F.

    Args:
        values: {name: 1D response}; NaN marks a missing value, which is
            omitted from that response's fits
        group: Group labels, one per observation
        nperm: Number of permutations (>= 1)
        seed: Random seed; None draws fresh entropy
        chunk_size: Permutations evaluated per vectorised batch

    Returns:
        PermutationSolution

    Examples:
        >>> result = permutation_ftest({'S': S, 'N': N}, group, nperm=999, seed=1)
        >>> result.p_values['S']
    """
    design = PermutationDesign.for_ftest(
        values, group, nperm, seed=seed, chunk_size=chunk_size,
    )
    backend = CPUPermutationBackend()
    result = backend.solve(design)
    return PermutationSolution(_result=result, _design=design)
