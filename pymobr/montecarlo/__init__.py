"""
pymobr Monte Carlo methods.

Provides the group-label permutation test used to compare diversity
metrics among treatments.

Usage:
    from pymobr.montecarlo import permutation_ftest

    result = permutation_ftest({'S': S, 'N': N}, group, nperm=999, seed=42)
    result.p_values
"""

from pymobr.montecarlo.solvers import permutation_ftest
from pymobr.montecarlo.solution import PermutationSolution

__all__ = [
    "permutation_ftest",
    "PermutationSolution",
]
