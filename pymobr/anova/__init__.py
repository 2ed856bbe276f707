"""
One-way Analysis of Variance.

Public API:
    anova_oneway(y, group) -> AnovaSolution
    oneway_f(y, codes, n_levels) -> float
    batched_oneway_f(y, codes, n_levels) -> F for each row of a code matrix
"""

from pymobr.anova.solvers import anova_oneway
from pymobr.anova.solution import AnovaSolution
from pymobr.anova._fstat import oneway_f, batched_oneway_f

__all__ = [
    "anova_oneway",
    "AnovaSolution",
    "oneway_f",
    "batched_oneway_f",
]
