"""
pymobr: measurement of biodiversity statistics for Python.

Sample- and group-scale species richness, rarefied richness, PIE and
asymptotic richness, with permutation ANOVA tests of treatment effects.

Submodules:
    diversity: PIE, ENS_PIE, rarefaction, Chao1, pooling by group
    anova: One-way ANOVA F statistics
    montecarlo: Group-label permutation F-test
    mob: Sample/group statistics engine (mob_stats)
    viz: Boxplots of mob_stats results (optional, needs matplotlib)
"""

__version__ = "0.1.0"

from pymobr import diversity
from pymobr import anova
from pymobr import montecarlo
from pymobr import mob
from pymobr.mob import mob_stats, MobStatsSolution, Metric
from pymobr.core.exceptions import PyMobrError, ValidationError

__all__ = [
    "__version__",
    "diversity",
    "anova",
    "montecarlo",
    "mob",
    "mob_stats",
    "MobStatsSolution",
    "Metric",
    "PyMobrError",
    "ValidationError",
]
