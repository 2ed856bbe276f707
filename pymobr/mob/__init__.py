"""
Measurement of biodiversity (MoB) statistics at sample and group scale.

Public API:
    mob_stats(comm, group, ...) -> MobStatsSolution
    Metric: identifiers of the computed metrics
"""

from pymobr.mob.solvers import mob_stats
from pymobr.mob.solution import MobStatsSolution
from pymobr.mob._common import (
    Metric,
    SampleStats,
    GroupStats,
    SiteMetrics,
    GroupMetrics,
    F_METRICS,
    TESTED_METRICS,
)

__all__ = [
    "mob_stats",
    "MobStatsSolution",
    "Metric",
    "SampleStats",
    "GroupStats",
    "SiteMetrics",
    "GroupMetrics",
    "F_METRICS",
    "TESTED_METRICS",
]
