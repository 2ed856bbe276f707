"""
Common data types for measurement-of-biodiversity (MoB) statistics.

Contains the metric identifiers, the dispatch tables that map them to
columns, and the frozen payloads that go inside Result[MobParams].
Payloads are pure data containers.

Missing values are NaN. N and S are never missing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray


class Metric(str, Enum):
    """Identifiers of the sample- and group-scale metrics."""
    S = 'S'
    N = 'N'
    S_RARE = 'S_rare'
    PIE = 'PIE'
    ENS_PIE = 'ENS_PIE'
    S_ASYMP = 'S_asymp'
    BETA_PIE = 'betaPIE'


@dataclass(frozen=True)
class SampleStats:
    """
    Sample-scale (plot) statistics, one entry per site in input order.

    betaPIE is the PIE of the site's group minus the site's own PIE.
    """
    group: tuple[str, ...]
    N: NDArray[np.floating[Any]]
    S: NDArray[np.int64]
    S_rare: NDArray[np.floating[Any]]
    S_asymp: NDArray[np.floating[Any]]
    PIE: NDArray[np.floating[Any]]
    ENS_PIE: NDArray[np.floating[Any]]
    betaPIE: NDArray[np.floating[Any]]


@dataclass(frozen=True)
class GroupStats:
    """Group-scale (treatment) statistics computed on pooled abundances."""
    group: tuple[str, ...]
    n_samples: NDArray[np.int64]
    N: NDArray[np.floating[Any]]
    S: NDArray[np.int64]
    S_rare: NDArray[np.floating[Any]]
    S_asymp: NDArray[np.floating[Any]]
    PIE: NDArray[np.floating[Any]]
    ENS_PIE: NDArray[np.floating[Any]]


@dataclass(frozen=True)
class SiteMetrics:
    """One site's metrics; a row of SampleStats."""
    site: int
    group: str
    N: float
    S: int
    S_rare: float
    S_asymp: float
    PIE: float
    ENS_PIE: float
    betaPIE: float


@dataclass(frozen=True)
class GroupMetrics:
    """One group's metrics; a row of GroupStats."""
    group: str
    n_samples: int
    N: float
    S: int
    S_rare: float
    S_asymp: float
    PIE: float
    ENS_PIE: float


@dataclass(frozen=True)
class MobParams:
    """
    Parameter payload for get_mob_stats-style analyses.

    f_observed and perm_stats cover every metric in F_METRICS; pvalues
    covers the keys of TESTED_METRICS.
    """
    pvalues: dict[str, float]
    samples: SampleStats
    groups: GroupStats
    f_observed: dict[str, float]
    perm_stats: NDArray[np.floating[Any]]   # shape (nperm, len(F_METRICS))
    levels: tuple[str, ...]


# Sample-scale column for each metric. Every metric resolves through this
# table; there is no lookup by attribute name.
SAMPLE_COLUMNS: dict[Metric, Callable[[SampleStats], NDArray]] = {
    Metric.S: lambda s: s.S,
    Metric.N: lambda s: s.N,
    Metric.S_RARE: lambda s: s.S_rare,
    Metric.PIE: lambda s: s.PIE,
    Metric.ENS_PIE: lambda s: s.ENS_PIE,
    Metric.S_ASYMP: lambda s: s.S_asymp,
    Metric.BETA_PIE: lambda s: s.betaPIE,
}

GROUP_COLUMNS: dict[Metric, Callable[[GroupStats], NDArray]] = {
    Metric.S: lambda g: g.S,
    Metric.N: lambda g: g.N,
    Metric.S_RARE: lambda g: g.S_rare,
    Metric.PIE: lambda g: g.PIE,
    Metric.ENS_PIE: lambda g: g.ENS_PIE,
    Metric.S_ASYMP: lambda g: g.S_asymp,
}

# Metrics whose F statistic is computed and permuted, in table order.
F_METRICS: tuple[Metric, ...] = (
    Metric.S,
    Metric.N,
    Metric.S_RARE,
    Metric.PIE,
    Metric.ENS_PIE,
    Metric.S_ASYMP,
    Metric.BETA_PIE,
)

# Reported p-value -> metric whose F statistic it is read from.
# The PIE p-value is the ENS_PIE test.
TESTED_METRICS: dict[Metric, Metric] = {
    Metric.S: Metric.S,
    Metric.N: Metric.N,
    Metric.S_RARE: Metric.S_RARE,
    Metric.PIE: Metric.ENS_PIE,
    Metric.S_ASYMP: Metric.S_ASYMP,
    Metric.BETA_PIE: Metric.BETA_PIE,
}
