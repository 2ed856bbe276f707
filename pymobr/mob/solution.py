"""
User-facing MoB statistics solution.

MobStatsSolution is the result bundle: the p-value table plus the
sample-scale and group-scale metric tables. It is read-only; arrays are
private copies flagged non-writeable. Presentation code dispatches on
its type (see pymobr.viz.plot).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pymobr.core.result import Result
from pymobr.mob._common import (
    GroupMetrics,
    GroupStats,
    MobParams,
    SampleStats,
    SiteMetrics,
    TESTED_METRICS,
)

if TYPE_CHECKING:
    import pandas as pd
    from pymobr.mob.design import MobDesign


@dataclass
class MobStatsSolution:
    """
    Sample- and group-scale biodiversity statistics with permutation
    p-values.

    Produced by mob_stats().
    """
    _result: Result[MobParams]
    _design: 'MobDesign'

    # --- Tables ---

    @property
    def pvalues(self) -> dict[str, float]:
        """Empirical p-value per metric (S, N, S_rare, PIE, S_asymp, betaPIE)."""
        return dict(self._result.params.pvalues)

    @property
    def samples(self) -> SampleStats:
        """Sample-scale statistics, one entry per site in input order."""
        return self._result.params.samples

    @property
    def groups(self) -> GroupStats:
        """Group-scale statistics, one entry per group level."""
        return self._result.params.groups

    @property
    def levels(self) -> tuple[str, ...]:
        return self._result.params.levels

    @property
    def f_observed(self) -> dict[str, float]:
        """Observed one-way F for every permuted metric (includes raw PIE)."""
        return dict(self._result.params.f_observed)

    @property
    def perm_stats(self) -> NDArray[np.floating[Any]]:
        """Permuted F statistics, shape (nperm, 7), columns as f_observed."""
        return self._result.params.perm_stats

    # --- Metadata ---

    @property
    def n_min(self) -> float:
        return self._design.n_min

    @property
    def nperm(self) -> int:
        return self._design.nperm

    @property
    def seed(self) -> int | None:
        return self._design.seed

    @property
    def effort_sample(self) -> float | None:
        """Individuals each site was rarefied to, or None if none qualified."""
        return self._result.info['effort_sample']

    @property
    def effort_group(self) -> float | None:
        """Individuals each group was rarefied to, or None if none qualified."""
        return self._result.info['effort_group']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Records ---

    def sample_records(self) -> tuple[SiteMetrics, ...]:
        """Sample-scale statistics as one record per site."""
        s = self.samples
        return tuple(
            SiteMetrics(
                site=i,
                group=s.group[i],
                N=float(s.N[i]),
                S=int(s.S[i]),
                S_rare=float(s.S_rare[i]),
                S_asymp=float(s.S_asymp[i]),
                PIE=float(s.PIE[i]),
                ENS_PIE=float(s.ENS_PIE[i]),
                betaPIE=float(s.betaPIE[i]),
            )
            for i in range(len(s.group))
        )

    def group_records(self) -> tuple[GroupMetrics, ...]:
        """Group-scale statistics as one record per group."""
        g = self.groups
        return tuple(
            GroupMetrics(
                group=g.group[k],
                n_samples=int(g.n_samples[k]),
                N=float(g.N[k]),
                S=int(g.S[k]),
                S_rare=float(g.S_rare[k]),
                S_asymp=float(g.S_asymp[k]),
                PIE=float(g.PIE[k]),
                ENS_PIE=float(g.ENS_PIE[k]),
            )
            for k in range(len(g.group))
        )

    def to_frames(self) -> tuple['pd.DataFrame', 'pd.DataFrame', 'pd.DataFrame']:
        """
        Tables as pandas DataFrames: (pvalues, samples, groups).

        The group column is a Categorical in level order. Requires pandas.
        """
        import pandas as pd

        s, g = self.samples, self.groups
        pvalues = pd.DataFrame([self.pvalues])
        samples = pd.DataFrame({
            'group': pd.Categorical(s.group, categories=self.levels),
            'N': np.array(s.N),
            'S': np.array(s.S),
            'S_rare': np.array(s.S_rare),
            'S_asymp': np.array(s.S_asymp),
            'PIE': np.array(s.PIE),
            'ENS_PIE': np.array(s.ENS_PIE),
            'betaPIE': np.array(s.betaPIE),
        })
        groups = pd.DataFrame({
            'group': pd.Categorical(g.group, categories=self.levels),
            'n_samples': np.array(g.n_samples),
            'N': np.array(g.N),
            'S': np.array(g.S),
            'S_rare': np.array(g.S_rare),
            'S_asymp': np.array(g.S_asymp),
            'PIE': np.array(g.PIE),
            'ENS_PIE': np.array(g.ENS_PIE),
        })
        return pvalues, samples, groups

    # --- Display ---

    def summary(self) -> str:
        """Group-scale table and permutation p-values."""
        g = self.groups
        lines = [
            "MEASUREMENT OF BIODIVERSITY: SAMPLE AND GROUP STATISTICS",
            "",
            f"Sites: {len(self.samples.group)}   Groups: {len(self.levels)}   "
            f"Permutations: {self.nperm}",
            f"Rarefaction effort: plots = {_fmt(self.effort_sample)}, "
            f"groups = {_fmt(self.effort_group)} (n_min = {self.n_min:g})",
            "",
            "Group scale:",
            f"{'group':<12} {'n':>4} {'N':>10} {'S':>6} {'S_rare':>9} "
            f"{'S_asymp':>9} {'PIE':>8} {'ENS_PIE':>9}",
        ]
        for k, level in enumerate(g.group):
            lines.append(
                f"{level:<12} {int(g.n_samples[k]):>4} {g.N[k]:>10.6g} {int(g.S[k]):>6} "
                f"{_fmt(g.S_rare[k]):>9} {_fmt(g.S_asymp[k]):>9} "
                f"{_fmt(g.PIE[k]):>8} {_fmt(g.ENS_PIE[k]):>9}"
            )

        lines.append("")
        lines.append("Permutation p-values (sample scale):")
        for key in TESTED_METRICS:
            lines.append(f"  {key.value:<10} {_fmt(self.pvalues[key.value])}")
        lines.append("  (PIE is tested on ENS_PIE)")

        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"MobStatsSolution(sites={len(self.samples.group)}, "
            f"groups={list(self.levels)}, nperm={self.nperm})"
        )


def _fmt(value: float | None) -> str:
    if value is None or np.isnan(value):
        return "NA"
    return f"{value:.4g}"
