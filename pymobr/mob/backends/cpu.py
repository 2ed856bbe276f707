"""
CPU backend for sample- and group-scale biodiversity statistics.

Order of work:
    1. sample scale: N, S, rarefied S, PIE, ENS_PIE, Chao1
    2. group scale: the same metrics on abundances pooled per group
    3. betaPIE per site
    4. permutation F-test of every metric against group membership

Advisory conditions (rows too small to rarefy, rows without individuals)
are collected once per category and scale and returned as warnings on
the Result; the affected entries are NaN.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymobr.core.result import Result
from pymobr.core.compute.timing import Timer
from pymobr.diversity import calc_pie, calc_ens_pie, chao1, rarefied_richness, pool_codes
from pymobr.montecarlo.design import PermutationDesign
from pymobr.montecarlo.backends.cpu import CPUPermutationBackend
from pymobr.mob._common import (
    F_METRICS,
    SAMPLE_COLUMNS,
    TESTED_METRICS,
    GroupStats,
    MobParams,
    SampleStats,
)
from pymobr.mob.design import MobDesign


def _frozen(arr: NDArray) -> NDArray:
    out = np.array(arr, copy=True)
    out.setflags(write=False)
    return out


def _scale_metrics(
    comm: NDArray,
    n_min: float,
    unit: str,
    warnings_list: list[str],
) -> tuple[dict[str, NDArray], float | None]:
    """
    Metrics for every row of ``comm``; ``unit`` names the rows in warnings.

    Returns:
        ({column: values}, rarefaction effort or None)
    """
    totals = np.sum(comm, axis=1)
    n = totals.astype(np.float64)
    s = np.sum(comm > 0, axis=1).astype(np.int64)

    rare = rarefied_richness(comm, n_min)
    if rare.n_excluded > 0:
        warnings_list.append(
            f"There are {rare.n_excluded} {unit} with less than {n_min:g} individuals. "
            f"These are removed for the calculation of rarefied richness."
        )

    empty = totals == 0
    if np.any(empty):
        warnings_list.append(
            f"There are {int(np.sum(empty))} {unit} without any individuals. "
            f"These are removed for the calculation of PIE."
        )
    pie = np.where(empty, np.nan, calc_pie(comm))
    ens_pie = np.where(empty, np.nan, calc_ens_pie(comm))

    columns = {
        'N': n,
        'S': s,
        'S_rare': rare.values,
        'S_asymp': chao1(comm),
        'PIE': pie,
        'ENS_PIE': ens_pie,
    }
    return columns, rare.effort


class CPUMobBackend:
    """CPU backend for MoB sample/group statistics and permutation tests."""

    @property
    def name(self) -> str:
        return 'cpu_mob'

    def solve(self, design: MobDesign) -> Result[MobParams]:
        """Compute all statistics and return Result[MobParams]."""
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        levels = design.levels
        codes = design.codes
        n_levels = len(levels)

        with timer.section('sample_metrics'):
            sample_cols, effort_sample = _scale_metrics(
                design.comm, design.n_min, 'plots', warnings_list,
            )

        with timer.section('group_metrics'):
            pooled = pool_codes(design.comm, codes, n_levels)
            group_cols, effort_group = _scale_metrics(
                pooled, design.n_min, 'groups', warnings_list,
            )
            n_samples = np.bincount(codes, minlength=n_levels).astype(np.int64)

        # NaN in either operand propagates
        beta_pie = group_cols['PIE'][codes] - sample_cols['PIE']

        samples = SampleStats(
            group=tuple(levels[c] for c in codes),
            N=_frozen(sample_cols['N']),
            S=_frozen(sample_cols['S']),
            S_rare=_frozen(sample_cols['S_rare']),
            S_asymp=_frozen(sample_cols['S_asymp']),
            PIE=_frozen(sample_cols['PIE']),
            ENS_PIE=_frozen(sample_cols['ENS_PIE']),
            betaPIE=_frozen(beta_pie),
        )
        groups = GroupStats(
            group=levels,
            n_samples=_frozen(n_samples),
            N=_frozen(group_cols['N']),
            S=_frozen(group_cols['S']),
            S_rare=_frozen(group_cols['S_rare']),
            S_asymp=_frozen(group_cols['S_asymp']),
            PIE=_frozen(group_cols['PIE']),
            ENS_PIE=_frozen(group_cols['ENS_PIE']),
        )

        with timer.section('permutation'):
            perm_design = PermutationDesign(
                names=tuple(m.value for m in F_METRICS),
                values=np.column_stack([
                    np.asarray(SAMPLE_COLUMNS[m](samples), dtype=np.float64)
                    for m in F_METRICS
                ]),
                levels=levels,
                codes=codes,
                nperm=design.nperm,
                seed=design.seed,
                chunk_size=design.chunk_size,
            )
            perm = CPUPermutationBackend().solve(perm_design).params

        position = {m: j for j, m in enumerate(F_METRICS)}
        pvalues = {
            key.value: float(perm.p_values[position[tested]])
            for key, tested in TESTED_METRICS.items()
        }
        f_observed = {
            m.value: float(perm.observed[j]) for j, m in enumerate(F_METRICS)
        }

        timer.stop()

        params = MobParams(
            pvalues=pvalues,
            samples=samples,
            groups=groups,
            f_observed=f_observed,
            perm_stats=_frozen(perm.perm_stats),
            levels=levels,
        )

        return Result(
            params=params,
            info={
                'n_sites': design.n_sites,
                'n_species': design.n_species,
                'n_groups': n_levels,
                'n_min': design.n_min,
                'nperm': design.nperm,
                'seed': design.seed,
                'effort_sample': effort_sample,
                'effort_group': effort_group,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
