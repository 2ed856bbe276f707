"""
Solver dispatch for MoB statistics.

Public API:
    mob_stats(comm, group, ...) -> MobStatsSolution
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from typing import Any

from pymobr.mob.design import MobDesign
from pymobr.mob.solution import MobStatsSolution
from pymobr.mob.backends.cpu import CPUMobBackend


def mob_stats(
    comm: Any,
    group: Any,
    *,
    env: Mapping[str, Any] | None = None,
    n_min: float = 10,
    nperm: int = 1000,
    seed: int | None = None,
    chunk_size: int = 256,
) -> MobStatsSolution:
    """
    Sample-based and group-based biodiversity statistics.

    Computes, for every site and for every group (sites pooled): the number
    of individuals N, observed richness S, rarefied richness S_rare, the
    bias-corrected Chao1 richness S_asymp, PIE and ENS_PIE; plus betaPIE
    per site (group PIE minus site PIE). Each sample-scale metric is then
    tested against group membership with a permutation one-way ANOVA.

    Sites with fewer than ``n_min`` individuals are left out of rarefied
    richness, and sites without individuals are left out of PIE and
    ENS_PIE; each condition produces one UserWarning per scale and the
    affected values are NaN.

    Args:
        comm: Sites x species abundance matrix; non-negative.
        group: Group label per site, or a column name of ``env``.
        env: Optional site attribute table.
        n_min: Minimum number of individuals a site (or group) needs for
            rarefied richness. Default 10.
        nperm: Number of permutations (>= 1). Default 1000.
        seed: Random seed for the permutations; fix it for reproducible
            p-values.
        chunk_size: Permutations evaluated per vectorised batch. Does not
            affect results.

    Returns:
        MobStatsSolution

    Raises:
        ValidationError: For negative abundances, nperm < 1, or malformed
            inputs. Nothing is computed in that case.

    Examples:
        >>> stats = mob_stats(comm, env['group'], nperm=199, seed=1)
        >>> stats.pvalues['S']
        >>> print(stats.summary())
    """
    design = MobDesign.for_stats(
        comm, group,
        env=env,
        n_min=n_min,
        nperm=nperm,
        seed=seed,
        chunk_size=chunk_size,
    )
    result = CPUMobBackend().solve(design)

    for message in result.warnings:
        warnings.warn(message, UserWarning, stacklevel=2)

    return MobStatsSolution(_result=result, _design=design)
