"""
CPU backend for the group-label permutation F-test.

Each trial shuffles the group codes and refits every response's one-way F
against the shuffled labels, holding the responses fixed. Trials are
independent; they are evaluated in chunks so that one bincount pass covers
chunk_size relabelings, and each chunk writes only its own rows of the
null matrix.

Labels for every trial are drawn from a single generator in trial order,
so a fixed seed gives identical results for any chunk_size.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pymobr.core.result import Result
from pymobr.core.compute.timing import Timer
from pymobr.anova._fstat import batched_oneway_f
from pymobr.montecarlo._common import PermutationParams
from pymobr.montecarlo.design import PermutationDesign


def empirical_p_values(observed: NDArray, perm_stats: NDArray) -> NDArray:
    """
    Upper-tail empirical p-values: count(observed <= perm) / nperm.

    Undefined permuted statistics (NaN) never count. An undefined observed
    statistic gives NaN.
    """
    nperm = perm_stats.shape[0]
    count = np.sum(observed[np.newaxis, :] <= perm_stats, axis=0)
    p = count / float(nperm)
    return np.where(np.isnan(observed), np.nan, p)


class CPUPermutationBackend:
    """CPU backend for the permutation F-test."""

    @property
    def name(self) -> str:
        return 'cpu_permutation'

    def solve(self, design: PermutationDesign) -> Result[PermutationParams]:
        """Run the permutation test and return Result[PermutationParams]."""
        timer = Timer()
        timer.start()

        values = design.values
        codes = design.codes
        n_levels = len(design.levels)
        nperm = design.nperm
        k = values.shape[1]

        rng = np.random.default_rng(design.seed)

        with timer.section('observed_stat'):
            observed = np.array([
                batched_oneway_f(values[:, j], codes, n_levels)[0]
                for j in range(k)
            ])

        with timer.section('permutation_replicates'):
            perm_stats = np.empty((nperm, k), dtype=np.float64)
            for start in range(0, nperm, design.chunk_size):
                stop = min(start + design.chunk_size, nperm)
                shuffled = np.stack([
                    rng.permutation(codes) for _ in range(stop - start)
                ])
                for j in range(k):
                    perm_stats[start:stop, j] = batched_oneway_f(
                        values[:, j], shuffled, n_levels
                    )

        with timer.section('p_value'):
            p_values = empirical_p_values(observed, perm_stats)

        timer.stop()

        params = PermutationParams(
            names=design.names,
            observed=observed,
            perm_stats=perm_stats,
            p_values=p_values,
            nperm=nperm,
            levels=design.levels,
        )

        return Result(
            params=params,
            info={
                'n': len(codes),
                'n_levels': n_levels,
                'seed': design.seed,
                'chunk_size': design.chunk_size,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
