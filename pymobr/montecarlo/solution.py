"""
Solution wrapper for permutation test results.

PermutationSolution wraps Result[PermutationParams] and provides
convenient accessors and a summary table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pymobr.core.result import Result
from pymobr.montecarlo._common import PermutationParams

if TYPE_CHECKING:
    from pymobr.montecarlo.design import PermutationDesign


@dataclass
class PermutationSolution:
    """
    User-facing permutation F-test results.

    Statistics are indexed by the response names given to
    permutation_ftest(), in the same order.
    """
    _result: Result[PermutationParams]
    _design: 'PermutationDesign'

    @property
    def names(self) -> tuple[str, ...]:
        return self._result.params.names

    @property
    def observed(self) -> dict[str, float]:
        """Observed F per response."""
        return dict(zip(self.names, self._result.params.observed.tolist()))

    @property
    def p_values(self) -> dict[str, float]:
        """Empirical p-value per response."""
        return dict(zip(self.names, self._result.params.p_values.tolist()))

    @property
    def perm_stats(self) -> NDArray[np.floating[Any]]:
        """Permuted F statistics, shape (nperm, k), columns ordered as names."""
        return self._result.params.perm_stats

    @property
    def nperm(self) -> int:
        return self._result.params.nperm

    @property
    def levels(self) -> tuple[str, ...]:
        return self._result.params.levels

    @property
    def seed(self) -> int | None:
        return self._design.seed

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

    def summary(self) -> str:
        """Table of observed F and empirical p-value per response."""
        lines = [
            "PERMUTATION F-TEST (group labels)",
            "",
            f"Groups: {', '.join(self.levels)}",
            f"Number of permutations: {self.nperm}",
            "",
            f"{'':<12} {'F obs':>12} {'p-value':>10}",
        ]
        for name in self.names:
            f_obs = self.observed[name]
            p = self.p_values[name]
            lines.append(f"{name:<12} {f_obs:>12.4f} {p:>10.4f}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"PermutationSolution(names={list(self.names)}, nperm={self.nperm})"
