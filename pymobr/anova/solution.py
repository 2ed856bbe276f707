"""
User-facing ANOVA solution type.

Wraps a Result[AnovaParams] and provides accessors and an R-style
summary table.
"""

from dataclasses import dataclass
from typing import Any

from pymobr.core.result import Result
from pymobr.anova._common import AnovaParams, AnovaTableRow


@dataclass
class AnovaSolution:
    """
    User-facing result for one-way ANOVA.

    Produced by anova_oneway().
    """
    _result: Result[AnovaParams]

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table (rows: group, Residuals)."""
        return self._result.params.table

    @property
    def f_value(self) -> float:
        """F statistic of the group term."""
        return self.table[0].f_value

    @property
    def p_value(self) -> float:
        """Parametric p-value of the group term."""
        return self.table[0].p_value

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def n_missing(self) -> int:
        return self._result.params.n_missing

    @property
    def levels(self) -> tuple[str, ...]:
        return self._result.params.levels

    @property
    def group_sizes(self) -> dict[str, int]:
        return self._result.params.group_sizes

    @property
    def group_means(self) -> dict[str, float]:
        return self._result.params.group_means

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def residual_df(self) -> int:
        return self._result.params.residual_df

    @property
    def residual_ss(self) -> float:
        return self._result.params.residual_ss

    @property
    def residual_ms(self) -> float:
        return self._result.params.residual_ms

    @property
    def eta_squared(self) -> float:
        return self._result.params.eta_squared

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
        """Generate R-style ANOVA summary table."""
        lines = [
            "Analysis of Variance Table",
            "=" * 72,
            f"Observations: {self.n_obs}"
            + (f" ({self.n_missing} deleted due to missingness)" if self.n_missing else ""),
            "",
            f"{'Source':<20} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} {'F value':>10} {'Pr(>F)':>12}",
            "-" * 72,
        ]

        for row in self.table:
            if row.f_value is not None:
                sig = _significance_stars(row.p_value)
                lines.append(
                    f"{row.term:<20} {row.df:>6} {row.sum_sq:>14.4f} "
                    f"{row.mean_sq:>14.4f} {row.f_value:>10.4f} "
                    f"{row.p_value:>12.4e} {sig}"
                )
            else:
                lines.append(
                    f"{row.term:<20} {row.df:>6} {row.sum_sq:>14.4f} "
                    f"{row.mean_sq:>14.4f}"
                )

        lines.append("-" * 72)
        lines.append("Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1")
        lines.append("")
        lines.append(f"eta^2 = {self.eta_squared:.4f}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaSolution(n={self.n_obs}, groups={len(self.levels)}, "
            f"F={self.f_value:.4g})"
        )


def _significance_stars(p: float | None) -> str:
    if p is None or p != p:
        return ""
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    if p < 0.1:
        return "."
    return ""
