"""
Common data types for ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container: no methods, no computation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnovaTableRow:
    """One row of an ANOVA table (the group term or residuals)."""
    term: str
    df: int
    sum_sq: float
    mean_sq: float
    f_value: float | None    # None for Residuals row
    p_value: float | None    # None for Residuals row


@dataclass(frozen=True)
class AnovaParams:
    """Parameter payload for one-way ANOVA."""
    table: tuple[AnovaTableRow, ...]
    n_obs: int
    n_missing: int
    levels: tuple[str, ...]
    group_sizes: dict[str, int]
    group_means: dict[str, float]
    grand_mean: float
    residual_df: int
    residual_ss: float
    residual_ms: float
    eta_squared: float
