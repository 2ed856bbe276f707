"""
ANOVA solver dispatch.

Public API:
    anova_oneway(y, group) -> AnovaSolution
"""

import time
from typing import Any

import numpy as np
from scipy import stats as sp_stats

from pymobr.core.result import Result
from pymobr.anova._common import AnovaParams, AnovaTableRow
from pymobr.anova._fstat import oneway_sums_of_squares
from pymobr.anova.design import AnovaDesign
from pymobr.anova.solution import AnovaSolution


def anova_oneway(
    y: Any,
    group: Any,
) -> AnovaSolution:
    """
    One-way Analysis of Variance.

    Tests whether the means of two or more groups are equal. Observations
    with a missing response are omitted, as lm() does in R.

    Args:
        y: Response variable (1D numeric array-like, NaN = missing)
        group: Group labels (1D array-like, same length as y)

    Returns:
        AnovaSolution with ANOVA table, eta-squared, and group means

    Examples:
        >>> result = anova_oneway(y, group)
        >>> print(result.summary())
        >>> result.f_value
    """
    t0 = time.perf_counter()

    design = AnovaDesign.for_oneway(y, group)
    k = len(design.levels)

    ss_b, ss_w, df_b, df_w = oneway_sums_of_squares(
        design.y, design.codes[np.newaxis, :], k
    )
    ss_between, ss_within = float(ss_b[0]), float(ss_w[0])
    df_between, df_within = int(df_b[0]), int(df_w[0])

    ms_between = ss_between / df_between
    ms_within = ss_within / df_within
    if ms_within > 0:
        f_val = ms_between / ms_within
        p_val = float(sp_stats.f.sf(f_val, df_between, df_within))
    else:
        # Perfect fit: R reports F = Inf (or NaN when nothing varies)
        f_val = np.inf if ms_between > 0 else np.nan
        p_val = 0.0 if ms_between > 0 else np.nan

    rows = (
        AnovaTableRow(
            term='group',
            df=df_between,
            sum_sq=ss_between,
            mean_sq=ms_between,
            f_value=float(f_val),
            p_value=p_val,
        ),
        AnovaTableRow(
            term='Residuals',
            df=df_within,
            sum_sq=ss_within,
            mean_sq=ms_within,
            f_value=None,
            p_value=None,
        ),
    )

    sizes = np.bincount(design.codes, minlength=k)
    sums = np.bincount(design.codes, weights=design.y, minlength=k)
    total_ss = ss_between + ss_within

    elapsed = time.perf_counter() - t0

    params = AnovaParams(
        table=rows,
        n_obs=design.n,
        n_missing=design.n_missing,
        levels=design.levels,
        group_sizes={lv: int(sizes[i]) for i, lv in enumerate(design.levels)},
        group_means={lv: float(sums[i] / sizes[i]) for i, lv in enumerate(design.levels)},
        grand_mean=float(np.mean(design.y)),
        residual_df=df_within,
        residual_ss=ss_within,
        residual_ms=ms_within,
        eta_squared=ss_between / total_ss if total_ss > 0 else 0.0,
    )

    result = Result(
        params=params,
        info={'design_type': 'oneway'},
        timing={'total_seconds': elapsed},
        backend_name='cpu',
    )

    return AnovaSolution(_result=result)
