"""
One-way ANOVA F statistics from integer group codes.

The permutation test refits the same response against thousands of
relabelings, so the F statistic is computed directly from group sums
rather than through a model matrix. A batch of B labelings is handled in
one pass: codes are offset by n_levels * b so a single bincount yields the
(B, n_levels) table of group sums and group sizes.

Responses are centred before summing, so a constant response gives
exactly zero between- and within-group sums of squares (F undefined)
instead of rounding noise.

Missing responses (NaN) are dropped before fitting, matching R's
lm(..., na.action = na.omit).
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def oneway_sums_of_squares(
    y: NDArray[np.floating[Any]],
    codes: NDArray[np.intp],
    n_levels: int,
) -> tuple[NDArray, NDArray, NDArray, NDArray]:
    """
    Between and within sums of squares for each row of ``codes``.

    Args:
        y: Response, shape (n,), without missing values
        codes: Group codes, shape (B, n), values in [0, n_levels)
        n_levels: Number of group levels

    Returns:
        (ss_between, ss_within, df_between, df_within), each of shape (B,)
    """
    n_batch, n = codes.shape
    centred = y - np.mean(y)
    ss_total = float(np.sum(centred * centred))

    offsets = codes + n_levels * np.arange(n_batch)[:, np.newaxis]
    flat = offsets.ravel()
    size = n_batch * n_levels
    sums = np.bincount(flat, weights=np.tile(centred, n_batch), minlength=size)
    counts = np.bincount(flat, minlength=size).astype(np.float64)
    sums = sums.reshape(n_batch, n_levels)
    counts = counts.reshape(n_batch, n_levels)

    occupied = counts > 0
    contrib = np.divide(sums * sums, counts, out=np.zeros_like(sums), where=occupied)
    ss_between = np.sum(contrib, axis=1)
    ss_within = np.maximum(ss_total - ss_between, 0.0)

    k = np.sum(occupied, axis=1)
    df_between = k - 1
    df_within = n - k
    return ss_between, ss_within, df_between, df_within


def batched_oneway_f(
    y: NDArray[np.floating[Any]],
    codes: NDArray[np.intp],
    n_levels: int,
) -> NDArray[np.floating[Any]]:
    """
    F statistic of y against each row of a (B, n) code matrix.

    NaN where the statistic is undefined: fewer than two occupied groups,
    no residual degrees of freedom, or 0/0. A perfect fit with non-zero
    between-group variation gives inf.

    Args:
        y: Response, shape (n,); NaN entries are omitted
        codes: Group codes, shape (B, n) or (n,)
        n_levels: Number of group levels

    Returns:
        Array of shape (B,)
    """
    y = np.asarray(y, dtype=np.float64)
    codes = np.atleast_2d(np.asarray(codes, dtype=np.intp))

    keep = ~np.isnan(y)
    y = y[keep]
    codes = codes[:, keep]

    if y.size == 0:
        return np.full(codes.shape[0], np.nan)

    ss_b, ss_w, df_b, df_w = oneway_sums_of_squares(y, codes, n_levels)

    valid = (df_b > 0) & (df_w > 0)
    safe_df_b = np.where(valid, df_b, 1)
    safe_df_w = np.where(valid, df_w, 1)
    with np.errstate(divide='ignore', invalid='ignore'):
        f = (ss_b / safe_df_b) / (ss_w / safe_df_w)
    return np.where(valid, f, np.nan)


def oneway_f(
    y: NDArray[np.floating[Any]],
    codes: NDArray[np.intp],
    n_levels: int,
) -> float:
    """F statistic of y against a single labeling. See batched_oneway_f()."""
    return float(batched_oneway_f(y, np.asarray(codes)[np.newaxis, :], n_levels)[0])
