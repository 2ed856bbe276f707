"""
Boxplots of sample- and group-scale MoB statistics.

Every function draws onto Axes supplied by the caller and never touches
pyplot's current figure. mob_figure() builds a matplotlib Figure directly
(not through pyplot) for callers that have no layout of their own.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import singledispatch
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pymobr.core.exceptions import ValidationError
from pymobr.mob._common import GROUP_COLUMNS, SAMPLE_COLUMNS, Metric
from pymobr.mob.solution import MobStatsSolution

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure


DEFAULT_DISPLAY: tuple[str, ...] = ('PIE', 'N', 'S', 'S_asymp')

# display item -> panels it draws, in drawing order
PANELS: dict[str, tuple[str, ...]] = {
    'PIE': ('PIE', 'betaPIE', 'PIE_group'),
    'N': ('N', 'N_group'),
    'S': ('S', 'S_group'),
    'S_rare': ('S_rare', 'S_rare_group'),
    'S_asymp': ('S_asymp', 'S_asymp_group'),
}

_LABELS: dict[Metric, str] = {
    Metric.PIE: 'PIE',
    Metric.BETA_PIE: 'beta PIE',
    Metric.N: 'N',
    Metric.S: 'S',
    Metric.S_RARE: 'S rarefied',
    Metric.S_ASYMP: 'S asymptotic',
}


def _resolve_display(display: str | Sequence[str]) -> tuple[str, ...]:
    items = (display,) if isinstance(display, str) else tuple(display)
    if 'all' in items:
        return DEFAULT_DISPLAY
    unknown = [d for d in items if d not in PANELS]
    if unknown:
        raise ValidationError(
            f"display: unknown item(s) {unknown}; expected 'all' or any of {list(PANELS)}"
        )
    return items


def panel_names(display: str | Sequence[str] = 'all') -> tuple[str, ...]:
    """Names of the Axes that plot() needs for a display selection."""
    return tuple(p for item in _resolve_display(display) for p in PANELS[item])


def _format_p(p: float) -> str:
    return "NA" if np.isnan(p) else f"{p:g}"


def _sample_boxplot(
    ax: 'Axes',
    values: NDArray,
    codes: NDArray,
    levels: tuple[str, ...],
    title: str,
    **kwargs: Any,
) -> None:
    values = np.asarray(values, dtype=np.float64)
    data = []
    for k in range(len(levels)):
        v = values[codes == k]
        data.append(v[~np.isnan(v)])
    ax.boxplot(data, **kwargs)
    ax.set_xticks(np.arange(1, len(levels) + 1))
    ax.set_xticklabels(levels)
    ax.set_title(title)


def _group_points(
    ax: 'Axes',
    values: NDArray,
    levels: tuple[str, ...],
    title: str,
    **kwargs: Any,
) -> None:
    ax.scatter(np.arange(1, len(levels) + 1), np.asarray(values, dtype=np.float64), **kwargs)
    ax.set_xticks(np.arange(1, len(levels) + 1))
    ax.set_xticklabels(levels)
    ax.set_xlim(0.5, len(levels) + 0.5)
    ax.set_title(title)


@singledispatch
def plot(result: Any, axes: Mapping[str, 'Axes'], display: str | Sequence[str] = 'all', **kwargs: Any) -> None:
    """
    Plot a result onto caller-supplied Axes.

    Dispatches on the result type; see the MobStatsSolution registration.
    """
    raise TypeError(f"plot: no plotting method for {type(result).__name__}")


@plot.register(MobStatsSolution)
def _plot_mob_stats(
    result: MobStatsSolution,
    axes: Mapping[str, 'Axes'],
    display: str | Sequence[str] = 'all',
    **kwargs: Any,
) -> None:
    """
    Boxplots of MoB statistics with permutation p-values in the titles.

    Args:
        result: Output of mob_stats()
        axes: {panel name: Axes}; panel_names(display) lists the keys used
        display: 'all' (PIE, N, S, S_asymp) or any of
            'PIE', 'N', 'S', 'S_rare', 'S_asymp'
        **kwargs: Passed to Axes.boxplot for sample-scale panels
    """
    needed = panel_names(display)
    missing = [name for name in needed if name not in axes]
    if missing:
        raise ValidationError(f"axes: missing panel(s) {missing}")

    samples, groups = result.samples, result.groups
    levels = result.levels
    index = {level: k for k, level in enumerate(levels)}
    codes = np.array([index[g] for g in samples.group], dtype=np.intp)
    p = result.pvalues

    for item in _resolve_display(display):
        metric = Metric(item)
        label = _LABELS[metric]
        _sample_boxplot(
            axes[item], SAMPLE_COLUMNS[metric](samples), codes, levels,
            f"{label} (p = {_format_p(p[metric.value])})\nplot scale", **kwargs,
        )
        if metric is Metric.PIE:
            _sample_boxplot(
                axes['betaPIE'], SAMPLE_COLUMNS[Metric.BETA_PIE](samples), codes, levels,
                f"beta PIE (p = {_format_p(p[Metric.BETA_PIE.value])})\nbetween scales",
                **kwargs,
            )
        _group_points(
            axes[f"{item}_group"], GROUP_COLUMNS[metric](groups), levels,
            f"{label}\ntreatment scale",
        )


def plot_beta_pie(
    result: MobStatsSolution,
    axes: Sequence['Axes'],
    **kwargs: Any,
) -> None:
    """
    Sample PIE with group PIE overlaid, next to betaPIE.

    Args:
        result: Output of mob_stats()
        axes: Two Axes (left: PIE, right: betaPIE)
        **kwargs: Passed to Axes.boxplot
    """
    if len(axes) != 2:
        raise ValidationError(f"axes: expected 2 Axes, got {len(axes)}")
    left, right = axes

    samples, groups = result.samples, result.groups
    levels = result.levels
    index = {level: k for k, level in enumerate(levels)}
    codes = np.array([index[g] for g in samples.group], dtype=np.intp)

    _sample_boxplot(left, samples.PIE, codes, levels, "Sample and group PIE", **kwargs)
    left.scatter(
        np.arange(1, len(levels) + 1) + 0.1, np.asarray(groups.PIE),
        marker='D', color='grey', zorder=3,
    )
    both = np.concatenate([np.asarray(samples.PIE), np.asarray(groups.PIE)])
    if np.any(~np.isnan(both)):
        left.set_ylim(np.nanmin(both), np.nanmax(both))
    left.set_ylabel("PIE")

    _sample_boxplot(right, samples.betaPIE, codes, levels, "Group PIE - sample PIE", **kwargs)
    right.set_ylabel("betaPIE")


def mob_figure(display: str | Sequence[str] = 'all') -> tuple['Figure', dict[str, 'Axes']]:
    """
    A Figure with one row per display item and the Axes plot() expects.

    The Figure is created without pyplot, so no global figure is registered.
    """
    from matplotlib.figure import Figure

    items = _resolve_display(display)
    n_cols = max(len(PANELS[item]) for item in items)
    fig = Figure(figsize=(3.2 * n_cols, 3.0 * len(items)), layout='constrained')
    axes: dict[str, Axes] = {}
    for row, item in enumerate(items):
        for col, name in enumerate(PANELS[item]):
            axes[name] = fig.add_subplot(len(items), n_cols, row * n_cols + col + 1)
    return fig, axes
