"""
Presentation of MoB results with matplotlib.

Requires the optional ``plot`` extra. Axes are always passed in
explicitly.

Public API:
    plot(result, axes, display='all')
    plot_beta_pie(result, axes)
    mob_figure(display='all') -> (Figure, {panel: Axes})
    panel_names(display='all') -> panel names plot() draws on
"""

from pymobr.viz._boxplots import plot, plot_beta_pie, mob_figure, panel_names

__all__ = [
    "plot",
    "plot_beta_pie",
    "mob_figure",
    "panel_names",
]
