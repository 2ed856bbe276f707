"""
Tests for boxplot presentation of MoB statistics.

Figures are built without pyplot, so no interactive backend is needed.
"""

import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")

from pymobr import mob_stats, ValidationError
from pymobr.viz import plot, plot_beta_pie, mob_figure, panel_names


@pytest.fixture
def result(small_comm):
    comm, group = small_comm
    return mob_stats(comm, group, n_min=1, nperm=50, seed=0)


class TestPanelNames:

    def test_all(self):
        assert panel_names() == (
            'PIE', 'betaPIE', 'PIE_group',
            'N', 'N_group',
            'S', 'S_group',
            'S_asymp', 'S_asymp_group',
        )

    def test_subset(self):
        assert panel_names(['S_rare']) == ('S_rare', 'S_rare_group')
        assert panel_names('N') == ('N', 'N_group')

    def test_unknown_item(self):
        with pytest.raises(ValidationError, match="unknown"):
            panel_names(['ENS_PIE'])


class TestMobFigure:

    def test_layout(self):
        fig, axes = mob_figure()
        assert set(axes) == set(panel_names())
        assert len(fig.axes) == len(panel_names())

    def test_does_not_touch_pyplot(self):
        plt = pytest.importorskip("matplotlib.pyplot")
        before = plt.get_fignums()
        mob_figure(['S'])
        assert plt.get_fignums() == before


class TestPlot:

    def test_titles_carry_p_values(self, result):
        fig, axes = mob_figure()
        plot(result, axes)
        p = result.pvalues
        assert axes['PIE'].get_title() == f"PIE (p = {p['PIE']:g})\nplot scale"
        assert axes['S'].get_title() == f"S (p = {p['S']:g})\nplot scale"
        assert axes['betaPIE'].get_title().startswith("beta PIE (p = ")
        assert axes['N'].get_title() == "N (p = NA)\nplot scale"
        assert axes['S_group'].get_title() == "S\ntreatment scale"

    def test_group_tick_labels(self, result):
        fig, axes = mob_figure(['S'])
        plot(result, axes, display=['S'])
        labels = [t.get_text() for t in axes['S'].get_xticklabels()]
        assert labels == ['A', 'B']

    def test_group_points(self, result):
        fig, axes = mob_figure(['PIE'])
        plot(result, axes, display='PIE')
        offsets = axes['PIE_group'].collections[0].get_offsets()
        np.testing.assert_allclose(np.asarray(offsets)[:, 1], [0.625, 0.0], atol=1e-15)

    def test_missing_axes(self, result):
        fig, axes = mob_figure(['S'])
        with pytest.raises(ValidationError, match="missing panel"):
            plot(result, axes, display=['S', 'N'])

    def test_unregistered_type(self):
        with pytest.raises(TypeError, match="no plotting method"):
            plot({'S': 1.0}, {})


class TestPlotBetaPie:

    def test_draws_both_panels(self, result):
        from matplotlib.figure import Figure

        fig = Figure()
        left, right = fig.subplots(1, 2)
        plot_beta_pie(result, (left, right))
        assert left.get_ylabel() == "PIE"
        assert right.get_ylabel() == "betaPIE"
        assert right.get_title() == "Group PIE - sample PIE"

    def test_needs_two_axes(self, result):
        from matplotlib.figure import Figure

        ax = Figure().subplots()
        with pytest.raises(ValidationError, match="expected 2 Axes"):
            plot_beta_pie(result, [ax])
