"""
Tests for the high-level plotting functions
"""

import pytest
from bokeh.models import Column

from spliceview import (
    get_current_plot,
    parse_plot_parameters,
    plot_conservation,
    plot_sequence_logo,
    plot_splice_sites,
)
from spliceview.constants import PlotMode, Theme


class TestParsePlotParameters:
    """Tests for parse_plot_parameters"""

    def test_mode_and_theme(self):
        params = parse_plot_parameters(mode="sequence_logo", theme="dark")

        assert params["mode"] == PlotMode.SEQUENCE_LOGO
        assert params["theme"] == Theme.DARK

    def test_theme_only(self):
        params = parse_plot_parameters(theme="LIGHT")

        assert params == {"theme": Theme.LIGHT}

    def test_unknown_theme(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            parse_plot_parameters(theme="SEPIA")

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown plot mode"):
            parse_plot_parameters(mode="SQUIGGLE")


class TestPlotSpliceSites:
    """Tests for plot_splice_sites"""

    def test_returns_html(
        self, splice_sites, donor_records, acceptor_records, conservation_intervals
    ):
        html = plot_splice_sites(
            splice_sites, donor_records, acceptor_records, conservation_intervals
        )

        assert isinstance(html, str)
        assert "<html" in html.lower()
        assert isinstance(get_current_plot(), Column)

    def test_options_are_forwarded(
        self, splice_sites, donor_records, acceptor_records, conservation_intervals
    ):
        plot_splice_sites(
            splice_sites,
            donor_records,
            acceptor_records,
            conservation_intervals,
            theme="DARK",
            width=1000,
            height=500,
            zoom_radius=3,
            smoothing_window=3,
        )

        layout = get_current_plot()
        assert layout.children[0].width == 900
        assert layout.children[0].height == 300

    def test_invalid_radius(
        self, splice_sites, donor_records, acceptor_records, conservation_intervals
    ):
        with pytest.raises(ValueError):
            plot_splice_sites(
                splice_sites,
                donor_records,
                acceptor_records,
                conservation_intervals,
                zoom_radius=0,
            )


class TestPlotSequenceLogo:
    """Tests for plot_sequence_logo"""

    def test_returns_html(self, donor_records):
        html = plot_sequence_logo(donor_records, 1200, side="donor")

        assert "<html" in html.lower()
        assert get_current_plot().width == 140

    def test_size_options(self, acceptor_records):
        plot_sequence_logo(
            acceptor_records, 2100, side="acceptor", width=300, height=90
        )

        fig = get_current_plot()
        assert (fig.width, fig.height) == (300, 90)


class TestPlotConservation:
    """Tests for plot_conservation"""

    def test_returns_html(self, conservation_intervals):
        html = plot_conservation(conservation_intervals, 5000, palette="Viridis256")

        assert "<html" in html.lower()
        assert len(get_current_plot().renderers) == 3

    def test_unknown_palette(self, conservation_intervals):
        with pytest.raises(ValueError, match="Unknown color palette"):
            plot_conservation(conservation_intervals, 5000, palette="Rainbow9000")
