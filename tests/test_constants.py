"""
Tests for constants
"""

import pytest

from spliceview.constants import (
    CONNECTOR_COLORS,
    LETTER_PATHS,
    LOGO_COLORS,
    MAX_BITS,
    SIDE_COLORS,
    SPLICE_ROW_RATIOS,
    SYMBOLS,
    PlotMode,
    SpliceSide,
    Theme,
)


class TestAlphabet:
    """Tests for alphabet constants"""

    def test_symbol_order(self):
        assert SYMBOLS == ("A", "C", "G", "T", "N")

    def test_max_bits(self):
        assert MAX_BITS == 2.0

    def test_every_symbol_has_color_and_outline(self):
        assert set(LOGO_COLORS) == set(SYMBOLS)
        assert set(LETTER_PATHS) == set(SYMBOLS)

    def test_logo_colors(self):
        assert LOGO_COLORS["A"] == "#4CAF50"
        assert LOGO_COLORS["C"] == "#2196F3"
        assert LOGO_COLORS["G"] == "#FFC107"
        assert LOGO_COLORS["T"] == "#F44336"
        assert LOGO_COLORS["N"] == "#9E9E9E"

    def test_logo_colors_are_read_only(self):
        with pytest.raises(TypeError):
            LOGO_COLORS["A"] = "#000000"


class TestSpliceConstants:
    """Tests for splice plot constants"""

    def test_side_values(self):
        assert SpliceSide("donor") is SpliceSide.DONOR
        assert SpliceSide("acceptor") is SpliceSide.ACCEPTOR

    def test_side_colors(self):
        assert SIDE_COLORS[SpliceSide.DONOR] == "#F78154"
        assert SIDE_COLORS[SpliceSide.ACCEPTOR] == "#5FAD56"
        assert set(CONNECTOR_COLORS) == set(SpliceSide)

    def test_row_ratios_are_positive(self):
        assert all(ratio > 0 for ratio in SPLICE_ROW_RATIOS.values())
        assert SPLICE_ROW_RATIOS["donor_zoom"] == SPLICE_ROW_RATIOS["acceptor_zoom"]


class TestEnums:
    """Tests for enums"""

    def test_plot_modes(self):
        assert {m.name for m in PlotMode} == {"SPLICE", "SEQUENCE_LOGO", "CONSERVATION"}

    def test_themes(self):
        assert {t.name for t in Theme} == {"LIGHT", "DARK"}
