"""
Tests for the conservation heat strip renderer
"""

import pytest
from bokeh.models import LinearColorMapper, Quad, Segment
from bokeh.palettes import Magma256

from spliceview.constants import HEATMAP_BACKGROUND_COLOR, MIN_CELL_WIDTH, Theme
from spliceview.records import ScoredInterval
from spliceview.rendering import DrawingRegion, HeatMapRenderer, ThemeManager
from spliceview.scales import LinearScale, SequentialColorScale


@pytest.fixture
def intervals():
    return [
        ScoredInterval(0, 10, 0.0),
        ScoredInterval(10, 20, 5.0),
        ScoredInterval(20, 30, 10.0),
    ]


@pytest.fixture
def renderer(intervals):
    return HeatMapRenderer(
        intervals, LinearScale((0, 30), (0, 300)), width=300, height=40
    )


@pytest.fixture
def region():
    fig = ThemeManager(Theme.LIGHT).create_cell(width=300, height=40)
    return DrawingRegion(fig, width=300, height=40, tag="conservation")


class TestHeatMapScales:
    """Tests for scale resolution"""

    def test_resolve_uses_max_score(self, renderer):
        y_scale, color_scale = renderer.resolve()

        assert y_scale.domain == (0.0, 10.0)
        assert y_scale.range == (40.0, 0.0)
        assert color_scale.domain == (0.0, 10.0)

    def test_getters_resolve_lazily(self, renderer):
        assert renderer.get_color_scale().domain == (0.0, 10.0)
        assert renderer.get_y_scale().domain == (0.0, 10.0)

    def test_provided_color_scale_domain_is_replaced(self, intervals):
        """Test that the color domain always becomes [0, max score]"""
        renderer = HeatMapRenderer(
            intervals,
            LinearScale((0, 30), (0, 300)),
            width=300,
            height=40,
            color_scale=SequentialColorScale(("#000000", "#ffffff"), (0, 1000)),
        )

        cells = renderer.compute_cells()

        assert renderer.get_color_scale().domain == (0.0, 10.0)
        assert [c.color for c in cells] == ["#000000", "#ffffff", "#ffffff"]

    def test_unknown_palette(self, intervals):
        with pytest.raises(ValueError):
            HeatMapRenderer(
                intervals, LinearScale((0, 30), (0, 300)), 300, 40, palette="Nope"
            )


class TestHeatCells:
    """Tests for HeatMapRenderer.compute_cells"""

    def test_palette_extremes(self, renderer):
        cells = renderer.compute_cells()

        assert cells[0].color == Magma256[0]
        assert cells[-1].color == Magma256[-1]

    def test_cells_span_intervals(self, renderer):
        cells = renderer.compute_cells()

        assert [c.x for c in cells] == [0.0, 100.0, 200.0]
        assert [c.width for c in cells] == [100.0, 100.0, 100.0]
        assert all(c.height == 40 for c in cells)

    def test_narrow_interval_is_widened(self):
        renderer = HeatMapRenderer(
            [ScoredInterval(0, 1, 1.0)], LinearScale((0, 10000), (0, 100)), 100, 40
        )

        (cell,) = renderer.compute_cells()

        assert cell.width == MIN_CELL_WIDTH

    def test_all_zero_scores(self):
        """Test that a collapsed score domain does not fail"""
        renderer = HeatMapRenderer(
            [ScoredInterval(0, 5, 0.0), ScoredInterval(5, 10, 0.0)],
            LinearScale((0, 10), (0, 100)),
            100,
            40,
        )

        cells = renderer.compute_cells()

        assert len({c.color for c in cells}) == 1

    def test_all_zero_scores_draw_flat_color(self, region):
        """Test that a collapsed domain draws plain colors instead of a mapper"""
        renderer = HeatMapRenderer(
            [ScoredInterval(0, 5, 0.0), ScoredInterval(5, 10, 0.0)],
            LinearScale((0, 10), (0, 300)),
            300,
            40,
        )

        cells = renderer.plot(region)

        strip = region.renderers()[-1]
        assert strip.data_source.data["fill_color"] == [c.color for c in cells]

    def test_no_intervals(self):
        renderer = HeatMapRenderer([], LinearScale((0, 10), (0, 100)), 100, 40)

        assert renderer.compute_cells() == []


class TestGridLines:
    """Tests for the background grid"""

    def test_grid_lines_at_ticks(self, renderer):
        assert renderer.grid_lines() == pytest.approx([40.0, 20.0, 0.0])


class TestHeatMapPlot:
    """Tests for HeatMapRenderer.plot"""

    def test_plot_layers(self, renderer, region):
        cells = renderer.plot(region)

        background, grid, strip = region.renderers()
        assert isinstance(background.glyph, Quad)
        assert background.glyph.fill_color == HEATMAP_BACKGROUND_COLOR
        assert isinstance(grid.glyph, Segment)
        assert len(grid.data_source.data["y0"]) == 3
        assert strip.data_source.data["score"] == [c.score for c in cells]
        mapper = strip.glyph.fill_color.transform
        assert isinstance(mapper, LinearColorMapper)
        assert (mapper.low, mapper.high) == (0.0, 10.0)
        assert tuple(mapper.palette) == tuple(Magma256)

    def test_plot_is_idempotent(self, renderer, region):
        renderer.plot(region)
        renderer.plot(region)

        assert len(region.renderers()) == 3

    def test_empty_strip_keeps_background(self, region):
        renderer = HeatMapRenderer([], LinearScale((0, 10), (0, 300)), 300, 40)

        assert renderer.plot(region) == []
        assert len(region.renderers()) == 2
