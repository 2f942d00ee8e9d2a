"""
Conservation strip plot strategy

Renders only the score heat strip over the full coordinate range.
"""

from ..constants import (
    DEFAULT_HEATMAP_PALETTE,
    DEFAULT_PLOT_WIDTH,
    DEFAULT_SMOOTHING_WINDOW,
    Theme,
)
from ..records import smooth_intervals
from ..rendering import DrawingRegion, HeatMapRenderer, ThemeManager
from ..scales import LinearScale
from .base import PlotStrategy

DEFAULT_STRIP_HEIGHT = 50


class ConservationPlotStrategy(PlotStrategy):
    """
    Strategy for plotting a conservation heat strip

    Examples:
        >>> strategy = ConservationPlotStrategy(Theme.LIGHT)
        >>> data = {'intervals': intervals, 'coordinate_length': 5000}
        >>> options = {'width': 1200, 'height': 40, 'smoothing_window': 5}
        >>> html, fig = strategy.create_plot(data, options)
    """

    def __init__(self, theme: Theme):
        super().__init__(theme)
        self.theme_manager = ThemeManager(theme)

    def validate_data(self, data: dict) -> None:
        """
        Required keys:
            - intervals: list of ScoredInterval
            - coordinate_length: last coordinate of the strip
        """
        self._require(data, ["intervals", "coordinate_length"], "conservation")

    def create_plot(self, data: dict, options: dict) -> tuple[str, object]:
        self.validate_data(data)

        width = options.get("width", DEFAULT_PLOT_WIDTH)
        height = options.get("height", DEFAULT_STRIP_HEIGHT)
        intervals = smooth_intervals(
            data["intervals"], options.get("smoothing_window", DEFAULT_SMOOTHING_WINDOW)
        )

        fig = self.theme_manager.create_cell(
            width, height, title=options.get("title"), show_axes=False
        )
        renderer = HeatMapRenderer(
            intervals,
            LinearScale((0, data["coordinate_length"]), (0, width)),
            width=width,
            height=height,
            palette=options.get("palette", DEFAULT_HEATMAP_PALETTE),
        )
        region = DrawingRegion(fig, width=width, height=height, tag="conservation")
        renderer.plot(region)

        return self._figure_to_html(fig), fig
