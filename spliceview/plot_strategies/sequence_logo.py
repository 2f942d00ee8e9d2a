"""
Single-site sequence logo plot strategy

Extracts the zoom window around one donor or acceptor site and renders its
sequence logo on a standalone figure.
"""

from ..constants import (
    DEFAULT_COLUMN_SPACING,
    DEFAULT_LETTER_WIDTH,
    DEFAULT_ZOOM_RADIUS,
    DEFAULT_ZOOM_WINDOW_WIDTH,
    SIDE_COLORS,
    Theme,
)
from ..logging_config import get_logger
from ..rendering import DrawingRegion, SequenceLogoRenderer, ThemeManager
from ..scales import LinearScale
from ..window import as_side, extract_window, zoom_domain
from .base import PlotStrategy

logger = get_logger(__name__)

DEFAULT_LOGO_HEIGHT = 125


class SequenceLogoPlotStrategy(PlotStrategy):
    """
    Strategy for plotting the logo of a single splice site

    Examples:
        >>> strategy = SequenceLogoPlotStrategy(Theme.LIGHT)
        >>> data = {'records': donor_records, 'anchor': 1200, 'side': 'donor'}
        >>> html, fig = strategy.create_plot(data, {'radius': 5})
    """

    def __init__(self, theme: Theme):
        super().__init__(theme)
        self.theme_manager = ThemeManager(theme)

    def validate_data(self, data: dict) -> None:
        """
        Required keys:
            - records: PositionRecords sorted by position
            - anchor: splice site position
            - side: "donor" or "acceptor" (or SpliceSide)
        """
        self._require(data, ["records", "anchor", "side"], "sequence logo")

    def create_plot(self, data: dict, options: dict) -> tuple[str, object]:
        self.validate_data(data)

        side = as_side(data["side"])
        anchor = data["anchor"]
        radius = options.get("radius", DEFAULT_ZOOM_RADIUS)
        if radius < 1:
            raise ValueError(f"Zoom radius must be at least 1, got {radius}")
        width = options.get("width", DEFAULT_ZOOM_WINDOW_WIDTH)
        height = options.get("height", DEFAULT_LOGO_HEIGHT)

        window = extract_window(data["records"], anchor, radius, side)
        if not window:
            logger.info(f"No records around {side.value} site {anchor}")

        fig = self.theme_manager.create_cell(
            width, height, title=options.get("title", f"{side.value} {anchor}")
        )
        region = DrawingRegion(fig, width=width, height=height, tag="logo")
        if options.get("show_background", True):
            fig.background_fill_color = SIDE_COLORS[side]

        renderer = SequenceLogoRenderer(
            window,
            LinearScale(zoom_domain(anchor, radius, side), (0, width)),
            width=width,
            height=height,
            letter_width=options.get("letter_width", DEFAULT_LETTER_WIDTH),
            column_spacing=options.get("column_spacing", DEFAULT_COLUMN_SPACING),
            colors=self.theme_manager.get_logo_colors(),
        )
        renderer.plot(region)

        return self._figure_to_html(fig), fig
