"""
Theme management for Bokeh plots

This module centralizes theme-related styling so every cell of a splice plot
shares the same background, border and text colors.
"""

from bokeh.models import Range1d
from bokeh.plotting import figure

from ..constants import DARK_THEME, LIGHT_THEME, LOGO_COLORS, Theme


class ThemeManager:
    """
    Centralized theme management for SpliceView plots

    Attributes:
        theme: Theme enum (LIGHT or DARK)
        colors: Dictionary of theme colors for plots

    Examples:
        >>> from spliceview.rendering import ThemeManager
        >>> from spliceview.constants import Theme
        >>>
        >>> manager = ThemeManager(Theme.DARK)
        >>> fig = manager.create_cell(width=1350, height=50)
        >>> fig.y_range.start, fig.y_range.end
        (50, 0)
    """

    def __init__(self, theme: Theme):
        """
        Initialize theme manager

        Args:
            theme: Theme enum (LIGHT or DARK)
        """
        self.theme = theme
        self.colors = DARK_THEME if theme == Theme.DARK else LIGHT_THEME

    def get_logo_colors(self) -> dict[str, str]:
        """
        Get sequence logo letter colors

        Returns:
            Dictionary mapping nucleotide letter to hex color
            Keys: 'A', 'C', 'G', 'T', 'N'
        """
        return dict(LOGO_COLORS)

    def create_cell(
        self,
        width: int,
        height: int,
        title: str | None = None,
        show_axes: bool = False,
        **kwargs,
    ):
        """
        Create a figure whose data space is its own pixel grid

        The x range runs from 0 to width and the y range from height down to
        0, so shapes placed at (x, y) land x pixels from the left edge and y
        pixels from the top edge, as on an SVG canvas.

        Args:
            width: Figure width in pixels
            height: Figure height in pixels
            title: Optional plot title
            show_axes: Keep the axes visible (useful for standalone plots)
            **kwargs: Additional arguments passed to bokeh.plotting.figure()

        Returns:
            Themed Bokeh figure with pixel ranges
        """
        fig_kwargs = {
            "width": int(round(width)),
            "height": int(round(height)),
            "x_range": Range1d(0, width),
            "y_range": Range1d(height, 0),
            "toolbar_location": None,
            "min_border": 0,
            "background_fill_color": self.colors["plot_bg"],
            "border_fill_color": self.colors["plot_border"],
            "outline_line_color": None,
        }
        if title is not None:
            fig_kwargs["title"] = title
        fig_kwargs.update(kwargs)

        fig = figure(**fig_kwargs)
        self.apply_to_figure(fig)

        fig.xgrid.visible = False
        fig.ygrid.visible = False
        if not show_axes:
            fig.axis.visible = False

        return fig

    def apply_to_figure(self, fig) -> None:
        """
        Apply theme styling to an existing Bokeh figure

        Args:
            fig: Bokeh figure to style
        """
        fig.title.text_color = self.colors["title_text"]

        fig.xaxis.axis_label_text_color = self.colors["axis_text"]
        fig.xaxis.major_label_text_color = self.colors["axis_text"]
        fig.xaxis.axis_line_color = self.colors["axis_line"]
        fig.xaxis.major_tick_line_color = self.colors["axis_line"]
        fig.xaxis.minor_tick_line_color = self.colors["axis_line"]

        fig.yaxis.axis_label_text_color = self.colors["axis_text"]
        fig.yaxis.major_label_text_color = self.colors["axis_text"]
        fig.yaxis.axis_line_color = self.colors["axis_line"]
        fig.yaxis.major_tick_line_color = self.colors["axis_line"]
        fig.yaxis.minor_tick_line_color = self.colors["axis_line"]

        fig.xgrid.grid_line_color = None
        fig.ygrid.grid_line_color = self.colors["grid_line"]
