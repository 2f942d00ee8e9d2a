"""
Base classes for plot strategy pattern

This module defines the abstract base class for all plot type implementations.
Each plot mode (SPLICE, SEQUENCE_LOGO, CONSERVATION) implements this interface.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..constants import APP_NAME, Theme


class PlotStrategy(ABC):
    """
    Abstract base class for all plot type strategies

    Attributes:
        theme: Theme enum (LIGHT or DARK) for plot styling

    Examples:
        >>> from spliceview.plot_strategies.conservation import (
        ...     ConservationPlotStrategy,
        ... )
        >>> strategy = ConservationPlotStrategy(Theme.LIGHT)
        >>> data = {'intervals': intervals, 'coordinate_length': 5000}
        >>> html, fig = strategy.create_plot(data, {'width': 1200})
    """

    def __init__(self, theme: Theme):
        """
        Initialize plot strategy with theme

        Args:
            theme: Theme enum (LIGHT or DARK)
        """
        self.theme = theme

    @abstractmethod
    def create_plot(
        self, data: dict[str, Any], options: dict[str, Any]
    ) -> tuple[str, Any]:
        """
        Generate Bokeh plot HTML and figure

        Args:
            data: Plot data dictionary; required keys depend on plot type
                (checked by validate_data)
            options: Plot options dictionary (sizes, radius, palette, ...);
                missing options fall back to the defaults in constants

        Returns:
            Tuple of (html_string, bokeh_figure_or_layout)

        Raises:
            ValueError: If required data is missing (checked by validate_data)
        """
        pass

    @abstractmethod
    def validate_data(self, data: dict[str, Any]) -> None:
        """
        Validate that required data is present for this plot type

        Raises:
            ValueError: If required data is missing, with descriptive message
                indicating which keys are required
        """
        pass

    def _require(self, data: dict[str, Any], keys: list[str], plot_name: str) -> None:
        missing = [key for key in keys if key not in data]
        if missing:
            raise ValueError(
                f"Missing required data for {plot_name} plot: {', '.join(missing)}"
            )

    def _figure_to_html(self, figure: Any) -> str:
        """
        Convert Bokeh figure to standalone HTML

        Uses Bokeh's CDN resources for smaller file sizes.

        Args:
            figure: Bokeh Figure, Column, Row, or GridPlot object

        Returns:
            Complete HTML document as string
        """
        from bokeh.embed import file_html
        from bokeh.resources import CDN

        return file_html(figure, CDN, f"{APP_NAME} Plot")
