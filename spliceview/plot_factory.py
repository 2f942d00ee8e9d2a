"""
Plot factory for creating plot strategies

This module provides a factory function for instantiating the appropriate
plot strategy based on the plot mode.
"""

from .constants import PlotMode, Theme
from .layout import ZoomSlotLayout
from .plot_strategies.base import PlotStrategy
from .plot_strategies.conservation import ConservationPlotStrategy
from .plot_strategies.sequence_logo import SequenceLogoPlotStrategy
from .plot_strategies.splice import SplicePlotStrategy


def create_plot_strategy(
    plot_mode: PlotMode, theme: Theme, layout: ZoomSlotLayout | None = None
) -> PlotStrategy:
    """
    Factory function to create the appropriate plot strategy

    Args:
        plot_mode: PlotMode enum specifying which plot type to create
        theme: Theme enum (LIGHT or DARK)
        layout: Zoom slot layout for SPLICE plots (ignored by other modes)

    Returns:
        PlotStrategy instance for the specified mode

    Raises:
        ValueError: If plot_mode is not recognized

    Examples:
        >>> from spliceview.plot_factory import create_plot_strategy
        >>> from spliceview.constants import PlotMode, Theme
        >>>
        >>> strategy = create_plot_strategy(PlotMode.SPLICE, Theme.LIGHT)
        >>> html, layout = strategy.create_plot(data, options)
    """
    if plot_mode == PlotMode.SPLICE:
        return SplicePlotStrategy(theme, layout=layout)

    strategy_map = {
        PlotMode.SEQUENCE_LOGO: SequenceLogoPlotStrategy,
        PlotMode.CONSERVATION: ConservationPlotStrategy,
    }

    strategy_class = strategy_map.get(plot_mode)
    if strategy_class is None:
        valid_modes = ", ".join(m.value for m in PlotMode)
        raise ValueError(f"Unknown plot mode: {plot_mode}. Valid modes: {valid_modes}")

    return strategy_class(theme)
