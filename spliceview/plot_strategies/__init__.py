"""
Plot strategies for the different plot modes

Each plot mode (SPLICE, SEQUENCE_LOGO, CONSERVATION) has its own strategy
class implementing the PlotStrategy interface.

Usage:
    >>> from spliceview.plot_strategies import SplicePlotStrategy
    >>> from spliceview.constants import Theme
    >>>
    >>> strategy = SplicePlotStrategy(Theme.LIGHT)
    >>> html, layout = strategy.create_plot(data, options)
"""

from .base import PlotStrategy
from .conservation import ConservationPlotStrategy
from .sequence_logo import SequenceLogoPlotStrategy
from .splice import SplicePanels, SplicePlotSettings, SplicePlotStrategy

__all__ = [
    "PlotStrategy",
    "SplicePlotStrategy",
    "SplicePlotSettings",
    "SplicePanels",
    "SequenceLogoPlotStrategy",
    "ConservationPlotStrategy",
]
