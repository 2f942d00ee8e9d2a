"""
SpliceView: splice site sequence logos and conservation strips

This package renders, for a gene model, a conservation heat strip over the
full coordinate range and one zoomed sequence logo per donor and acceptor
splice site, linked to the overview by connectors. Plots are Bokeh figures
returned as standalone HTML.

Example usage:
    >>> import spliceview
    >>> sites = spliceview.SpliceSites([1200, 3400], [2100, 4200], end=5000)
    >>> html = spliceview.plot_splice_sites(sites, donors, acceptors, intervals)
    >>> spliceview.export_current_plot('splice.html')

Example usage in Jupyter notebook:
    >>> from bokeh.models import Div
    >>> from bokeh.plotting import output_notebook, show
    >>>
    >>> output_notebook()
    >>> show(Div(text=spliceview.plot_conservation(intervals, 5000)))
"""

__version__ = "0.1.0"

from .constants import LOGO_COLORS, SYMBOLS, PlotMode, SpliceSide, Theme
from .export import (
    export_current_plot,
    export_plot_to_html,
    export_plot_to_png,
    export_plot_to_svg,
    get_current_plot,
)
from .frequency import (
    FrequencyProfile,
    frequencies,
    frequency_profile,
    information_content,
    shannon_entropy,
)
from .layout import EvenSlotLayout, SlotPlacement, ZoomSlotLayout
from .plot_factory import create_plot_strategy
from .plotting import (
    parse_plot_parameters,
    plot_conservation,
    plot_sequence_logo,
    plot_splice_sites,
)
from .records import (
    PositionRecord,
    ScoredInterval,
    SpliceSites,
    max_score,
    smooth_intervals,
)
from .scales import LinearScale, SequentialColorScale
from .window import extract_window, zoom_domain

__all__ = [
    # Version
    "__version__",
    # Plotting functions
    "plot_splice_sites",
    "plot_sequence_logo",
    "plot_conservation",
    "create_plot_strategy",
    "parse_plot_parameters",
    # Export
    "export_plot_to_html",
    "export_plot_to_png",
    "export_plot_to_svg",
    "export_current_plot",
    "get_current_plot",
    # Data structures
    "PositionRecord",
    "ScoredInterval",
    "SpliceSites",
    "FrequencyProfile",
    "SlotPlacement",
    "ZoomSlotLayout",
    "EvenSlotLayout",
    "LinearScale",
    "SequentialColorScale",
    # Constants
    "PlotMode",
    "SpliceSide",
    "Theme",
    "SYMBOLS",
    "LOGO_COLORS",
    # Functions
    "frequencies",
    "shannon_entropy",
    "information_content",
    "frequency_profile",
    "max_score",
    "smooth_intervals",
    "extract_window",
    "zoom_domain",
]
