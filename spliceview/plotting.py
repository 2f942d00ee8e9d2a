"""
Plotting functions for SpliceView

High-level functions that build a plot strategy from string parameters, run
it, remember the result for export, and return the standalone HTML.
"""

from collections.abc import Sequence

from .constants import PlotMode, SpliceSide, Theme
from .export import set_current_plot
from .layout import ZoomSlotLayout
from .plot_factory import create_plot_strategy
from .records import PositionRecord, ScoredInterval


def parse_plot_parameters(mode: str | None = None, theme: str = "LIGHT") -> dict:
    """
    Convert string plot parameters to enum values

    Args:
        mode: Plot mode string ("SPLICE", "SEQUENCE_LOGO", "CONSERVATION").
              If None, only the theme is parsed.
        theme: Color theme string ("LIGHT" or "DARK")

    Returns:
        Dictionary with "theme" (Theme) and, when mode is given, "mode" (PlotMode)

    Raises:
        ValueError: If the mode or theme string is not recognized

    Examples:
        >>> parse_plot_parameters(mode="splice", theme="dark")["mode"]
        <PlotMode.SPLICE: 'splice'>
    """
    try:
        result = {"theme": Theme[theme.upper()]}
    except KeyError:
        valid = ", ".join(t.name for t in Theme)
        raise ValueError(f"Unknown theme: {theme}. Valid themes: {valid}") from None

    if mode is not None:
        try:
            result["mode"] = PlotMode[mode.upper()]
        except KeyError:
            valid = ", ".join(m.value for m in PlotMode)
            raise ValueError(
                f"Unknown plot mode: {mode}. Valid modes: {valid}"
            ) from None

    return result


def _options(**kwargs) -> dict:
    return {key: value for key, value in kwargs.items() if value is not None}


def plot_splice_sites(
    splice_sites,
    donors: Sequence[PositionRecord],
    acceptors: Sequence[PositionRecord],
    conservation: Sequence[ScoredInterval],
    theme: str = "LIGHT",
    width: int | None = None,
    height: int | None = None,
    zoom_radius: int | None = None,
    zoom_window_width: float | None = None,
    smoothing_window: int | None = None,
    palette: str | None = None,
    gene_track=None,
    layout: ZoomSlotLayout | None = None,
) -> str:
    """
    Generate the composite splice plot

    Args:
        splice_sites: Object with donors(), acceptors() and get_end(), such as
            SpliceSites
        donors: Per-position base counts around donor sites, sorted by position
        acceptors: Per-position base counts around acceptor sites, sorted by
            position
        conservation: Scored intervals for the heat strip, sorted by start
        theme: Color theme (LIGHT, DARK)
        width: Total plot width in pixels (default: 1500)
        height: Total plot height in pixels (default: 1000)
        zoom_radius: Bases shown on each side of a site (default: 5)
        zoom_window_width: Pixel width of one zoom slot (default: 140)
        smoothing_window: Moving average window for the scores (default: 1)
        palette: Bokeh palette name for the heat strip (default: Magma256)
        gene_track: Bokeh figure that already holds the gene model layer
        layout: Zoom slot layout (default: EvenSlotLayout)

    Returns:
        Bokeh HTML string

    Examples:
        >>> from spliceview import SpliceSites, plot_splice_sites
        >>> sites = SpliceSites([1200, 3400], [2100, 4200], end=5000)
        >>> html = plot_splice_sites(sites, donors, acceptors, intervals)
        >>> with open('splice.html', 'w') as f:
        ...     f.write(html)
    """
    params = parse_plot_parameters(theme=theme)
    strategy = create_plot_strategy(PlotMode.SPLICE, params["theme"], layout=layout)

    data = {
        "splice_sites": splice_sites,
        "donors": donors,
        "acceptors": acceptors,
        "conservation": conservation,
    }
    if gene_track is not None:
        data["gene_track"] = gene_track

    options = _options(
        width=width,
        height=height,
        zoom_radius=zoom_radius,
        zoom_window_width=zoom_window_width,
        smoothing_window=smoothing_window,
        palette=palette,
    )

    html, plot = strategy.create_plot(data, options)
    set_current_plot(plot)
    return html


def plot_sequence_logo(
    records: Sequence[PositionRecord],
    anchor: int,
    side: str | SpliceSide = "donor",
    theme: str = "LIGHT",
    radius: int | None = None,
    width: float | None = None,
    height: float | None = None,
    show_background: bool = True,
) -> str:
    """
    Generate the sequence logo of a single splice site

    Args:
        records: Per-position base counts, sorted by position
        anchor: Splice site position
        side: "donor" or "acceptor"
        theme: Color theme (LIGHT, DARK)
        radius: Bases shown on each side of the site (default: 5)
        width: Plot width in pixels (default: 140)
        height: Plot height in pixels (default: 125)
        show_background: Fill the background with the side's accent color

    Returns:
        Bokeh HTML string
    """
    params = parse_plot_parameters(theme=theme)
    strategy = create_plot_strategy(PlotMode.SEQUENCE_LOGO, params["theme"])

    options = _options(radius=radius, width=width, height=height)
    options["show_background"] = show_background

    html, fig = strategy.create_plot(
        {"records": records, "anchor": anchor, "side": side}, options
    )
    set_current_plot(fig)
    return html


def plot_conservation(
    intervals: Sequence[ScoredInterval],
    coordinate_length: int,
    theme: str = "LIGHT",
    width: float | None = None,
    height: float | None = None,
    smoothing_window: int | None = None,
    palette: str | None = None,
) -> str:
    """
    Generate a conservation heat strip

    Args:
        intervals: Scored intervals, sorted by start
        coordinate_length: Last coordinate of the strip
        theme: Color theme (LIGHT, DARK)
        width: Plot width in pixels (default: 1500)
        height: Plot height in pixels (default: 50)
        smoothing_window: Moving average window for the scores (default: 1)
        palette: Bokeh palette name (default: Magma256)

    Returns:
        Bokeh HTML string
    """
    params = parse_plot_parameters(theme=theme)
    strategy = create_plot_strategy(PlotMode.CONSERVATION, params["theme"])

    options = _options(
        width=width,
        height=height,
        smoothing_window=smoothing_window,
        palette=palette,
    )

    html, fig = strategy.create_plot(
        {"intervals": intervals, "coordinate_length": coordinate_length}, options
    )
    set_current_plot(fig)
    return html
