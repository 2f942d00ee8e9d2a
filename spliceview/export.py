"""
Export functions for SpliceView plots

This module writes finished Bokeh plots (single figures or the composite
splice layout) to standalone HTML, PNG or SVG files.
"""

import warnings
from pathlib import Path
from typing import Any

from bokeh.embed import file_html
from bokeh.io import export_png, export_svgs
from bokeh.models import Plot
from bokeh.resources import CDN

from .constants import APP_NAME
from .logging_config import get_logger

logger = get_logger(__name__)

# Last plot produced by the plotting functions, for export_current_plot
_last_plot_figure: Any | None = None


def export_plot_to_html(
    plot: Any, output_path: str, title: str = f"{APP_NAME} Plot"
) -> None:
    """
    Export a Bokeh plot to a standalone HTML file

    Args:
        plot: Bokeh figure or layout
        output_path: Path where the HTML file will be saved
        title: Document title

    Raises:
        ValueError: If plot is None
    """
    if plot is None:
        raise ValueError("Plot object cannot be None")

    Path(output_path).write_text(file_html(plot, CDN, title), encoding="utf-8")
    logger.info(f"Exported plot to {output_path}")


def export_plot_to_png(
    plot: Any, output_path: str, scale_factor: float = 1
) -> None:
    """
    Export a Bokeh plot to PNG format

    Shapes are placed in pixel coordinates, so the plot is rendered at its own
    size; scale_factor multiplies the output resolution.

    Args:
        plot: Bokeh figure or layout
        output_path: Path where the PNG file will be saved
        scale_factor: Resolution multiplier (default: 1)

    Raises:
        RuntimeError: If selenium/webdriver is not available
        ValueError: If plot is None or scale_factor is not positive

    Examples:
        >>> from spliceview.export import export_plot_to_png
        >>> html, layout = strategy.create_plot(data, options)
        >>> export_plot_to_png(layout, 'splice.png', scale_factor=2)
    """
    if plot is None:
        raise ValueError("Plot object cannot be None")
    if scale_factor <= 0:
        raise ValueError(f"Scale factor must be positive, got {scale_factor}")

    try:
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", message="Saving.*in image")
            export_png(plot, filename=output_path, scale_factor=scale_factor)
    except Exception as e:
        if "webdriver" in str(e).lower() or "selenium" in str(e).lower():
            raise RuntimeError(
                "PNG export requires selenium and a webdriver. "
                "Install with: pip install spliceview[export]"
            ) from e
        raise

    logger.info(f"Exported plot to {output_path}")


def export_plot_to_svg(plot: Any, output_path: str) -> None:
    """
    Export a Bokeh plot to SVG format

    Every figure of a layout is switched to the SVG backend for the export
    and restored afterwards. A layout produces one SVG file per figure.

    Raises:
        RuntimeError: If selenium/webdriver is not available
        ValueError: If plot is None
    """
    if plot is None:
        raise ValueError("Plot object cannot be None")

    figures = list(plot.select({"type": Plot}))
    backends = [fig.output_backend for fig in figures]

    try:
        for fig in figures:
            fig.output_backend = "svg"
        export_svgs(plot, filename=output_path)
    except Exception as e:
        if "webdriver" in str(e).lower() or "selenium" in str(e).lower():
            raise RuntimeError(
                "SVG export requires selenium and a webdriver. "
                "Install with: pip install spliceview[export]"
            ) from e
        raise
    finally:
        for fig, backend in zip(figures, backends, strict=True):
            fig.output_backend = backend

    logger.info(f"Exported plot to {output_path}")


def set_current_plot(figure: Any) -> None:
    """Store the plot most recently produced by the plotting functions"""
    global _last_plot_figure
    _last_plot_figure = figure


def get_current_plot() -> Any:
    """
    Get the currently stored plot figure

    Returns:
        The last plot stored via set_current_plot(), or None if no plot available
    """
    return _last_plot_figure


def export_current_plot(output_path: str, format: str = "html", **kwargs) -> None:
    """
    Export the most recent plot

    Args:
        output_path: Path where the file will be saved
        format: Output format ('html', 'png' or 'svg')
        **kwargs: Passed on to the format's export function

    Raises:
        ValueError: If no plot is available or the format is unknown
        RuntimeError: If selenium/webdriver is not available (PNG and SVG)

    Examples:
        >>> import spliceview
        >>> spliceview.plot_conservation(intervals, coordinate_length=5000)
        >>> from spliceview.export import export_current_plot
        >>> export_current_plot('conservation.png', format='png', scale_factor=2)
    """
    if _last_plot_figure is None:
        raise ValueError("No plot available for export. Generate a plot first.")

    exporters = {
        "html": export_plot_to_html,
        "png": export_plot_to_png,
        "svg": export_plot_to_svg,
    }
    exporter = exporters.get(format.lower())
    if exporter is None:
        raise ValueError(f"Format must be 'html', 'png' or 'svg', got '{format}'")

    exporter(_last_plot_figure, output_path, **kwargs)
