"""
Rendering utilities for SpliceView plots

This package contains rendering infrastructure used by plot strategies:
- ThemeManager: Bokeh figure theming (light/dark mode)
- DrawingRegion: cell-local shape emission onto a figure
- SequenceLogoRenderer: stacked-letter logos of per-base counts
- HeatMapRenderer: score-colored conservation strips
- TriangleConnector: overview to zoom slot connectors
"""

from .connector import TriangleConnector, draw_guide_lines, draw_guide_spans
from .heatmap import HeatCell, HeatMapRenderer
from .region import DrawingRegion
from .sequence_logo import GlyphSpec, SequenceLogoRenderer
from .theme_manager import ThemeManager

__all__ = [
    "ThemeManager",
    "DrawingRegion",
    "SequenceLogoRenderer",
    "GlyphSpec",
    "HeatMapRenderer",
    "HeatCell",
    "TriangleConnector",
    "draw_guide_lines",
    "draw_guide_spans",
]
