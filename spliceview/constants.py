"""Constants and configuration for SpliceView"""

from enum import Enum
from types import MappingProxyType

# ==============================================================================
# Application Metadata
# ==============================================================================

APP_NAME = "SpliceView"

# ==============================================================================
# Nucleotide Alphabet
# ==============================================================================

# Order matters: ties in the logo stacking sort fall back to this order
SYMBOLS = ("A", "C", "G", "T", "N")

# Maximum entropy of a 4-letter alphabet; information content is 2 - H
MAX_BITS = 2.0

# ==============================================================================
# Sequence Logo Settings
# ==============================================================================

DEFAULT_LETTER_WIDTH = 20  # Maximum glyph column width in pixels
DEFAULT_COLUMN_SPACING = 1  # Divisor applied to the per-position pixel pitch
MIN_LETTER_WIDTH = 10  # Floor for the column width policy
COLUMN_MARGIN = 2  # Pixels kept free between neighbouring columns
DEFAULT_BIT_DOMAIN = (0.0, MAX_BITS)

# Logo letter colors
LOGO_COLORS = MappingProxyType(
    {
        "A": "#4CAF50",  # Green
        "C": "#2196F3",  # Blue
        "G": "#FFC107",  # Amber
        "T": "#F44336",  # Red
        "N": "#9E9E9E",  # Gray
    }
)

LOGO_BORDER_COLOR = "black"
LOGO_BORDER_WIDTH = 3
LETTER_OUTLINE_COLOR = "black"
LETTER_OUTLINE_ALPHA = 0.2

# Letter outlines drawn in a 100x100 box, y pointing down
LETTER_PATHS = MappingProxyType(
    {
        "A": (
            "M0,100 L50,0 L100,100 L75,100 L65,80 L35,80 L25,100 Z "
            "M40,60 L60,60 L50,40 Z"
        ),
        "C": (
            "M100,25 C100,10 90,0 50,0 C10,0 0,25 0,50 C0,75 10,100 50,100 "
            "C90,100 100,90 100,75 L75,75 C75,85 70,90 50,90 C30,90 25,75 25,50 "
            "C25,25 30,10 50,10 C70,10 75,15 75,25 Z"
        ),
        "G": (
            "M100,25 C100,10 90,0 50,0 C10,0 0,25 0,50 C0,75 10,100 50,100 "
            "C90,100 100,90 100,75 L75,75 C75,85 70,90 50,90 C30,90 25,75 25,50 "
            "C25,25 30,10 50,10 C70,10 75,25 75,40 L50,40 L50,60 L100,60 Z"
        ),
        "T": "M0,0 L100,0 L100,20 L60,20 L60,100 L40,100 L40,20 L0,20 Z",
        "N": "M0,100 L0,0 L25,0 L75,75 L75,0 L100,0 L100,100 L75,100 L25,25 L25,100 Z",
    }
)
LETTER_BOX_SIZE = 100.0
BEZIER_SAMPLES = 12  # Points sampled per cubic segment when flattening outlines

# ==============================================================================
# Heat Strip Settings
# ==============================================================================

DEFAULT_HEATMAP_PALETTE = "Magma256"
DEFAULT_CELL_HEIGHT = 20
HEATMAP_GRID_TICKS = 2
MIN_CELL_WIDTH = 1  # Intervals narrower than this are widened to stay visible
HEATMAP_BACKGROUND_COLOR = "#f7f7f7"
HEATMAP_BACKGROUND_ALPHA = 0.75
HEATMAP_GRID_COLOR = "black"
HEATMAP_GRID_ALPHA = 0.03  # rgba(0,0,0,0.1) at 0.3 opacity
HEATMAP_GRID_DASH = [5, 5]

# ==============================================================================
# Splice Plot Settings
# ==============================================================================


class SpliceSide(Enum):
    """Side of an intron a splice site sits on"""

    DONOR = "donor"  # 5' boundary
    ACCEPTOR = "acceptor"  # 3' boundary


DEFAULT_ZOOM_RADIUS = 5  # Bases on each side of a site shown in its logo
DEFAULT_ZOOM_WINDOW_WIDTH = 140  # Pixel width of one zoom slot
DEFAULT_PLOT_WIDTH = 1500
DEFAULT_PLOT_HEIGHT = 1000
DEFAULT_SMOOTHING_WINDOW = 1  # 1 = no smoothing

# Accent colors per side (guide lines and slot backgrounds)
SIDE_COLORS = MappingProxyType(
    {
        SpliceSide.DONOR: "#F78154",  # Orange
        SpliceSide.ACCEPTOR: "#5FAD56",  # Green
    }
)

# Connector colors per side
CONNECTOR_COLORS = MappingProxyType(
    {
        SpliceSide.DONOR: "red",
        SpliceSide.ACCEPTOR: "green",
    }
)
CONNECTOR_ALPHA = 0.3
GUIDE_LINE_DASH = [5, 5]

# Share of the figure width given to the plot column
PLOT_COLUMN_RATIO = 0.9

# Share of the figure height given to each row of the composite
SPLICE_ROW_RATIOS = MappingProxyType(
    {
        "gene_model": 0.60,
        "spacer": 0.025,
        "conservation": 0.05,
        "donor_connector": 0.05,
        "donor_zoom": 0.125,
        "acceptor_spacer": 0.025,
        "acceptor_connector": 0.05,
        "acceptor_zoom": 0.125,
    }
)

# ==============================================================================
# Plot Modes
# ==============================================================================


class PlotMode(Enum):
    """Available plot types"""

    SPLICE = "splice"  # Gene model, conservation strip and splice site logos
    SEQUENCE_LOGO = "sequence_logo"  # Logo around a single site
    CONSERVATION = "conservation"  # Conservation strip only


# ==============================================================================
# Theme Settings
# ==============================================================================


class Theme(Enum):
    """Application theme modes"""

    LIGHT = "light"  # Light mode (default)
    DARK = "dark"  # Dark mode


LIGHT_THEME = {
    "plot_bg": "#ffffff",
    "plot_border": "#ffffff",
    "grid_line": "#e6e6e6",
    "axis_line": "#000000",
    "axis_text": "#000000",
    "title_text": "#000000",
}

DARK_THEME = {
    "plot_bg": "#2b2b2b",
    "plot_border": "#1e1e1e",
    "grid_line": "#3c3c3c",
    "axis_line": "#cccccc",
    "axis_text": "#cccccc",
    "title_text": "#ffffff",
}
