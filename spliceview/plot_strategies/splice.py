"""
Splice plot strategy implementation

Composes the full splice plot: gene model layer, splice site guide lines,
conservation strip, and one zoomed sequence logo per donor and acceptor
site, each linked to its overview position by a connector.
"""

from collections.abc import Sequence
from dataclasses import dataclass, fields

from bokeh.layouts import column
from bokeh.models import Spacer

from ..constants import (
    CONNECTOR_COLORS,
    DEFAULT_COLUMN_SPACING,
    DEFAULT_HEATMAP_PALETTE,
    DEFAULT_LETTER_WIDTH,
    DEFAULT_PLOT_HEIGHT,
    DEFAULT_PLOT_WIDTH,
    DEFAULT_SMOOTHING_WINDOW,
    DEFAULT_ZOOM_RADIUS,
    DEFAULT_ZOOM_WINDOW_WIDTH,
    PLOT_COLUMN_RATIO,
    SIDE_COLORS,
    SPLICE_ROW_RATIOS,
    SpliceSide,
    Theme,
)
from ..layout import EvenSlotLayout, SlotPlacement, ZoomSlotLayout
from ..logging_config import get_logger
from ..records import PositionRecord, smooth_intervals
from ..rendering import (
    DrawingRegion,
    HeatMapRenderer,
    SequenceLogoRenderer,
    ThemeManager,
    TriangleConnector,
    draw_guide_lines,
    draw_guide_spans,
)
from ..scales import LinearScale
from ..window import extract_window, zoom_domain
from .base import PlotStrategy

logger = get_logger(__name__)


@dataclass(frozen=True)
class SplicePlotSettings:
    """Sizes and rendering parameters of a splice plot"""

    width: int = DEFAULT_PLOT_WIDTH
    height: int = DEFAULT_PLOT_HEIGHT
    zoom_radius: int = DEFAULT_ZOOM_RADIUS
    zoom_window_width: float = DEFAULT_ZOOM_WINDOW_WIDTH
    smoothing_window: int = DEFAULT_SMOOTHING_WINDOW
    letter_width: float = DEFAULT_LETTER_WIDTH
    column_spacing: float = DEFAULT_COLUMN_SPACING
    palette: str = DEFAULT_HEATMAP_PALETTE

    @classmethod
    def from_options(cls, options: dict) -> "SplicePlotSettings":
        """Build settings from an options dict, ignoring unrelated keys"""
        known = {f.name for f in fields(cls)}
        settings = cls(**{k: v for k, v in options.items() if k in known})
        if settings.zoom_radius < 1:
            raise ValueError(
                f"Zoom radius must be at least 1, got {settings.zoom_radius}"
            )
        if settings.width <= 0 or settings.height <= 0:
            raise ValueError(
                "Plot dimensions must be positive, "
                f"got {settings.width}x{settings.height}"
            )
        return settings

    @property
    def plot_width(self) -> float:
        return self.width * PLOT_COLUMN_RATIO

    def row_height(self, row: str) -> float:
        return self.height * SPLICE_ROW_RATIOS[row]


@dataclass
class SplicePanels:
    """Drawing regions of one splice plot, top to bottom"""

    gene_model: DrawingRegion
    conservation: DrawingRegion
    zoom: dict[SpliceSide, DrawingRegion]
    connectors: dict[SpliceSide, DrawingRegion]
    # Caller-supplied gene model figure in genomic coordinates, if any
    gene_track: object = None

    def regions(self) -> list[DrawingRegion]:
        return [
            self.gene_model,
            self.conservation,
            *self.connectors.values(),
            *self.zoom.values(),
        ]


class SplicePlotStrategy(PlotStrategy):
    """
    Strategy for the composite splice plot

    Zoom slot geometry comes from a layout object (EvenSlotLayout unless
    another ZoomSlotLayout is given).

    Examples:
        >>> from spliceview.records import SpliceSites
        >>> strategy = SplicePlotStrategy(Theme.LIGHT)
        >>> data = {
        ...     'splice_sites': SpliceSites([1200, 3400], [2100, 4200], end=5000),
        ...     'donors': donor_records,
        ...     'acceptors': acceptor_records,
        ...     'conservation': intervals,
        ... }
        >>> html, layout = strategy.create_plot(data, {'zoom_radius': 5})
    """

    def __init__(self, theme: Theme, layout: ZoomSlotLayout | None = None):
        """
        Initialize splice plot strategy

        Args:
            theme: Theme enum (LIGHT or DARK)
            layout: Zoom slot layout (default: EvenSlotLayout)
        """
        super().__init__(theme)
        self.theme_manager = ThemeManager(theme)
        self.layout = layout if layout is not None else EvenSlotLayout()

    def validate_data(self, data: dict) -> None:
        """
        Validate that required data is present

        Required keys:
            - splice_sites: object with donors(), acceptors() and get_end()
            - donors: PositionRecords for donor sites, sorted by position
            - acceptors: PositionRecords for acceptor sites, sorted by position
            - conservation: ScoredIntervals sorted by start

        Optional keys:
            - gene_track: Bokeh figure already holding the gene model layer,
              with genomic coordinates on its x axis
        """
        self._require(
            data, ["splice_sites", "donors", "acceptors", "conservation"], "splice"
        )
        sites = data["splice_sites"]
        for method in ("donors", "acceptors", "get_end"):
            if not callable(getattr(sites, method, None)):
                raise ValueError(f"splice_sites must provide a {method}() method")

    def create_plot(self, data: dict, options: dict) -> tuple[str, object]:
        """
        Generate the splice plot

        Args:
            data: See validate_data
            options: Any SplicePlotSettings field (width, height, zoom_radius,
                zoom_window_width, smoothing_window, letter_width,
                column_spacing, palette)

        Returns:
            Tuple of (html_string, bokeh_column_layout)
        """
        self.validate_data(data)
        settings = SplicePlotSettings.from_options(options)

        panels = self.create_panels(settings, gene_track=data.get("gene_track"))
        self.render(data, panels, settings)

        layout = column(
            panels.gene_model.fig,
            Spacer(height=round(settings.row_height("spacer"))),
            panels.conservation.fig,
            panels.connectors[SpliceSide.DONOR].fig,
            panels.zoom[SpliceSide.DONOR].fig,
            Spacer(height=round(settings.row_height("acceptor_spacer"))),
            panels.connectors[SpliceSide.ACCEPTOR].fig,
            panels.zoom[SpliceSide.ACCEPTOR].fig,
        )
        return self._figure_to_html(layout), layout

    def create_panels(
        self, settings: SplicePlotSettings, gene_track=None
    ) -> SplicePanels:
        """
        Create one themed figure per row and wrap each in a region

        Args:
            settings: Plot settings
            gene_track: Existing figure holding the gene model in genomic
                coordinates; a blank pixel-space cell is created when None

        Returns:
            SplicePanels with every region sized to the plot column width
        """
        width = settings.plot_width

        def cell(row: str) -> DrawingRegion:
            height = settings.row_height(row)
            fig = self.theme_manager.create_cell(width, height)
            return DrawingRegion(fig, width=width, height=height, tag=row)

        if gene_track is None:
            gene_model = cell("gene_model")
        else:
            gene_model = DrawingRegion(
                gene_track,
                width=width,
                height=gene_track.height or settings.row_height("gene_model"),
                tag="gene_model",
            )

        return SplicePanels(
            gene_model=gene_model,
            gene_track=gene_track,
            conservation=cell("conservation"),
            zoom={
                SpliceSide.DONOR: cell("donor_zoom"),
                SpliceSide.ACCEPTOR: cell("acceptor_zoom"),
            },
            connectors={
                SpliceSide.DONOR: cell("donor_connector"),
                SpliceSide.ACCEPTOR: cell("acceptor_connector"),
            },
        )

    def render(
        self, data: dict, panels: SplicePanels, settings: SplicePlotSettings
    ) -> None:
        """
        Run one render pass over existing panels

        Every region is cleared first, so repeating a pass with the same
        inputs reproduces the same shapes.
        """
        for region in panels.regions():
            region.clear()

        sites = data["splice_sites"]
        end = sites.get_end()
        donors = sorted(sites.donors())
        acceptors = sorted(sites.acceptors())
        logger.info(
            f"Rendering splice plot: {len(donors)} donors, {len(acceptors)} acceptors, "
            f"coordinate length {end}"
        )

        self._draw_guides(panels, donors, acceptors, end)
        self._draw_conservation(
            panels.conservation, data["conservation"], end, settings
        )

        for side, positions, records in (
            (SpliceSide.DONOR, donors, data["donors"]),
            (SpliceSide.ACCEPTOR, acceptors, data["acceptors"]),
        ):
            self._draw_side(
                side,
                positions,
                records,
                end,
                panels.zoom[side],
                panels.connectors[side],
                settings,
            )

    # =========================================================================
    # Private Methods
    # =========================================================================

    def _draw_guides(
        self,
        panels: SplicePanels,
        donors: list[int],
        acceptors: list[int],
        end: int,
    ) -> None:
        for side, positions in (
            (SpliceSide.DONOR, donors),
            (SpliceSide.ACCEPTOR, acceptors),
        ):
            tag = f"{side.value}-guides"
            if panels.gene_track is None:
                regions = (panels.gene_model, panels.conservation)
            else:
                draw_guide_spans(
                    panels.gene_track,
                    positions,
                    SIDE_COLORS[side],
                    tag=f"{panels.gene_model.tag}/{tag}",
                )
                regions = (panels.conservation,)
            for region in regions:
                guides = region.subregion(0, 0, region.width, region.height, tag=tag)
                draw_guide_lines(guides, positions, end, SIDE_COLORS[side])

    def _draw_conservation(
        self,
        region: DrawingRegion,
        intervals: Sequence,
        end: int,
        settings: SplicePlotSettings,
    ) -> None:
        strip = region.subregion(0, 0, region.width, region.height, tag="strip")
        renderer = HeatMapRenderer(
            smooth_intervals(intervals, settings.smoothing_window),
            LinearScale((0, end), (0, region.width)),
            width=region.width,
            height=region.height,
            palette=settings.palette,
        )
        renderer.plot(strip)

    def _draw_side(
        self,
        side: SpliceSide,
        positions: list[int],
        records: Sequence[PositionRecord],
        end: int,
        zoom: DrawingRegion,
        connector_region: DrawingRegion,
        settings: SplicePlotSettings,
    ) -> None:
        placements = self.layout.place(
            positions, end, settings.zoom_window_width, zoom.width
        )
        connector = TriangleConnector(CONNECTOR_COLORS[side])

        for i, placement in enumerate(placements):
            self._draw_slot(side, i, placement, records, zoom, settings)
            connector.plot(
                connector_region.subregion(
                    0,
                    0,
                    connector_region.width,
                    connector_region.height,
                    tag=f"slot-{i}",
                ),
                placement,
            )

    def _draw_slot(
        self,
        side: SpliceSide,
        index: int,
        placement: SlotPlacement,
        records: Sequence[PositionRecord],
        zoom: DrawingRegion,
        settings: SplicePlotSettings,
    ) -> None:
        anchor = placement.element
        left = placement.slot[0]
        width = placement.width

        background = zoom.subregion(
            left, 0, width, zoom.height, tag=f"slot-{index}-background"
        )
        background.rect(
            0, 0, width, zoom.height, fill_color=SIDE_COLORS[side], line_color=None
        )

        window = extract_window(records, anchor, settings.zoom_radius, side)
        if not window:
            logger.debug(f"No records around {side.value} site {anchor}")

        renderer = SequenceLogoRenderer(
            window,
            LinearScale(zoom_domain(anchor, settings.zoom_radius, side), (0, width)),
            width=width,
            height=zoom.height,
            letter_width=settings.letter_width,
            column_spacing=settings.column_spacing,
            colors=self.theme_manager.get_logo_colors(),
        )
        renderer.plot(
            zoom.subregion(left, 0, width, zoom.height, tag=f"slot-{index}-logo")
        )
