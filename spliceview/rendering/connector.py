"""
Connector and guide line shapes linking the overview to zoom slots
"""

from collections.abc import Sequence

from bokeh.models import Span

from ..constants import CONNECTOR_ALPHA, GUIDE_LINE_DASH
from ..layout import SlotPlacement
from .region import DrawingRegion


class TriangleConnector:
    """
    Triangle joining an overview position to the edges of its zoom slot

    The apex sits at the top of the region, over the middle of the overview
    interval; the base spans the slot along the bottom edge.

    Examples:
        >>> connector = TriangleConnector(color="red")
        >>> connector.points(SlotPlacement(500, slot=(100, 240), origin=(50, 52)), 40)
        ([51.0, 100, 240], [0.0, 40, 40])
    """

    def __init__(self, color: str, alpha: float = CONNECTOR_ALPHA):
        self.color = color
        self.alpha = alpha

    def points(
        self, placement: SlotPlacement, height: float
    ) -> tuple[list[float], list[float]]:
        """Triangle vertices (apex, slot left, slot right) in region coordinates"""
        left, right = placement.slot
        return [placement.origin_mid, left, right], [0.0, height, height]

    def plot(self, region: DrawingRegion, placement: SlotPlacement) -> None:
        xs, ys = self.points(placement, region.height)
        region.patches(
            [xs],
            [ys],
            fill_color=self.color,
            fill_alpha=self.alpha,
            line_color=self.color,
            line_width=1,
        )


def draw_guide_lines(
    region: DrawingRegion,
    sites: Sequence[int],
    coordinate_length: int,
    color: str,
) -> list[float]:
    """
    Draw dashed vertical lines at splice sites across a region

    Args:
        region: Region spanning the full coordinate range
        sites: Site positions
        coordinate_length: Last coordinate of the overview
        color: Line color

    Returns:
        Pixel x coordinate of each line
    """
    if coordinate_length <= 0:
        return []
    xs = [site / coordinate_length * region.width for site in sites]
    if xs:
        region.segments(
            xs,
            [0.0] * len(xs),
            xs,
            [float(region.height)] * len(xs),
            line_color=color,
            line_width=1,
            line_dash=GUIDE_LINE_DASH,
        )
    return xs


def draw_guide_spans(fig, sites: Sequence[int], color: str, tag: str) -> list[Span]:
    """
    Draw dashed vertical spans at splice sites on a figure in genomic coordinates

    Used for gene model figures supplied by the caller, whose x axis is the
    coordinate itself. Spans cover the whole y range of the figure and take
    no part in auto-ranging. Spans from an earlier call with the same tag are
    removed first.

    Args:
        fig: Bokeh figure with a genomic x axis
        sites: Site positions
        color: Line color
        tag: Tag identifying this group of spans

    Returns:
        The Span annotations added, one per site
    """
    fig.center = [a for a in fig.center if tag not in a.tags]
    spans = [
        Span(
            location=site,
            dimension="height",
            line_color=color,
            line_width=1,
            line_dash=GUIDE_LINE_DASH,
            tags=[tag],
        )
        for site in sites
    ]
    for span in spans:
        fig.add_layout(span)
    return spans
