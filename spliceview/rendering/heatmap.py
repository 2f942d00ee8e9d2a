"""
Conservation heat strip rendering

Draws one full-height rectangle per scored interval, colored by its score.
Despite the name this is a one-dimensional intensity strip: the vertical
scale only positions the background grid lines.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from bokeh.transform import transform

from ..constants import (
    DEFAULT_CELL_HEIGHT,
    DEFAULT_HEATMAP_PALETTE,
    HEATMAP_BACKGROUND_ALPHA,
    HEATMAP_BACKGROUND_COLOR,
    HEATMAP_GRID_ALPHA,
    HEATMAP_GRID_COLOR,
    HEATMAP_GRID_DASH,
    HEATMAP_GRID_TICKS,
    MIN_CELL_WIDTH,
)
from ..logging_config import get_logger
from ..records import ScoredInterval, max_score
from ..scales import LinearScale, SequentialColorScale
from .region import DrawingRegion

logger = get_logger(__name__)


@dataclass(frozen=True)
class HeatCell:
    """Rectangle of the strip, in region pixel coordinates"""

    x: float
    width: float
    height: float
    score: float
    color: str


class HeatMapRenderer:
    """
    Renders scored intervals as a colored strip

    Scales are finalized by ``resolve()``: the vertical scale defaults to
    [0, max score] onto [height, 0], and the color scale domain is always
    [0, max score].

    Attributes:
        intervals: ScoredIntervals sorted by start
        x_scale: Genomic position to pixel mapping
        width: Region width in pixels
        height: Region height in pixels
        cell_height: Row height used by strip layouts (kept for callers)

    Examples:
        >>> from spliceview.scales import LinearScale
        >>> intervals = [ScoredInterval(0, 10, 0.0), ScoredInterval(10, 20, 4.0)]
        >>> renderer = HeatMapRenderer(
        ...     intervals, LinearScale((0, 20), (0, 200)), width=200, height=30
        ... )
        >>> [cell.width for cell in renderer.compute_cells()]
        [100.0, 100.0]
    """

    def __init__(
        self,
        intervals: Sequence[ScoredInterval],
        x_scale: LinearScale,
        width: float,
        height: float,
        y_scale: LinearScale | None = None,
        color_scale: SequentialColorScale | None = None,
        palette: str = DEFAULT_HEATMAP_PALETTE,
        cell_height: float = DEFAULT_CELL_HEIGHT,
    ):
        self.intervals = list(intervals)
        self.x_scale = x_scale
        self.width = width
        self.height = height
        self.cell_height = cell_height
        self._provided_y_scale = y_scale
        self._base_color_scale = (
            color_scale if color_scale is not None else SequentialColorScale(palette)
        )
        self._y_scale: LinearScale | None = None
        self._color_scale: SequentialColorScale | None = None

    def resolve(self) -> tuple[LinearScale, SequentialColorScale]:
        """Finalize the vertical and color scales from the current intervals"""
        top = max_score(self.intervals)
        if self._provided_y_scale is not None:
            self._y_scale = self._provided_y_scale
        else:
            self._y_scale = LinearScale((0, top), (self.height, 0))
        self._color_scale = self._base_color_scale.with_domain(0, top)

        logger.debug(f"Heat strip scales resolved for max score {top}")
        return self._y_scale, self._color_scale

    def get_y_scale(self) -> LinearScale:
        return self._y_scale if self._y_scale is not None else self.resolve()[0]

    def get_color_scale(self) -> SequentialColorScale:
        return self._color_scale if self._color_scale is not None else self.resolve()[1]

    def compute_cells(self) -> list[HeatCell]:
        """One full-height cell per interval, at least MIN_CELL_WIDTH wide"""
        _, color_scale = self.resolve()
        cells = []
        for interval in self.intervals:
            left = self.x_scale(interval.start)
            width = max(MIN_CELL_WIDTH, self.x_scale(interval.end) - left)
            cells.append(
                HeatCell(
                    x=left,
                    width=width,
                    height=self.height,
                    score=interval.score,
                    color=color_scale(interval.score),
                )
            )
        return cells

    def grid_lines(self) -> list[float]:
        """Pixel y coordinates of the horizontal grid lines"""
        y_scale = self.get_y_scale()
        return [y_scale(tick) for tick in y_scale.ticks(HEATMAP_GRID_TICKS)]

    def plot(self, region: DrawingRegion) -> list[HeatCell]:
        """
        Draw the strip into a region

        The region is cleared first, so plotting twice gives the same shapes.

        Args:
            region: Drawing region sized width x height

        Returns:
            The HeatCells that were drawn
        """
        region.clear()
        cells = self.compute_cells()

        region.rect(
            0,
            0,
            self.width,
            self.height,
            fill_color=HEATMAP_BACKGROUND_COLOR,
            fill_alpha=HEATMAP_BACKGROUND_ALPHA,
            line_color=None,
        )
        self._add_grid(region)
        self._add_cells(region, cells)

        logger.debug(f"Heat strip: {len(cells)} cells")
        return cells

    # =========================================================================
    # Private Methods
    # =========================================================================

    def _add_grid(self, region: DrawingRegion) -> None:
        ys = self.grid_lines()
        if not ys:
            return
        region.segments(
            [0.0] * len(ys),
            ys,
            [float(self.width)] * len(ys),
            ys,
            line_color=HEATMAP_GRID_COLOR,
            line_alpha=HEATMAP_GRID_ALPHA,
            line_width=1,
            line_dash=HEATMAP_GRID_DASH,
        )

    def _add_cells(self, region: DrawingRegion, cells: list[HeatCell]) -> None:
        if not cells:
            return
        color_scale = self.get_color_scale()
        low, high = color_scale.domain
        if high > low:
            fill_color = transform("score", color_scale.color_mapper())
        else:
            # LinearColorMapper cannot bin over an empty domain
            fill_color = [cell.color for cell in cells]
        region.quads(
            [cell.x for cell in cells],
            [0.0] * len(cells),
            [cell.width for cell in cells],
            [cell.height for cell in cells],
            columns={"score": [cell.score for cell in cells]},
            fill_color=fill_color,
            line_color=None,
        )
