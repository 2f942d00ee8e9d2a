"""
Cell-local drawing on Bokeh figures

A DrawingRegion is a rectangle of a Bokeh figure with its own origin at the
top-left corner. Renderers emit shapes in region coordinates (pixels, y
growing downward) and the region translates them onto the figure. Every
glyph renderer a region adds is tagged so that the region can clear its own
shapes without touching the rest of the figure. Subregion tags are nested
under their parent ("zoom/slot-0"), so clearing a region also clears the
shapes of its subregions.
"""

import itertools

from bokeh.core.properties import field
from bokeh.models import ColumnDataSource

_region_ids = itertools.count()


class DrawingRegion:
    """
    Rectangular drawing area on a Bokeh figure

    The figure is expected to use pixel ranges with a reversed y range
    (see ThemeManager.create_cell), so region y coordinates grow downward.

    Attributes:
        fig: Bokeh figure the shapes are added to
        x: Left edge of the region in figure coordinates
        y: Top edge of the region in figure coordinates
        width: Region width in pixels
        height: Region height in pixels
        tag: Tag stored on every renderer this region adds

    Examples:
        >>> from spliceview.rendering import ThemeManager
        >>> from spliceview.constants import Theme
        >>> fig = ThemeManager(Theme.LIGHT).create_cell(width=300, height=80)
        >>> region = DrawingRegion(fig, width=300, height=80)
        >>> region.rect(0, 0, 300, 80, fill_color="#f7f7f7")
        >>> len(region.renderers())
        1
    """

    def __init__(
        self,
        fig,
        width: float,
        height: float,
        x: float = 0.0,
        y: float = 0.0,
        tag: str | None = None,
    ):
        self.fig = fig
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.tag = tag or f"region-{next(_region_ids)}"

    def subregion(
        self, x: float, y: float, width: float, height: float, tag: str | None = None
    ) -> "DrawingRegion":
        """Region nested inside this one, positioned in this region's coordinates"""
        child = tag if tag is not None else str(next(_region_ids))
        return DrawingRegion(
            self.fig,
            width=width,
            height=height,
            x=self.x + x,
            y=self.y + y,
            tag=f"{self.tag}/{child}",
        )

    def renderers(self) -> list:
        """Glyph renderers added by this region, in drawing order"""
        return [r for r in self.fig.renderers if self._owns(r)]

    def clear(self) -> None:
        """Remove every shape this region has drawn"""
        self.fig.renderers = [r for r in self.fig.renderers if not self._owns(r)]

    # =========================================================================
    # Shape emission
    # =========================================================================

    def rect(self, x: float, y: float, width: float, height: float, **style) -> None:
        """Add one rectangle given its top-left corner"""
        self.quads([x], [y], [width], [height], **style)

    def quads(
        self,
        xs: list[float],
        ys: list[float],
        widths: list[float],
        heights: list[float],
        columns: dict | None = None,
        **style,
    ) -> None:
        """
        Add rectangles given their top-left corners and sizes

        Style values passed as lists are stored as data columns, one entry
        per rectangle. ``columns`` adds further data columns, for example
        values read by a color mapper transform.
        """
        data = {
            "left": [self.x + x for x in xs],
            "right": [self.x + x + w for x, w in zip(xs, widths, strict=True)],
            "top": [self.y + y for y in ys],
            "bottom": [self.y + y + h for y, h in zip(ys, heights, strict=True)],
            **(columns or {}),
        }
        style = self._columns(data, style)
        source = ColumnDataSource(data=data)
        self._tag(
            self.fig.quad(
                left="left",
                right="right",
                top="top",
                bottom="bottom",
                source=source,
                **style,
            )
        )

    def segments(
        self,
        x0: list[float],
        y0: list[float],
        x1: list[float],
        y1: list[float],
        **style,
    ) -> None:
        """Add straight line segments"""
        data = {
            "x0": [self.x + x for x in x0],
            "y0": [self.y + y for y in y0],
            "x1": [self.x + x for x in x1],
            "y1": [self.y + y for y in y1],
        }
        style = self._columns(data, style)
        source = ColumnDataSource(data=data)
        self._tag(
            self.fig.segment(x0="x0", y0="y0", x1="x1", y1="y1", source=source, **style)
        )

    def patches(self, xs: list[list[float]], ys: list[list[float]], **style) -> None:
        """Add simple closed polygons, one per entry of xs/ys"""
        data = {
            "xs": [[self.x + x for x in ring] for ring in xs],
            "ys": [[self.y + y for y in ring] for ring in ys],
        }
        style = self._columns(data, style)
        source = ColumnDataSource(data=data)
        self._tag(self.fig.patches(xs="xs", ys="ys", source=source, **style))

    def polygons(
        self,
        xs: list[list[list[float]]],
        ys: list[list[list[float]]],
        **style,
    ) -> None:
        """
        Add polygons with holes

        Each entry of xs/ys is a list of rings: the exterior first, then the
        holes.
        """
        data = {
            "xs": [[[[self.x + x for x in ring] for ring in shape]] for shape in xs],
            "ys": [[[[self.y + y for y in ring] for ring in shape]] for shape in ys],
        }
        style = self._columns(data, style)
        source = ColumnDataSource(data=data)
        self._tag(self.fig.multi_polygons(xs="xs", ys="ys", source=source, **style))

    def text(self, xs: list[float], ys: list[float], texts: list[str], **style) -> None:
        """Add text labels"""
        data = {
            "x": [self.x + x for x in xs],
            "y": [self.y + y for y in ys],
            "text": list(texts),
        }
        style = self._columns(data, style)
        source = ColumnDataSource(data=data)
        self._tag(self.fig.text(x="x", y="y", text="text", source=source, **style))

    # =========================================================================
    # Private Methods
    # =========================================================================

    def _owns(self, renderer) -> bool:
        prefix = self.tag + "/"
        return any(
            isinstance(t, str) and (t == self.tag or t.startswith(prefix))
            for t in renderer.tags
        )

    def _tag(self, renderer) -> None:
        renderer.tags = [*renderer.tags, self.tag]

    @staticmethod
    def _columns(data: dict, style: dict) -> dict:
        """Move per-shape style lists into the data source"""
        glyph_style = {}
        for key, value in style.items():
            if isinstance(value, list) and key != "line_dash":
                data[key] = value
                glyph_style[key] = field(key)
            else:
                glyph_style[key] = value
        return glyph_style
