"""
Sequence logo rendering

Each position of a window becomes a column of stacked letters. Letter heights
are proportional to frequency times information content, the rarest letter
sits at the bottom, and the whole column fills the height given by the
vertical bit scale.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from types import MappingProxyType

import numpy as np

from ..constants import (
    BEZIER_SAMPLES,
    COLUMN_MARGIN,
    DEFAULT_BIT_DOMAIN,
    DEFAULT_COLUMN_SPACING,
    DEFAULT_LETTER_WIDTH,
    LETTER_BOX_SIZE,
    LETTER_OUTLINE_ALPHA,
    LETTER_OUTLINE_COLOR,
    LETTER_PATHS,
    LOGO_BORDER_COLOR,
    LOGO_BORDER_WIDTH,
    LOGO_COLORS,
    MIN_LETTER_WIDTH,
)
from ..frequency import frequency_profile
from ..logging_config import get_logger
from ..records import PositionRecord
from ..scales import LinearScale
from .region import DrawingRegion

logger = get_logger(__name__)

_PATH_TOKEN = re.compile(r"[A-Za-z]|-?\d+(?:\.\d+)?")


def flatten_path(
    path: str, samples: int = BEZIER_SAMPLES
) -> list[list[tuple[float, float]]]:
    """
    Flatten an SVG path into polygon rings

    Only absolute M, L, C and Z commands are understood, which is all the
    letter outlines use. Cubic curves are sampled at ``samples`` points.

    Args:
        path: SVG path data
        samples: Points per cubic segment

    Returns:
        One list of (x, y) points per subpath

    Raises:
        ValueError: On any other path command

    Examples:
        >>> flatten_path("M0,0 L10,0 L10,10 Z")
        [[(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]]
    """
    tokens = _PATH_TOKEN.findall(path)
    rings: list[list[tuple[float, float]]] = []
    ring: list[tuple[float, float]] = []
    command = None
    i = 0

    def number() -> float:
        nonlocal i
        value = float(tokens[i])
        i += 1
        return value

    while i < len(tokens):
        token = tokens[i]
        if token.isalpha():
            if token not in "MLCZ":
                raise ValueError(f"Unsupported path command {token!r} in {path!r}")
            command = token
            i += 1
            if command == "Z":
                if ring:
                    rings.append(ring)
                ring = []
            continue

        if command == "M":
            if ring:
                rings.append(ring)
            ring = [(number(), number())]
            command = "L"  # implicit lineto after the first pair
        elif command == "L":
            ring.append((number(), number()))
        elif command == "C":
            p0 = np.array(ring[-1])
            p1 = np.array((number(), number()))
            p2 = np.array((number(), number()))
            p3 = np.array((number(), number()))
            t = np.linspace(0.0, 1.0, samples + 1)[1:, None]
            curve = (
                (1 - t) ** 3 * p0
                + 3 * (1 - t) ** 2 * t * p1
                + 3 * (1 - t) * t**2 * p2
                + t**3 * p3
            )
            ring.extend((float(x), float(y)) for x, y in curve)
        else:
            raise ValueError(f"Unsupported path data near token {i}: {path!r}")

    if ring:
        rings.append(ring)
    return rings


# Outlines are flattened once per process; the first ring is the letter body,
# any further ring is a hole
LETTER_OUTLINES = MappingProxyType(
    {
        symbol: tuple(tuple(ring) for ring in flatten_path(path))
        for symbol, path in LETTER_PATHS.items()
    }
)


@dataclass(frozen=True)
class GlyphSpec:
    """One letter of a logo column, in region pixel coordinates"""

    position: int  # Genomic position of the column
    symbol: str
    stack_order: int  # 0 = bottom of the column
    frequency: float
    x: float  # Left edge
    y: float  # Top edge
    width: float
    height: float


class SequenceLogoRenderer:
    """
    Renders a sequence logo for a window of per-base counts

    The vertical scale maps bits onto pixels. When none is supplied it is
    built on ``resolve()`` as [0, 2] bits onto [height, 0].

    Attributes:
        records: Window of PositionRecords, sorted by position
        x_scale: Genomic position to pixel mapping
        width: Region width in pixels
        height: Region height in pixels
        colors: Letter to fill color mapping
        letter_width: Maximum column width in pixels
        column_spacing: Divisor applied to the pixel pitch between positions

    Examples:
        >>> from spliceview.scales import LinearScale
        >>> records = [PositionRecord("chr1", 100, A=8, G=2)]
        >>> renderer = SequenceLogoRenderer(
        ...     records, LinearScale((96, 105), (0, 140)), width=140, height=100
        ... )
        >>> [g.symbol for g in renderer.compute_glyphs()]
        ['G', 'A']
    """

    def __init__(
        self,
        records: Sequence[PositionRecord],
        x_scale: LinearScale,
        width: float,
        height: float,
        y_scale: LinearScale | None = None,
        colors: dict[str, str] | None = None,
        letter_width: float = DEFAULT_LETTER_WIDTH,
        column_spacing: float = DEFAULT_COLUMN_SPACING,
    ):
        self.records = list(records)
        self.x_scale = x_scale
        self.width = width
        self.height = height
        self.colors = dict(colors) if colors is not None else dict(LOGO_COLORS)
        self.letter_width = letter_width
        self.column_spacing = column_spacing
        self._provided_y_scale = y_scale
        self._y_scale: LinearScale | None = None

    def resolve(self) -> LinearScale:
        """Finalize the vertical scale and return it"""
        if self._provided_y_scale is not None:
            self._y_scale = self._provided_y_scale
        else:
            self._y_scale = LinearScale(DEFAULT_BIT_DOMAIN, (self.height, 0))
        return self._y_scale

    def get_y_scale(self) -> LinearScale:
        """Vertical scale in use, resolving it first if needed"""
        return self._y_scale if self._y_scale is not None else self.resolve()

    def column_width(self) -> float:
        """
        Width of a letter column in pixels

        The configured width is shrunk to fit the smallest pixel gap between
        neighbouring positions (divided by the column spacing, less a small
        margin) and never drops below MIN_LETTER_WIDTH. A window with fewer
        than two positions keeps the configured width.
        """
        positions = sorted(record.position for record in self.records)
        if len(positions) <= 1:
            return float(self.letter_width)

        min_spacing = min(b - a for a, b in zip(positions, positions[1:]))
        pixels_per_unit = abs(
            self.x_scale(positions[0] + min_spacing) - self.x_scale(positions[0])
        )
        width = min(
            self.letter_width, pixels_per_unit / self.column_spacing - COLUMN_MARGIN
        )
        return float(max(MIN_LETTER_WIDTH, width))

    def layout_column(
        self, record: PositionRecord, letter_width: float | None = None
    ) -> list[GlyphSpec]:
        """
        Lay out the letters of one position

        Args:
            record: Counts at the position
            letter_width: Column width (defaults to column_width())

        Returns:
            GlyphSpecs ordered bottom to top. Empty when the position has no
            coverage or its weighted information sums to zero.
        """
        if record.total == 0:
            return []
        if letter_width is None:
            letter_width = self.column_width()
        y_scale = self.get_y_scale()

        profile = frequency_profile(record)
        ic = profile.information_content

        # sorted() is stable, so ties keep A, C, G, T, N order
        stack = sorted(
            (item for item in profile.frequencies.items() if item[1] > 0),
            key=lambda item: item[1],
        )
        weights = [freq * ic for _, freq in stack]
        denominator = sum(weights)
        if denominator == 0:
            return []
        fractions = [weight / denominator for weight in weights]

        baseline = y_scale(0)
        bits_max = y_scale.domain[1]
        column_height = baseline - y_scale(sum(fractions) * bits_max)

        x = self.x_scale(record.position) - letter_width / 2
        glyphs = []
        y_offset = baseline
        used = 0.0
        for order, (symbol, freq) in enumerate(stack):
            fraction = fractions[order]
            if order == len(stack) - 1:
                # Last letter takes the remainder so the column sums exactly
                letter_height = column_height - used
            else:
                letter_height = column_height * fraction
            used += letter_height
            glyphs.append(
                GlyphSpec(
                    position=record.position,
                    symbol=symbol,
                    stack_order=order,
                    frequency=freq,
                    x=x,
                    y=y_offset - letter_height,
                    width=letter_width,
                    height=letter_height,
                )
            )
            y_offset -= letter_height

        return glyphs

    def compute_glyphs(self) -> list[GlyphSpec]:
        """Lay out every position of the window"""
        self.resolve()
        letter_width = self.column_width()
        glyphs = []
        for record in self.records:
            glyphs.extend(self.layout_column(record, letter_width))
        return glyphs

    def plot(self, region: DrawingRegion) -> list[GlyphSpec]:
        """
        Draw the logo into a region

        The region is cleared first, so plotting twice gives the same shapes.

        Args:
            region: Drawing region sized width x height

        Returns:
            The GlyphSpecs that were drawn
        """
        region.clear()
        self._add_background(region)

        glyphs = self.compute_glyphs()
        self._add_glyphs(region, glyphs)

        logger.debug(
            f"Sequence logo: {len(self.records)} positions, {len(glyphs)} glyphs"
        )
        return glyphs

    # =========================================================================
    # Private Methods
    # =========================================================================

    def _add_background(self, region: DrawingRegion) -> None:
        region.rect(
            0,
            0,
            self.width,
            self.height,
            fill_color=None,
            line_color=LOGO_BORDER_COLOR,
            line_width=LOGO_BORDER_WIDTH,
        )

    def _add_glyphs(self, region: DrawingRegion, glyphs: list[GlyphSpec]) -> None:
        if not glyphs:
            return

        xs, ys, fills = [], [], []
        for glyph in glyphs:
            sx = glyph.width / LETTER_BOX_SIZE
            sy = glyph.height / LETTER_BOX_SIZE
            rings = LETTER_OUTLINES.get(glyph.symbol, ())
            xs.append([[glyph.x + px * sx for px, _ in ring] for ring in rings])
            ys.append([[glyph.y + py * sy for _, py in ring] for ring in rings])
            fills.append(self.colors.get(glyph.symbol, LOGO_COLORS["N"]))

        region.polygons(
            xs,
            ys,
            fill_color=fills,
            line_color=LETTER_OUTLINE_COLOR,
            line_alpha=LETTER_OUTLINE_ALPHA,
            line_width=1,
        )
