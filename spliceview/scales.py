"""
Coordinate and color scales

LinearScale maps a genomic (or bit) domain onto pixels and is the axis
mapping every renderer receives. SequentialColorScale maps scores onto a
Bokeh palette.
"""

import math

import numpy as np
from bokeh import palettes
from bokeh.models import LinearColorMapper

from .constants import DEFAULT_HEATMAP_PALETTE


class LinearScale:
    """
    Immutable linear mapping from a domain onto a range

    A reversed range (e.g. ``(height, 0)``) is allowed and is how vertical
    scales put 0 at the bottom of a cell.

    Examples:
        >>> x = LinearScale((0, 1000), (0, 500))
        >>> x(250)
        125.0
        >>> y = LinearScale((0, 2), (100, 0))
        >>> y(2)
        0.0
    """

    __slots__ = ("_domain", "_range")

    def __init__(self, domain: tuple[float, float], range: tuple[float, float]):
        self._domain = (float(domain[0]), float(domain[1]))
        self._range = (float(range[0]), float(range[1]))

    @property
    def domain(self) -> tuple[float, float]:
        return self._domain

    @property
    def range(self) -> tuple[float, float]:
        return self._range

    def __call__(self, value: float) -> float:
        d0, d1 = self._domain
        r0, r1 = self._range
        if d1 == d0:
            # Same convention as d3: a collapsed domain maps to the range midpoint
            return (r0 + r1) / 2
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def ticks(self, count: int = 10) -> list[float]:
        """
        Evenly spaced round values covering the domain

        Steps are 1, 2 or 5 times a power of ten, picked so that roughly
        ``count`` ticks are produced.

        Examples:
            >>> LinearScale((0, 10), (100, 0)).ticks(2)
            [0.0, 5.0, 10.0]
        """
        start, stop = self._domain
        if start == stop:
            return [start]
        reverse = stop < start
        if reverse:
            start, stop = stop, start

        step = _tick_increment(start, stop, count)
        if step == 0 or not math.isfinite(step):
            return []

        if step > 0:
            i0, i1 = math.ceil(start / step), math.floor(stop / step)
            values = [float(i * step) for i in range(i0, i1 + 1)]
        else:
            # Negative increments encode 1 / step to avoid float drift
            step = -step
            i0, i1 = math.ceil(start * step), math.floor(stop * step)
            values = [float(i / step) for i in range(i0, i1 + 1)]

        return values[::-1] if reverse else values

    def __eq__(self, other) -> bool:
        if not isinstance(other, LinearScale):
            return NotImplemented
        return self._domain == other._domain and self._range == other._range

    def __hash__(self) -> int:
        return hash((self._domain, self._range))

    def __repr__(self) -> str:
        return f"LinearScale(domain={self._domain}, range={self._range})"


def _tick_increment(start: float, stop: float, count: int) -> float:
    if count <= 0:
        return 0
    step = (stop - start) / count
    if not math.isfinite(step) or step <= 0:
        return 0
    power = math.floor(math.log10(step))
    error = step / 10**power
    if error >= math.sqrt(50):
        factor = 10
    elif error >= math.sqrt(10):
        factor = 5
    elif error >= math.sqrt(2):
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return factor * 10**power
    return -(10 ** (-power)) / factor


def get_palette(name: str) -> tuple[str, ...]:
    """
    Look up a named Bokeh palette

    Args:
        name: Palette identifier from ``bokeh.palettes`` (e.g. "Magma256")

    Returns:
        Tuple of hex colors

    Raises:
        ValueError: If no palette of that name exists
    """
    palette = getattr(palettes, name, None)
    if not isinstance(palette, (tuple, list)) or not palette:
        raise ValueError(f"Unknown color palette: {name}")
    return tuple(palette)


class SequentialColorScale:
    """
    Maps scores onto a sequential palette

    Values are clamped to the domain and binned onto the palette the way
    Bokeh's LinearColorMapper bins them. A collapsed domain maps every value
    to the middle of the palette.

    Attributes:
        palette: Tuple of hex colors, low to high
        domain: (low, high) score domain
    """

    def __init__(
        self,
        palette: str | tuple[str, ...] | list[str] = DEFAULT_HEATMAP_PALETTE,
        domain: tuple[float, float] = (0.0, 1.0),
    ):
        if isinstance(palette, str):
            palette = get_palette(palette)
        self.palette = tuple(palette)
        if not self.palette:
            raise ValueError("Color palette must not be empty")
        self.domain = (float(domain[0]), float(domain[1]))

    def with_domain(self, low: float, high: float) -> "SequentialColorScale":
        """Return a copy of this scale over another domain"""
        return SequentialColorScale(self.palette, (low, high))

    def normalize(self, value: float) -> float:
        """Position of a value inside the domain, clamped to [0, 1]"""
        low, high = self.domain
        if high == low:
            return 0.5
        return float(np.clip((value - low) / (high - low), 0.0, 1.0))

    def __call__(self, value: float) -> str:
        t = self.normalize(value)
        index = min(int(t * len(self.palette)), len(self.palette) - 1)
        return self.palette[index]

    def color_mapper(self) -> LinearColorMapper:
        """Bokeh color mapper over the same palette and domain"""
        low, high = self.domain
        return LinearColorMapper(palette=list(self.palette), low=low, high=high)
