"""
Zoom window extraction around splice sites

Selects the per-base records shown in the zoomed logo of a donor or
acceptor site. The bounds are asymmetric: the glyph stack
sits under the splice boundary instead of being centred on it. Acceptor
records are shifted one base to the right.
"""

from collections.abc import Iterable

from .constants import SpliceSide
from .records import PositionRecord


def as_side(side: SpliceSide | str) -> SpliceSide:
    """Coerce a side tag ("donor" / "acceptor" or the enum) to SpliceSide"""
    if isinstance(side, SpliceSide):
        return side
    try:
        return SpliceSide(str(side).lower())
    except ValueError:
        valid = ", ".join(s.value for s in SpliceSide)
        raise ValueError(
            f"Unknown splice side: {side!r}. Valid sides: {valid}"
        ) from None


def side_offsets(side: SpliceSide | str, radius: int) -> tuple[int, int, int]:
    """
    Window offsets for a splice side

    Args:
        side: DONOR or ACCEPTOR
        radius: Zoom radius in bases

    Returns:
        Tuple of (low_offset, high_offset, position_shift). Records with
        ``anchor - low_offset <= position <= anchor + high_offset`` are kept
        and moved by ``position_shift``.

    Examples:
        >>> side_offsets("donor", 5)
        (3, 4, 0)
        >>> side_offsets("acceptor", 5)
        (5, 2, 1)
    """
    side = as_side(side)
    if side is SpliceSide.DONOR:
        return radius - 2, radius - 1, 0
    return radius, radius - 3, 1


def extract_window(
    records: Iterable[PositionRecord],
    anchor: int,
    radius: int,
    side: SpliceSide | str,
) -> list[PositionRecord]:
    """
    Extract the records around a splice site

    Args:
        records: Records sorted by position
        anchor: Splice site position
        radius: Zoom radius in bases
        side: DONOR or ACCEPTOR

    Returns:
        New records in input order. Acceptor records are shifted by +1.
        Empty when no record falls inside the window.

    Examples:
        >>> recs = [PositionRecord("chr1", p, A=1) for p in range(90, 111)]
        >>> [r.position for r in extract_window(recs, 100, 5, "donor")]
        [97, 98, 99, 100, 101, 102, 103, 104]
        >>> [r.position for r in extract_window(recs, 100, 5, "acceptor")]
        [96, 97, 98, 99, 100, 101, 102, 103]
    """
    low, high, shift = side_offsets(side, radius)
    start, stop = anchor - low, anchor + high

    return [
        record.with_position(record.position + shift)
        for record in records
        if start <= record.position <= stop
    ]


def zoom_domain(anchor: int, radius: int, side: SpliceSide | str) -> tuple[int, int]:
    """
    Axis domain of the zoom slot of a splice site

    Examples:
        >>> zoom_domain(100, 5, "donor")
        (96, 105)
        >>> zoom_domain(100, 5, "acceptor")
        (95, 104)
    """
    side = as_side(side)
    if side is SpliceSide.DONOR:
        return anchor - (radius - 1), anchor + radius
    return anchor - radius, anchor + (radius - 1)
