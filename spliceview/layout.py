"""
Zoom slot placement

The splice plot does not decide where zoom slots go. It asks a layout
object for one placement per site: the pixel interval of the slot in the
zoom row, and the pixel interval of the site in the overview. Anything
implementing ``ZoomSlotLayout`` can be passed to the splice strategy;
``EvenSlotLayout`` is the stand-in used when none is given.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .scales import LinearScale


@dataclass(frozen=True)
class SlotPlacement:
    """Where one zoom slot sits and which overview interval it magnifies"""

    element: int  # Original coordinate of the item
    slot: tuple[float, float]  # Placed pixel interval in the zoom row
    origin: tuple[float, float]  # Pixel interval of the item in the overview

    @property
    def width(self) -> float:
        return self.slot[1] - self.slot[0]

    @property
    def origin_mid(self) -> float:
        return (self.origin[0] + self.origin[1]) / 2


class ZoomSlotLayout(Protocol):
    def place(
        self,
        elements: Sequence[int],
        coordinate_length: int,
        element_width: float,
        total_width: float,
    ) -> list[SlotPlacement]: ...


class EvenSlotLayout:
    """
    Spread slots evenly across the row, in element order

    Slots keep ``element_width`` unless the row is too narrow for all of
    them, in which case they shrink to share it.

    Examples:
        >>> placements = EvenSlotLayout().place([100, 500], 1000, 100, 500)
        >>> [p.slot for p in placements]
        [(100.0, 200.0), (300.0, 400.0)]
    """

    def place(
        self,
        elements: Sequence[int],
        coordinate_length: int,
        element_width: float,
        total_width: float,
    ) -> list[SlotPlacement]:
        if not elements:
            return []

        count = len(elements)
        width = min(float(element_width), total_width / count)
        gap = (total_width - count * width) / (count + 1)
        overview = LinearScale((0, coordinate_length), (0, total_width))

        placements = []
        for i, element in enumerate(elements):
            left = gap * (i + 1) + width * i
            placements.append(
                SlotPlacement(
                    element=element,
                    slot=(left, left + width),
                    origin=(overview(element), overview(element + 1)),
                )
            )
        return placements
