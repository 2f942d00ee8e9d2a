"""Per-base count records, scored intervals and splice site models"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace

import numpy as np


@dataclass(frozen=True)
class PositionRecord:
    """Observed base counts at one genomic position"""

    seqid: str
    position: int
    A: int = 0
    C: int = 0
    G: int = 0
    T: int = 0
    N: int = 0

    def counts(self) -> tuple[int, int, int, int, int]:
        """Counts in A, C, G, T, N order"""
        return (self.A, self.C, self.G, self.T, self.N)

    @property
    def total(self) -> int:
        return self.A + self.C + self.G + self.T + self.N

    def with_position(self, position: int) -> "PositionRecord":
        """Return a copy of this record placed at another position"""
        return replace(self, position=position)


@dataclass(frozen=True)
class ScoredInterval:
    """Half-open interval [start, end) carrying a non-negative score"""

    start: int
    end: int
    score: float


@dataclass
class SpliceSites:
    """Donor and acceptor positions of a gene model

    The splice plot only needs the site positions and the coordinate length,
    so any object exposing ``donors()``, ``acceptors()`` and ``get_end()``
    can stand in for this class.
    """

    donor_positions: list[int] = field(default_factory=list)
    acceptor_positions: list[int] = field(default_factory=list)
    end: int = 0

    def donors(self) -> list[int]:
        return list(self.donor_positions)

    def acceptors(self) -> list[int]:
        return list(self.acceptor_positions)

    def get_end(self) -> int:
        return self.end


def max_score(intervals: Iterable[ScoredInterval]) -> float:
    """Largest score in a set of intervals, 0 when there are none"""
    return max((interval.score for interval in intervals), default=0.0)


def smooth_intervals(
    intervals: Sequence[ScoredInterval], window: int
) -> list[ScoredInterval]:
    """
    Smooth interval scores with a centred moving average

    Each interval keeps its coordinates; its score becomes the mean of the
    scores of the ``window`` intervals centred on it. Near the ends the
    average only covers the intervals that exist.

    Args:
        intervals: Intervals sorted by start
        window: Number of neighbouring intervals averaged (<= 1 disables)

    Returns:
        New list of intervals with smoothed scores

    Examples:
        >>> data = [ScoredInterval(0, 1, 0.0), ScoredInterval(1, 2, 3.0),
        ...         ScoredInterval(2, 3, 0.0)]
        >>> [i.score for i in smooth_intervals(data, 3)]
        [1.5, 1.0, 1.5]
    """
    if window <= 1 or len(intervals) == 0:
        return list(intervals)

    scores = np.array([interval.score for interval in intervals], dtype=float)
    n = len(scores)
    index = np.arange(n)
    lo = np.maximum(0, index - (window - 1) // 2)
    hi = np.minimum(n, index + window // 2 + 1)

    # Prefix sums give the total of scores[lo:hi] for every index at once
    prefix = np.concatenate(([0.0], np.cumsum(scores)))
    smoothed = (prefix[hi] - prefix[lo]) / (hi - lo)

    return [
        replace(interval, score=float(score))
        for interval, score in zip(intervals, smoothed, strict=True)
    ]
