"""
Nucleotide frequency and information content

Converts the five per-base counts of a position into normalized
frequencies, Shannon entropy and information content. The information
content is ``2 - H``: the 2-bit ceiling of a four-letter alphabet, even
though N is counted as a fifth symbol. Positions with N mass can therefore
carry a negative information content.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .constants import MAX_BITS, SYMBOLS
from .records import PositionRecord


@dataclass(frozen=True)
class FrequencyProfile:
    """Frequencies and information content of one position"""

    frequencies: dict[str, float]
    entropy: float
    information_content: float

    @property
    def is_empty(self) -> bool:
        return not any(self.frequencies.values())


def frequencies(counts: Sequence[int]) -> dict[str, float]:
    """
    Normalize A, C, G, T, N counts to frequencies

    Args:
        counts: Five non-negative counts in A, C, G, T, N order

    Returns:
        Dictionary mapping symbol to frequency. All zeros when the total
        count is zero.

    Examples:
        >>> frequencies([5, 5, 0, 0, 0])
        {'A': 0.5, 'C': 0.5, 'G': 0.0, 'T': 0.0, 'N': 0.0}
    """
    total = sum(counts)
    if total == 0:
        return dict.fromkeys(SYMBOLS, 0.0)
    return {
        symbol: count / total for symbol, count in zip(SYMBOLS, counts, strict=True)
    }


def shannon_entropy(freqs: dict[str, float]) -> float:
    """Shannon entropy in bits; zero-probability symbols contribute nothing"""
    p = np.fromiter(freqs.values(), dtype=float, count=len(freqs))
    p = p[p > 0]
    if p.size == 0:
        return 0.0
    return float(-np.sum(p * np.log2(p)))


def information_content(freqs: dict[str, float]) -> float:
    """
    Information content of a position in bits

    Args:
        freqs: Symbol frequencies (need not be normalized)

    Returns:
        ``2 - H`` of the normalized frequencies, 0 when all frequencies are 0

    Examples:
        >>> information_content({'A': 1.0, 'C': 0.0, 'G': 0.0, 'T': 0.0, 'N': 0.0})
        2.0
        >>> information_content({'A': 0.5, 'C': 0.5, 'G': 0.0, 'T': 0.0, 'N': 0.0})
        1.0
    """
    total = sum(freqs.values())
    if total == 0:
        return 0.0
    normalized = {symbol: freq / total for symbol, freq in freqs.items()}
    return MAX_BITS - shannon_entropy(normalized)


def frequency_profile(record: PositionRecord) -> FrequencyProfile:
    """Compute frequencies, entropy and information content of a record"""
    freqs = frequencies(record.counts())
    if record.total == 0:
        return FrequencyProfile(frequencies=freqs, entropy=0.0, information_content=0.0)
    entropy = shannon_entropy(freqs)
    return FrequencyProfile(
        frequencies=freqs,
        entropy=entropy,
        information_content=MAX_BITS - entropy,
    )
