# histogram.py
"""
Per-channel intensity histograms and their cumulative distributions.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from pixel_buffer import PixelBuffer

LEVELS = 256
CHANNEL_NAMES = ("red", "green", "blue")


def _empty_counts() -> List[int]:
    return [0] * LEVELS


@dataclass
class RGBHistogram:
    red: List[int] = field(default_factory=_empty_counts)
    green: List[int] = field(default_factory=_empty_counts)
    blue: List[int] = field(default_factory=_empty_counts)

    def channel(self, name: str) -> List[int]:
        if name not in CHANNEL_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    def channels(self) -> Iterator[Tuple[str, List[int]]]:
        """Yield (name, counts) in red, green, blue order."""
        for name in CHANNEL_NAMES:
            yield name, getattr(self, name)

    @property
    def total(self) -> int:
        return sum(self.red)


def compute_histogram(buffer: PixelBuffer) -> RGBHistogram:
    """Count every pixel once into the red, green and blue tables (length 256 each)."""
    hist = RGBHistogram()
    rhist, ghist, bhist = hist.red, hist.green, hist.blue
    for (r, g, b) in buffer.pixels():
        rhist[r] += 1
        ghist[g] += 1
        bhist[b] += 1
    return hist


def cumulative(counts: List[int]) -> List[int]:
    """Running prefix sum of a channel histogram."""
    cdf, csum = [], 0
    for c in counts:
        csum += c
        cdf.append(csum)
    return cdf


def first_nonzero(values: List[int]) -> int:
    """Index of the first non-zero entry, or len(values) if there is none."""
    for i, v in enumerate(values):
        if v:
            return i
    return len(values)


def peak_index(values: List[int]) -> int:
    """Index of the largest value; ties go to the lowest index."""
    best = 0
    for i, v in enumerate(values):
        if v > values[best]:
            best = i
    return best
