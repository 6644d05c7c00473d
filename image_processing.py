# image_processing.py
"""
Point-processing tone transforms on RGB pixel buffers.
Every transform works per channel, returns a new buffer and leaves the input untouched.
"""

import logging
from typing import List, Tuple, Union

from histogram import RGBHistogram, compute_histogram, cumulative, first_nonzero, peak_index
from pixel_buffer import PixelBuffer, RGBColor, check_channel

logger = logging.getLogger(__name__)

DEFAULT_CUTOFF = 128

# Per-channel lookup table: value -> value
LUT = List[int]


def _apply_luts(buffer: PixelBuffer, rlut: LUT, glut: LUT, blut: LUT) -> PixelBuffer:
    return buffer.map_pixels(lambda px: (rlut[px[0]], glut[px[1]], blut[px[2]]))

# ---------------------------------------------------------------------
# 1. Histogram Equalization
# ---------------------------------------------------------------------
def equalization_lut(counts: List[int]) -> LUT:
    """
    Mapping s = floor(255 * (cdf[v] - cdf_min) / (total - cdf_min)).
    A channel with a single distinct value (or no pixels) maps everything to 0.
    """
    cdf = cumulative(counts)
    total = cdf[-1]
    idx = first_nonzero(cdf)
    cdf_min = cdf[idx] if idx < len(cdf) else 0
    denom = total - cdf_min
    if denom == 0:
        return [0] * len(counts)
    return [min(255, max(0, (255 * (c - cdf_min)) // denom)) for c in cdf]


def equalize(buffer: PixelBuffer) -> PixelBuffer:
    """Equalize red, green and blue independently."""
    hist = compute_histogram(buffer)
    luts = [equalization_lut(counts) for _, counts in hist.channels()]
    return _apply_luts(buffer, *luts)

# ---------------------------------------------------------------------
# 2. Fixed threshold ("cutout")
# ---------------------------------------------------------------------
def _as_cutoff(cutoff: Union[int, RGBColor]) -> Tuple[int, int, int]:
    if isinstance(cutoff, RGBColor):
        return check_channel(cutoff.r), check_channel(cutoff.g), check_channel(cutoff.b)
    c = check_channel(cutoff)
    return c, c, c


def threshold(buffer: PixelBuffer, cutoff: Union[int, RGBColor]) -> PixelBuffer:
    """Per channel: v < cutoff -> 0, otherwise 255."""
    cr, cg, cb = _as_cutoff(cutoff)
    luts = [[0 if v < c else 255 for v in range(256)] for c in (cr, cg, cb)]
    return _apply_luts(buffer, *luts)


def cutout(buffer: PixelBuffer, cutoff: int = DEFAULT_CUTOFF) -> PixelBuffer:
    return threshold(buffer, cutoff)

# ---------------------------------------------------------------------
# 3. Two-peaks adaptive threshold
# ---------------------------------------------------------------------
def find_two_peaks(counts: List[int]) -> Tuple[int, int]:
    """
    First peak is the most populous intensity. The second peak maximizes
    (i - first)^2 * count[i], which favors a populous mode far from the first.
    If no intensity scores above zero the second peak is the first one.
    """
    first = peak_index(counts)
    scores = [(i - first) ** 2 * c for i, c in enumerate(counts)]
    second = peak_index(scores)
    if scores[second] == 0:
        second = first
    return first, second


def two_peaks_cutoff(hist: RGBHistogram) -> RGBColor:
    cut = []
    for name, counts in hist.channels():
        first, second = find_two_peaks(counts)
        cut.append((first + second) >> 1)
        logger.debug("two_peaks %s: first=%d second=%d cutoff=%d", name, first, second, cut[-1])
    return RGBColor(*cut)


def two_peaks(buffer: PixelBuffer) -> PixelBuffer:
    cutoff = two_peaks_cutoff(compute_histogram(buffer))
    logger.info("Two-peaks cutoff: %s", cutoff.as_tuple())
    return threshold(buffer, cutoff)

# ---------------------------------------------------------------------
# 4. Median grey level
# ---------------------------------------------------------------------
def median_grey_level_cutoff(hist: RGBHistogram) -> RGBColor:
    """
    cutoff = (peak - low) >> 1 where low is the darkest intensity present
    and peak the most populous one. Empty channels get cutoff 0.
    """
    cut = []
    for _, counts in hist.channels():
        low = first_nonzero(counts)
        if low == len(counts):
            cut.append(0)
            continue
        # peak has a non-zero count so peak >= low
        cut.append((peak_index(counts) - low) >> 1)
    return RGBColor(*cut)


def median_grey_level(buffer: PixelBuffer) -> PixelBuffer:
    cutoff = median_grey_level_cutoff(compute_histogram(buffer))
    logger.info("Median grey level cutoff: %s", cutoff.as_tuple())
    return threshold(buffer, cutoff)
