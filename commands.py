# commands.py
"""
Method names -> processing pipelines.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from histogram import compute_histogram
from histogram_render import create_histogram_image, plot_histogram_image
from image_io import buffer_from_pil
from image_processing import DEFAULT_CUTOFF, cutout, equalize, median_grey_level, two_peaks
from pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class Command(Enum):
    UNKNOWN = "unknown"
    HISTOGRAM = "histogram"
    EQUALIZE = "equalize"
    CUTOUT = "cutout"
    TWO_PEAKS = "two_peaks"
    MEDIAN_GREY_LEVEL = "median_grey_level"
    PLOT = "plot"


ALIASES = {"fixed_binarize": Command.CUTOUT}


def command_by_method(method: str) -> Command:
    name = (method or "").strip().lower().replace("-", "_")
    if name in ALIASES:
        return ALIASES[name]
    for cmd in Command:
        if cmd is not Command.UNKNOWN and cmd.value == name:
            return cmd
    return Command.UNKNOWN


def method_names():
    return [c.value for c in Command if c is not Command.UNKNOWN] + sorted(ALIASES)


@dataclass
class ProcessingConfig:
    method: str
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    cutoff: int = DEFAULT_CUTOFF

    @property
    def command(self) -> Command:
        return command_by_method(self.method)


def run_command(img: PixelBuffer, config: ProcessingConfig) -> PixelBuffer:
    """Run the configured method on img and return the resulting image."""
    cmd = config.command
    logger.info("Running %s on %dx%d image", cmd.value, img.width, img.height)

    if cmd is Command.HISTOGRAM:
        return create_histogram_image(compute_histogram(img))
    if cmd is Command.EQUALIZE:
        return equalize(img)
    if cmd is Command.CUTOUT:
        return cutout(img, config.cutoff)
    if cmd is Command.TWO_PEAKS:
        return two_peaks(img)
    if cmd is Command.MEDIAN_GREY_LEVEL:
        return median_grey_level(img)
    if cmd is Command.PLOT:
        return buffer_from_pil(plot_histogram_image(compute_histogram(img)))

    raise ValueError(f"Unknown method: {config.method!r}")
