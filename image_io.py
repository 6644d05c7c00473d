# image_io.py
"""
Load and save pixel buffers by file suffix.
.pcx uses the manual decoder (read only); every other format,
.bmp included, goes through Pillow.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Tuple

import numpy as np
from PIL import Image

from pcxdecoder import decode_pcx
from pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def buffer_from_pil(image: Image.Image) -> PixelBuffer:
    arr = np.array(image.convert("RGB"), dtype=np.uint8)
    return PixelBuffer.from_rows([[tuple(px) for px in row] for row in arr.tolist()])


def buffer_to_pil(img: PixelBuffer) -> Image.Image:
    if img.width == 0 or img.height == 0:
        raise ValueError(f"Cannot convert an empty {img.width}x{img.height} image")
    arr = np.array(img.to_rows(), dtype=np.uint8)
    return Image.fromarray(arr)


def read_image(path) -> Tuple[PixelBuffer, Dict[str, object]]:
    """Return (pixel buffer, header info dict) for the file at path."""
    path = Path(path)
    if path.suffix.lower() == ".pcx":
        img, info = decode_pcx(path)
    else:
        with Image.open(path) as image:
            info = {
                "Filename": os.path.basename(path),
                "File Size": f"{path.stat().st_size} bytes",
                "Format": image.format,
                "Mode": image.mode,
                "Image Dimensions": f"{image.width}x{image.height}",
                "DPI": image.info.get("dpi", "N/A"),
                "Compression": image.info.get("compression", "N/A"),
            }
            img = buffer_from_pil(image)
    logger.info("Loaded %s (%dx%d)", path, img.width, img.height)
    return img, info


def load_image(path) -> PixelBuffer:
    img, _ = read_image(path)
    return img


def save_image(img: PixelBuffer, path):
    path = Path(path)
    if path.suffix.lower() == ".pcx":
        raise NotImplementedError("Writing PCX files is not supported")
    buffer_to_pil(img).save(path)
    logger.info("Wrote %s (%dx%d)", path, img.width, img.height)
