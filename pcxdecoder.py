#!/usr/bin/env python3
"""
pcxdecoder.py — Manual PCX RLE decoder (no Pillow)

Reads:
- Header info (manufacturer, version, encoding, etc.)
- Image pixel data (1-bit mono, 8-bit indexed, 24-bit 3-plane)
- Optional VGA palette (manually decoded)
Returns:
    pixel buffer (PixelBuffer), header_info (dict)
"""

import io
import os
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pixel_buffer import PixelBuffer

# 128-byte PCX header structure (little-endian)
PCX_HEADER_FMT = "<BBBBHHHHHH48sB B H H H H 54s".replace(" ", "")
PCX_HEADER_SIZE = 128
VGA_PALETTE_MARKER = 0x0C


@dataclass
class PCXHeader:
    manufacturer: int
    version: int
    encoding: int
    bits_per_pixel: int
    x_min: int
    y_min: int
    x_max: int
    y_max: int
    h_dpi: int
    v_dpi: int
    colormap: bytes
    reserved: int
    n_planes: int
    bytes_per_line: int
    palette_info: int
    h_screen_size: int
    v_screen_size: int
    filler: bytes

    @property
    def width(self): return self.x_max - self.x_min + 1
    @property
    def height(self): return self.y_max - self.y_min + 1


def read_pcx_header(fp) -> PCXHeader:
    data = fp.read(PCX_HEADER_SIZE)
    if len(data) != PCX_HEADER_SIZE:
        raise ValueError("Incomplete PCX header")
    header = PCXHeader(*struct.unpack(PCX_HEADER_FMT, data))
    if header.manufacturer != 10:
        raise ValueError(f"Not a PCX file (manufacturer byte {header.manufacturer})")
    return header


def decode_pcx_rle(fp, expected_bytes: int) -> bytes:
    """Decode one scan line; a byte >= 0xC0 carries a repeat count for the next byte."""
    out = bytearray()
    while len(out) < expected_bytes:
        b = fp.read(1)
        if not b:
            raise ValueError("Truncated RLE stream")
        v = b[0]
        if v >= 0xC0:
            count = v & 0x3F
            data = fp.read(1)
            if not data:
                raise ValueError("Truncated RLE stream")
            out.extend(data * count)
        else:
            out.append(v)
    return bytes(out[:expected_bytes])


def read_vga_palette(data: bytes) -> Optional[List[Tuple[int, int, int]]]:
    """256-color VGA palette: marker byte 0x0C then 768 bytes at the end of the file."""
    if len(data) < 769 + PCX_HEADER_SIZE or data[-769] != VGA_PALETTE_MARKER:
        return None
    raw = data[-768:]
    return [tuple(raw[i:i+3]) for i in range(0, 768, 3)]


def decode_pcx_bytes(data: bytes) -> Tuple[PixelBuffer, PCXHeader]:
    fp = io.BytesIO(data)
    header = read_pcx_header(fp)
    width, height = header.width, header.height
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid PCX dimensions: {width}x{height}")
    bpl = header.bytes_per_line
    decoded_rows = [decode_pcx_rle(fp, header.n_planes * bpl) for _ in range(height)]
    img = PixelBuffer(width, height)

    # ---- 8-bit indexed ----
    if header.bits_per_pixel == 8 and header.n_planes == 1:
        palette = read_vga_palette(data) or [(i, i, i) for i in range(256)]
        for y, line in enumerate(decoded_rows):
            for x in range(width):
                img.set_pixel(x, y, *palette[line[x]])
        return img, header

    # ---- 24-bit RGB (three planes per line) ----
    if header.bits_per_pixel == 8 and header.n_planes == 3:
        for y, line in enumerate(decoded_rows):
            rplane = line[0:bpl]
            gplane = line[bpl:2*bpl]
            bplane = line[2*bpl:3*bpl]
            for x in range(width):
                img.set_pixel(x, y, rplane[x], gplane[x], bplane[x])
        return img, header

    # ---- 1-bit black/white ----
    if header.bits_per_pixel == 1 and header.n_planes == 1:
        for y, line in enumerate(decoded_rows):
            for x in range(width):
                v = 255 if (line[x >> 3] >> (7 - (x & 7))) & 1 else 0
                img.set_pixel(x, y, v, v, v)
        return img, header

    raise NotImplementedError(
        f"Unsupported PCX format: {header.bits_per_pixel}-bit, {header.n_planes} plane(s)"
    )


def decode_pcx(path: Path) -> Tuple[PixelBuffer, Dict[str, object]]:
    path = Path(path)
    img, header = decode_pcx_bytes(path.read_bytes())
    info = {
        "Filename": os.path.basename(path),
        "File Size": f"{path.stat().st_size} bytes",
        "Manufacturer": f"ZSoft .pcx ({header.manufacturer})",
        "Version": header.version,
        "Encoding": header.encoding,
        "Bits per Pixel": header.bits_per_pixel,
        "Image Dimensions": f"{header.width}x{header.height}",
        "HDPI": header.h_dpi,
        "VDPI": header.v_dpi,
        "Color Planes": header.n_planes,
        "Bytes per Line": header.bytes_per_line,
    }
    return img, info


if __name__ == "__main__":
    import sys
    if len(sys.argv) < 2:
        print("Usage: python pcxdecoder.py <file.pcx>")
    else:
        _, info = decode_pcx(Path(sys.argv[1]))
        for k, v in info.items():
            print(f"{k}: {v}")
