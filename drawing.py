# drawing.py
"""
Minimal raster drawing helpers used by the histogram renderer.
"""

from dataclasses import dataclass

from pixel_buffer import PixelBuffer, RGBColor


@dataclass(frozen=True)
class Rectangle:
    x: int
    y: int
    width: int
    height: int


def fill_rectangle(img: PixelBuffer, rect: Rectangle, color: RGBColor):
    for y in range(rect.y, rect.y + rect.height):
        for x in range(rect.x, rect.x + rect.width):
            img.set_pixel(x, y, color.r, color.g, color.b)


def draw_rectangle(img: PixelBuffer, rect: Rectangle, color: RGBColor):
    """Outline only: the first/last row and the first/last column of rect."""
    x_last = rect.x + rect.width - 1
    y_last = rect.y + rect.height - 1
    for y in range(rect.y, rect.y + rect.height):
        for x in range(rect.x, rect.x + rect.width):
            if x in (rect.x, x_last) or y in (rect.y, y_last):
                img.set_pixel(x, y, color.r, color.g, color.b)


def fill_vertical_bar(img: PixelBuffer, x: int, top: int, height: int, color: RGBColor):
    """
    One-pixel-wide bar covering rows top .. top+height-1 of column x.
    This is the only line shape the renderer needs; there is no general line drawer.
    """
    fill_rectangle(img, Rectangle(x, top, 1, height), color)
