# pixel_buffer.py
"""
In-memory RGB pixel container shared by the codecs and every transform.
Pixels are stored as rows of (r, g, b) tuples, rows[y][x].
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

# RGB row type alias
RGBRows = List[List[Tuple[int, int, int]]]


@dataclass(frozen=True)
class RGBColor:
    r: int
    g: int
    b: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b


BLACK = RGBColor(0, 0, 0)
WHITE = RGBColor(255, 255, 255)
RED = RGBColor(255, 0, 0)
GREEN = RGBColor(0, 255, 0)
BLUE = RGBColor(0, 0, 255)


def check_channel(value: int) -> int:
    """Return value as int, raising ValueError if it is not in 0..255."""
    v = int(value)
    if not 0 <= v <= 255:
        raise ValueError(f"Channel value out of range: {value}")
    return v


class PixelBuffer:
    """Fixed-size RGB image with bounds-checked pixel access."""

    def __init__(self, width: int, height: int, fill: Optional[RGBColor] = None):
        if width < 0 or height < 0:
            raise ValueError(f"Invalid dimensions: {width}x{height}")
        self._width = width
        self._height = height
        px = fill.as_tuple() if fill else (0, 0, 0)
        self._rows: RGBRows = [[px] * width for _ in range(height)]

    @classmethod
    def from_rows(cls, rgb_rows: RGBRows) -> "PixelBuffer":
        height = len(rgb_rows)
        width = len(rgb_rows[0]) if height else 0
        buf = cls(width, height)
        for y, row in enumerate(rgb_rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} pixels, expected {width}")
            buf._rows[y] = [(check_channel(r), check_channel(g), check_channel(b))
                            for (r, g, b) in row]
        return buf

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self._width}x{self._height} image"
            )

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        self._check_bounds(x, y)
        return self._rows[y][x]

    def set_pixel(self, x: int, y: int, r: int, g: int, b: int):
        self._check_bounds(x, y)
        self._rows[y][x] = (check_channel(r), check_channel(g), check_channel(b))

    def pixels(self) -> Iterator[Tuple[int, int, int]]:
        """Yield every pixel once, row by row."""
        for row in self._rows:
            yield from row

    def map_pixels(self, fn) -> "PixelBuffer":
        """Return a new buffer with fn((r, g, b)) -> (r, g, b) applied to every pixel."""
        out = PixelBuffer(self._width, self._height)
        for y, row in enumerate(self._rows):
            prow = []
            for px in row:
                r, g, b = fn(px)
                prow.append((check_channel(r), check_channel(g), check_channel(b)))
            out._rows[y] = prow
        return out

    def to_rows(self) -> RGBRows:
        return [list(row) for row in self._rows]

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (self._width, self._height) == (other._width, other._height) \
            and self._rows == other._rows

    def __repr__(self):
        return f"PixelBuffer({self._width}x{self._height})"
