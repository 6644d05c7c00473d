import matplotlib

matplotlib.use("Agg")

import pytest

from pixel_buffer import PixelBuffer


def solid(width, height, color):
    return PixelBuffer.from_rows([[color] * width for _ in range(height)])


@pytest.fixture
def make_solid():
    return solid


@pytest.fixture
def black_2x2():
    return solid(2, 2, (0, 0, 0))


@pytest.fixture
def two_tone_2x2():
    return PixelBuffer.from_rows([
        [(0, 0, 0), (0, 0, 0)],
        [(255, 255, 255), (255, 255, 255)],
    ])


@pytest.fixture
def gradient_16x16():
    """Every intensity 0..255 exactly once per channel; blue runs backwards."""
    rows = []
    for y in range(16):
        row = []
        for x in range(16):
            v = y * 16 + x
            row.append((v, v, 255 - v))
        rows.append(row)
    return PixelBuffer.from_rows(rows)


@pytest.fixture
def small_rgb():
    return PixelBuffer.from_rows([
        [(10, 200, 30), (40, 50, 60), (255, 0, 128)],
        [(127, 128, 129), (0, 255, 1), (90, 90, 90)],
    ])
