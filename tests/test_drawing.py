import pytest

from drawing import Rectangle, draw_rectangle, fill_rectangle, fill_vertical_bar
from pixel_buffer import BLACK, RED, WHITE, PixelBuffer

W = WHITE.as_tuple()
K = BLACK.as_tuple()


def test_fill_rectangle():
    img = PixelBuffer(5, 4)
    fill_rectangle(img, Rectangle(1, 1, 3, 2), WHITE)
    for y in range(4):
        for x in range(5):
            inside = 1 <= x <= 3 and 1 <= y <= 2
            assert img.get_pixel(x, y) == (W if inside else K)


def test_draw_rectangle_outline_only():
    img = PixelBuffer(6, 6)
    draw_rectangle(img, Rectangle(1, 1, 4, 4), WHITE)
    assert img.get_pixel(1, 1) == W
    assert img.get_pixel(4, 4) == W
    assert img.get_pixel(4, 2) == W
    assert img.get_pixel(2, 4) == W
    assert img.get_pixel(2, 2) == K
    assert img.get_pixel(3, 3) == K
    assert img.get_pixel(0, 0) == K
    assert img.get_pixel(5, 5) == K


def test_fill_vertical_bar():
    img = PixelBuffer(3, 5)
    fill_vertical_bar(img, 1, 1, 3, RED)
    column = [img.get_pixel(1, y) for y in range(5)]
    assert column == [K, RED.as_tuple(), RED.as_tuple(), RED.as_tuple(), K]
    assert all(img.get_pixel(0, y) == K for y in range(5))


def test_zero_height_bar_draws_nothing():
    img = PixelBuffer(2, 2)
    fill_vertical_bar(img, 0, 0, 0, RED)
    assert img == PixelBuffer(2, 2)


def test_drawing_outside_raises():
    img = PixelBuffer(2, 2)
    with pytest.raises(IndexError):
        fill_vertical_bar(img, 0, 0, 3, RED)
