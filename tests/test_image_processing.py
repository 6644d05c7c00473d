import random

import pytest

from histogram import RGBHistogram, compute_histogram
from image_processing import (cutout, equalization_lut, equalize, find_two_peaks,
                              median_grey_level, median_grey_level_cutoff, threshold,
                              two_peaks, two_peaks_cutoff)
from pixel_buffer import PixelBuffer, RGBColor


def grey_row(values):
    return PixelBuffer.from_rows([[(v, v, v) for v in values]])


def red_values(img):
    return [px[0] for px in img.pixels()]


@pytest.fixture
def noisy():
    rnd = random.Random(1234)
    rows = [[(rnd.randrange(256), rnd.randrange(40, 90), rnd.randrange(256)) for _ in range(20)]
            for _ in range(15)]
    return PixelBuffer.from_rows(rows)

# ---------------- Equalization ----------------

def test_equalize_uniform_histogram_is_identity(gradient_16x16):
    assert equalize(gradient_16x16) == gradient_16x16


def test_equalize_spreads_values():
    out = equalize(grey_row([10, 20, 20, 30]))
    assert red_values(out) == [0, 170, 170, 255]


def test_equalize_two_tone_is_unchanged(two_tone_2x2):
    assert equalize(two_tone_2x2) == two_tone_2x2


def test_equalize_single_value_maps_to_zero(make_solid):
    out = equalize(make_solid(3, 3, (7, 7, 7)))
    assert all(px == (0, 0, 0) for px in out.pixels())


def test_equalize_channels_independent():
    img = PixelBuffer.from_rows([[(0, 5, 9), (100, 5, 9)]])
    out = equalize(img)
    # red has two values, green and blue one each
    assert out.to_rows() == [[(0, 0, 0), (255, 0, 0)]]


def test_equalize_output_in_range(noisy):
    out = equalize(noisy)
    assert (out.width, out.height) == (noisy.width, noisy.height)
    assert all(0 <= c <= 255 for px in out.pixels() for c in px)


def test_equalize_empty_image():
    out = equalize(PixelBuffer(0, 0))
    assert (out.width, out.height) == (0, 0)


def test_equalization_lut_empty_channel():
    assert equalization_lut([0] * 256) == [0] * 256


def test_equalize_does_not_modify_input(noisy):
    before = PixelBuffer.from_rows(noisy.to_rows())
    equalize(noisy)
    assert noisy == before

# ---------------- Fixed threshold ----------------

def test_cutout_all_black(black_2x2):
    out = cutout(black_2x2)
    assert out == black_2x2


def test_cutout_default_cutoff(small_rgb):
    out = cutout(small_rgb)
    assert out.get_pixel(0, 0) == (0, 255, 0)
    assert out.get_pixel(0, 1) == (0, 255, 255)
    assert out.get_pixel(2, 0) == (255, 0, 255)


def test_cutout_binary_property(noisy):
    out = cutout(noisy)
    for src, dst in zip(noisy.pixels(), out.pixels()):
        for s, d in zip(src, dst):
            assert d in (0, 255)
            assert (d == 255) == (s >= 128)


def test_threshold_per_channel_cutoff():
    img = PixelBuffer.from_rows([[(40, 50, 60)]])
    assert threshold(img, RGBColor(41, 50, 61)).get_pixel(0, 0) == (0, 255, 0)


def test_threshold_rejects_bad_cutoff(small_rgb):
    with pytest.raises(ValueError):
        threshold(small_rgb, 300)
    with pytest.raises(ValueError):
        cutout(small_rgb, -1)

# ---------------- Two peaks ----------------

def test_find_two_peaks_two_tone():
    counts = [0] * 256
    counts[0] = counts[255] = 2
    assert find_two_peaks(counts) == (0, 255)


def test_find_two_peaks_prefers_distant_mode():
    counts = [0] * 256
    counts[10], counts[12], counts[200] = 100, 90, 5
    assert find_two_peaks(counts) == (10, 200)


def test_find_two_peaks_single_value():
    counts = [0] * 256
    counts[77] = 9
    assert find_two_peaks(counts) == (77, 77)


def test_find_two_peaks_empty():
    assert find_two_peaks([0] * 256) == (0, 0)


def test_two_peaks_flat_histogram(gradient_16x16):
    hist = compute_histogram(gradient_16x16)
    # every intensity once: first peak is 0, the farthest populated value is 255
    assert find_two_peaks(hist.red) == (0, 255)
    assert find_two_peaks(hist.blue) == (0, 255)
    assert two_peaks_cutoff(hist) == RGBColor(127, 127, 127)


def test_two_peaks_cutoff_two_tone(two_tone_2x2):
    assert two_peaks_cutoff(compute_histogram(two_tone_2x2)) == RGBColor(127, 127, 127)


def test_two_peaks_reproduces_two_tone(two_tone_2x2):
    assert two_peaks(two_tone_2x2) == two_tone_2x2


def test_two_peaks_single_color_goes_white(make_solid):
    out = two_peaks(make_solid(2, 3, (77, 150, 3)))
    assert all(px == (255, 255, 255) for px in out.pixels())


def test_two_peaks_deterministic(noisy):
    hist = compute_histogram(noisy)
    assert two_peaks_cutoff(hist) == two_peaks_cutoff(compute_histogram(noisy))
    assert two_peaks(noisy) == two_peaks(noisy)


def test_two_peaks_empty_image():
    assert two_peaks(PixelBuffer(0, 0)) == PixelBuffer(0, 0)

# ---------------- Median grey level ----------------

def test_median_grey_level_cutoff():
    out = median_grey_level(grey_row([10, 100, 100]))
    # low = 10, peak = 100 -> cutoff 45
    assert red_values(out) == [0, 255, 255]


def test_median_grey_level_peak_at_low_end():
    out = median_grey_level(grey_row([50, 50, 50, 200]))
    assert red_values(out) == [255, 255, 255, 255]


def test_median_grey_level_empty_histogram():
    assert median_grey_level_cutoff(RGBHistogram()) == RGBColor(0, 0, 0)
