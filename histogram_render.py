# histogram_render.py
"""
Histogram visualizations.

create_histogram_image() paints the classic three-panel chart straight into a
PixelBuffer (red panel on top, then green, then blue). Bars hang from the top
edge of each panel and grow downward.

plot_histogram_image() renders the same data with matplotlib for a quick
preview; it returns a Pillow image.
"""

import logging
from io import BytesIO

import matplotlib.pyplot as plt
from PIL import Image

from drawing import Rectangle, draw_rectangle, fill_vertical_bar
from histogram import RGBHistogram
from pixel_buffer import BLACK, BLUE, GREEN, RED, WHITE, PixelBuffer

logger = logging.getLogger(__name__)

LR_BORDER = 30
TB_BORDER = 10
BETWEEN_BORDER = 30
GRAPH_WIDTH = 256
GRAPH_HEIGHT = 256

CANVAS_WIDTH = 2 * LR_BORDER + GRAPH_WIDTH
CANVAS_HEIGHT = 2 * TB_BORDER + 2 * BETWEEN_BORDER + 3 * GRAPH_HEIGHT

CHANNEL_COLORS = {"red": RED, "green": GREEN, "blue": BLUE}


def panel_rect(index: int) -> Rectangle:
    """Panel 0 is red, 1 green, 2 blue."""
    return Rectangle(x=LR_BORDER,
                     y=TB_BORDER + index * (GRAPH_HEIGHT + BETWEEN_BORDER),
                     width=GRAPH_WIDTH,
                     height=GRAPH_HEIGHT)


def bar_height(count: int, max_count: int) -> int:
    if max_count <= 0:
        return 0
    return (GRAPH_HEIGHT * count) // max_count


def create_histogram_image(histogram: RGBHistogram) -> PixelBuffer:
    graph = PixelBuffer(CANVAS_WIDTH, CANVAS_HEIGHT, fill=BLACK)

    panels = [panel_rect(i) for i in range(3)]
    for rect in panels:
        draw_rectangle(graph, rect, WHITE)

    for rect, (name, counts) in zip(panels, histogram.channels()):
        max_count = max(counts)
        color = CHANNEL_COLORS[name]
        # Peak bar is exactly GRAPH_HEIGHT rows; empty buckets leave the border untouched
        for i, count in enumerate(counts):
            h = bar_height(count, max_count)
            if h:
                fill_vertical_bar(graph, rect.x + i, rect.y, h, color)
        logger.debug("Rendered %s panel (max count %d)", name, max_count)

    return graph


def plot_histogram_image(histogram: RGBHistogram, width=512, height=384) -> Image.Image:
    fig, axes = plt.subplots(3, 1, figsize=(width/100, height/100), dpi=100, sharex=True)
    for ax, (name, counts) in zip(axes, histogram.channels()):
        ax.bar(range(256), counts, color=name, width=1.0)
        ax.set_xlim(0, 255)
        ax.set_ylim(0, max(counts)*1.1 if max(counts) else 1)
        ax.set_yticks([])
    buf = BytesIO()
    fig.savefig(buf, format="png", bbox_inches="tight", pad_inches=0.05)
    plt.close(fig)
    buf.seek(0)
    img = Image.open(buf)
    img.load()
    return img.convert("RGB")
