from __future__ import annotations

from functools import lru_cache

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from trendchart.raster.canvas import RGBA


TOOLTIP_FONT_FILE = "DejaVuSans.ttf"
DEFAULT_FONT_SIZE_PX = 12.0


def draw_text(dst: np.ndarray, x: int, y: int, text: str, color: RGBA, *, font_size_px: float = DEFAULT_FONT_SIZE_PX) -> None:
    """Composite `text` with its top-left glyph box at (x, y); clipped to the canvas."""

    if not text:
        return
    mask = _render_mask(text, _load_font(max(1, int(round(font_size_px)))))
    h, w = mask.shape
    x0, y0 = max(0, x), max(0, y)
    x1, y1 = min(dst.shape[1], x + w), min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    coverage = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.uint16) * color[3] // 255
    ink = Image.new("RGBA", (x1 - x0, y1 - y0), (color[0], color[1], color[2], 0))
    ink.putalpha(Image.fromarray(coverage.astype(np.uint8)))
    base = Image.fromarray(np.ascontiguousarray(dst[y0:y1, x0:x1]))
    dst[y0:y1, x0:x1] = np.asarray(Image.alpha_composite(base, ink))


def text_size(text: str, *, font_size_px: float = DEFAULT_FONT_SIZE_PX) -> tuple[int, int]:
    if not text:
        return (0, 0)
    left, top, right, bottom = _load_font(max(1, int(round(font_size_px)))).getbbox(text)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


@lru_cache(maxsize=128)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    image = Image.new("L", (max(1, int(right - left)), max(1, int(bottom - top))), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=8)
def _load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    # Pillow resolves bare file names against the system font directories.
    try:
        return ImageFont.truetype(TOOLTIP_FONT_FILE, size=size)
    except OSError:
        return ImageFont.load_default(size=size)
