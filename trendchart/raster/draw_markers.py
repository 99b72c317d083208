from __future__ import annotations

import numpy as np

from trendchart.raster.canvas import RGBA, draw_hline


def draw_disc(dst: np.ndarray, cx: float, cy: float, radius: float, color: RGBA) -> None:
    if radius <= 0:
        return
    top = int(np.floor(cy - radius))
    bottom = int(np.ceil(cy + radius))
    for yy in range(top, bottom + 1):
        dy = (yy + 0.5) - cy
        if abs(dy) > radius:
            continue
        half = float(np.sqrt(radius * radius - dy * dy))
        x0 = int(np.ceil(cx - half - 0.5))
        x1 = int(np.floor(cx + half - 0.5))
        if x1 >= x0:
            draw_hline(dst, x0, x1, yy, color)


def draw_ring_marker(
    dst: np.ndarray,
    cx: float,
    cy: float,
    radius: float,
    *,
    fill: RGBA,
    stroke: RGBA,
    stroke_width: float,
) -> None:
    half = stroke_width / 2.0
    draw_disc(dst, cx, cy, radius + half, stroke)
    draw_disc(dst, cx, cy, max(0.0, radius - half), fill)
