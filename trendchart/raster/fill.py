from __future__ import annotations

import numpy as np

from trendchart.raster.canvas import RGBA, draw_hline, with_opacity


def fill_polygon_vertical_gradient(
    dst: np.ndarray,
    vertices: np.ndarray,
    color: RGBA,
    *,
    opacity_top: float,
    opacity_bottom: float,
) -> None:
    """Even-odd scanline fill whose opacity ramps from the shape's top to its bottom.

    The ramp spans the polygon's own bounding box, matching an SVG
    `linearGradient` in objectBoundingBox units.
    """

    if vertices.ndim != 2 or vertices.shape[0] < 3 or vertices.shape[1] != 2:
        return
    x0 = vertices[:-1, 0]
    y0 = vertices[:-1, 1]
    x1 = vertices[1:, 0]
    y1 = vertices[1:, 1]
    if not np.allclose(vertices[0], vertices[-1]):
        x0 = np.append(x0, vertices[-1, 0])
        y0 = np.append(y0, vertices[-1, 1])
        x1 = np.append(x1, vertices[0, 0])
        y1 = np.append(y1, vertices[0, 1])

    ymin = float(np.min(vertices[:, 1]))
    ymax = float(np.max(vertices[:, 1]))
    span = ymax - ymin
    row_start = max(0, int(np.floor(ymin)))
    row_end = min(dst.shape[0] - 1, int(np.ceil(ymax)))

    for row in range(row_start, row_end + 1):
        yc = row + 0.5
        crossing = ((y0 <= yc) & (y1 > yc)) | ((y1 <= yc) & (y0 > yc))
        if not np.any(crossing):
            continue
        ex0 = x0[crossing]
        ey0 = y0[crossing]
        xs = np.sort(ex0 + (yc - ey0) * (x1[crossing] - ex0) / (y1[crossing] - ey0))
        t = 0.0 if span <= 0 else min(1.0, max(0.0, (yc - ymin) / span))
        row_color = with_opacity(color, opacity_top + (opacity_bottom - opacity_top) * t)
        for left, right in zip(xs[0::2].tolist(), xs[1::2].tolist(), strict=False):
            xa = int(np.ceil(left - 0.5))
            xb = int(np.floor(right - 0.5))
            if xb >= xa:
                draw_hline(dst, xa, xb, row, row_color)
