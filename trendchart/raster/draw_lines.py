from __future__ import annotations

import numpy as np

from trendchart.raster.canvas import RGBA, draw_pixel


def draw_polyline(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, width: int = 1) -> None:
    if xs.size < 2:
        return
    ix = np.rint(xs).astype(np.int64)
    iy = np.rint(ys).astype(np.int64)
    visited: set[tuple[int, int]] = set()
    for i in range(ix.size - 1):
        _draw_line_segment(dst, int(ix[i]), int(iy[i]), int(ix[i + 1]), int(iy[i + 1]), color, width, visited)


def _draw_line_segment(
    dst: np.ndarray,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    color: RGBA,
    width: int,
    visited: set[tuple[int, int]],
) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color, width, visited)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(
    dst: np.ndarray,
    x: int,
    y: int,
    color: RGBA,
    width: int,
    visited: set[tuple[int, int]],
) -> None:
    lo = -((width - 1) // 2)
    hi = width // 2
    for yy in range(y + lo, y + hi + 1):
        for xx in range(x + lo, x + hi + 1):
            # Each pixel is stamped once per polyline.
            if (xx, yy) in visited:
                continue
            visited.add((xx, yy))
            draw_pixel(dst, xx, yy, color)
