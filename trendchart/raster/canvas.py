from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 0)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def with_opacity(color: RGBA, opacity: float) -> RGBA:
    a = int(round(max(0.0, min(1.0, opacity)) * color[3]))
    return (color[0], color[1], color[2], a)


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    _blend(dst[y : y + 1, x], color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    _blend(dst[y, xa : xb + 1], color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    _blend(dst[ya : yb + 1, x], color)


def _blend(segment: np.ndarray, color: RGBA) -> None:
    # Source-over compositing; segment is an (N, 4) view into the canvas.
    src_a = color[3] / 255.0
    if src_a <= 0.0:
        return
    dst_a = segment[:, 3].astype(np.float32) / 255.0
    out_a = src_a + dst_a * (1.0 - src_a)
    src_rgb = np.asarray(color[0:3], dtype=np.float32) * src_a
    dst_rgb = segment[:, :3].astype(np.float32) * (dst_a * (1.0 - src_a))[:, None]
    safe = np.where(out_a > 1e-6, out_a, 1.0)
    segment[:, :3] = np.clip((src_rgb + dst_rgb) / safe[:, None], 0, 255).astype(np.uint8)
    segment[:, 3] = np.clip(out_a * 255.0, 0, 255).astype(np.uint8)
