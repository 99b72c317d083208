from __future__ import annotations

import math

import numpy as np

from trendchart.config import ChartConfig
from trendchart.interaction import HoverState, Tooltip
from trendchart.layout import ChartGeometry
from trendchart.paths import flatten_path
from trendchart.raster import (
    draw_hline,
    draw_polyline,
    draw_ring_marker,
    draw_text,
    draw_vline,
    fill_polygon_vertical_gradient,
    new_canvas,
    text_size,
    with_opacity,
)
from trendchart.ticks import tick_segments


TOOLTIP_PAD_X = 6
TOOLTIP_PAD_Y = 4
TOOLTIP_LINE_GAP = 2

Rect = tuple[int, int, int, int]


def render_chart_rgba(
    geometry: ChartGeometry,
    config: ChartConfig,
    *,
    hover: HoverState | None = None,
    tooltip: Tooltip | None = None,
) -> np.ndarray:
    width, height = _canvas_size(geometry)
    style = config.style
    canvas = new_canvas(width, height, style.background)

    for vertices in flatten_path(geometry.fill_path, config.curve_segments):
        fill_polygon_vertical_gradient(
            canvas,
            vertices,
            style.line_color,
            opacity_top=style.fill_opacity_top,
            opacity_bottom=style.fill_opacity_bottom,
        )
    line_width = max(1, int(round(style.line_width)))
    for vertices in flatten_path(geometry.line_path, config.curve_segments):
        draw_polyline(canvas, vertices[:, 0], vertices[:, 1], style.line_color, width=line_width)

    if hover is not None:
        x = int(round(hover.x))
        draw_vline(
            canvas,
            x,
            int(round(geometry.area.top)),
            int(round(geometry.area.baseline)),
            with_opacity(style.line_color, style.crosshair_opacity),
        )
        draw_ring_marker(
            canvas,
            hover.x,
            hover.y,
            style.hover_radius,
            fill=(255, 255, 255, 255),
            stroke=style.line_color,
            stroke_width=style.hover_stroke_width,
        )

    if geometry.show_ticks:
        tick_color = with_opacity(style.tick_color, style.tick_opacity)
        for x1, y1, _, y2 in tick_segments(geometry.points, geometry.tick_indices, geometry.area.baseline, config.tick_length):
            draw_vline(canvas, int(round(x1)), int(round(y1)), int(round(y2)), tick_color)

    if tooltip is not None:
        _draw_tooltip(canvas, tooltip, config)
    return canvas


def hover_region(
    geometry: ChartGeometry,
    config: ChartConfig,
    hover: HoverState | None,
    tooltip: Tooltip | None = None,
) -> Rect | None:
    """Pixel rect (x, y, w, h) touched by the hover overlay, clipped to the canvas."""

    if hover is None:
        return None
    width, height = _canvas_size(geometry)
    style = config.style
    reach = style.hover_radius + style.hover_stroke_width / 2.0 + 1.0
    x0 = hover.x - reach
    x1 = hover.x + reach
    y0 = min(geometry.area.top, hover.y - reach)
    y1 = max(geometry.area.baseline, hover.y + reach)
    if tooltip is not None:
        tx, ty, tw, th = _tooltip_box(tooltip, config)
        x0 = min(x0, tx)
        y0 = min(y0, ty)
        x1 = max(x1, tx + tw)
        y1 = max(y1, ty + th)
    # One extra pixel on each side absorbs rounding in the drawers.
    left = max(0, int(math.floor(x0)) - 1)
    top = max(0, int(math.floor(y0)) - 1)
    right = min(width, int(math.ceil(x1)) + 2)
    bottom = min(height, int(math.ceil(y1)) + 2)
    if right <= left or bottom <= top:
        return None
    return (left, top, right - left, bottom - top)


def union_rect(a: Rect | None, b: Rect | None) -> Rect | None:
    if a is None:
        return b
    if b is None:
        return a
    x0 = min(a[0], b[0])
    y0 = min(a[1], b[1])
    x1 = max(a[0] + a[2], b[0] + b[2])
    y1 = max(a[1] + a[3], b[1] + b[3])
    return (x0, y0, x1 - x0, y1 - y0)


def _canvas_size(geometry: ChartGeometry) -> tuple[int, int]:
    width = int(round(geometry.viewport.width))
    height = int(round(geometry.viewport.height))
    if width <= 0 or height <= 0:
        raise ValueError("chart viewport must be measured before rasterizing")
    return width, height


def _tooltip_box(tooltip: Tooltip, config: ChartConfig) -> tuple[float, float, float, float]:
    font_px = config.style.font_size_px
    vw, vh = text_size(tooltip.value_text, font_size_px=font_px)
    lw, lh = text_size(tooltip.label_text, font_size_px=font_px)
    box_w = max(vw, lw) + 2 * TOOLTIP_PAD_X
    box_h = vh + lh + TOOLTIP_LINE_GAP + 2 * TOOLTIP_PAD_Y
    # Centered on x with the bottom edge at `top`.
    return (tooltip.left - box_w / 2.0, tooltip.top - box_h, float(box_w), float(box_h))


def _draw_tooltip(canvas: np.ndarray, tooltip: Tooltip, config: ChartConfig) -> None:
    style = config.style
    x, y, w, h = _tooltip_box(tooltip, config)
    left = int(round(x))
    top = int(round(y))
    for row in range(top, top + int(round(h))):
        draw_hline(canvas, left, left + int(round(w)) - 1, row, style.tooltip_background)
    _, value_h = text_size(tooltip.value_text, font_size_px=style.font_size_px)
    draw_text(canvas, left + TOOLTIP_PAD_X, top + TOOLTIP_PAD_Y, tooltip.value_text, style.text_color, font_size_px=style.font_size_px)
    draw_text(
        canvas,
        left + TOOLTIP_PAD_X,
        top + TOOLTIP_PAD_Y + value_h + TOOLTIP_LINE_GAP,
        tooltip.label_text,
        with_opacity(style.text_color, 0.7),
        font_size_px=style.font_size_px,
    )
