from __future__ import annotations

import xml.etree.ElementTree as ET

from trendchart.config import RGBA, ChartConfig
from trendchart.interaction import HoverState
from trendchart.layout import ChartGeometry
from trendchart.paths import path_to_svg_d
from trendchart.ticks import tick_segments


SVG_NS = "http://www.w3.org/2000/svg"


def css_color(color: RGBA) -> str:
    return f"#{color[0]:02x}{color[1]:02x}{color[2]:02x}"


def render_chart_svg(
    geometry: ChartGeometry,
    config: ChartConfig,
    *,
    gradient_id: str,
    hover: HoverState | None = None,
) -> str:
    style = config.style
    color = css_color(style.line_color)
    color_alpha = style.line_color[3] / 255.0
    area = geometry.area

    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": _fmt(geometry.viewport.width),
            "height": _fmt(geometry.viewport.height),
        },
    )
    defs = ET.SubElement(root, "defs")
    gradient = ET.SubElement(defs, "linearGradient", {"id": gradient_id, "x1": "0", "y1": "0", "x2": "0", "y2": "1"})
    ET.SubElement(
        gradient,
        "stop",
        {"offset": "0%", "stop-color": color, "stop-opacity": _fmt(style.fill_opacity_top * color_alpha)},
    )
    ET.SubElement(
        gradient,
        "stop",
        {"offset": "100%", "stop-color": color, "stop-opacity": _fmt(style.fill_opacity_bottom * color_alpha)},
    )

    if geometry.fill_path:
        ET.SubElement(
            root,
            "path",
            {"class": "trend-area", "d": path_to_svg_d(geometry.fill_path), "fill": f"url(#{gradient_id})", "stroke": "none"},
        )
    if geometry.line_path:
        ET.SubElement(
            root,
            "path",
            {
                "class": "trend-line",
                "d": path_to_svg_d(geometry.line_path),
                "fill": "none",
                "stroke": color,
                "stroke-opacity": _fmt(color_alpha),
                "stroke-width": _fmt(style.line_width),
                "stroke-linejoin": "round",
                "stroke-linecap": "round",
            },
        )
    if hover is not None:
        group = ET.SubElement(root, "g", {"class": "trend-hover"})
        ET.SubElement(
            group,
            "line",
            {
                "x1": _fmt(hover.x),
                "x2": _fmt(hover.x),
                "y1": _fmt(area.top),
                "y2": _fmt(area.baseline),
                "stroke": color,
                "stroke-opacity": _fmt(style.crosshair_opacity),
            },
        )
        ET.SubElement(
            group,
            "circle",
            {
                "cx": _fmt(hover.x),
                "cy": _fmt(hover.y),
                "r": _fmt(style.hover_radius),
                "fill": "#fff",
                "stroke": color,
                "stroke-width": _fmt(style.hover_stroke_width),
            },
        )
    if geometry.show_ticks:
        group = ET.SubElement(root, "g", {"class": "trend-ticks"})
        for x1, y1, x2, y2 in tick_segments(geometry.points, geometry.tick_indices, area.baseline, config.tick_length):
            ET.SubElement(
                group,
                "line",
                {
                    "x1": _fmt(x1),
                    "x2": _fmt(x2),
                    "y1": _fmt(y1),
                    "y2": _fmt(y2),
                    "stroke": css_color(style.tick_color),
                    "stroke-opacity": _fmt(style.tick_opacity),
                },
            )
    return ET.tostring(root, encoding="unicode")


def _fmt(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(round(value, 6))
