from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import math
from typing import Literal, Mapping

import numpy as np

from trendchart.geometry import PlotPoint
from trendchart.series import TrendSeries


PointerKind = Literal["pointer_move", "pointer_leave", "resize"]


@dataclass(frozen=True)
class HoverState:
    index: int
    x: float
    y: float


@dataclass(frozen=True)
class PointerEvent:
    """Surface event normalized for the chart adapter.

    `x`/`y` are relative to the surface origin for pointer events. `resize`
    carries the measured `width` and an optional `height`; `None` keeps the
    current height, while an explicit 0 collapses the viewport.
    """

    kind: PointerKind
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float | None = None


@dataclass(frozen=True)
class Tooltip:
    value_text: str
    label_text: str
    left: float
    top: float


def find_nearest_by_x(points: Sequence[PlotPoint], pointer_x: float) -> HoverState | None:
    if not points:
        return None
    nearest = 0
    best = math.inf
    for i, pt in enumerate(points):
        d = abs(pt.x - pointer_x)
        # Strict comparison keeps the lowest index on ties.
        if d < best:
            best = d
            nearest = i
    pt = points[nearest]
    return HoverState(index=nearest, x=pt.x, y=pt.y)


def parse_pointer_event(event_type: str, payload: object) -> PointerEvent | None:
    if event_type == "pointer_leave":
        return PointerEvent(kind="pointer_leave")
    if not isinstance(payload, Mapping):
        return None
    if event_type == "pointer_move":
        if "x" in payload:
            x = _finite(payload.get("x"))
        else:
            client_x = _finite(payload.get("client_x"))
            left = _finite(payload.get("surface_left", 0.0))
            x = None if client_x is None or left is None else client_x - left
        if x is None:
            return None
        y = _finite(payload.get("y", 0.0))
        return PointerEvent(kind="pointer_move", x=x, y=0.0 if y is None else y)
    if event_type == "resize":
        width = _finite(payload.get("width"))
        height = _finite(payload["height"]) if "height" in payload else None
        if width is None or width < 0:
            return None
        if "height" in payload and (height is None or height < 0):
            return None
        return PointerEvent(kind="resize", width=width, height=height)
    return None


def build_tooltip(series: TrendSeries, hover: HoverState | None, *, offset: float = 8.0) -> Tooltip | None:
    if hover is None or not 0 <= hover.index < len(series):
        return None
    return Tooltip(
        value_text=format_value(float(series.values[hover.index])),
        label_text=series.label_for(hover.index),
        left=hover.x,
        top=max(0.0, hover.y - offset),
    )


def format_value(value: float) -> str:
    """Shortest round-trip text, positional for 1e-6 <= |v| < 1e21 as browsers display numbers."""

    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        return np.format_float_positional(value, trim="-")
    return np.format_float_scientific(value, trim="-", exp_digits=1)


def _finite(raw: object) -> float | None:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    value = float(raw)
    if not math.isfinite(value):
        return None
    return value
