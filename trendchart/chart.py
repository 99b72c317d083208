from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import numpy as np
from PIL import Image

from trendchart.adapters import normalize_series
from trendchart.compile import WriteBatch, compile_full_rewrite_batch, compile_replace_rect_batch
from trendchart.config import ChartConfig
from trendchart.interaction import HoverState, Tooltip, build_tooltip, find_nearest_by_x, parse_pointer_event
from trendchart.layout import ChartGeometry, build_chart_geometry
from trendchart.rasterize import hover_region, render_chart_rgba, union_rect
from trendchart.series import EMPTY_SERIES, TrendSeries, Viewport
from trendchart.svg import render_chart_svg


LOGGER = logging.getLogger(__name__)


class TrendChart:
    """Stateful adapter around the pure trend geometry.

    The UI layer feeds it data, surface measurements and pointer events; every
    data or size change rebuilds the whole geometry, and pointer handling only
    reads the current points.
    """

    def __init__(
        self,
        values: Any = None,
        labels: Any = None,
        *,
        config: ChartConfig | None = None,
        width: float = 0.0,
        gradient_id: str | None = None,
    ) -> None:
        self._config = config or ChartConfig()
        self._explicit_gradient_id = gradient_id
        self._series = EMPTY_SERIES if values is None else normalize_series(values, labels)
        self._viewport = Viewport(width=float(width), height=float(self._config.height))
        self._hover: HoverState | None = None
        self._geometry = self._rebuild()

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def series(self) -> TrendSeries:
        return self._series

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def geometry(self) -> ChartGeometry:
        return self._geometry

    @property
    def hover(self) -> HoverState | None:
        return self._hover

    @property
    def tooltip(self) -> Tooltip | None:
        return build_tooltip(self._series, self._hover, offset=self._config.tooltip_offset)

    @property
    def gradient_id(self) -> str:
        if self._explicit_gradient_id is not None:
            return self._explicit_gradient_id
        return f"trend-grad-{self._series.content_digest()[:10]}"

    def set_series(self, values: Any, labels: Any = None) -> ChartGeometry:
        self._series = normalize_series(values, labels)
        self._geometry = self._rebuild()
        self._resnap_hover()
        return self._geometry

    def resize(self, width: float, height: float | None = None) -> ChartGeometry:
        if width < 0 or (height is not None and height < 0):
            raise ValueError("viewport width/height must be >= 0")
        self._viewport = Viewport(
            width=float(width),
            height=float(self._viewport.height if height is None else height),
        )
        self._geometry = self._rebuild()
        self._resnap_hover()
        return self._geometry

    def pointer_move(self, x: float) -> HoverState | None:
        if not self._geometry.points:
            return self._hover
        self._hover = find_nearest_by_x(self._geometry.points, x)
        return self._hover

    def pointer_leave(self) -> None:
        self._hover = None

    def dispatch(self, event_type: str, payload: Mapping[str, Any] | None = None) -> bool:
        event = parse_pointer_event(event_type, payload)
        if event is None:
            LOGGER.debug("ignoring unsupported chart event: %s", event_type)
            return False
        if event.kind == "pointer_move":
            self.pointer_move(event.x)
        elif event.kind == "pointer_leave":
            self.pointer_leave()
        else:
            self.resize(event.width, event.height)
        return True

    def render_svg(self) -> str:
        return render_chart_svg(self._geometry, self._config, gradient_id=self.gradient_id, hover=self._hover)

    def render_rgba(self) -> np.ndarray:
        return render_chart_rgba(self._geometry, self._config, hover=self._hover, tooltip=self.tooltip)

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        Image.fromarray(self.render_rgba()).save(out, format="PNG")
        LOGGER.info("wrote trend chart png: %s", out)
        return out

    def compile_frame(self) -> WriteBatch:
        return compile_full_rewrite_batch(self.render_rgba())

    def compile_hover_patch(self, previous_hover: HoverState | None) -> WriteBatch | None:
        """Batch that repaints only the area touched by the old and current hover overlays."""

        if not self._geometry.area.measurable:
            return None
        previous_tooltip = build_tooltip(self._series, previous_hover, offset=self._config.tooltip_offset)
        rect = union_rect(
            hover_region(self._geometry, self._config, previous_hover, previous_tooltip),
            hover_region(self._geometry, self._config, self._hover, self.tooltip),
        )
        if rect is None:
            return None
        x, y, w, h = rect
        return compile_replace_rect_batch(self.render_rgba(), x, y, w, h)

    def _rebuild(self) -> ChartGeometry:
        geometry = build_chart_geometry(self._series, self._viewport, self._config)
        if not geometry.area.measurable:
            LOGGER.debug(
                "trend chart viewport not measurable yet: width=%s height=%s",
                self._viewport.width,
                self._viewport.height,
            )
        else:
            LOGGER.debug(
                "trend chart geometry rebuilt: points=%d ticks=%d",
                len(geometry.points),
                len(geometry.tick_indices),
            )
        return geometry

    def _resnap_hover(self) -> None:
        hover = self._hover
        if hover is None:
            return
        if hover.index >= len(self._geometry.points):
            self._hover = None
            return
        pt = self._geometry.points[hover.index]
        self._hover = HoverState(index=hover.index, x=pt.x, y=pt.y)
