"""Coordinate mapping from series values to plot pixels.

Everything here is a pure function of (series, viewport, padding); callers
recompute on every data or size change instead of patching old results.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from trendchart.config import ChartPadding
from trendchart.series import Viewport


@dataclass(frozen=True)
class PlotPoint:
    x: float
    y: float


@dataclass(frozen=True)
class PlotArea:
    left: float
    top: float
    width: float
    height: float

    @property
    def baseline(self) -> float:
        return self.top + self.height

    @property
    def measurable(self) -> bool:
        return self.width > 0 and self.height > 0


def compute_plot_area(viewport: Viewport, padding: ChartPadding) -> PlotArea:
    w = max(0.0, float(viewport.width) - padding.left - padding.right)
    h = max(0.0, float(viewport.height) - padding.top - padding.bottom)
    return PlotArea(left=float(padding.left), top=float(padding.top), width=w, height=h)


def series_max(series: Sequence[float] | np.ndarray) -> float:
    values = np.asarray(series, dtype=np.float64)
    if values.size == 0:
        return 1.0
    return max(1.0, float(np.max(values)))


def compute_plot_points(
    series: Sequence[float] | np.ndarray,
    viewport: Viewport,
    padding: ChartPadding,
) -> tuple[PlotPoint, ...]:
    values = np.asarray(series, dtype=np.float64)
    area = compute_plot_area(viewport, padding)
    n = int(values.size)
    if not area.measurable or n == 0:
        return ()

    peak = series_max(values)
    step_x = area.width / (n - 1) if n > 1 else area.width
    xs = area.left + np.arange(n, dtype=np.float64) * step_x
    np.minimum(xs, area.left + area.width, out=xs)
    # Negative values sit on the baseline so points never leave the plot rect.
    ratios = np.clip(values, 0.0, None) / peak
    ys = area.top + (1.0 - ratios) * area.height
    return tuple(PlotPoint(x=float(x), y=float(y)) for x, y in zip(xs.tolist(), ys.tolist(), strict=True))

