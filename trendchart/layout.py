from __future__ import annotations

from dataclasses import dataclass

from trendchart.config import ChartConfig
from trendchart.geometry import PlotArea, PlotPoint, compute_plot_area, compute_plot_points
from trendchart.paths import PathCommand, build_fill_path, build_line_path
from trendchart.series import TrendSeries, Viewport
from trendchart.ticks import compute_tick_indices


@dataclass(frozen=True)
class ChartGeometry:
    viewport: Viewport
    area: PlotArea
    points: tuple[PlotPoint, ...]
    line_path: tuple[PathCommand, ...]
    fill_path: tuple[PathCommand, ...]
    tick_indices: frozenset[int]

    @property
    def show_ticks(self) -> bool:
        return len(self.points) > 1


def build_chart_geometry(series: TrendSeries, viewport: Viewport, config: ChartConfig) -> ChartGeometry:
    area = compute_plot_area(viewport, config.padding)
    points = compute_plot_points(series.values, viewport, config.padding)
    return ChartGeometry(
        viewport=viewport,
        area=area,
        points=points,
        line_path=build_line_path(points),
        fill_path=build_fill_path(points, area.baseline),
        tick_indices=compute_tick_indices(points, config.max_ticks),
    )
