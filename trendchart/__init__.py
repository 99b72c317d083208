from trendchart.adapters import normalize_series
from trendchart.chart import TrendChart
from trendchart.config import ChartConfig, ChartPadding, ChartStyle, load_chart_config
from trendchart.errors import ChartDataError
from trendchart.geometry import PlotArea, PlotPoint, compute_plot_area, compute_plot_points
from trendchart.interaction import HoverState, Tooltip, find_nearest_by_x
from trendchart.layout import ChartGeometry, build_chart_geometry
from trendchart.paths import ClosePath, CubicTo, LineTo, MoveTo, build_fill_path, build_line_path
from trendchart.series import TrendSeries, Viewport
from trendchart.ticks import compute_tick_indices

__all__ = [
    "ChartConfig",
    "ChartDataError",
    "ChartGeometry",
    "ChartPadding",
    "ChartStyle",
    "ClosePath",
    "CubicTo",
    "HoverState",
    "LineTo",
    "MoveTo",
    "PlotArea",
    "PlotPoint",
    "Tooltip",
    "TrendChart",
    "TrendSeries",
    "Viewport",
    "build_chart_geometry",
    "build_fill_path",
    "build_line_path",
    "compute_plot_area",
    "compute_plot_points",
    "compute_tick_indices",
    "find_nearest_by_x",
    "load_chart_config",
    "normalize_series",
]
