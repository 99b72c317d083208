from __future__ import annotations

import unittest

from trendchart.adapters import normalize_series
from trendchart.geometry import PlotPoint
from trendchart.interaction import (
    HoverState,
    PointerEvent,
    build_tooltip,
    find_nearest_by_x,
    format_value,
    parse_pointer_event,
)
from trendchart.ticks import compute_tick_indices, tick_segments


def _points_at(*xs: float) -> tuple[PlotPoint, ...]:
    return tuple(PlotPoint(x, 100.0 - x) for x in xs)


class NearestByXTests(unittest.TestCase):
    def test_picks_closest_x(self) -> None:
        hover = find_nearest_by_x(_points_at(10.0, 50.0, 90.0), 45.0)
        self.assertEqual(hover, HoverState(index=1, x=50.0, y=50.0))

    def test_ties_go_to_lowest_index(self) -> None:
        self.assertEqual(find_nearest_by_x(_points_at(10.0, 20.0, 40.0), 30.0).index, 1)
        self.assertEqual(find_nearest_by_x(_points_at(20.0, 40.0), 30.0).index, 0)

    def test_vertical_position_is_ignored(self) -> None:
        points = (PlotPoint(10.0, 0.0), PlotPoint(12.0, 500.0))
        self.assertEqual(find_nearest_by_x(points, 11.9).index, 1)

    def test_pointer_outside_surface_snaps_to_edges(self) -> None:
        points = _points_at(10.0, 50.0, 90.0)
        self.assertEqual(find_nearest_by_x(points, -400.0).index, 0)
        self.assertEqual(find_nearest_by_x(points, 4000.0).index, 2)

    def test_empty_points_means_no_hover(self) -> None:
        self.assertIsNone(find_nearest_by_x((), 5.0))


class TickIndexTests(unittest.TestCase):
    def test_stride_with_last_index(self) -> None:
        self.assertEqual(compute_tick_indices(_points_at(*range(13))), frozenset({0, 3, 6, 9, 12}))
        self.assertEqual(compute_tick_indices(_points_at(*range(10))), frozenset({0, 2, 4, 6, 8, 9}))

    def test_small_series_marks_every_point(self) -> None:
        self.assertEqual(compute_tick_indices(_points_at(*range(6))), frozenset(range(6)))
        self.assertEqual(compute_tick_indices(_points_at(3.0)), frozenset({0}))
        self.assertEqual(compute_tick_indices(()), frozenset())

    def test_tick_count_stays_bounded(self) -> None:
        for n in (7, 31, 100, 997):
            self.assertLessEqual(len(compute_tick_indices(_points_at(*range(n)))), 7)

    def test_custom_max_ticks(self) -> None:
        self.assertEqual(compute_tick_indices(_points_at(*range(9)), max_ticks=3), frozenset({0, 3, 6, 8}))
        with self.assertRaises(ValueError):
            compute_tick_indices(_points_at(1.0), max_ticks=0)

    def test_tick_segments_hang_below_baseline(self) -> None:
        points = _points_at(10.0, 20.0, 30.0)
        segments = tick_segments(points, frozenset({0, 2}), 142.0)
        self.assertEqual(segments, [(10.0, 142.0, 10.0, 146.0), (30.0, 142.0, 30.0, 146.0)])


class PointerEventTests(unittest.TestCase):
    def test_move_with_surface_relative_x(self) -> None:
        self.assertEqual(parse_pointer_event("pointer_move", {"x": 12, "y": 3}), PointerEvent("pointer_move", 12.0, 3.0))

    def test_move_with_client_coordinates(self) -> None:
        event = parse_pointer_event("pointer_move", {"client_x": 130.0, "surface_left": 100.0})
        self.assertEqual(event, PointerEvent("pointer_move", 30.0, 0.0))

    def test_leave_needs_no_payload(self) -> None:
        self.assertEqual(parse_pointer_event("pointer_leave", None), PointerEvent("pointer_leave"))

    def test_resize_without_height_keeps_current_height(self) -> None:
        self.assertEqual(parse_pointer_event("resize", {"width": 300}), PointerEvent("resize", width=300.0, height=None))

    def test_resize_passes_zero_height_through(self) -> None:
        self.assertEqual(parse_pointer_event("resize", {"width": 300, "height": 0}), PointerEvent("resize", width=300.0, height=0.0))

    def test_malformed_events_are_ignored(self) -> None:
        self.assertIsNone(parse_pointer_event("pointer_move", {"x": "left"}))
        self.assertIsNone(parse_pointer_event("pointer_move", {"x": float("nan")}))
        self.assertIsNone(parse_pointer_event("pointer_move", {"x": True}))
        self.assertIsNone(parse_pointer_event("pointer_move", "x=4"))
        self.assertIsNone(parse_pointer_event("resize", {}))
        self.assertIsNone(parse_pointer_event("resize", {"width": -5}))
        self.assertIsNone(parse_pointer_event("resize", {"width": 10, "height": -1}))
        self.assertIsNone(parse_pointer_event("resize", {"width": 10, "height": None}))
        self.assertIsNone(parse_pointer_event("scroll", {"x": 1}))


class TooltipTests(unittest.TestCase):
    def test_label_defaults_to_one_based_index(self) -> None:
        series = normalize_series([3, 4.5])
        tooltip = build_tooltip(series, HoverState(index=1, x=40.0, y=20.0))
        self.assertEqual((tooltip.value_text, tooltip.label_text), ("4.5", "2"))
        self.assertEqual((tooltip.left, tooltip.top), (40.0, 12.0))

    def test_uses_labels_and_clamps_top(self) -> None:
        series = normalize_series([3, 4], ["Mon", "Tue"])
        tooltip = build_tooltip(series, HoverState(index=0, x=8.0, y=5.0))
        self.assertEqual((tooltip.value_text, tooltip.label_text), ("3", "Mon"))
        self.assertEqual(tooltip.top, 0.0)

    def test_no_hover_no_tooltip(self) -> None:
        series = normalize_series([1])
        self.assertIsNone(build_tooltip(series, None))
        self.assertIsNone(build_tooltip(series, HoverState(index=4, x=0.0, y=0.0)))

    def test_value_formatting(self) -> None:
        self.assertEqual(format_value(12.0), "12")
        self.assertEqual(format_value(-0.25), "-0.25")
        self.assertEqual(format_value(123456789.0), "123456789")
        self.assertEqual(format_value(0.1 + 0.2), "0.30000000000000004")

    def test_large_and_tiny_values_use_exponent_form(self) -> None:
        self.assertEqual(format_value(1e21), "1e+21")
        self.assertEqual(format_value(-2.5e22), "-2.5e+22")
        self.assertEqual(format_value(1e-7), "1e-7")
        self.assertEqual(format_value(1e20), "100000000000000000000")


if __name__ == "__main__":
    unittest.main()
