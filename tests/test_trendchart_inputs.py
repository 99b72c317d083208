from __future__ import annotations

from decimal import Decimal
from pathlib import Path
import tempfile
import unittest

import numpy as np
import torch

from trendchart import ChartDataError
from trendchart.adapters.normalize import normalize_series
from trendchart.config import ChartConfig, ChartPadding, load_chart_config


class NormalizeSeriesTests(unittest.TestCase):
    def test_accepts_common_numeric_inputs(self) -> None:
        expected = np.asarray([1.0, 2.0, 3.0])
        for raw in (
            [1, 2, 3],
            (1.0, 2.0, 3.0),
            np.asarray([1, 2, 3], dtype=np.int32),
            torch.tensor([1.0, 2.0, 3.0], dtype=torch.float32),
            [Decimal("1"), Decimal("2.0"), 3],
        ):
            series = normalize_series(raw)
            self.assertEqual(series.values.dtype, np.float64)
            np.testing.assert_array_equal(series.values, expected)

    def test_empty_series_is_valid(self) -> None:
        self.assertEqual(len(normalize_series([])), 0)

    def test_values_are_read_only_copies(self) -> None:
        raw = np.asarray([1.0, 2.0])
        series = normalize_series(raw)
        raw[0] = 99.0
        self.assertEqual(series.values[0], 1.0)
        self.assertFalse(series.values.flags.writeable)

    def test_rejects_invalid_values(self) -> None:
        for raw in (None, "123", [1, None], [1.0, float("nan")], [float("inf")], [[1, 2], [3, 4]], {"a": 1}, [1, "2"]):
            with self.subTest(raw=raw), self.assertRaises(ChartDataError):
                normalize_series(raw)
        with self.assertRaises(ChartDataError):
            normalize_series(torch.zeros((2, 2)))

    def test_labels_must_match_length(self) -> None:
        series = normalize_series([1, 2], ["a", "b"])
        self.assertEqual(series.labels, ("a", "b"))
        with self.assertRaises(ChartDataError):
            normalize_series([1, 2], ["a"])
        with self.assertRaises(ChartDataError):
            normalize_series([1, 2], "ab")

    def test_content_digest_tracks_values(self) -> None:
        a = normalize_series([1, 2, 3])
        b = normalize_series([1.0, 2.0, 3.0], ["x", "y", "z"])
        c = normalize_series([1, 2, 4])
        self.assertEqual(a.content_digest(), b.content_digest())
        self.assertNotEqual(a.content_digest(), c.content_digest())


class ChartConfigTests(unittest.TestCase):
    def test_defaults_match_trend_chart_layout(self) -> None:
        config = ChartConfig()
        self.assertEqual(config.height, 160)
        self.assertEqual(config.padding, ChartPadding(left=8.0, right=8.0, top=12.0, bottom=18.0))
        self.assertEqual(config.max_ticks, 6)
        self.assertEqual(config.style.line_width, 2.5)

    def test_from_mapping_overrides_sections(self) -> None:
        config = ChartConfig.from_mapping(
            {"height": 200, "max_ticks": 4, "padding": {"left": 10}, "style": {"line_color": "#112233"}}
        )
        self.assertEqual(config.height, 200)
        self.assertEqual(config.max_ticks, 4)
        self.assertEqual(config.padding.left, 10.0)
        self.assertEqual(config.padding.right, 8.0)
        self.assertEqual(config.style.line_color, (0x11, 0x22, 0x33, 255))

    def test_rejects_bad_fields(self) -> None:
        bad = (
            {"unknown": 1},
            {"height": "tall"},
            {"height": 0},
            {"max_ticks": 0},
            {"padding": {"left": -1}},
            {"padding": 3},
            {"style": {"line_color": "#12"}},
            {"style": {"tick_color": [0, 0, 300]}},
            {"style": {"line_width": True}},
        )
        for raw in bad:
            with self.subTest(raw=raw), self.assertRaises(ValueError):
                ChartConfig.from_mapping(raw)

    def test_load_from_toml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "chart.toml"
            path.write_text(
                "[chart]\nheight = 240\n\n[chart.padding]\ntop = 20\n\n[chart.style]\nline_color = [10, 20, 30]\n",
                encoding="utf-8",
            )
            config = load_chart_config(path)
        self.assertEqual(config.height, 240)
        self.assertEqual(config.padding.top, 20.0)
        self.assertEqual(config.style.line_color, (10, 20, 30, 255))

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_chart_config("/nonexistent/chart.toml")


if __name__ == "__main__":
    unittest.main()
