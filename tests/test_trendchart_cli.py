from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

from main import main as cli_main


class TrendChartCliTests(unittest.TestCase):
    def test_render_svg(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "trend.svg"
            with contextlib.redirect_stdout(io.StringIO()):
                code = cli_main(["render", "--values", "1,3,2", "--width", "300", "--out", str(out)])
            self.assertEqual(code, 0)
            markup = out.read_text(encoding="utf-8")
        self.assertTrue(markup.startswith("<svg"))
        self.assertIn("trend-line", markup)

    def test_render_png_from_json_input_with_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            data = Path(tmp) / "series.json"
            data.write_text(json.dumps({"values": [4, 1, 6, 2], "labels": ["q1", "q2", "q3", "q4"]}), encoding="utf-8")
            config = Path(tmp) / "chart.toml"
            config.write_text("[chart]\nheight = 120\n", encoding="utf-8")
            out = Path(tmp) / "trend.png"
            with contextlib.redirect_stdout(io.StringIO()):
                cli_main(["render", "--input", str(data), "--config", str(config), "--hover-x", "10", "--out", str(out)])
            self.assertTrue(out.exists())
            self.assertEqual(out.read_bytes()[:8], b"\x89PNG\r\n\x1a\n")

    def test_inspect_reports_geometry(self) -> None:
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            cli_main(["inspect", "--values", "0,5,10", "--width", "116", "--hover-x", "45", "--labels", "a,b,c"])
        report = json.loads(buf.getvalue())
        self.assertEqual(report["points"], [[8.0, 142.0], [58.0, 77.0], [108.0, 12.0]])
        self.assertEqual(report["ticks"], [0, 1, 2])
        self.assertEqual(report["hover"], {"index": 1, "x": 58.0, "y": 77.0})
        self.assertEqual(report["tooltip"], {"value": "5", "label": "b"})

    def test_unknown_output_format(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                cli_main(["render", "--values", "1,2", "--out", str(Path(tmp) / "trend.gif")])


if __name__ == "__main__":
    unittest.main()
