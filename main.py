from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from trendchart import ChartConfig, TrendChart, load_chart_config


LOGGER = logging.getLogger("trendchart.cli")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="trendchart")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a trend chart to SVG or PNG.")
    _add_chart_arguments(render)
    render.add_argument("--out", type=Path, required=True, help="Output path; .svg or .png.")

    inspect = sub.add_parser("inspect", help="Print plot points, ticks and hover state as JSON.")
    _add_chart_arguments(inspect)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    chart = _build_chart(args)

    if args.command == "render":
        suffix = args.out.suffix.lower()
        if suffix == ".svg":
            args.out.write_text(chart.render_svg(), encoding="utf-8")
            LOGGER.info("wrote trend chart svg: %s", args.out)
        elif suffix == ".png":
            chart.save_png(args.out)
        else:
            raise ValueError(f"unsupported output format: {args.out.suffix or '<none>'}")
        print(f"render complete: points={len(chart.geometry.points)} out={args.out}")
        return 0

    if args.command == "inspect":
        print(json.dumps(_describe(chart), indent=2, sort_keys=True))
        return 0

    raise RuntimeError(f"unsupported command: {args.command}")


def _add_chart_arguments(p: argparse.ArgumentParser) -> None:
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument("--values", type=str, help="Comma-separated numeric series.")
    source.add_argument("--input", type=Path, help="JSON file: a list of numbers or {values, labels}.")
    p.add_argument("--labels", type=str, default=None, help="Comma-separated labels, one per value.")
    p.add_argument("--width", type=float, default=480.0)
    p.add_argument("--height", type=float, default=None, help="Default: config height.")
    p.add_argument("--config", type=Path, default=None, help="TOML file with a [chart] table.")
    p.add_argument("--hover-x", type=float, default=None, help="Simulate a pointer at this x offset.")
    p.add_argument("--gradient-id", type=str, default=None)


def _build_chart(args: argparse.Namespace) -> TrendChart:
    config = load_chart_config(args.config) if args.config is not None else ChartConfig()
    values, labels = _load_series(args)
    chart = TrendChart(values, labels, config=config, gradient_id=args.gradient_id)
    chart.resize(args.width, args.height)
    if args.hover_x is not None:
        chart.pointer_move(args.hover_x)
    return chart


def _load_series(args: argparse.Namespace) -> tuple[list[Any], list[str] | None]:
    labels = _split_csv(args.labels) if args.labels is not None else None
    if args.values is not None:
        text = args.values.strip()
        values: list[Any] = [float(v) for v in _split_csv(text)] if text else []
        return values, labels

    raw = json.loads(args.input.read_text(encoding="utf-8"))
    if isinstance(raw, list):
        return raw, labels
    if isinstance(raw, dict) and "values" in raw:
        file_labels = raw.get("labels")
        return list(raw["values"]), labels if labels is not None else file_labels
    raise ValueError("input JSON must be a list of numbers or an object with `values`")


def _split_csv(text: str) -> list[str]:
    return [part.strip() for part in text.split(",")]


def _describe(chart: TrendChart) -> dict[str, Any]:
    geometry = chart.geometry
    hover = chart.hover
    tooltip = chart.tooltip
    return {
        "viewport": {"width": chart.viewport.width, "height": chart.viewport.height},
        "plot_area": {
            "left": geometry.area.left,
            "top": geometry.area.top,
            "width": geometry.area.width,
            "height": geometry.area.height,
        },
        "points": [[p.x, p.y] for p in geometry.points],
        "ticks": sorted(geometry.tick_indices) if geometry.show_ticks else [],
        "hover": None if hover is None else {"index": hover.index, "x": hover.x, "y": hover.y},
        "tooltip": None if tooltip is None else {"value": tooltip.value_text, "label": tooltip.label_text},
        "gradient_id": chart.gradient_id,
    }


if __name__ == "__main__":
    raise SystemExit(main())
