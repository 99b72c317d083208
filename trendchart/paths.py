"""Backend-agnostic path commands for the trend line and its fill area.

The line is a Catmull-Rom spline converted to cubic Bezier segments. Neighbour
indices are clamped at both ends, so the first and last points are repeated
and the curve flattens toward the edges. Renderers rely on that exact shape.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

import numpy as np

from trendchart.geometry import PlotPoint


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CubicTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, LineTo, CubicTo, ClosePath]


def build_line_path(points: Sequence[PlotPoint], closed: bool = False) -> tuple[PathCommand, ...]:
    n = len(points)
    if n < 2:
        return ()

    def at(i: int) -> PlotPoint:
        return points[max(0, min(n - 1, i))]

    commands: list[PathCommand] = [MoveTo(points[0].x, points[0].y)]
    for i in range(n - 1):
        p0 = at(i - 1)
        p1 = at(i)
        p2 = at(i + 1)
        p3 = at(i + 2)
        commands.append(
            CubicTo(
                c1x=p1.x + (p2.x - p0.x) / 6,
                c1y=p1.y + (p2.y - p0.y) / 6,
                c2x=p2.x - (p3.x - p1.x) / 6,
                c2y=p2.y - (p3.y - p1.y) / 6,
                x=p2.x,
                y=p2.y,
            )
        )
    if closed:
        commands.append(ClosePath())
    return tuple(commands)


def build_fill_path(points: Sequence[PlotPoint], baseline_y: float) -> tuple[PathCommand, ...]:
    top = build_line_path(points)
    if not top:
        return ()
    first = points[0]
    last = points[-1]
    return top + (LineTo(last.x, baseline_y), LineTo(first.x, baseline_y), ClosePath())


def path_to_svg_d(commands: Sequence[PathCommand]) -> str:
    parts: list[str] = []
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            parts.append(f"M {_num(cmd.x)},{_num(cmd.y)}")
        elif isinstance(cmd, LineTo):
            parts.append(f"L {_num(cmd.x)},{_num(cmd.y)}")
        elif isinstance(cmd, CubicTo):
            parts.append(
                f"C {_num(cmd.c1x)},{_num(cmd.c1y)} {_num(cmd.c2x)},{_num(cmd.c2y)} {_num(cmd.x)},{_num(cmd.y)}"
            )
        elif isinstance(cmd, ClosePath):
            parts.append("Z")
        else:
            raise ValueError(f"unsupported path command: {cmd!r}")
    return " ".join(parts)


def flatten_path(commands: Sequence[PathCommand], segments_per_curve: int = 16) -> list[np.ndarray]:
    """Sample path commands into polyline subpaths.

    Each subpath is an (M, 2) float64 array. Cubic segments contribute
    `segments_per_curve` samples past their start point; `ClosePath` repeats the
    subpath's first vertex so filled shapes come back closed.
    """

    if segments_per_curve <= 0:
        raise ValueError("segments_per_curve must be > 0")
    t = np.linspace(0.0, 1.0, segments_per_curve + 1, dtype=np.float64)[1:]
    a = (1.0 - t) ** 3
    b = 3.0 * (1.0 - t) ** 2 * t
    c = 3.0 * (1.0 - t) * t**2
    d = t**3

    subpaths: list[np.ndarray] = []
    current: list[np.ndarray] = []
    cursor: tuple[float, float] | None = None
    start: tuple[float, float] | None = None

    def finish() -> None:
        if current:
            subpaths.append(np.vstack(current))

    for cmd in commands:
        if isinstance(cmd, MoveTo):
            finish()
            cursor = (cmd.x, cmd.y)
            start = cursor
            current = [np.asarray([cursor], dtype=np.float64)]
            continue
        if cursor is None or start is None:
            raise ValueError("path must start with MoveTo")
        if isinstance(cmd, LineTo):
            cursor = (cmd.x, cmd.y)
            current.append(np.asarray([cursor], dtype=np.float64))
        elif isinstance(cmd, CubicTo):
            x0, y0 = cursor
            xs = a * x0 + b * cmd.c1x + c * cmd.c2x + d * cmd.x
            ys = a * y0 + b * cmd.c1y + c * cmd.c2y + d * cmd.y
            # Pin the endpoint so joins stay exact.
            xs[-1] = cmd.x
            ys[-1] = cmd.y
            current.append(np.column_stack([xs, ys]))
            cursor = (cmd.x, cmd.y)
        elif isinstance(cmd, ClosePath):
            current.append(np.asarray([start], dtype=np.float64))
            cursor = start
        else:
            raise ValueError(f"unsupported path command: {cmd!r}")
    finish()
    return subpaths


def _num(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
