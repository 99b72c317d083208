from __future__ import annotations

from collections.abc import Sequence
import math

from trendchart.geometry import PlotPoint


def compute_tick_indices(points: Sequence[PlotPoint], max_ticks: int = 6) -> frozenset[int]:
    if max_ticks <= 0:
        raise ValueError("max_ticks must be > 0")
    n = len(points)
    if n == 0:
        return frozenset()
    stride = math.ceil(n / max_ticks)
    indices = set(range(0, n, stride))
    # The final point is always marked even when it falls between strides.
    indices.add(n - 1)
    return frozenset(indices)


def tick_segments(
    points: Sequence[PlotPoint],
    indices: frozenset[int],
    baseline: float,
    length: float = 4.0,
) -> list[tuple[float, float, float, float]]:
    return [(points[i].x, baseline, points[i].x, baseline + length) for i in sorted(indices) if 0 <= i < len(points)]
