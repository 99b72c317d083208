from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when series values or labels cannot be plotted."""
