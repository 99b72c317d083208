from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np
import torch

from trendchart.errors import ChartDataError
from trendchart.series import TrendSeries


def normalize_series(values: Any, labels: Any = None) -> TrendSeries:
    if values is None:
        raise ChartDataError("values input is required")
    arr = _coerce_1d_numeric(values)
    if arr.size and not np.all(np.isfinite(arr)):
        bad = int(np.flatnonzero(~np.isfinite(arr))[0])
        raise ChartDataError(f"values contains a non-finite value at index {bad}")

    label_tuple: tuple[str, ...] | None = None
    if labels is not None:
        if isinstance(labels, (str, bytes, bytearray)) or not isinstance(labels, Sequence):
            raise ChartDataError("labels must be a sequence of strings")
        label_tuple = tuple(str(label) for label in labels)
        if len(label_tuple) != arr.size:
            raise ChartDataError(f"values and labels length mismatch: {arr.size} != {len(label_tuple)}")

    # Stored values are a read-only snapshot of the input.
    arr = arr.copy()
    arr.setflags(write=False)
    return TrendSeries(values=arr, labels=label_tuple)


def _coerce_1d_numeric(value: Any) -> np.ndarray:
    if isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise ChartDataError("values must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError("values must be 1-D")
        return _coerce_ndarray(value)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
        if arr.ndim != 1:
            raise ChartDataError("values must be 1-D")
        return _coerce_ndarray(arr)

    raise ChartDataError(f"unsupported values input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None or isinstance(raw, (str, bytes)):
            raise ChartDataError(f"values contains non-numeric value at index {i}: {raw!r}")
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"values contains non-numeric value at index {i}: {raw!r}") from exc
    return out
