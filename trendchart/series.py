from __future__ import annotations

from dataclasses import dataclass
import hashlib

import numpy as np


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float


@dataclass(frozen=True)
class TrendSeries:
    values: np.ndarray
    labels: tuple[str, ...] | None = None

    def __len__(self) -> int:
        return int(self.values.size)

    def label_for(self, index: int) -> str:
        if self.labels is not None and 0 <= index < len(self.labels):
            return self.labels[index]
        return str(index + 1)

    def content_digest(self) -> str:
        return hashlib.sha1(np.ascontiguousarray(self.values, dtype=np.float64).tobytes()).hexdigest()


EMPTY_SERIES = TrendSeries(values=np.zeros(0, dtype=np.float64))
