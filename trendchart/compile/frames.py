from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

import numpy as np
import torch


@dataclass(frozen=True)
class FullRewrite:
    tensor_h_w_4: torch.Tensor


@dataclass(frozen=True)
class ReplaceRect:
    x: int
    y: int
    width: int
    height: int
    rect_h_w_4: torch.Tensor


WriteOp: TypeAlias = FullRewrite | ReplaceRect


@dataclass(frozen=True)
class WriteBatch:
    operations: list[WriteOp]


def compile_full_rewrite_batch(frame_rgba: np.ndarray) -> WriteBatch:
    _validate_frame(frame_rgba)
    tensor = torch.from_numpy(np.ascontiguousarray(frame_rgba))
    return WriteBatch([FullRewrite(tensor)])


def compile_replace_rect_batch(frame_rgba: np.ndarray, x: int, y: int, width: int, height: int) -> WriteBatch:
    _validate_frame(frame_rgba)
    if width <= 0 or height <= 0:
        raise ValueError("rect width/height must be > 0")
    if x < 0 or y < 0:
        raise ValueError("rect x/y must be >= 0")
    if x + width > frame_rgba.shape[1] or y + height > frame_rgba.shape[0]:
        raise ValueError("rect exceeds frame bounds")
    patch = torch.from_numpy(np.ascontiguousarray(frame_rgba[y : y + height, x : x + width]))
    return WriteBatch([ReplaceRect(x=x, y=y, width=width, height=height, rect_h_w_4=patch)])


def apply_write_batch(target: torch.Tensor, batch: WriteBatch) -> torch.Tensor:
    """Return a copy of `target` (H, W, 4 uint8) with the batch applied in order."""

    if not batch.operations:
        raise ValueError("write batch must include at least one operation")
    staged = target.clone()
    height, width = int(staged.shape[0]), int(staged.shape[1])
    for op in batch.operations:
        if isinstance(op, FullRewrite):
            if tuple(op.tensor_h_w_4.shape) != (height, width, 4):
                raise ValueError("full rewrite shape does not match target")
            staged = op.tensor_h_w_4.clone()
        elif isinstance(op, ReplaceRect):
            if op.x < 0 or op.y < 0 or op.x + op.width > width or op.y + op.height > height:
                raise ValueError("rect exceeds target bounds")
            staged[op.y : op.y + op.height, op.x : op.x + op.width, :] = op.rect_h_w_4
        else:
            raise ValueError(f"unsupported write operation: {op!r}")
    return staged


def _validate_frame(frame_rgba: np.ndarray) -> None:
    if frame_rgba.dtype != np.uint8:
        raise ValueError("frame_rgba must be uint8")
    if frame_rgba.ndim != 3 or frame_rgba.shape[2] != 4:
        raise ValueError("frame_rgba must have shape (H, W, 4)")
