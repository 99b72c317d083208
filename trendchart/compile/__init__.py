from .frames import (
    FullRewrite,
    ReplaceRect,
    WriteBatch,
    apply_write_batch,
    compile_full_rewrite_batch,
    compile_replace_rect_batch,
)

__all__ = [
    "FullRewrite",
    "ReplaceRect",
    "WriteBatch",
    "apply_write_batch",
    "compile_full_rewrite_batch",
    "compile_replace_rect_batch",
]
