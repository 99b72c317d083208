from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
import tomllib
from typing import Any, Mapping


RGBA = tuple[int, int, int, int]

DEFAULT_HEIGHT = 160


@dataclass(frozen=True)
class ChartPadding:
    left: float = 8.0
    right: float = 8.0
    top: float = 12.0
    bottom: float = 18.0


@dataclass(frozen=True)
class ChartStyle:
    line_color: RGBA = (190, 18, 60, 255)
    background: RGBA = (255, 255, 255, 255)
    tick_color: RGBA = (15, 23, 42, 255)
    text_color: RGBA = (15, 23, 42, 255)
    tooltip_background: RGBA = (255, 255, 255, 240)
    line_width: float = 2.5
    fill_opacity_top: float = 0.25
    fill_opacity_bottom: float = 0.02
    crosshair_opacity: float = 0.2
    tick_opacity: float = 0.2
    hover_radius: float = 4.0
    hover_stroke_width: float = 2.0
    font_size_px: float = 12.0


@dataclass(frozen=True)
class ChartConfig:
    height: int = DEFAULT_HEIGHT
    padding: ChartPadding = field(default_factory=ChartPadding)
    style: ChartStyle = field(default_factory=ChartStyle)
    max_ticks: int = 6
    tick_length: float = 4.0
    curve_segments: int = 16
    tooltip_offset: float = 8.0

    def __post_init__(self) -> None:
        if self.height <= 0:
            raise ValueError("height must be > 0")
        if self.max_ticks <= 0:
            raise ValueError("max_ticks must be > 0")
        if self.curve_segments <= 0:
            raise ValueError("curve_segments must be > 0")
        for name in ("left", "right", "top", "bottom"):
            if getattr(self.padding, name) < 0:
                raise ValueError(f"padding.{name} must be >= 0")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ChartConfig":
        padding = _build_section(ChartPadding, raw.get("padding", {}), "padding")
        style = _build_section(ChartStyle, raw.get("style", {}), "style")
        top_level = {k: v for k, v in raw.items() if k not in {"padding", "style"}}
        base = _build_section(cls, top_level, "chart", skip={"padding", "style"})
        return replace(base, padding=padding, style=style)


def load_chart_config(path: str | Path) -> ChartConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"chart config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    chart = raw.get("chart", {})
    if not isinstance(chart, Mapping):
        raise ValueError("chart must be a table")
    return ChartConfig.from_mapping(chart)


def _build_section(cls: type, raw: object, section: str, *, skip: set[str] | None = None) -> Any:
    if not isinstance(raw, Mapping):
        raise ValueError(f"{section} must be a table")
    known = {f.name: f for f in fields(cls) if f.name not in (skip or set())}
    kwargs: dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            raise ValueError(f"unknown {section} field: {key}")
        default = getattr(cls(), key)
        kwargs[key] = _coerce_field(value, default, f"{section}.{key}")
    return cls(**kwargs)


def _coerce_field(value: object, default: object, field_name: str) -> object:
    if isinstance(default, tuple):
        return _coerce_color(value, field_name)
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number")
    if isinstance(default, int):
        if not isinstance(value, int):
            raise ValueError(f"{field_name} must be an integer")
        return value
    if isinstance(default, float):
        if not isinstance(value, (int, float)):
            raise ValueError(f"{field_name} must be a number")
        return float(value)
    return value


def _coerce_color(value: object, field_name: str) -> RGBA:
    if isinstance(value, str):
        text = value.strip().lstrip("#")
        if len(text) not in (6, 8):
            raise ValueError(f"{field_name} must be #rrggbb or #rrggbbaa")
        try:
            parts = [int(text[i : i + 2], 16) for i in range(0, len(text), 2)]
        except ValueError as exc:
            raise ValueError(f"{field_name} is not a valid hex color: {value!r}") from exc
        if len(parts) == 3:
            parts.append(255)
        return (parts[0], parts[1], parts[2], parts[3])
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        channels = [int(c) for c in value]
        if any(c < 0 or c > 255 for c in channels):
            raise ValueError(f"{field_name} channels must be in [0, 255]")
        if len(channels) == 3:
            channels.append(255)
        return (channels[0], channels[1], channels[2], channels[3])
    raise ValueError(f"{field_name} must be a hex string or an RGB(A) list")
