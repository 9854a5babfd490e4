from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Literal, Mapping, TypeVar

BorderStyle = Literal["solid", "dotted", "dashed"]

BORDER_STYLES = ("solid", "dotted", "dashed")
DEFAULT_AXIS_LABEL_WIDTH = 40.0


@dataclass(frozen=True)
class AxisStyle:
    """Line, tick and gridline settings for one axis."""

    axis_line_width: float = 1.0
    axis_line_color: str = "#808080"
    tick_length: float = 6.0
    label_offset: float = 6.0
    gridline_width: float = 1.0
    gridline_color: str = "#808080"
    gridline_style: BorderStyle = "solid"


@dataclass(frozen=True)
class LabelStyle:
    width: float = DEFAULT_AXIS_LABEL_WIDTH
    font_size: float = 12.0
    color: str = "#808080"


@dataclass(frozen=True)
class BarStyle:
    """Spacing between bar groups and between bars of a cluster, plus borders."""

    spacing: float = 10.0
    cluster_spacing: float = 0.0
    border_width: float = 2.0
    border_style: BorderStyle = "solid"


@dataclass(frozen=True)
class LineStyle:
    line_width: float = 2.0
    point_radius: float = 5.0
    point_border_width: float = 2.0


DEFAULT_AXIS_STYLE = AxisStyle()
DEFAULT_LABEL_STYLE = LabelStyle()
DEFAULT_BAR_STYLE = BarStyle()
DEFAULT_LINE_STYLE = LineStyle()

_StyleT = TypeVar("_StyleT", AxisStyle, LabelStyle, BarStyle, LineStyle)


def validate_axis_style(overrides: Mapping[str, Any] | None = None) -> AxisStyle:
    return _merge(DEFAULT_AXIS_STYLE, overrides)


def validate_label_style(overrides: Mapping[str, Any] | None = None) -> LabelStyle:
    return _merge(DEFAULT_LABEL_STYLE, overrides)


def validate_bar_style(overrides: Mapping[str, Any] | None = None) -> BarStyle:
    return _merge(DEFAULT_BAR_STYLE, overrides)


def validate_line_style(overrides: Mapping[str, Any] | None = None) -> LineStyle:
    return _merge(DEFAULT_LINE_STYLE, overrides)


def _merge(defaults: _StyleT, overrides: Mapping[str, Any] | None) -> _StyleT:
    """Merge ``overrides`` onto ``defaults`` and check every value.

    Colors are opaque to the engine and only need to be non-empty strings;
    widths, lengths and sizes must be non-negative numbers.
    """

    raw: dict[str, Any] = asdict(defaults)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown {type(defaults).__name__} key: {key}")
            raw[key] = value

    out: dict[str, Any] = {}
    for f in fields(defaults):
        value = raw[f.name]
        if f.name == "color" or f.name.endswith("_color"):
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Style `{f.name}` must be a non-empty color string")
            out[f.name] = value
        elif f.name.endswith("_style"):
            if value not in BORDER_STYLES:
                raise ValueError(f"Style `{f.name}` must be one of {BORDER_STYLES}")
            out[f.name] = value
        else:
            if isinstance(value, bool) or not isinstance(value, (int, float)) or float(value) < 0:
                raise ValueError(f"Style `{f.name}` must be a non-negative number")
            out[f.name] = float(value)
    return type(defaults)(**out)
