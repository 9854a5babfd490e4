from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Callable, Literal, Mapping, Sequence

from chartscale.errors import InvalidScale, MissingRequiredInput
from chartscale.modes import (
    CATEGORY_AXIS_MODES,
    ORIENTATIONS,
    VALUE_AXIS_MODES,
    CategoryAxisMode,
    Orientation,
    ValueAxisMode,
    check_mode,
)
from chartscale.scales import Scale, coerce_scale
from chartscale.style import DEFAULT_AXIS_STYLE, DEFAULT_LABEL_STYLE, AxisStyle, LabelStyle

LabelFormatter = Callable[[str], str]

MAX_DECIMAL_PLACES = 20
# Relative to the unit; absorbs float noise when the span is a whole number of units.
UNIT_TOLERANCE = 1e-9


def _whole_unit_count(scale: Scale) -> int:
    if not (0 < scale.unit < scale.span):
        raise InvalidScale(f"scale.unit: {scale.unit}, must be within scale range and greater than zero")
    return int(math.floor(scale.span / scale.unit + UNIT_TOLERANCE))


def _remainder(scale: Scale, count: int) -> float:
    remain = scale.max - (count * scale.unit + scale.min)
    if remain <= scale.unit * UNIT_TOLERANCE:
        return 0.0
    return remain


def value_units(scale: Scale, inverted: bool = False) -> list[float]:
    """Flex weights of the value axis: whole units, then a partial remainder unit."""

    count = _whole_unit_count(scale)
    units = [scale.unit] * count
    remain = _remainder(scale, count)
    if remain:
        units.append(remain)
    if inverted:
        units.reverse()
    return units


def value_ticks(scale: Scale, inverted: bool = False) -> list[float]:
    count = _whole_unit_count(scale)
    ticks = [scale.unit * i + scale.min for i in range(count + 1)]
    if _remainder(scale, count):
        ticks.append(scale.max)
    if inverted:
        ticks.reverse()
    return ticks


def find_decimal_places(value: float) -> int:
    """Count the decimal places of ``value`` by scaling by 10 until it is whole."""

    a = abs(float(value))
    c = a
    count = 1
    while math.isfinite(c) and not c.is_integer() and count <= MAX_DECIMAL_PLACES:
        c = a * 10**count
        count += 1
    return min(count - 1, MAX_DECIMAL_PLACES)


def format_value_label(value: float, decimals: int, formatter: LabelFormatter | None = None) -> str:
    out = f"{value:.{decimals}f}"
    if out.startswith("-") and float(out) == 0:
        out = out[1:]
    if formatter is not None:
        return formatter(out)
    return out


def value_labels(scale: Scale, inverted: bool = False, formatter: LabelFormatter | None = None) -> list[str]:
    decimals = find_decimal_places(scale.unit)
    return [format_value_label(v, decimals, formatter) for v in value_ticks(scale, inverted)]


def category_units(label_count: int, mode: CategoryAxisMode = "range") -> list[float]:
    """Equal flex weights for a category axis.

    Labels sit inside bands in ``range`` mode and on tick boundaries in
    ``point`` mode, which has one segment fewer than labels.
    """

    check_mode(mode, CATEGORY_AXIS_MODES, label="category axis mode")
    base = 1 if mode == "point" else 0
    return [1.0 for _ in range(base, label_count)]


@dataclass(frozen=True)
class AxisVisibility:
    line: bool = True
    labels: bool = True
    ticks: bool = True
    gridlines: bool = True


@dataclass(frozen=True)
class AxisLayout:
    role: Literal["category", "value"]
    mode: CategoryAxisMode
    labels: tuple[str, ...]
    units: tuple[float, ...]
    visibility: AxisVisibility
    style: AxisStyle
    label_style: LabelStyle
    edge_margin: float


@dataclass(frozen=True)
class AxesLayout:
    """Axis descriptors mapped onto screen x (left to right) and y (top to bottom)."""

    orientation: Orientation
    x: AxisLayout
    y: AxisLayout

    @property
    def category_axis(self) -> AxisLayout:
        return self.x if self.orientation == "vertical" else self.y

    @property
    def value_axis(self) -> AxisLayout:
        return self.y if self.orientation == "vertical" else self.x


def build_axes_layout(
    value_scale: Scale | Mapping[str, Any] | None,
    category_labels: Sequence[str] | None,
    *,
    orientation: Orientation = "vertical",
    category_axis_mode: CategoryAxisMode = "range",
    value_axis_mode: ValueAxisMode = "normal",
    value_labels_override: Sequence[str] | None = None,
    value_labels_formatter: LabelFormatter | None = None,
    category_visibility: AxisVisibility = AxisVisibility(),
    value_visibility: AxisVisibility = AxisVisibility(),
    category_axis_style: AxisStyle = DEFAULT_AXIS_STYLE,
    value_axis_style: AxisStyle = DEFAULT_AXIS_STYLE,
    category_label_style: LabelStyle = DEFAULT_LABEL_STYLE,
    value_label_style: LabelStyle = DEFAULT_LABEL_STYLE,
) -> AxesLayout:
    scale = coerce_scale(value_scale)
    if scale is None or category_labels is None:
        raise MissingRequiredInput("value_scale and category_labels are required")
    check_mode(orientation, ORIENTATIONS, label="orientation")
    check_mode(category_axis_mode, CATEGORY_AXIS_MODES, label="category axis mode")
    check_mode(value_axis_mode, VALUE_AXIS_MODES, label="value axis mode")

    vertical = orientation == "vertical"
    inverted = value_axis_mode == "inverted"
    if value_labels_override is not None:
        values = [str(v) for v in value_labels_override]
    else:
        values = value_labels(scale, inverted, value_labels_formatter)
    units = value_units(scale, inverted)
    if vertical:
        # y runs top to bottom on screen while values grow upwards.
        values.reverse()
        units.reverse()

    category_extent = category_label_style.width if vertical else category_label_style.font_size
    value_extent = value_label_style.font_size if vertical else value_label_style.width
    category = AxisLayout(
        role="category",
        mode=category_axis_mode,
        labels=tuple(category_labels),
        units=tuple(category_units(len(category_labels), category_axis_mode)),
        visibility=category_visibility,
        style=category_axis_style,
        label_style=category_label_style,
        edge_margin=_edge_margin(category_axis_mode, category_visibility, category_extent),
    )
    value = AxisLayout(
        role="value",
        mode="point",
        labels=tuple(values),
        units=tuple(units),
        visibility=value_visibility,
        style=value_axis_style,
        label_style=value_label_style,
        edge_margin=_edge_margin("point", value_visibility, value_extent),
    )
    if vertical:
        return AxesLayout(orientation=orientation, x=category, y=value)
    return AxesLayout(orientation=orientation, x=value, y=category)


def _edge_margin(mode: CategoryAxisMode, visibility: AxisVisibility, label_extent: float) -> float:
    # Point-mode labels are centred on the outermost ticks and overhang by half their extent.
    if mode != "point" or not visibility.labels:
        return 0.0
    return label_extent / 2
