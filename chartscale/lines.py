from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from chartscale.datasets import Dataset
from chartscale.errors import MissingRequiredInput
from chartscale.modes import (
    CATEGORY_AXIS_MODES,
    VALUE_AXIS_MODES,
    CategoryAxisMode,
    PointMode,
    ValueAxisMode,
    check_mode,
)
from chartscale.ranges import has_samples
from chartscale.ratios import endpoint_ratios
from chartscale.scales import Scale, coerce_scale
from chartscale.style import DEFAULT_LINE_STYLE, LineStyle
from chartscale.validation import ensure_scale_covers_range

RANGE_MODE_EDGE_FLEX = 0.5


@dataclass(frozen=True)
class LineSegment:
    index: int
    from_ratio: float
    to_ratio: float | None
    point_mode: PointMode


@dataclass(frozen=True)
class BlankSlot:
    """Placeholder keeping the slot width of a missing sample."""

    index: int


@dataclass(frozen=True)
class AreaSegment:
    index: int
    from_ratio: float
    to_ratio: float


@dataclass(frozen=True)
class LineSeriesLayout:
    dataset: Dataset
    slots: tuple[LineSegment | BlankSlot, ...]
    areas: tuple[AreaSegment, ...] | None
    flex: int
    edge_flex: float


@dataclass(frozen=True)
class LineChartLayout:
    scale: Scale
    value_axis_mode: ValueAxisMode
    category_axis_mode: CategoryAxisMode
    style: LineStyle
    series: tuple[LineSeriesLayout, ...]


def build_line_chart(
    datasets: Sequence[Dataset],
    scale: Scale | Mapping[str, Any] | None,
    *,
    value_axis_mode: ValueAxisMode = "normal",
    category_axis_mode: CategoryAxisMode = "point",
    show_points: bool = True,
    show_area: bool = False,
    style: LineStyle = DEFAULT_LINE_STYLE,
) -> LineChartLayout:
    """Lay out line (and optionally area) segments for every dataset.

    The scale is only validated when at least one sample is present; a chart
    whose datasets are all missing renders blank slots.
    """

    check_mode(value_axis_mode, VALUE_AXIS_MODES, label="value axis mode")
    check_mode(category_axis_mode, CATEGORY_AXIS_MODES, label="category axis mode")
    resolved = coerce_scale(scale)
    if resolved is None:
        raise MissingRequiredInput("scale is required")
    if has_samples(datasets):
        ensure_scale_covers_range(resolved, datasets, totalize=False)

    inverted = value_axis_mode == "inverted"
    edge_flex = RANGE_MODE_EDGE_FLEX if category_axis_mode == "range" else 0.0
    series = tuple(
        LineSeriesLayout(
            dataset=dataset,
            slots=tuple(line_slots(dataset.samples(), resolved, inverted=inverted, show_points=show_points)),
            areas=tuple(area_segments(dataset.samples(), resolved, inverted=inverted)) if show_area else None,
            flex=max(0, len(dataset) - 1),
            edge_flex=edge_flex,
        )
        for dataset in datasets
    )
    return LineChartLayout(
        scale=resolved,
        value_axis_mode=value_axis_mode,
        category_axis_mode=category_axis_mode,
        style=style,
        series=series,
    )


def line_slots(
    values: Sequence[float | None],
    scale: Scale,
    *,
    inverted: bool = False,
    show_points: bool = True,
) -> list[LineSegment | BlankSlot]:
    """One slot per sample index.

    A missing sample leaves a blank slot. A present sample followed by a
    missing one draws nothing past the first index, so the trailing slot is
    dropped; at index 0 it still places a lone point.
    """

    out: list[LineSegment | BlankSlot] = []
    for index, value in enumerate(values):
        if value is None:
            out.append(BlankSlot(index=index))
            continue
        to_value = _at(values, index + 1)
        if index > 0 and to_value is None:
            continue
        ratios = endpoint_ratios(value, to_value, scale.min, scale.max, inverted)
        position_mode: PointMode = "both" if _at(values, index + 2) is None else "from"
        out.append(
            LineSegment(
                index=index,
                from_ratio=ratios.from_ratio,
                to_ratio=ratios.to_ratio,
                point_mode=position_mode if show_points else "none",
            )
        )
    return out


def area_segments(values: Sequence[float | None], scale: Scale, *, inverted: bool = False) -> list[AreaSegment]:
    out: list[AreaSegment] = []
    for index, value in enumerate(values):
        to_value = _at(values, index + 1)
        if value is None or to_value is None:
            continue
        ratios = endpoint_ratios(value, to_value, scale.min, scale.max, inverted)
        assert ratios.to_ratio is not None
        out.append(AreaSegment(index=index, from_ratio=ratios.from_ratio, to_ratio=ratios.to_ratio))
    return out


def _at(values: Sequence[float | None], index: int) -> float | None:
    if index >= len(values):
        return None
    return values[index]
