from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Sequence

from chartscale.datasets import Dataset, Datum, resolve_datasets
from chartscale.modes import DISPLAY_MODES, ORIENTATIONS, DisplayMode, Orientation, check_mode
from chartscale.ratios import SegmentRatios, split_ratio, stacked_ratios
from chartscale.scales import Scale, coerce_scale
from chartscale.style import DEFAULT_BAR_STYLE, BarStyle
from chartscale.validation import ensure_scale_covers_range

BarPiece = Literal["empty", "positive", "negative"]

VERTICAL_PIECE_ORDER: tuple[BarPiece, ...] = ("empty", "positive", "negative")
HORIZONTAL_PIECE_ORDER: tuple[BarPiece, ...] = ("negative", "positive", "empty")


@dataclass(frozen=True)
class BarLayout:
    datum: Datum
    ratios: SegmentRatios
    border_width: float
    margin_start: float
    margin_end: float
    piece_order: tuple[BarPiece, ...]

    def pieces(self) -> list[tuple[BarPiece, float]]:
        """Flex weights in render order (top to bottom, or left to right)."""
        by_name = {"empty": self.ratios.empty, "positive": self.ratios.positive, "negative": self.ratios.negative}
        return [(name, by_name[name]) for name in self.piece_order]


@dataclass(frozen=True)
class StackSegment:
    datum: Datum
    ratio: float
    border_width: float


@dataclass(frozen=True)
class BarClusterLayout:
    index: int
    bars: tuple[BarLayout, ...]
    margin: float


@dataclass(frozen=True)
class BarStackLayout:
    """One stacked bar; ``segments`` are in render order after (or before) the spacer."""

    index: int
    segments: tuple[StackSegment, ...]
    total_ratio: float
    empty_ratio: float
    margin: float
    spacer_first: bool


@dataclass(frozen=True)
class BarChartLayout:
    orientation: Orientation
    display_mode: DisplayMode
    scale: Scale
    groups: tuple[BarClusterLayout, ...] | tuple[BarStackLayout, ...]


def build_bar_chart(
    datasets: Sequence[Dataset],
    scale: Scale | Mapping[str, Any] | None,
    *,
    display_mode: DisplayMode = "clustered",
    orientation: Orientation = "vertical",
    style: BarStyle = DEFAULT_BAR_STYLE,
) -> BarChartLayout:
    """Validate ``scale`` against ``datasets`` and lay out one bar group per category."""

    check_mode(display_mode, DISPLAY_MODES, label="display mode")
    check_mode(orientation, ORIENTATIONS, label="orientation")
    stacked = display_mode == "stacked"
    ensure_scale_covers_range(scale, datasets, totalize=stacked)
    resolved = coerce_scale(scale)
    assert resolved is not None

    vertical = orientation == "vertical"
    categories = resolve_datasets(datasets)
    if stacked:
        groups: Any = tuple(
            _stack(index, data, resolved, vertical=vertical, style=style) for index, data in enumerate(categories)
        )
    else:
        groups = tuple(
            _cluster(index, data, resolved, vertical=vertical, style=style) for index, data in enumerate(categories)
        )
    return BarChartLayout(orientation=orientation, display_mode=display_mode, scale=resolved, groups=groups)


def _cluster(index: int, data: list[Datum], scale: Scale, *, vertical: bool, style: BarStyle) -> BarClusterLayout:
    bar_margin = style.cluster_spacing / 2
    order = VERTICAL_PIECE_ORDER if vertical else HORIZONTAL_PIECE_ORDER
    bars = []
    for i, datum in enumerate(data):
        value = 0.0 if datum.value is None else datum.value
        ratios = split_ratio(value, scale.min, scale.max)
        bars.append(
            BarLayout(
                datum=datum,
                ratios=ratios,
                border_width=style.border_width if ratios.positive else 0.0,
                margin_start=bar_margin if i > 0 else 0.0,
                margin_end=0.0 if i == len(data) - 1 else bar_margin,
                piece_order=order,
            )
        )
    return BarClusterLayout(index=index, bars=tuple(bars), margin=style.spacing / 2)


def _stack(index: int, data: list[Datum], scale: Scale, *, vertical: bool, style: BarStyle) -> BarStackLayout:
    ratios = stacked_ratios([d.value for d in data], scale.min, scale.max)
    segments = [
        StackSegment(datum=datum, ratio=ratio, border_width=style.border_width if ratio else 0.0)
        for datum, ratio in zip(data, ratios.segments)
    ]
    # Vertical stacks are drawn top down: spacer, then the last dataset first.
    if vertical:
        segments.reverse()
    return BarStackLayout(
        index=index,
        segments=tuple(segments),
        total_ratio=ratios.total,
        empty_ratio=ratios.empty,
        margin=style.spacing / 2,
        spacer_first=vertical,
    )
