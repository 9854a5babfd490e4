from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from chartscale.errors import DegenerateRange


@dataclass(frozen=True)
class SegmentRatios:
    """Fractions of a bar track; the three parts sum to 1."""

    positive: float
    negative: float
    empty: float

    @property
    def filled(self) -> float:
        return self.positive


@dataclass(frozen=True)
class StackRatios:
    segments: tuple[float, ...]
    total: float
    empty: float


@dataclass(frozen=True)
class EndpointRatios:
    from_ratio: float
    to_ratio: float | None


def _span(scale_min: float, scale_max: float) -> float:
    span = float(scale_max) - float(scale_min)
    if span == 0:
        raise DegenerateRange(f"scale spans zero width at {scale_min}")
    return span


def simple_ratio(value: float, scale_min: float, scale_max: float) -> SegmentRatios:
    ratio = (float(value) - scale_min) / _span(scale_min, scale_max)
    return SegmentRatios(positive=ratio, negative=0.0, empty=1.0 - ratio)


def split_ratio(value: float, scale_min: float, scale_max: float) -> SegmentRatios:
    """Split a clustered bar into positive, negative and empty track fractions.

    For a positive value ``negative`` is the share of the track below zero,
    independent of the bar itself. For a negative value ``negative`` is the
    distance from ``scale_min`` up to the value and ``positive`` is the value's
    own magnitude, so the fill sits against the zero baseline. The two cases
    are deliberately not symmetric; mixed-sign charts line up only with this
    exact form. Results are not clamped.
    """

    span = _span(scale_min, scale_max)
    value = float(value)
    if value > 0:
        negative = abs(scale_min - max(0.0, scale_min)) / span
        positive = (value - scale_min) / span - negative
    elif value == 0:
        negative = 0.0
        positive = 0.0
    else:
        negative = abs(scale_min - value) / span
        positive = abs(value) / span
    return SegmentRatios(positive=positive, negative=negative, empty=1.0 - positive - negative)


def stacked_ratios(values: Sequence[float | None], scale_min: float, scale_max: float) -> StackRatios:
    """Ratios for one stacked bar; missing values add nothing to the stack."""

    span = _span(scale_min, scale_max)
    present = [0.0 if v is None else float(v) for v in values]
    total = (sum(present) - scale_min) / span
    segments = tuple(0.0 if v is None else (float(v) - scale_min) / span for v in values)
    return StackRatios(segments=segments, total=total, empty=1.0 - total)


def endpoint_ratios(
    from_value: float,
    to_value: float | None,
    scale_min: float,
    scale_max: float,
    inverted: bool = False,
) -> EndpointRatios:
    span = _span(scale_min, scale_max)
    from_ratio = (float(from_value) - scale_min) / span
    to_ratio = None if to_value is None else (float(to_value) - scale_min) / span
    if inverted:
        from_ratio = 1.0 - from_ratio
        if to_ratio is not None:
            to_ratio = 1.0 - to_ratio
    return EndpointRatios(from_ratio=from_ratio, to_ratio=to_ratio)
