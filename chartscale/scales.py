from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Mapping

import numpy as np

from chartscale.errors import ChartDataError, DegenerateRange
from chartscale.ranges import DataRange

LOGGER = logging.getLogger(__name__)

FLAT_RANGE_PAD_RATIO = 0.05


@dataclass(frozen=True)
class Scale:
    """Axis bounds plus tick granularity.

    A scale may be supplied by the caller, so construction does not check the
    invariants; ``chartscale.validation.ensure_scale_covers_range`` does.
    """

    min: float
    max: float
    unit: float

    @property
    def span(self) -> float:
        return self.max - self.min

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Scale":
        missing = [key for key in ("min", "max", "unit") if key not in raw]
        if missing:
            raise ChartDataError(f"scale is missing keys: {missing}")
        try:
            return cls(min=float(raw["min"]), max=float(raw["max"]), unit=float(raw["unit"]))
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"scale values must be numeric: {dict(raw)!r}") from exc


def coerce_scale(scale: Scale | Mapping[str, Any] | None) -> Scale | None:
    if scale is None or isinstance(scale, Scale):
        return scale
    if isinstance(scale, Mapping):
        return Scale.from_mapping(scale)
    raise ChartDataError(f"unsupported scale type: {type(scale)!r}")


def generate_scale(data_range: DataRange) -> Scale:
    """Produce a readable scale that covers ``data_range``.

    The unit is one tenth of the range's order of magnitude, halved when the
    range fills less than half of that order. The lower bound sits one unit
    below the floored minimum (never below zero for non-negative data) and the
    upper bound is the first whole unit step at or above the maximum.
    """

    vmin = float(data_range.min)
    vmax = float(data_range.max)
    if not (np.isfinite(vmin) and np.isfinite(vmax)):
        raise DegenerateRange(f"range bounds must be finite: min={vmin}, max={vmax}")
    if vmax < vmin:
        raise DegenerateRange(f"range max {vmax} is below range min {vmin}")
    if vmax == vmin:
        pad = max(1.0, abs(vmin) * FLAT_RANGE_PAD_RATIO)
        LOGGER.warning("flat data range at %s; widening upper bound by %s", vmin, pad)
        vmax = vmin + pad

    diff = vmax - vmin
    diff_log = int(np.ceil(np.log10(diff)))
    diff_max = 10.0**diff_log
    diff_min = 10.0 ** (diff_log - 1)
    diff_rounded = _round_half_up(diff / diff_max)
    unit = diff_min if diff_rounded else diff_min / 2

    scale_min = float(np.floor(vmin / unit)) * unit - unit
    if vmin >= 0:
        scale_min = max(0.0, scale_min)

    steps = max(0, math.ceil((vmax - scale_min) / unit))
    scale_max = scale_min + steps * unit
    while scale_max < vmax:
        steps += 1
        scale_max = scale_min + steps * unit

    LOGGER.debug("generated scale min=%s max=%s unit=%s for range %s..%s", scale_min, scale_max, unit, vmin, vmax)
    return Scale(min=scale_min, max=scale_max, unit=unit)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
