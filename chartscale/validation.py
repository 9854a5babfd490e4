from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from chartscale.datasets import Dataset
from chartscale.errors import InvalidScale, MissingRequiredInput
from chartscale.ranges import resolve_range
from chartscale.scales import Scale, coerce_scale

LOGGER = logging.getLogger(__name__)


def ensure_scale_covers_range(
    scale: Scale | Mapping[str, Any] | None,
    datasets: Sequence[Dataset],
    totalize: bool = False,
) -> None:
    """Raise unless ``scale`` bounds every sample and has a usable unit.

    Datasets without any present sample have no range to cover; only the
    scale's unit is checked for them.
    """

    resolved = coerce_scale(scale)
    if resolved is None:
        raise MissingRequiredInput("scale is required")

    data_range = resolve_range(datasets, totalize)
    if data_range is None:
        LOGGER.debug("no samples in datasets; skipping scale range checks")
    else:
        if resolved.min > data_range.min:
            raise InvalidScale(
                f"scale.min: {resolved.min}, must be lesser or equal to the minimum value of the range: "
                f"{data_range.min}, range is totalized: {totalize}"
            )
        if resolved.max < data_range.max:
            raise InvalidScale(
                f"scale.max: {resolved.max}, must be greater or equal to the maximum value of the range: "
                f"{data_range.max}, range is totalized: {totalize}"
            )

    if not (0 < resolved.unit < resolved.span):
        raise InvalidScale(
            f"scale.unit: {resolved.unit}, must be within scale range and greater than zero: "
            f"{{min: {resolved.min}, max: {resolved.max}, unit: {resolved.unit}}}, range is totalized: {totalize}"
        )
