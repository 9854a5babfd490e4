from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from chartscale.datasets import Dataset, category_count


@dataclass(frozen=True)
class DataRange:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


def has_samples(datasets: Sequence[Dataset]) -> bool:
    return any(bool(np.any(d.mask)) for d in datasets)


def resolve_range(datasets: Sequence[Dataset], totalize: bool = False) -> DataRange | None:
    """Return the extent of all present samples, or ``None`` when there are none.

    With ``totalize`` the upper bound is the largest per-category sum across
    datasets (stacked bars), while the lower bound stays the smallest single
    sample so the most negative bar keeps its room below the baseline.
    """

    if not has_samples(datasets):
        return None

    vmin = min(float(np.min(d.present_values())) for d in datasets if np.any(d.mask))
    if not totalize:
        vmax = max(float(np.max(d.present_values())) for d in datasets if np.any(d.mask))
        return DataRange(min=vmin, max=vmax)

    totals = np.zeros(category_count(datasets), dtype=np.float64)
    for d in datasets:
        totals[: len(d)] += np.where(d.mask, d.values, 0.0)
    return DataRange(min=vmin, max=float(np.max(totals)))
