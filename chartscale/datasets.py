from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


DEFAULT_PRIMARY_COLOR = "#CBDDE6"
DEFAULT_SECONDARY_COLOR = "#A2C3D2"


@dataclass(frozen=True)
class Dataset:
    """Ordered samples for one series; missing samples are NaN with ``mask`` False."""

    values: np.ndarray
    mask: np.ndarray
    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    name: str | None = None

    def __len__(self) -> int:
        return int(self.values.size)

    def sample(self, index: int) -> float | None:
        if index < 0 or index >= self.values.size or not self.mask[index]:
            return None
        return float(self.values[index])

    def samples(self) -> list[float | None]:
        return [float(v) if present else None for v, present in zip(self.values.tolist(), self.mask.tolist())]

    def present_values(self) -> np.ndarray:
        return self.values[self.mask]


@dataclass(frozen=True)
class Datum:
    value: float | None
    primary_color: str
    secondary_color: str
    name: str | None = None


def category_count(datasets: Sequence[Dataset]) -> int:
    return max((len(d) for d in datasets), default=0)


def resolve_datasets(datasets: Sequence[Dataset]) -> list[list[Datum]]:
    """Transpose datasets into one list of data per category index.

    Shorter datasets contribute a missing datum at indices they do not reach,
    so every category holds exactly one datum per dataset.
    """

    out: list[list[Datum]] = []
    for index in range(category_count(datasets)):
        out.append(
            [
                Datum(
                    value=dataset.sample(index),
                    primary_color=dataset.primary_color,
                    secondary_color=dataset.secondary_color,
                    name=dataset.name,
                )
                for dataset in datasets
            ]
        )
    return out
