from __future__ import annotations

from typing import Literal, Sequence

from chartscale.errors import ChartDataError


Orientation = Literal["vertical", "horizontal"]
DisplayMode = Literal["clustered", "stacked"]
CategoryAxisMode = Literal["point", "range"]
ValueAxisMode = Literal["normal", "inverted"]
PointMode = Literal["none", "from", "both"]

ORIENTATIONS = ("vertical", "horizontal")
DISPLAY_MODES = ("clustered", "stacked")
CATEGORY_AXIS_MODES = ("point", "range")
VALUE_AXIS_MODES = ("normal", "inverted")


def check_mode(value: str, allowed: Sequence[str], *, label: str) -> str:
    if value not in allowed:
        raise ChartDataError(f"{label} must be one of {tuple(allowed)}, got {value!r}")
    return value
