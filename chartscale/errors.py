from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when chart inputs are malformed or violate a geometry contract."""


class MissingRequiredInput(ChartDataError):
    """A required scale or category label input is absent."""


class InvalidScale(ChartDataError):
    """A scale does not cover the data range or has an unusable unit."""


class DegenerateRange(ChartDataError):
    """A range or scale spans zero (or negative) width."""
