from chartscale.adapters import normalize_dataset, normalize_datasets
from chartscale.axis import (
    AxesLayout,
    AxisLayout,
    AxisVisibility,
    build_axes_layout,
    category_units,
    find_decimal_places,
    value_labels,
    value_ticks,
    value_units,
)
from chartscale.bars import BarChartLayout, build_bar_chart
from chartscale.datasets import Dataset, Datum, resolve_datasets
from chartscale.errors import ChartDataError, DegenerateRange, InvalidScale, MissingRequiredInput
from chartscale.lines import LineChartLayout, build_line_chart
from chartscale.ranges import DataRange, has_samples, resolve_range
from chartscale.ratios import (
    EndpointRatios,
    SegmentRatios,
    StackRatios,
    endpoint_ratios,
    simple_ratio,
    split_ratio,
    stacked_ratios,
)
from chartscale.scales import Scale, generate_scale
from chartscale.validation import ensure_scale_covers_range

__all__ = [
    "AxesLayout",
    "AxisLayout",
    "AxisVisibility",
    "BarChartLayout",
    "ChartDataError",
    "DataRange",
    "Dataset",
    "Datum",
    "DegenerateRange",
    "EndpointRatios",
    "InvalidScale",
    "LineChartLayout",
    "MissingRequiredInput",
    "Scale",
    "SegmentRatios",
    "StackRatios",
    "build_axes_layout",
    "build_bar_chart",
    "build_line_chart",
    "category_units",
    "endpoint_ratios",
    "ensure_scale_covers_range",
    "find_decimal_places",
    "generate_scale",
    "has_samples",
    "normalize_dataset",
    "normalize_datasets",
    "resolve_datasets",
    "resolve_range",
    "simple_ratio",
    "split_ratio",
    "stacked_ratios",
    "value_labels",
    "value_ticks",
    "value_units",
]
