from __future__ import annotations

import unittest

from chartscale import (
    AxisVisibility,
    ChartDataError,
    InvalidScale,
    MissingRequiredInput,
    Scale,
    build_axes_layout,
    category_units,
    find_decimal_places,
    value_labels,
    value_ticks,
    value_units,
)
from chartscale.axis import format_value_label


class ValueAxisTests(unittest.TestCase):
    def test_whole_units_sum_to_scale_span(self) -> None:
        units = value_units(Scale(0.0, 10.0, 1.0))
        self.assertEqual(units, [1.0] * 10)
        self.assertAlmostEqual(sum(units), 10.0, places=12)

    def test_remainder_unit_is_appended_and_inverted(self) -> None:
        scale = Scale(0.0, 10.0, 3.0)
        self.assertEqual(value_units(scale), [3.0, 3.0, 3.0, 1.0])
        self.assertEqual(value_units(scale, inverted=True), [1.0, 3.0, 3.0, 3.0])
        self.assertEqual(value_ticks(scale), [0.0, 3.0, 6.0, 9.0, 10.0])
        self.assertEqual(value_labels(scale), ["0", "3", "6", "9", "10"])
        self.assertEqual(value_labels(scale, inverted=True), ["10", "9", "6", "3", "0"])

    def test_float_noise_does_not_add_a_sliver_unit(self) -> None:
        scale = Scale(0.0, 0.3, 0.1)
        units = value_units(scale)
        self.assertEqual(len(units), 3)
        self.assertAlmostEqual(sum(units), 0.3, places=12)
        self.assertEqual(value_labels(scale), ["0.0", "0.1", "0.2", "0.3"])

    def test_labels_use_unit_decimal_places(self) -> None:
        self.assertEqual(value_labels(Scale(-1.0, 1.0, 0.5)), ["-1.0", "-0.5", "0.0", "0.5", "1.0"])

    def test_labels_formatter_receives_fixed_decimal_string(self) -> None:
        labels = value_labels(Scale(0.0, 10.0, 5.0), formatter=lambda s: s + "%")
        self.assertEqual(labels, ["0%", "5%", "10%"])

    def test_unusable_unit_is_rejected(self) -> None:
        with self.assertRaises(InvalidScale):
            value_units(Scale(0.0, 10.0, 0.0))
        with self.assertRaises(InvalidScale):
            value_ticks(Scale(0.0, 10.0, 10.0))

    def test_negative_zero_label_is_normalized(self) -> None:
        self.assertEqual(format_value_label(-0.0001, 2), "0.00")

    def test_find_decimal_places(self) -> None:
        self.assertEqual(find_decimal_places(1.0), 0)
        self.assertEqual(find_decimal_places(10.0), 0)
        self.assertEqual(find_decimal_places(0.5), 1)
        self.assertEqual(find_decimal_places(0.25), 2)
        self.assertEqual(find_decimal_places(-0.005), 3)


class CategoryAxisTests(unittest.TestCase):
    def test_point_mode_has_one_unit_fewer_than_labels(self) -> None:
        self.assertEqual(category_units(4, "point"), [1.0, 1.0, 1.0])
        self.assertEqual(category_units(4, "range"), [1.0, 1.0, 1.0, 1.0])

    def test_empty_axis_yields_no_units(self) -> None:
        self.assertEqual(category_units(0, "range"), [])
        self.assertEqual(category_units(0, "point"), [])

    def test_unknown_mode_is_rejected(self) -> None:
        with self.assertRaises(ChartDataError):
            category_units(3, "band")  # type: ignore[arg-type]


class AxesLayoutTests(unittest.TestCase):
    def test_vertical_layout_puts_values_on_y_top_down(self) -> None:
        layout = build_axes_layout(Scale(0.0, 10.0, 5.0), ["a", "b", "c"])
        self.assertIs(layout.category_axis, layout.x)
        self.assertEqual(layout.x.units, (1.0, 1.0, 1.0))
        self.assertEqual(layout.x.mode, "range")
        self.assertEqual(layout.x.edge_margin, 0.0)
        self.assertEqual(layout.y.labels, ("10", "5", "0"))
        self.assertEqual(layout.y.units, (5.0, 5.0))
        self.assertEqual(layout.y.mode, "point")
        self.assertEqual(layout.y.edge_margin, 6.0)

    def test_horizontal_layout_puts_values_on_x_left_to_right(self) -> None:
        layout = build_axes_layout(
            {"min": 0, "max": 10, "unit": 5},
            ["a", "b"],
            orientation="horizontal",
            category_axis_mode="point",
        )
        self.assertIs(layout.value_axis, layout.x)
        self.assertEqual(layout.x.labels, ("0", "5", "10"))
        self.assertEqual(layout.x.edge_margin, 20.0)
        self.assertEqual(layout.y.units, (1.0,))
        self.assertEqual(layout.y.edge_margin, 6.0)

    def test_inverted_value_axis_runs_bottom_up_on_screen(self) -> None:
        layout = build_axes_layout(Scale(0.0, 10.0, 3.0), ["a"], value_axis_mode="inverted")
        self.assertEqual(layout.y.labels, ("0", "3", "6", "9", "10"))
        self.assertEqual(layout.y.units, (3.0, 3.0, 3.0, 1.0))

    def test_hidden_labels_remove_edge_margin(self) -> None:
        layout = build_axes_layout(
            Scale(0.0, 10.0, 5.0),
            ["a", "b"],
            value_visibility=AxisVisibility(labels=False),
        )
        self.assertEqual(layout.y.edge_margin, 0.0)
        self.assertFalse(layout.y.visibility.labels)
        self.assertTrue(layout.y.visibility.gridlines)

    def test_value_label_override(self) -> None:
        layout = build_axes_layout(Scale(0.0, 10.0, 5.0), ["a"], value_labels_override=["lo", "mid", "hi"])
        self.assertEqual(layout.y.labels, ("hi", "mid", "lo"))

    def test_missing_inputs_are_rejected(self) -> None:
        with self.assertRaises(MissingRequiredInput):
            build_axes_layout(None, ["a"])
        with self.assertRaises(MissingRequiredInput):
            build_axes_layout(Scale(0.0, 10.0, 5.0), None)
        with self.assertRaises(ChartDataError):
            build_axes_layout(Scale(0.0, 10.0, 5.0), ["a"], orientation="diagonal")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
