from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from chartscale import ChartDataError, Dataset, normalize_dataset, normalize_datasets, resolve_datasets


class NormalizeDatasetTests(unittest.TestCase):
    def test_normalize_decimal_and_mask(self) -> None:
        ds = normalize_dataset([Decimal("1.5"), Decimal("2.25"), None, Decimal("3.5")], name="rev")
        self.assertEqual(ds.samples(), [1.5, 2.25, None, 3.5])
        self.assertTrue(np.array_equal(ds.mask, np.asarray([True, True, False, True])))
        self.assertEqual(ds.name, "rev")

    def test_non_finite_samples_are_missing(self) -> None:
        ds = normalize_dataset(np.asarray([1.0, np.inf, np.nan, -2.0]))
        self.assertEqual(ds.samples(), [1.0, None, None, -2.0])
        self.assertEqual(ds.present_values().tolist(), [1.0, -2.0])

    def test_normalized_arrays_are_read_only(self) -> None:
        ds = normalize_dataset([1, 2])
        with self.assertRaises(ValueError):
            ds.values[0] = 5.0

    def test_normalize_torch_tensor(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")

        ds = normalize_dataset(torch.tensor([1, 2, 3], dtype=torch.int64))
        self.assertEqual(ds.values.dtype, np.float64)
        self.assertEqual(ds.samples(), [1.0, 2.0, 3.0])

    def test_normalize_pandas_series_and_dataframe_column(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        ds = normalize_dataset(pd.Series([1.0, None, 3.0]))
        self.assertEqual(ds.samples(), [1.0, None, 3.0])
        df = pd.DataFrame({"label": ["x", "y"], "value": [4, 5]})
        self.assertEqual(normalize_dataset(data=df).samples(), [4.0, 5.0])
        self.assertEqual(normalize_dataset("value", data=df).samples(), [4.0, 5.0])
        with self.assertRaises(ChartDataError):
            normalize_dataset("missing", data=df)

    def test_rejects_bad_inputs(self) -> None:
        with self.assertRaises(ChartDataError):
            normalize_dataset(None)
        with self.assertRaises(ChartDataError):
            normalize_dataset(["a", 1])
        with self.assertRaises(ChartDataError):
            normalize_dataset(np.zeros((2, 2)))
        with self.assertRaises(ChartDataError):
            normalize_dataset([1], primary_color="")

    def test_normalize_datasets_accepts_mappings_and_sequences(self) -> None:
        existing = normalize_dataset([7])
        datasets = normalize_datasets(
            [
                {"values": [1, None], "primary_color": "#111111", "name": "m"},
                [2, 3],
                existing,
            ]
        )
        self.assertEqual(len(datasets), 3)
        self.assertEqual(datasets[0].primary_color, "#111111")
        self.assertEqual(datasets[1].samples(), [2.0, 3.0])
        self.assertIs(datasets[2], existing)
        with self.assertRaisesRegex(ChartDataError, "unknown keys"):
            normalize_datasets([{"values": [1], "colour": "red"}])
        with self.assertRaises(ChartDataError):
            normalize_datasets(None)


class ResolveDatasetsTests(unittest.TestCase):
    def test_transposes_per_category_and_pads_short_datasets(self) -> None:
        a = normalize_dataset([1, 2, 3], primary_color="#AA0000", name="a")
        b = normalize_dataset([4], name="b")
        categories = resolve_datasets([a, b])
        self.assertEqual(len(categories), 3)
        self.assertEqual([d.value for d in categories[0]], [1.0, 4.0])
        self.assertEqual([d.value for d in categories[2]], [3.0, None])
        self.assertEqual(categories[1][0].primary_color, "#AA0000")
        self.assertIsInstance(a, Dataset)

    def test_no_datasets_means_no_categories(self) -> None:
        self.assertEqual(resolve_datasets([]), [])


if __name__ == "__main__":
    unittest.main()
