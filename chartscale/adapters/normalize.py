from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from chartscale.datasets import DEFAULT_PRIMARY_COLOR, DEFAULT_SECONDARY_COLOR, Dataset
from chartscale.errors import ChartDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


_DATASET_KEYS = frozenset({"values", "primary_color", "secondary_color", "name"})


def normalize_dataset(
    values: Any = None,
    *,
    data: Any = None,
    primary_color: str = DEFAULT_PRIMARY_COLOR,
    secondary_color: str = DEFAULT_SECONDARY_COLOR,
    name: str | None = None,
) -> Dataset:
    """Coerce a 1-D sample sequence into a :class:`Dataset`.

    Accepts lists (``None`` marks a missing sample), numpy arrays, Decimal
    values, torch tensors, pandas Series, or a column of ``data`` when it is
    a DataFrame. Non-finite samples are treated as missing.
    """

    raw = _resolve_input(values, data=data)
    if raw is None:
        raise ChartDataError("values input is required")

    arr = _coerce_1d_numeric(raw, label=name or "values")
    mask = np.isfinite(arr)
    arr = np.where(mask, arr, np.nan)
    arr.setflags(write=False)
    mask.setflags(write=False)
    return Dataset(
        values=arr,
        mask=mask,
        primary_color=_coerce_color(primary_color, "primary_color"),
        secondary_color=_coerce_color(secondary_color, "secondary_color"),
        name=name,
    )


def normalize_datasets(datasets: Any) -> list[Dataset]:
    """Normalize a sequence of datasets given as Dataset objects, mappings or raw sequences."""

    if datasets is None:
        raise ChartDataError("datasets input is required")
    if isinstance(datasets, (str, bytes, bytearray)) or not isinstance(datasets, Sequence):
        raise ChartDataError(f"datasets must be a sequence, got {type(datasets)!r}")

    out: list[Dataset] = []
    for i, item in enumerate(datasets):
        if isinstance(item, Dataset):
            out.append(item)
            continue
        if isinstance(item, Mapping):
            unknown = set(item) - _DATASET_KEYS
            if unknown:
                raise ChartDataError(f"dataset {i} has unknown keys: {sorted(unknown)}")
            if "values" not in item:
                raise ChartDataError(f"dataset {i} is missing `values`")
            out.append(
                normalize_dataset(
                    item["values"],
                    primary_color=item.get("primary_color", DEFAULT_PRIMARY_COLOR),
                    secondary_color=item.get("secondary_color", DEFAULT_SECONDARY_COLOR),
                    name=item.get("name"),
                )
            )
            continue
        out.append(normalize_dataset(item))
    return out


def _resolve_input(values: Any, *, data: Any) -> Any:
    if data is not None:
        if pd is None:
            raise ChartDataError("pandas is required when using `data=`")
        if not isinstance(data, pd.DataFrame):
            raise ChartDataError("`data` must be a pandas DataFrame")
        if isinstance(values, str):
            if values not in data.columns:
                raise ChartDataError(f"column not found: {values}")
            return data[values]
        if values is None:
            numeric_cols = [c for c in data.columns if _is_numeric_dtype(data[c])]
            if len(numeric_cols) != 1:
                raise ChartDataError("when values is omitted, data must have exactly one numeric column")
            return data[numeric_cols[0]]
        return values

    if pd is not None and isinstance(values, pd.DataFrame):
        numeric_cols = [c for c in values.columns if _is_numeric_dtype(values[c])]
        if len(numeric_cols) != 1:
            raise ChartDataError("DataFrame input must contain exactly one numeric column")
        return values[numeric_cols[0]]

    return values


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    return bool(pd.api.types.is_numeric_dtype(series))


def _coerce_color(color: Any, label: str) -> str:
    if not isinstance(color, str) or not color.strip():
        raise ChartDataError(f"{label} must be a non-empty string")
    return color


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy().copy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(dtype=object, na_value=None), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.empty(len(value), dtype=object)
        for i, item in enumerate(value):
            arr[i] = item
        return _coerce_ndarray(arr, label=label)

    raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f"}:
        return arr.astype(np.float64, copy=True)
    if arr.dtype.kind == "b":
        raise ChartDataError(f"{label} must be numeric, got booleans")

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, bool) or isinstance(raw, (str, bytes)):
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
