from chartscale.adapters.normalize import normalize_dataset, normalize_datasets

__all__ = ["normalize_dataset", "normalize_datasets"]
