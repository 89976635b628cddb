"""Histogram: value distribution of raster samples and its quantile breaks."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class HistogramLike(Protocol):
    """What classifiers and color maps need from a histogram."""

    def get_quantile_breaks(self, count: int) -> list: ...

    def values(self) -> list: ...


class Histogram:
    """Exact histogram of sample values, backed by sorted numpy arrays.

    Stores each distinct value once with its occurrence count. Integer
    input stays integer, so quantile breaks come back as ints.
    """

    __slots__ = ("_values", "_counts")

    def __init__(self, values: np.ndarray, counts: np.ndarray) -> None:
        if len(values) != len(counts):
            raise ValueError(
                f"values and counts must have the same length, "
                f"got {len(values)} and {len(counts)}."
            )
        order = np.argsort(values, kind="stable")
        self._values: np.ndarray = np.asarray(values)[order]
        self._counts: np.ndarray = np.asarray(counts, dtype=np.int64)[order]

    @classmethod
    def from_values(cls, data: Any, no_data: float | int | None = None) -> Histogram:
        """Count the finite samples in ``data``, skipping NaN and ``no_data``."""
        arr = np.asarray(data).ravel()
        if arr.dtype.kind not in "iuf":
            raise TypeError(
                f"Histogram samples must be numeric, got dtype {arr.dtype}."
            )
        if arr.dtype.kind == "f":
            arr = arr[np.isfinite(arr)]
        if no_data is not None:
            arr = arr[arr != no_data]
        values, counts = np.unique(arr, return_counts=True)
        return cls(values, counts)

    @property
    def is_integral(self) -> bool:
        return self._values.dtype.kind in "iu"

    def __len__(self) -> int:
        return len(self._values)

    def values(self) -> list:
        """Distinct sample values, ascending."""
        return self._values.tolist()

    def item_count(self, value: float | int) -> int:
        idx = np.searchsorted(self._values, value)
        if idx < len(self._values) and self._values[idx] == value:
            return int(self._counts[idx])
        return 0

    def total_count(self) -> int:
        return int(self._counts.sum())

    def min_value(self) -> float | int:
        self._require_data()
        return self._values[0].item()

    def max_value(self) -> float | int:
        self._require_data()
        return self._values[-1].item()

    def get_quantile_breaks(self, count: int) -> list:
        """Return up to ``count`` ascending breaks splitting the samples evenly.

        Break ``i`` is the observed value at cumulative fraction
        ``(i + 1) / count``. Heavily repeated values can make neighbouring
        quantiles coincide; duplicates are dropped, so fewer than ``count``
        breaks may come back.
        """
        self._require_data()
        if count < 1:
            raise ValueError(f"Quantile break count must be at least 1, got {count}.")
        cumulative = np.cumsum(self._counts)
        total = cumulative[-1]
        targets = np.arange(1, count + 1) / count * total
        # first value whose cumulative count reaches the target ("lower" quantile)
        idx = np.searchsorted(cumulative, targets - 1e-9 * total, side="left")
        idx = np.clip(idx, 0, len(self._values) - 1)
        breaks = np.unique(self._values[idx])
        return breaks.tolist()

    def _require_data(self) -> None:
        if len(self._values) == 0:
            raise ValueError("Histogram is empty. Add at least one finite sample.")
