"""NumPy implementations of the WMA/HMA series primitives.

Missing samples are carried as NaN inside the arrays and converted back to
``None`` at the boundary, so results line up with the pure-Python path.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .common import OptionalFloat, resolve_window
from .moving_average import hull_window_lengths


def _to_np(values) -> np.ndarray:
    return np.asarray(
        [np.nan if value is None else float(value) for value in values],
        dtype=np.float64,
    )


def to_optional_list(arr: np.ndarray) -> list[OptionalFloat]:
    """Convert a float array to ``float | None`` entries (non-finite -> None)."""
    out: list[OptionalFloat] = []
    for value in arr.tolist():
        out.append(value if math.isfinite(value) else None)
    return out


def _wma_array(arr: np.ndarray, period_i: int) -> np.ndarray:
    out = np.full(arr.shape, np.nan, dtype=np.float64)
    if arr.size < period_i:
        return out
    windows = sliding_window_view(arr, period_i)
    finite = np.isfinite(windows)
    valid = finite.all(axis=1)
    weights = np.arange(1, period_i + 1, dtype=np.float64)
    denom = float(period_i * (period_i + 1)) / 2.0
    weighted = np.where(finite, windows, 0.0) @ weights / denom
    out[period_i - 1 :] = np.where(valid, weighted, np.nan)
    return out


def weighted_moving_average_numpy(values: Sequence[OptionalFloat], period) -> np.ndarray:
    """Return the WMA as a float array, NaN where the value is absent."""
    return _wma_array(_to_np(values), resolve_window(period, 1))


def hull_moving_average_numpy(values: Sequence[OptionalFloat], length) -> np.ndarray:
    """Return the Hull moving average as a float array, NaN where absent."""
    full, half, sqrt_len = hull_window_lengths(length)
    arr = _to_np(values)
    diff = 2.0 * _wma_array(arr, half) - _wma_array(arr, full)
    return _wma_array(diff, sqrt_len)
