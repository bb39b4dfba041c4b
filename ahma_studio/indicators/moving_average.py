"""Weighted and Hull moving-average series primitives.

Every function returns a list index-aligned with its input. Positions that
cannot be computed (warmup, or a window touching a missing sample) are
``None``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .common import OptionalFloat, is_present, resolve_window, round_half_up


def weighted_moving_average_series(
    values: Sequence[OptionalFloat],
    period,
) -> list[OptionalFloat]:
    """Return the linearly weighted moving average for every index.

    The newest sample in the window gets weight ``period`` and the oldest gets
    weight 1. A window containing a missing sample yields ``None``.
    """
    period_i = resolve_window(period, 1)
    out: list[OptionalFloat] = [None] * len(values)
    if len(values) < period_i:
        return out
    denom = float(period_i * (period_i + 1)) / 2.0

    for index in range(period_i - 1, len(values)):
        weight = period_i
        weighted_sum = 0.0
        valid = True
        for inner in range(index, index - period_i, -1):
            value = values[inner]
            if not is_present(value):
                valid = False
                break
            weighted_sum += float(value) * weight
            weight -= 1
        if valid:
            out[index] = weighted_sum / denom
    return out


def hull_window_lengths(length) -> tuple[int, int, int]:
    """Return ``(full, half, sqrt)`` window lengths for a Hull average."""
    full = resolve_window(length, 1)
    half = max(1, full // 2)
    sqrt_len = max(1, round_half_up(math.sqrt(full)))
    return full, half, sqrt_len


def hull_difference_series(
    wma_half: Sequence[OptionalFloat],
    wma_full: Sequence[OptionalFloat],
) -> list[OptionalFloat]:
    """Return ``2 * half - full`` per index, absent when either side is absent."""
    diff: list[OptionalFloat] = []
    for half, full in zip(wma_half, wma_full):
        if half is None or full is None:
            diff.append(None)
        else:
            diff.append(2.0 * half - full)
    return diff


def hull_moving_average_series(
    values: Sequence[OptionalFloat],
    length,
) -> list[OptionalFloat]:
    """Return the Hull moving average: ``WMA(2*WMA(n/2) - WMA(n), sqrt(n))``."""
    full, half, sqrt_len = hull_window_lengths(length)
    wma_half = weighted_moving_average_series(values, half)
    wma_full = weighted_moving_average_series(values, full)
    diff = hull_difference_series(wma_half, wma_full)
    return weighted_moving_average_series(diff, sqrt_len)
