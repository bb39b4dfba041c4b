"""Volatility-adaptive exponential smoothing (Kaufman-style efficiency ratio)."""

from __future__ import annotations

from collections.abc import Sequence

from .common import OptionalFloat, is_present, resolve_window


def smoothing_bounds(fast_period, slow_period) -> tuple[float, float]:
    """Return ``(fast_sc, slow_sc)`` after clamping the two periods.

    ``fast`` is floored at 1 and ``slow`` is forced to at least ``fast + 1``.
    """
    fast = max(1.0, float(fast_period))
    slow = max(fast + 1.0, float(slow_period))
    return 2.0 / (fast + 1.0), 2.0 / (slow + 1.0)


def efficiency_ratio(window_values: Sequence[float]) -> float:
    """Return net change over path length for ``window_values``, in ``[0, 1]``."""
    if len(window_values) < 2:
        return 0.0
    change = abs(window_values[-1] - window_values[0])
    volatility = 0.0
    for idx in range(1, len(window_values)):
        volatility += abs(window_values[idx] - window_values[idx - 1])
    if volatility == 0:
        return 0.0
    return change / volatility


def smoothing_constant(efficiency: float, fast_sc: float, slow_sc: float) -> float:
    """Return the squared blend between the slow and fast smoothing constants."""
    return (efficiency * (fast_sc - slow_sc) + slow_sc) ** 2


def adaptive_smoothing_series(
    values: Sequence[OptionalFloat],
    window=14,
    fast_period=2,
    slow_period=30,
) -> list[OptionalFloat]:
    """Filter ``values`` with an efficiency-ratio driven exponential smoother.

    Absent inputs produce absent outputs and are invisible to the filter. The
    first present value seeds the filter. The lookback is a span of positions
    ``max(0, i - window + 1)..i``, so missing samples inside it shrink the
    number of values used for the efficiency ratio.
    """
    window_i = resolve_window(window, 2)
    fast_sc, slow_sc = smoothing_bounds(fast_period, slow_period)
    out: list[OptionalFloat] = [None] * len(values)

    previous: float | None = None
    for index, current in enumerate(values):
        if not is_present(current):
            continue
        current = float(current)

        if previous is None:
            out[index] = current
            previous = current
            continue

        start = max(0, index - window_i + 1)
        window_values = [float(v) for v in values[start : index + 1] if is_present(v)]
        if len(window_values) < 2:
            out[index] = current
            previous = current
            continue

        sc = smoothing_constant(efficiency_ratio(window_values), fast_sc, slow_sc)
        previous = previous + sc * (current - previous)
        out[index] = previous
    return out
