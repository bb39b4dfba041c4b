"""Common, dependency-light helpers used by indicator modules."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from decimal import Decimal

OptionalFloat = float | None


def safe_float(value) -> float | None:
    """Return a finite float or ``None`` when ``value`` is not a finite real number.

    ``Decimal`` values count as numbers; strings and booleans are treated as
    missing rather than coerced.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def is_present(value) -> bool:
    """Return True when ``value`` is a usable sample (not absent, finite)."""
    return value is not None and math.isfinite(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero towards +inf."""
    return int(math.floor(float(value) + 0.5))


def resolve_window(value, minimum: int) -> int:
    """Round ``value`` and floor it at ``minimum``."""
    return max(int(minimum), round_half_up(value))


def sanitize_series(values: Iterable) -> list[OptionalFloat]:
    """Map every sample to a finite float or ``None``."""
    return [safe_float(value) for value in values]
