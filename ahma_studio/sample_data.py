"""Deterministic sample price series for demos and smoke tests."""

from __future__ import annotations

from datetime import date, timedelta

import numpy as np


def sample_price_series(
    days: int = 180,
    *,
    seed: int = 7,
    start: date = date(2024, 1, 1),
    start_price: float = 430.0,
) -> list[tuple[str, float]]:
    """Return ``(ISO date, close)`` pairs from a seeded random walk with drift."""
    n = max(0, int(days))
    rng = np.random.default_rng(seed)
    drift = 0.0004
    returns = drift + rng.normal(0.0, 0.012, size=n)
    # Slow cycle: alternating trend and chop.
    returns += 0.004 * np.sin(np.arange(n) / 9.0)
    closes = start_price * np.cumprod(1.0 + returns)

    return [
        ((start + timedelta(days=offset)).isoformat(), round(float(close), 2))
        for offset, close in enumerate(closes)
    ]


def sample_series_text(days: int = 180, **kwargs) -> str:
    """Return the sample series as ``date, close`` lines."""
    return "\n".join(f"{label}, {close}" for label, close in sample_price_series(days, **kwargs))
