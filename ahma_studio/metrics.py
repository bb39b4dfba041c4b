"""Latest-bar metrics and price/AHMA crossover detection."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

from ahma_studio.indicators.common import OptionalFloat

BULLISH = "bullish"
BEARISH = "bearish"
MISSING_TEXT = "-"


@dataclass(frozen=True, slots=True)
class CrossSignal:
    """Most recent bar where price crossed the AHMA."""

    kind: str
    index: int


@dataclass(frozen=True, slots=True)
class IndicatorSnapshot:
    latest_price: float | None = None
    latest_ahma: float | None = None
    slope: float | None = None
    spread_pct: float | None = None
    cross: CrossSignal | None = None
    cross_label: str | None = None
    bars_since_cross: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _finite(value) -> bool:
    return value is not None and math.isfinite(value)


def resolve_labels(labels: Sequence[str] | None, count: int) -> list[str]:
    """Return ``labels`` when they match ``count``, else ``Point 1..Point N``."""
    if labels is not None and len(labels) == count:
        return list(labels)
    return [f"Point {index + 1}" for index in range(count)]


def find_latest_cross(
    prices: Sequence[float],
    ahma: Sequence[OptionalFloat],
) -> CrossSignal | None:
    """Scan backwards for the most recent price/AHMA crossover."""
    for index in range(len(prices) - 1, 0, -1):
        if index >= len(ahma):
            continue
        price = prices[index]
        prev_price = prices[index - 1]
        indicator = ahma[index]
        prev_indicator = ahma[index - 1]
        if not (
            _finite(indicator)
            and _finite(prev_indicator)
            and _finite(price)
            and _finite(prev_price)
        ):
            continue

        current_diff = price - indicator
        previous_diff = prev_price - prev_indicator
        if current_diff >= 0 and previous_diff < 0:
            return CrossSignal(kind=BULLISH, index=index)
        if current_diff <= 0 and previous_diff > 0:
            return CrossSignal(kind=BEARISH, index=index)
    return None


def build_snapshot(
    labels: Sequence[str] | None,
    prices: Sequence[float],
    ahma: Sequence[OptionalFloat],
) -> IndicatorSnapshot:
    """Summarize the latest bar: price, AHMA, slope, spread and last crossover."""
    count = len(prices)
    if count == 0:
        return IndicatorSnapshot()

    names = resolve_labels(labels, count)
    last = count - 1
    latest_price = prices[last] if _finite(prices[last]) else None
    latest_ahma = ahma[last] if last < len(ahma) else None
    previous_ahma = ahma[last - 1] if 0 < last <= len(ahma) else None

    slope = None
    if latest_ahma is not None and previous_ahma is not None:
        slope = latest_ahma - previous_ahma

    spread_pct = None
    if latest_price is not None and latest_ahma is not None and latest_ahma != 0:
        spread_pct = (latest_price - latest_ahma) / latest_ahma * 100.0

    cross = find_latest_cross(prices, ahma)
    return IndicatorSnapshot(
        latest_price=latest_price,
        latest_ahma=latest_ahma,
        slope=slope,
        spread_pct=spread_pct,
        cross=cross,
        cross_label=names[cross.index] if cross is not None else None,
        bars_since_cross=count - cross.index - 1 if cross is not None else None,
    )


def format_price(value: float | None, decimals: int = 2) -> str:
    if value is None:
        return MISSING_TEXT
    return f"${value:,.{decimals}f}"


def format_signed(value: float | None, decimals: int = 2, suffix: str = "") -> str:
    if value is None:
        return MISSING_TEXT
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.{decimals}f}{suffix}"


def format_snapshot(snapshot: IndicatorSnapshot, decimals: int = 2) -> list[str]:
    """Render the snapshot as ``Name: value`` lines."""
    if snapshot.cross is not None and snapshot.cross_label:
        signal = f"{snapshot.cross.kind.capitalize()} crossover on {snapshot.cross_label}"
    else:
        signal = "No crossover detected"
    bars = MISSING_TEXT if snapshot.bars_since_cross is None else f"{snapshot.bars_since_cross} bars"
    return [
        f"Last Close: {format_price(snapshot.latest_price, decimals)}",
        f"Last AHMA: {format_price(snapshot.latest_ahma, decimals)}",
        f"AHMA Slope: {format_signed(snapshot.slope, decimals)}",
        f"Price vs AHMA: {format_signed(snapshot.spread_pct, 2, '%')}",
        f"Recent Signal: {signal}",
        f"Bars Since Signal: {bars}",
    ]
