"""Polars frame assembly and export for AHMA results."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import polars as pl

from ahma_studio.indicators.ahma import AhmaResult
from ahma_studio.metrics import resolve_labels

FRAME_COLUMNS: tuple[str, ...] = ("label", "close", "hma", "ahma")


def indicator_frame(
    labels: Sequence[str] | None,
    prices: Sequence[float],
    result: AhmaResult,
) -> pl.DataFrame:
    """Return a ``label, close, hma, ahma`` frame; absent values become nulls."""
    count = len(prices)
    return pl.DataFrame(
        {
            "label": resolve_labels(labels, count),
            "close": [float(value) for value in prices],
            "hma": list(result.hma),
            "ahma": list(result.ahma),
        },
        schema={
            "label": pl.Utf8,
            "close": pl.Float64,
            "hma": pl.Float64,
            "ahma": pl.Float64,
        },
    )


def write_indicator_frame(frame: pl.DataFrame, path: str | Path) -> Path:
    """Write ``frame`` as Parquet for ``.parquet`` paths, CSV otherwise."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    if target.suffix.lower() == ".parquet":
        frame.write_parquet(target)
    else:
        frame.write_csv(target)
    return target
