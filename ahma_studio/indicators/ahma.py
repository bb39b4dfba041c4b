"""Adaptive Hull Moving Average (AHMA) pipeline.

``calculate_ahma`` wires the three stages together:

1. Hull moving average of the sanitized prices (``hull_length``).
2. Efficiency-ratio adaptive smoothing of the HMA
   (``adaptive_window``, ``fast_period``, ``slow_period``).

The function is pure and never raises for any price sequence or option values:
bad samples become missing, bad options are clamped or fall back to defaults.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

from .accelerated import hull_moving_average_numpy, to_optional_list
from .adaptive import adaptive_smoothing_series
from .common import OptionalFloat, resolve_window, sanitize_series
from .moving_average import hull_moving_average_series

LOGGER = logging.getLogger(__name__)

BACKENDS: tuple[str, ...] = ("python", "numpy")

_OPTION_ALIASES = {
    "hullLength": "hull_length",
    "adaptiveWindow": "adaptive_window",
    "fastPeriod": "fast_period",
    "slowPeriod": "slow_period",
}


@dataclass(slots=True)
class AhmaOptions:
    """User-facing AHMA parameters; any field may hold an out-of-range value."""

    hull_length: Any = 21
    adaptive_window: Any = 14
    fast_period: Any = 2
    slow_period: Any = 30
    backend: str = "python"


@dataclass(frozen=True, slots=True)
class ResolvedAhmaOptions:
    """Clamped parameters actually used by the pipeline."""

    hull_length: int
    adaptive_window: int
    fast_period: float
    slow_period: float
    backend: str


@dataclass(frozen=True, slots=True)
class AhmaResult:
    """Two series index-aligned with the input prices."""

    hma: list[OptionalFloat]
    ahma: list[OptionalFloat]

    def __len__(self) -> int:
        return len(self.hma)

    def to_dict(self) -> dict[str, list[OptionalFloat]]:
        return {"hma": list(self.hma), "ahma": list(self.ahma)}


_DEFAULTS = AhmaOptions()


def _finite_number(value: Any, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return float(default)
    try:
        parsed = float(value)
    except (TypeError, ValueError, OverflowError):
        return float(default)
    return parsed if math.isfinite(parsed) else float(default)


def _options_from_mapping(raw: Mapping[str, Any]) -> AhmaOptions:
    allowed = {item.name for item in fields(AhmaOptions)}
    kwargs: dict[str, Any] = {}
    for key, value in raw.items():
        name = _OPTION_ALIASES.get(str(key), str(key))
        if name in allowed and value is not None:
            kwargs[name] = value
    return AhmaOptions(**kwargs)


def resolve_options(options: AhmaOptions | Mapping[str, Any] | None = None) -> ResolvedAhmaOptions:
    """Merge ``options`` with defaults and clamp every parameter to its valid range."""
    if options is None:
        raw = AhmaOptions()
    elif isinstance(options, AhmaOptions):
        raw = options
    elif isinstance(options, Mapping):
        raw = _options_from_mapping(options)
    else:
        LOGGER.warning("Ignoring AHMA options of type %s", type(options).__name__)
        raw = AhmaOptions()

    hull_length = resolve_window(_finite_number(raw.hull_length, _DEFAULTS.hull_length), 1)
    adaptive_window = resolve_window(
        _finite_number(raw.adaptive_window, _DEFAULTS.adaptive_window), 2
    )
    fast_period = max(1.0, _finite_number(raw.fast_period, _DEFAULTS.fast_period))
    slow_period = max(
        fast_period + 1.0,
        _finite_number(raw.slow_period, _DEFAULTS.slow_period),
    )
    backend = str(raw.backend or "").strip().lower()
    if backend not in BACKENDS:
        LOGGER.warning("Unknown AHMA backend %r; using 'python'.", raw.backend)
        backend = "python"

    return ResolvedAhmaOptions(
        hull_length=hull_length,
        adaptive_window=adaptive_window,
        fast_period=fast_period,
        slow_period=slow_period,
        backend=backend,
    )


def sanitize_prices(prices: Iterable | None) -> list[OptionalFloat]:
    """Return prices with every non-finite or non-numeric sample set to ``None``."""
    if prices is None:
        return []
    try:
        return sanitize_series(prices)
    except TypeError:
        LOGGER.warning("Price input of type %s is not iterable", type(prices).__name__)
        return []


def calculate_ahma(
    prices: Iterable | None,
    options: AhmaOptions | Mapping[str, Any] | None = None,
) -> AhmaResult:
    """Compute the HMA and AHMA series for ``prices``."""
    resolved = resolve_options(options)
    sanitized = sanitize_prices(prices)

    if resolved.backend == "numpy":
        hma = to_optional_list(hull_moving_average_numpy(sanitized, resolved.hull_length))
    else:
        hma = hull_moving_average_series(sanitized, resolved.hull_length)

    ahma = adaptive_smoothing_series(
        hma,
        resolved.adaptive_window,
        resolved.fast_period,
        resolved.slow_period,
    )
    return AhmaResult(hma=hma, ahma=ahma)


def options_as_dict(options: ResolvedAhmaOptions) -> dict[str, Any]:
    return asdict(options)
