"""Runtime configuration validation.

Indicator parameters are clamped by the pipeline and are not checked here;
only tool settings with a closed set of values are validated.
"""

from __future__ import annotations

from ahma_studio.configuration.schema import RuntimeConfig
from ahma_studio.indicators.ahma import BACKENDS

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS: tuple[str, ...] = ("csv", "parquet")


def validate_runtime_config(runtime: RuntimeConfig) -> None:
    """Validate runtime configuration invariants."""
    level = str(runtime.system.log_level or "").strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"system.log_level must be one of: {', '.join(LOG_LEVELS)}.")

    backend = str(runtime.indicator.backend or "").strip().lower()
    if backend not in BACKENDS:
        raise ValueError(f"indicator.backend must be one of: {', '.join(BACKENDS)}.")

    fmt = str(runtime.output.format or "").strip().lower()
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"output.format must be one of: {', '.join(OUTPUT_FORMATS)}.")

    if runtime.output.price_decimals < 0 or runtime.output.price_decimals > 8:
        raise ValueError("output.price_decimals must be in range [0, 8].")
