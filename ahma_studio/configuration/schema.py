"""Typed runtime configuration schema."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class SystemConfig:
    """System-level runtime settings."""

    log_level: str = "INFO"


@dataclass(slots=True)
class IndicatorSettings:
    """AHMA parameters; clamped by the indicator pipeline, not rejected here."""

    hull_length: int = 21
    adaptive_window: int = 14
    fast_period: float = 2.0
    slow_period: float = 30.0
    backend: str = "python"


@dataclass(slots=True)
class OutputConfig:
    """Export and display settings."""

    format: str = "csv"
    price_decimals: int = 2


@dataclass(slots=True)
class RuntimeConfig:
    """Full runtime configuration bundle."""

    system: SystemConfig = field(default_factory=SystemConfig)
    indicator: IndicatorSettings = field(default_factory=IndicatorSettings)
    output: OutputConfig = field(default_factory=OutputConfig)
