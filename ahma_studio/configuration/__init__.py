"""Typed configuration API."""

from ahma_studio.configuration.loader import load_runtime_config, load_yaml_config
from ahma_studio.configuration.schema import (
    IndicatorSettings,
    OutputConfig,
    RuntimeConfig,
    SystemConfig,
)
from ahma_studio.configuration.validate import validate_runtime_config

__all__ = [
    "IndicatorSettings",
    "OutputConfig",
    "RuntimeConfig",
    "SystemConfig",
    "load_runtime_config",
    "load_yaml_config",
    "validate_runtime_config",
]
