"""Class-attribute config shim backed by typed runtime configuration."""

from __future__ import annotations

import os

from ahma_studio.configuration.loader import load_runtime_config

_CONFIG_PATH = os.getenv("AHMA_CONFIG_PATH") or None
_RUNTIME = load_runtime_config(config_path=_CONFIG_PATH)


class BaseConfig:
    """Shared configuration fields."""

    LOG_LEVEL = _RUNTIME.system.log_level
