"""Configuration loader with env overrides."""

import json
import math
import os
from collections.abc import Mapping
from dataclasses import fields
from pathlib import Path
from typing import Any, TypeVar

import yaml
from dotenv import load_dotenv

from ahma_studio.configuration.schema import (
    IndicatorSettings,
    OutputConfig,
    RuntimeConfig,
    SystemConfig,
)
from ahma_studio.indicators.common import round_half_up

T = TypeVar("T")

DEFAULT_CONFIG_PATH = "config.yaml"
ENV_PREFIX = "AHMA_"


def _as_float(value: Any, default: float) -> float:
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return float(default)
    return parsed if math.isfinite(parsed) else float(default)


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(default)


def _as_window(value: Any, default: int) -> int:
    return round_half_up(_as_float(value, default))


def load_yaml_config(
    config_path: str = DEFAULT_CONFIG_PATH, *, required: bool = True
) -> dict[str, Any]:
    """Load YAML config from project root, cwd, or an absolute path.

    When ``required`` is False a missing file yields an empty mapping.
    """
    project_root = Path(__file__).resolve().parents[2]
    raw_path = Path(config_path)
    candidates: list[Path] = []
    if raw_path.is_absolute():
        candidates.append(raw_path)
    else:
        candidates.extend(
            [
                Path.cwd() / config_path,
                project_root / config_path,
                raw_path,
            ]
        )

    path = next((candidate for candidate in candidates if candidate.exists()), None)
    if path is None:
        if not required:
            return {}
        tried = ", ".join(str(candidate.absolute()) for candidate in candidates)
        raise FileNotFoundError(f"Configuration file not found. Tried: {tried}")
    with open(path, encoding="utf-8") as file:
        loaded = yaml.safe_load(file) or {}
    if not isinstance(loaded, dict):
        return {}
    return loaded


def _parse_env_scalar(raw: str) -> Any:
    lowered = raw.strip().lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if raw.strip().startswith(("[", "{")):
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            return raw
    try:
        if "." in raw or "e" in lowered:
            return float(raw)
        return int(raw)
    except ValueError:
        return raw


def _set_nested_value(container: dict[str, Any], path_tokens: list[str], value: Any) -> None:
    cur: dict[str, Any] = container
    for token in path_tokens[:-1]:
        key = token.lower()
        node = cur.get(key)
        if not isinstance(node, dict):
            node = {}
            cur[key] = node
        else:
            node = dict(node)
            cur[key] = node
        cur = node
    cur[path_tokens[-1].lower()] = value


def apply_env_overrides(data: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    """Apply ``AHMA__SECTION__KEY`` env overrides onto the config dictionary.

    Only keys with at least a section and a field are considered, so plain
    settings such as ``AHMA_LOG_DIR`` are left alone.
    """
    merged = dict(data)
    for key, raw_value in env.items():
        if not key.startswith(ENV_PREFIX):
            continue
        body = key[len(ENV_PREFIX) :].lstrip("_")
        tokens = [token for token in body.split("__") if token]
        if len(tokens) < 2:
            continue
        _set_nested_value(merged, tokens, _parse_env_scalar(raw_value))
    return merged


def _coerce_dataclass_kwargs(raw: dict[str, Any], model_cls: type[T]) -> dict[str, Any]:
    allowed = {item.name for item in fields(model_cls)}
    return {key: value for key, value in raw.items() if key in allowed}


def _section(mapped: dict[str, Any], name: str) -> dict[str, Any]:
    raw = mapped.get(name, {})
    return raw if isinstance(raw, dict) else {}


def build_runtime_config(data: dict[str, Any], env: Mapping[str, str]) -> RuntimeConfig:
    """Build a strongly typed runtime config from raw dict + environment."""
    mapped = apply_env_overrides(data, env)

    runtime = RuntimeConfig(
        system=SystemConfig(**_coerce_dataclass_kwargs(_section(mapped, "system"), SystemConfig)),
        indicator=IndicatorSettings(
            **_coerce_dataclass_kwargs(_section(mapped, "indicator"), IndicatorSettings)
        ),
        output=OutputConfig(**_coerce_dataclass_kwargs(_section(mapped, "output"), OutputConfig)),
    )

    defaults = IndicatorSettings()
    runtime.system.log_level = str(runtime.system.log_level or "INFO").strip().upper()
    runtime.indicator.hull_length = _as_window(runtime.indicator.hull_length, defaults.hull_length)
    runtime.indicator.adaptive_window = _as_window(
        runtime.indicator.adaptive_window, defaults.adaptive_window
    )
    runtime.indicator.fast_period = _as_float(runtime.indicator.fast_period, defaults.fast_period)
    runtime.indicator.slow_period = _as_float(runtime.indicator.slow_period, defaults.slow_period)
    runtime.indicator.backend = str(runtime.indicator.backend or "python").strip().lower()
    runtime.output.format = str(runtime.output.format or "csv").strip().lower()
    runtime.output.price_decimals = _as_int(runtime.output.price_decimals, 2)
    return runtime


def load_runtime_config(
    config_path: str | None = None,
    env: Mapping[str, str] | None = None,
) -> RuntimeConfig:
    """Load `.env`, read YAML, apply overrides, and produce typed config.

    An explicitly given ``config_path`` must exist; the default one is optional.
    """
    load_dotenv()
    effective_env = os.environ if env is None else env
    if config_path is None:
        raw = load_yaml_config(DEFAULT_CONFIG_PATH, required=False)
    else:
        raw = load_yaml_config(config_path)
    return build_runtime_config(raw, effective_env)
