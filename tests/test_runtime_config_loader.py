"""Tests for typed runtime config loader."""

import os
import tempfile
import textwrap
import unittest

from ahma_studio.configuration import (
    RuntimeConfig,
    load_runtime_config,
    validate_runtime_config,
)
from ahma_studio.configuration.loader import apply_env_overrides, build_runtime_config


class TestRuntimeConfigLoader(unittest.TestCase):
    """Runtime config loader coverage for YAML values and env overrides."""

    def _write_yaml(self, text: str) -> str:
        with tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False, encoding="utf-8") as fp:
            fp.write(textwrap.dedent(text).strip())
            return fp.name

    def test_defaults_without_sources(self):
        runtime = build_runtime_config({}, {})
        self.assertEqual(runtime, RuntimeConfig())
        validate_runtime_config(runtime)

    def test_yaml_values(self):
        path = self._write_yaml(
            """
            system:
              log_level: debug
            indicator:
              hull_length: 34
              adaptive_window: 10
              fast_period: 3
              slow_period: 40
              backend: NumPy
            output:
              format: parquet
            """
        )
        try:
            runtime = load_runtime_config(config_path=path, env={})
        finally:
            os.remove(path)

        self.assertEqual(runtime.system.log_level, "DEBUG")
        self.assertEqual(runtime.indicator.hull_length, 34)
        self.assertEqual(runtime.indicator.adaptive_window, 10)
        self.assertEqual(runtime.indicator.fast_period, 3.0)
        self.assertEqual(runtime.indicator.slow_period, 40.0)
        self.assertEqual(runtime.indicator.backend, "numpy")
        self.assertEqual(runtime.output.format, "parquet")
        validate_runtime_config(runtime)

    def test_env_nested_override(self):
        path = self._write_yaml(
            """
            indicator:
              hull_length: 34
            """
        )
        try:
            env = {
                "AHMA__INDICATOR__HULL_LENGTH": "9.6",
                "AHMA__INDICATOR__SLOW_PERIOD": "25",
                "AHMA_LOG_DIR": "/tmp/ignored",
            }
            runtime = load_runtime_config(config_path=path, env=env)
        finally:
            os.remove(path)

        self.assertEqual(runtime.indicator.hull_length, 10)
        self.assertEqual(runtime.indicator.slow_period, 25.0)

    def test_env_overrides_do_not_mutate_input(self):
        data = {"indicator": {"hull_length": 21}}
        merged = apply_env_overrides(data, {"AHMA__INDICATOR__HULL_LENGTH": "5"})
        self.assertEqual(merged["indicator"]["hull_length"], 5)
        self.assertEqual(data["indicator"]["hull_length"], 21)
        self.assertNotIn("log_dir", apply_env_overrides({}, {"AHMA_LOG_DIR": "x"}))

    def test_unparseable_numbers_fall_back_to_defaults(self):
        runtime = build_runtime_config(
            {"indicator": {"hull_length": "long", "fast_period": None}, "unknown": {"a": 1}},
            {},
        )
        self.assertEqual(runtime.indicator.hull_length, 21)
        self.assertEqual(runtime.indicator.fast_period, 2.0)

    def test_missing_explicit_config_raises(self):
        with self.assertRaises(FileNotFoundError):
            load_runtime_config(config_path="/nonexistent/ahma.yaml", env={})

    def test_invalid_settings_raise(self):
        for section, key, value in (
            ("system", "log_level", "loud"),
            ("indicator", "backend", "gpu"),
            ("output", "format", "xlsx"),
            ("output", "price_decimals", 12),
        ):
            runtime = build_runtime_config({section: {key: value}}, {})
            with self.assertRaises(ValueError):
                validate_runtime_config(runtime)

    def test_base_config_log_level_follows_runtime(self):
        from ahma_studio.config import BaseConfig

        runtime = load_runtime_config(config_path=os.getenv("AHMA_CONFIG_PATH") or None)
        self.assertEqual(BaseConfig.LOG_LEVEL, runtime.system.log_level)


if __name__ == "__main__":
    unittest.main()
