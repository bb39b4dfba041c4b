import json
import logging
import os
from logging.handlers import RotatingFileHandler

from ahma_studio.config import BaseConfig

PACKAGE_LOGGER = "ahma_studio"
PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record, with the emitting module and line."""

    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "logger": record.name,
            "level": record.levelname,
            "module": record.module,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def _resolve_logs_dir() -> str:
    candidate = str(os.getenv("AHMA_LOG_DIR", "logs") or "").strip()
    return candidate or "logs"


def _use_json() -> bool:
    return os.getenv("AHMA_JSON_LOG", "0").strip().lower() in {"1", "true", "yes"}


def log_file_path(name=PACKAGE_LOGGER, logs_dir=None) -> str:
    """Return the rotating log file used for logger ``name``."""
    return os.path.join(logs_dir or _resolve_logs_dir(), f"{name}.log")


def setup_logging(name=PACKAGE_LOGGER, level=None, *, json_logs=None, logs_dir=None):
    """Attach console and rotating file handlers to logger ``name``.

    Records from ``ahma_studio.*`` module loggers propagate into the
    ``ahma_studio`` logger, so configuring that name covers the package.
    ``level`` defaults to ``system.log_level`` from the runtime config;
    ``json_logs`` and ``logs_dir`` default to ``AHMA_JSON_LOG`` and
    ``AHMA_LOG_DIR``. A second call only adjusts the level.
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        if level:
            logger.setLevel(level)
        return logger

    logger.setLevel(level or BaseConfig.LOG_LEVEL)
    logger.propagate = False

    use_json = _use_json() if json_logs is None else bool(json_logs)
    formatter = JsonLogFormatter() if use_json else logging.Formatter(PLAIN_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    path = log_file_path(name, logs_dir)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    rotating = RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS)
    rotating.setFormatter(formatter)
    logger.addHandler(rotating)

    return logger
