"""Shared utilities."""

from ahma_studio.utils.logging_utils import JsonLogFormatter, log_file_path, setup_logging

__all__ = ["JsonLogFormatter", "log_file_path", "setup_logging"]
