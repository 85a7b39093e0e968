"""Logging helpers for rekey."""

from __future__ import annotations

from rekey.logging.error_logger import log_body_processing_error, log_error
from rekey.logging.formatters import CompactJSONFormatter, JSONFormatter
from rekey.logging.setup import configure_logging

__all__ = [
    "CompactJSONFormatter",
    "JSONFormatter",
    "configure_logging",
    "log_body_processing_error",
    "log_error",
]
