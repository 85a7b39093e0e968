"""Configuration models, loading and validation for rekey."""

from __future__ import annotations

from rekey.config.loader import ConfigLoader, load_config
from rekey.config.models import (
    DEFAULT_NAME,
    LoggingConfig,
    RekeyConfig,
    RenameConfig,
    create_config,
)
from rekey.config.validator import ConfigValidator, validate_config

__all__ = [
    "DEFAULT_NAME",
    "ConfigLoader",
    "ConfigValidator",
    "LoggingConfig",
    "RekeyConfig",
    "RenameConfig",
    "create_config",
    "load_config",
    "validate_config",
]
