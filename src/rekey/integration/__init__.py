"""Host framework adapters (ASGI and WSGI)."""

from __future__ import annotations

import logging
from typing import Any

from rekey.config.loader import ConfigLoader
from rekey.config.models import RekeyConfig
from rekey.config.validator import ConfigValidator

logger = logging.getLogger(__name__)


def resolve_config(
    config: RekeyConfig | None = None,
    config_dict: dict[str, Any] | None = None,
    config_file: str | None = None,
) -> RekeyConfig:
    """Build the middleware configuration from exactly one source.

    Precedence is ``config``, then ``config_dict``, then ``config_file``. With
    none given the default (disabled) configuration is used.

    Raises:
        ConfigValidationError: If the configuration has errors
    """
    if config is None:
        loader = ConfigLoader()
        if config_dict is not None:
            config = loader.load_from_dict(config_dict)
        elif config_file is not None:
            config = loader.load_from_file(config_file)
        else:
            config = RekeyConfig()

    for warning in ConfigValidator().check(config):
        logger.warning(f"[{config.name}] {warning}")
    return config


__all__ = ["resolve_config"]
