"""Configuration file loading with environment variable substitution."""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from rekey.config.models import RekeyConfig
from rekey.exceptions import (
    ConfigFileNotFoundError,
    ConfigurationError,
    EnvironmentVariableError,
)

logger = logging.getLogger(__name__)

# ${VAR} or ${VAR:-default}
_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")


class ConfigLoader:
    """Load :class:`RekeyConfig` from YAML or JSON files.

    Example:
        loader = ConfigLoader()
        config = loader.load_from_file("rekey.yaml")
    """

    def __init__(self, env_vars: dict[str, str] | None = None):
        self.env_vars = dict(os.environ) if env_vars is None else env_vars

    def _substitute_env_vars(self, text: str) -> str:
        """Replace ``${VAR}`` and ``${VAR:-default}`` references.

        Raises:
            EnvironmentVariableError: If a variable without default is unset
        """

        def replace(match: re.Match[str]) -> str:
            name, default = match.group(1), match.group(2)
            if name in self.env_vars:
                return self.env_vars[name]
            if default is not None:
                return default
            raise EnvironmentVariableError(name)

        return _ENV_VAR_PATTERN.sub(replace, text)

    def _parse(self, text: str, suffix: str) -> dict[str, Any]:
        if suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration document must be a mapping",
                context={"type": type(data).__name__},
            )
        return data

    def load_dict_from_file(self, path: str | Path) -> dict[str, Any]:
        """Read, substitute and parse a configuration file into a dict."""
        file_path = Path(path)
        try:
            raw = file_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ConfigFileNotFoundError(str(file_path), cause=e) from e

        text = self._substitute_env_vars(raw)
        try:
            return self._parse(text, file_path.suffix.lower())
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to parse configuration file: {e}",
                context={"path": str(file_path)},
                cause=e,
            ) from e

    def load_from_file(self, path: str | Path) -> RekeyConfig:
        data = self.load_dict_from_file(path)
        logger.debug(f"Loaded configuration from {path}")
        return self.load_from_dict(data)

    def load_from_dict(self, data: dict[str, Any]) -> RekeyConfig:
        return RekeyConfig.from_dict(data)


def load_config(path: str | Path, env_vars: dict[str, str] | None = None) -> RekeyConfig:
    """Load a configuration file.

    Args:
        path: YAML (``.yaml``/``.yml``) or JSON (``.json``) file
        env_vars: Variables used for substitution (defaults to ``os.environ``)

    Returns:
        Parsed configuration
    """
    return ConfigLoader(env_vars=env_vars).load_from_file(path)
