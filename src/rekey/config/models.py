"""Configuration data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_NAME = "rewrite-request-body"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class RenameConfig:
    """Key rename settings.

    Both keys are stored as given. The trimmed values are what the
    middleware actually uses, and renaming is enabled only when both trimmed
    keys are non-empty and differ.
    """

    old_key: str = ""
    new_key: str = ""

    @property
    def source_key(self) -> str:
        return self.old_key.strip()

    @property
    def target_key(self) -> str:
        return self.new_key.strip()

    @property
    def enabled(self) -> bool:
        source, target = self.source_key, self.target_key
        return bool(source) and bool(target) and source != target

    def to_dict(self) -> dict[str, Any]:
        return {"old_key": self.old_key, "new_key": self.new_key}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RenameConfig:
        """Build from a mapping using either ``oldKey`` or ``old_key`` names."""
        old_key = data.get("old_key", data.get("oldKey", ""))
        new_key = data.get("new_key", data.get("newKey", ""))
        return cls(
            old_key="" if old_key is None else old_key,
            new_key="" if new_key is None else new_key,
        )


def create_config() -> RenameConfig:
    """Return the default rename configuration (renaming disabled)."""
    return RenameConfig()


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings applied by :func:`rekey.logging.configure_logging`."""

    level: str = "INFO"
    format: str = "text"
    output: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"level": self.level, "format": self.format, "output": self.output}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LoggingConfig:
        return cls(
            level=str(data.get("level", "INFO")).upper(),
            format=str(data.get("format", "text")).lower(),
            output=data.get("output"),
        )


@dataclass(frozen=True)
class RekeyConfig:
    """Top-level middleware configuration."""

    name: str = DEFAULT_NAME
    rename: RenameConfig = field(default_factory=RenameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "rename": self.rename.to_dict(),
            "logging": self.logging.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RekeyConfig:
        """Create a configuration from a parsed document.

        A flat document carrying ``oldKey``/``newKey`` (or ``old_key``/``new_key``)
        at the top level is accepted in place of a ``rename`` section.
        """
        rename_data = data.get("rename")
        if rename_data is None:
            rename_data = {
                k: v
                for k, v in data.items()
                if k in ("old_key", "new_key", "oldKey", "newKey")
            }

        return cls(
            name=data.get("name") or DEFAULT_NAME,
            rename=RenameConfig.from_dict(rename_data or {}),
            logging=LoggingConfig.from_dict(data.get("logging") or {}),
        )
