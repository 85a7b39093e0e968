"""Configuration validation."""

from __future__ import annotations

from rekey.config.models import LOG_FORMATS, LOG_LEVELS, RekeyConfig
from rekey.exceptions import ConfigValidationError


class ConfigValidator:
    """Check a :class:`RekeyConfig` for errors and questionable settings.

    Errors make the configuration unusable. Warnings describe settings that
    are accepted but probably not what the operator intended, such as a
    configuration that never renames anything.
    """

    def validate(self, config: RekeyConfig) -> tuple[list[str], list[str]]:
        errors: list[str] = []
        warnings: list[str] = []

        if not isinstance(config.name, str) or not config.name.strip():
            errors.append("name must be a non-empty string")

        keys_are_strings = True
        for field_name in ("old_key", "new_key"):
            value = getattr(config.rename, field_name)
            if not isinstance(value, str):
                errors.append(
                    f"rename.{field_name} must be a string, got {type(value).__name__}"
                )
                keys_are_strings = False
            elif value != value.strip():
                warnings.append(
                    f"rename.{field_name} has surrounding whitespace, "
                    f"{value.strip()!r} will be used"
                )

        if keys_are_strings and not config.rename.enabled:
            if not config.rename.source_key or not config.rename.target_key:
                warnings.append(
                    "rename.old_key or rename.new_key is empty, "
                    "request bodies will not be modified"
                )
            else:
                warnings.append(
                    "rename.old_key and rename.new_key are equal, "
                    "request bodies will not be modified"
                )

        if config.logging.level not in LOG_LEVELS:
            errors.append(
                f"logging.level must be one of {', '.join(LOG_LEVELS)}, "
                f"got {config.logging.level!r}"
            )
        if config.logging.format not in LOG_FORMATS:
            errors.append(
                f"logging.format must be one of {', '.join(LOG_FORMATS)}, "
                f"got {config.logging.format!r}"
            )

        return errors, warnings

    def check(self, config: RekeyConfig) -> list[str]:
        """Validate and raise on errors.

        Returns:
            The list of warnings

        Raises:
            ConfigValidationError: If any error was found
        """
        errors, warnings = self.validate(config)
        if errors:
            raise ConfigValidationError("Invalid configuration", errors=errors)
        return warnings


def validate_config(config: RekeyConfig) -> tuple[list[str], list[str]]:
    return ConfigValidator().validate(config)
