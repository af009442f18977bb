"""Config validation errors.

Each error names the offending environment variable (``SELFCQRS_LOG_LEVEL``
rather than ``log_level``) so an operator can fix the deployment without
reading the settings class, and records the settings class in ``detail``.
"""
from __future__ import annotations

from typing import Any

from selfcqrs.kernel.errors import ApplicationError, type_name


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, env_key: str, *, settings_class: type | None = None) -> None:
        owner = type_name(settings_class) if settings_class is not None else None
        target = f" for {owner}" if owner else ""
        super().__init__(
            f"{env_key} is not set and has no default{target}",
            detail={"env_key": env_key, "settings": owner},
        )
        self.setting_name = env_key
        self.settings_class = settings_class


class InvalidSettingValueError(ConfigError):
    """A variable is present but its value cannot be used.

    ``setting_name`` is the environment variable; ``reason`` says what was
    expected.
    """

    default_code = "invalid_setting_value"

    def __init__(
        self,
        env_key: str,
        value: Any,
        reason: str,
        *,
        settings_class: type | None = None,
    ) -> None:
        owner = type_name(settings_class) if settings_class is not None else None
        super().__init__(
            f"{env_key}={value!r} rejected: {reason}",
            detail={"env_key": env_key, "value": value, "reason": reason, "settings": owner},
        )
        self.setting_name = env_key
        self.value = value
        self.reason = reason
        self.settings_class = settings_class


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
