"""Errors raised while loading ``EVENT_SOURCERY_*`` settings."""
from __future__ import annotations

from event_sourcery.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or a repository is missing a collaborator."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, settings_class: str | None = None) -> None:
        owner = f" for {settings_class}" if settings_class else ""
        super().__init__(
            f"Required setting '{setting_name}'{owner} is not set",
            detail={"setting": setting_name, "settings_class": settings_class},
        )
        self.setting_name = setting_name
        self.settings_class = settings_class


class InvalidSettingValueError(ConfigError):
    """The setting is present but cannot be used (bad type, unknown level, ...)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
