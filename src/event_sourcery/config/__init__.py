"""Config – 12-factor settings and loaders."""

from event_sourcery.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    EventSourcerySettings,
    Settings,
    SettingsLoader,
    configure_logging,
)
from event_sourcery.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "EventSourcerySettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "configure_logging",
]
