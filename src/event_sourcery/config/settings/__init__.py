"""Config settings – 12-factor env-based configuration."""
from event_sourcery.config.settings.base import EventSourcerySettings, Settings, configure_logging
from event_sourcery.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "EventSourcerySettings",
    "Settings",
    "SettingsLoader",
    "configure_logging",
]
