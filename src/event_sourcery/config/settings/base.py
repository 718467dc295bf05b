"""Config settings – Settings base class and the library's own settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from event_sourcery.config.validation import InvalidSettingValueError
from event_sourcery.observability.logging import JsonLoggerFactory

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class EventSourcerySettings(Settings):
    """Process-level settings read from ``EVENT_SOURCERY_*`` variables.

    ``log_level`` is a stdlib level name; ``log_json`` switches between the
    JSON renderer and the human-readable console renderer.
    """

    _prefix: ClassVar[str] = "EVENT_SOURCERY"

    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"must be one of {', '.join(_LEVELS)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def configure_logging(settings: EventSourcerySettings) -> None:
    """Apply *settings* to structlog and the stdlib root logger."""
    JsonLoggerFactory.configure(settings.log_level_number, json=settings.log_json)


__all__ = ["EventSourcerySettings", "Settings", "configure_logging"]
