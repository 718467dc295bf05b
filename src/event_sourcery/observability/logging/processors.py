"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class EventContextProcessor:
    """structlog processor that flattens a bound ``event_obj`` into log fields.

    Core modules pass the :class:`~event_sourcery.kernel.ddd.event.Event`
    being handled as ``event_obj=...``; this processor replaces it with the
    identifying fields a log reader needs:

    * ``event_uuid``
    * ``event_type``
    * ``aggregate_id`` (only when not ``None``)
    * ``correlation_id`` (only when not ``None``)
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        event = event_dict.pop("event_obj", None)
        if event is None:
            return event_dict
        event_dict.setdefault("event_uuid", event.uuid)
        event_dict.setdefault("event_type", event.type)
        if event.aggregate_id is not None:
            event_dict.setdefault("aggregate_id", event.aggregate_id)
        if event.correlation_id is not None:
            event_dict.setdefault("correlation_id", event.correlation_id)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["EventContextProcessor", "get_logger"]
