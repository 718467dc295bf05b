"""Event body serializer — normalises event payloads to plain JSON-ready data."""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from event_sourcery.kernel.errors import SerializationError

_SCALARS = (str, int, float, bool, type(None))


class EventBodySerializer:
    """Convert an arbitrary event body into a ``dict`` of plain values.

    Mappings become ``dict`` with ``str`` keys, sequences and sets become
    lists, temporal values become ISO-8601 strings (datetimes in UTC), and
    ``Decimal`` / ``UUID`` / ``Enum`` collapse to their string or value form.
    Other types need a converter registered with :meth:`add`::

        serializer = EventBodySerializer()
        serializer.add(Money, lambda m: {"amount": str(m.amount), "currency": m.currency})

    The conversion is pure: the input is never modified.
    """

    def __init__(self) -> None:
        self._converters: dict[type, Callable[[Any], Any]] = {}

    def add(self, value_type: type, converter: Callable[[Any], Any]) -> None:
        """Register *converter* for instances of *value_type* (and subclasses)."""
        self._converters[value_type] = converter

    def serialize(self, body: Any) -> dict[str, Any]:
        if not isinstance(body, Mapping):
            raise SerializationError(
                f"Event body must be a mapping, got {type(body).__name__}",
                payload_type=type(body).__name__,
            )
        return self._convert_mapping(body)

    def _convert_mapping(self, value: Mapping[Any, Any]) -> dict[str, Any]:
        return {str(k): self._convert(v) for k, v in value.items()}

    def _convert(self, value: Any) -> Any:
        for value_type, converter in self._converters.items():
            if isinstance(value, value_type):
                return self._convert(converter(value))
        if isinstance(value, enum.Enum):
            return self._convert(value.value)
        if isinstance(value, _SCALARS):
            return value
        if isinstance(value, Mapping):
            return self._convert_mapping(value)
        if isinstance(value, (list, tuple, set, frozenset)):
            return [self._convert(v) for v in value]
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=UTC)
            return value.astimezone(UTC).isoformat()
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, (Decimal, UUID)):
            return str(value)
        raise SerializationError(
            f"Cannot serialize value of type {type(value).__name__} in event body",
            payload_type=type(value).__name__,
        )


__all__ = ["EventBodySerializer"]
