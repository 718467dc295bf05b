"""Event — immutable record of something that happened to an aggregate."""

from __future__ import annotations

import dataclasses
import numbers
from collections.abc import Mapping
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any, ClassVar
from uuid import uuid4

from event_sourcery.kernel.ddd.body_serializer import EventBodySerializer
from event_sourcery.kernel.ddd.event_types import EventTypeRegistry
from event_sourcery.kernel.errors import (
    InvalidEventVersionError,
    InvalidTypeOverrideError,
    UnpersistedEventComparisonError,
    ValidationError,
)


def _coerce_version(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidEventVersionError(value)
    if isinstance(value, numbers.Integral):
        version = int(value)
    elif isinstance(value, float) and value.is_integer():
        version = int(value)
    elif isinstance(value, str):
        try:
            version = int(value.strip())
        except ValueError as exc:
            raise InvalidEventVersionError(value, cause=exc) from exc
    else:
        raise InvalidEventVersionError(value)
    if version < 0:
        raise InvalidEventVersionError(value)
    return version


def _coerce_timestamp(value: Any) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as exc:
            raise ValidationError(f"Invalid created_at timestamp {value!r}", cause=exc) from exc
    if not isinstance(value, datetime):
        raise ValidationError(f"created_at must be a datetime, got {type(value).__name__}")
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


@dataclasses.dataclass(frozen=True, eq=False, kw_only=True)
class Event:
    """Base class for events; also the generic event for unknown types.

    Concrete events subclass it and register a stable type name; their
    ``type`` is then always the registered name, whatever is passed in::

        @default_registry.register("item_added")
        class ItemAdded(Event):
            pass

        ItemAdded(aggregate_id="cart-1", body={"sku": "A"}).type  # "item_added"

    Identity is ``(class, uuid)``: two events are equal when they are of the
    same class and share a uuid, whatever their other attributes. Persisted
    events (``id`` set by the store) order by ``id``; comparing an event that
    has no ``id`` raises :class:`UnpersistedEventComparisonError`.

    ``body`` is a normalised copy of what was passed in, exposed as a
    read-only mapping. Nested lists and dicts are plain values and must not
    be mutated by handlers.
    """

    type_registry: ClassVar[EventTypeRegistry]
    body_serializer: ClassVar[EventBodySerializer] = EventBodySerializer()

    id: int | None = None
    uuid: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    aggregate_id: str | None = None
    type: str | None = None
    body: Mapping[str, Any] | None = None
    version: int | None = None
    created_at: datetime | None = None
    correlation_id: str | None = None
    causation_id: str | None = None

    def __post_init__(self) -> None:
        if self.id is not None and (isinstance(self.id, bool) or not isinstance(self.id, int)):
            raise ValidationError(f"Event id must be an integer, got {self.id!r}")
        object.__setattr__(self, "uuid", str(self.uuid).lower())
        declared = type(self).declared_type()
        if declared is None:
            declared = "" if self.type is None else str(self.type)
        object.__setattr__(self, "type", declared)
        body = {} if self.body is None else self.body_serializer.serialize(self.body)
        object.__setattr__(self, "body", MappingProxyType(body))
        object.__setattr__(self, "version", _coerce_version(self.version))
        object.__setattr__(self, "created_at", _coerce_timestamp(self.created_at))

    @classmethod
    def declared_type(cls) -> str | None:
        """Registered type name of this class; ``None`` for untyped events."""
        return cls.type_registry.serialize(cls)

    def persisted(self) -> bool:
        return self.id is not None

    def replace(self, event_class: type[Event] | None = None, /, **overrides: Any) -> Event:
        """Return a copy as *event_class* (default: same class) with *overrides* applied.

        ``type`` may only be overridden on untyped events; to change the type
        of a registered event pass a different *event_class*. The body is
        carried over as-is and is not checked against the target class.
        """
        target = type(self) if event_class is None else event_class
        if not (isinstance(target, type) and issubclass(target, Event)):
            raise ValidationError(f"{target!r} is not an Event class")
        declared = target.declared_type()
        if "type" in overrides and declared is not None and overrides["type"] != declared:
            raise InvalidTypeOverrideError(target.__qualname__, declared, overrides["type"])
        values = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        values.update(overrides)
        return target(**values)

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view of every attribute (``created_at`` as ISO-8601)."""
        return {
            "id": self.id,
            "uuid": self.uuid,
            "aggregate_id": self.aggregate_id,
            "type": self.type,
            "body": self.body_serializer.serialize(self.body),
            "version": self.version,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "correlation_id": self.correlation_id,
            "causation_id": self.causation_id,
        }

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        registry: EventTypeRegistry | None = None,
    ) -> Event:
        """Rebuild an event from :meth:`to_dict` output.

        The class is resolved from ``type`` through *registry*; unknown types
        come back as the generic class with their ``type`` string kept.
        """
        registry = registry or cls.type_registry
        event_class = registry.deserialize(data.get("type") or "")
        kwargs = {f.name: data[f.name] for f in dataclasses.fields(cls) if f.name in data}
        return event_class(**kwargs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return type(self) is type(other) and self.uuid == other.uuid

    def __hash__(self) -> int:
        return hash((type(self), self.uuid))

    def _ids(self, other: Event) -> tuple[int, int]:
        if self.id is None or other.id is None:
            raise UnpersistedEventComparisonError(
                "Only persisted events (with an id) can be ordered",
                detail={"left": self.uuid, "right": other.uuid},
            )
        return self.id, other.id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        left, right = self._ids(other)
        return left < right

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        left, right = self._ids(other)
        return left <= right

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        left, right = self._ids(other)
        return left > right

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        left, right = self._ids(other)
        return left >= right


default_registry = EventTypeRegistry(Event)
Event.type_registry = default_registry


__all__ = ["Event", "default_registry"]
