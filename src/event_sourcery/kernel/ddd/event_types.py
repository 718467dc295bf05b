"""Event type registry — stable type names ↔ concrete event classes."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from event_sourcery.kernel.errors import DuplicateEventTypeError, ValidationError

if TYPE_CHECKING:
    from event_sourcery.kernel.ddd.event import Event

E = TypeVar("E", bound="Event")


class EventTypeRegistry:
    """Bidirectional mapping between logical type names and event classes.

    Names are declared explicitly when a class is registered and never
    derived from the class name, so renaming a class does not change what is
    written to the store::

        @default_registry.register("item_added")
        class ItemAdded(Event):
            pass

    ``base_class`` is the generic, untyped event class. It serializes to
    ``None`` and is what :meth:`deserialize` hands back for names it does not
    know, so streams written by newer code still load in older readers.
    """

    def __init__(self, base_class: type[Event]) -> None:
        self._base_class = base_class
        self._by_name: dict[str, type[Event]] = {}
        self._by_class: dict[type[Event], str] = {}

    @property
    def base_class(self) -> type[Event]:
        return self._base_class

    def register(self, type_name: str) -> Callable[[type[E]], type[E]]:
        """Class decorator registering an event class under *type_name*."""
        if not type_name:
            raise ValidationError("Event type name must not be empty")

        def decorator(event_class: type[E]) -> type[E]:
            self.add(type_name, event_class)
            return event_class

        return decorator

    def add(self, type_name: str, event_class: type[Event]) -> None:
        if not (isinstance(event_class, type) and issubclass(event_class, self._base_class)):
            raise ValidationError(
                f"{event_class!r} is not a subclass of {self._base_class.__name__}"
            )
        if event_class is self._base_class:
            raise ValidationError(f"{self._base_class.__name__} itself cannot be registered")
        existing = self._by_name.get(type_name)
        if existing is not None and existing is not event_class:
            raise DuplicateEventTypeError(
                f"Event type '{type_name}' is already registered to {existing.__qualname__}",
                detail={"type_name": type_name, "registered": existing.__qualname__},
            )
        current = self._by_class.get(event_class)
        if current is not None and current != type_name:
            raise DuplicateEventTypeError(
                f"{event_class.__qualname__} is already registered as '{current}'",
                detail={"type_name": current, "registered": event_class.__qualname__},
            )
        self._by_name[type_name] = event_class
        self._by_class[event_class] = type_name

    def serialize(self, event_class: type[Event]) -> str | None:
        """Return the type name for *event_class*; ``None`` for the generic class."""
        return self._by_class.get(event_class)

    def deserialize(self, type_name: str) -> type[Event]:
        """Return the class registered under *type_name*, or the generic class."""
        return self._by_name.get(type_name, self._base_class)

    def types(self) -> dict[str, type[Event]]:
        return dict(self._by_name)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)


__all__ = ["EventTypeRegistry"]
