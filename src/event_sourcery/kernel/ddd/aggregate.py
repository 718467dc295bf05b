"""AggregateRoot — rebuilds state from history and records new events."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from event_sourcery.kernel.ddd.event import Event
from event_sourcery.kernel.errors import UnknownEventError, ValidationError

if TYPE_CHECKING:
    from event_sourcery.application.event_sourcing.ports import EventSink

F = TypeVar("F", bound=Callable[..., Any])
Handler = Callable[[Any, Event], None]

_HANDLES_ATTR = "__handles_event_types__"


def _type_name(event_type: str | type[Event]) -> str:
    if isinstance(event_type, str):
        if not event_type:
            raise ValidationError("Handled event type must not be empty")
        return event_type
    name = event_type.declared_type()
    if name is None:
        raise ValidationError(f"{event_type.__qualname__} has no registered event type")
    return name


def handles(*event_types: str | type[Event]) -> Callable[[F], F]:
    """Mark a method as the state mutation for one or more event types.

    Accepts type names or registered event classes::

        class ShoppingCart(AggregateRoot):
            @handles("item_added")
            def _item_added(self, event: Event) -> None:
                self.items.append(event.body["sku"])
    """
    names = tuple(_type_name(t) for t in event_types)

    def decorator(fn: F) -> F:
        existing = getattr(fn, _HANDLES_ATTR, ())
        setattr(fn, _HANDLES_ATTR, (*existing, *names))
        return fn

    return decorator


class AggregateRoot:
    """Base for event-sourced aggregates.

    State changes only through :meth:`apply_event`. Each subclass gets its own
    handler table, built when the class is created from the ``@handles``
    methods of the class and its bases; a subclass handler for a type
    replaces the inherited one.

    Decorated handlers are stored by method name and looked up on the
    instance at dispatch, so a subclass that redefines the method (with or
    without ``@handles``) is the one called.

    Historical events (already persisted) only mutate state. New events
    mutate state and are then forwarded to the event sink stamped with the
    aggregate id and the next stream version, which the store checks for
    optimistic concurrency. ``version`` only moves once the sink accepted
    the event.
    """

    _handlers: ClassVar[dict[str, str | Handler]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        handlers: dict[str, str | Handler] = {}
        for base in reversed(cls.__mro__[1:]):
            handlers.update(base.__dict__.get("_handlers", {}))
        for attr_name, attr in vars(cls).items():
            for name in getattr(attr, _HANDLES_ATTR, ()):
                handlers[name] = attr_name
        cls._handlers = handlers

    def __init__(self, id: str, event_sink: EventSink) -> None:  # noqa: A002
        self._id = id
        self._event_sink = event_sink
        self._version = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def version(self) -> int:
        """Stream position of the last event applied."""
        return self._version

    @classmethod
    def register_handler(cls, event_type: str | type[Event], handler: Handler) -> None:
        """Add *handler* to this class's table (not to already-created subclasses)."""
        if "_handlers" not in cls.__dict__:
            cls._handlers = dict(cls._handlers)
        cls._handlers[_type_name(event_type)] = handler

    @classmethod
    def handled_types(cls) -> frozenset[str]:
        return frozenset(cls._handlers)

    def load_history(self, events: Iterable[Event]) -> None:
        for event in events:
            self.apply_event(event)

    def apply_event(self, event: Event) -> None:
        handler = self._handlers.get(event.type)
        if handler is None:
            raise UnknownEventError(event.type, type(self).__qualname__)
        if isinstance(handler, str):
            getattr(self, handler)(event)
        else:
            handler(self, event)

        if event.persisted():
            self._version = event.version if event.version is not None else self._version + 1
            return

        next_version = self._version + 1
        recorded = Event(
            aggregate_id=self._id,
            type=event.type,
            body=event.body,
            version=next_version,
            correlation_id=event.correlation_id,
            causation_id=event.causation_id,
        )
        self._event_sink.sink(recorded)
        self._version = next_version

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(id={self._id!r}, version={self._version})"


__all__ = ["AggregateRoot", "handles"]
