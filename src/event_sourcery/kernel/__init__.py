"""Kernel — events, aggregates, errors and time."""

from event_sourcery.kernel.ddd import (
    AggregateRoot,
    Event,
    EventBodySerializer,
    EventTypeRegistry,
    default_registry,
    handles,
)
from event_sourcery.kernel.errors import (
    BaseError,
    ConcurrencyError,
    DomainError,
    InvalidTypeOverrideError,
    UnknownEventError,
)

__all__ = [
    "AggregateRoot",
    "BaseError",
    "ConcurrencyError",
    "DomainError",
    "Event",
    "EventBodySerializer",
    "EventTypeRegistry",
    "InvalidTypeOverrideError",
    "UnknownEventError",
    "default_registry",
    "handles",
]
