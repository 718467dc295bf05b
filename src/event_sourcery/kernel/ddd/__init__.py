"""Event-sourcing building blocks — public re-export surface."""

from event_sourcery.kernel.ddd.aggregate import AggregateRoot, handles
from event_sourcery.kernel.ddd.body_serializer import EventBodySerializer
from event_sourcery.kernel.ddd.event import Event, default_registry
from event_sourcery.kernel.ddd.event_types import EventTypeRegistry

__all__ = [
    "AggregateRoot",
    "Event",
    "EventBodySerializer",
    "EventTypeRegistry",
    "default_registry",
    "handles",
]
