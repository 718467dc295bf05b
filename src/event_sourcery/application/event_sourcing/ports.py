"""Application event sourcing – EventSource / EventSink ports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from event_sourcery.kernel.ddd.event import Event


@runtime_checkable
class EventSource(Protocol):
    """Port — read side of an event store.

    Implementations return the events of one aggregate in append order
    (ascending version), or an empty sequence for an unknown aggregate.
    """

    def get_events_for_aggregate_id(self, aggregate_id: str) -> Sequence[Event]: ...


@runtime_checkable
class EventSink(Protocol):
    """Port — write side of an event store.

    Receives one new event at a time in the order the aggregate recorded
    them. The store assigns ``id`` and rejects an event whose ``version`` is
    not the next position of its aggregate's stream.
    """

    def sink(self, event: Event) -> None: ...


__all__ = ["EventSink", "EventSource"]
