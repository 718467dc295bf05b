"""Testing support – fakes and property-based generators."""

from event_sourcery.testing.fakes import (
    FakeClock,
    FrozenClock,
    InMemoryEventStore,
    RecordingEventSink,
)
from event_sourcery.testing.generators import (
    body_strategy,
    event_strategy,
    history_strategy,
)

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemoryEventStore",
    "RecordingEventSink",
    "body_strategy",
    "event_strategy",
    "history_strategy",
]
