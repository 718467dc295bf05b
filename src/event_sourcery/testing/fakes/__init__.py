"""Testing fakes – in-memory doubles for the event source / sink ports."""
from event_sourcery.testing.fakes.clock import FakeClock
from event_sourcery.testing.fakes.event_store import InMemoryEventStore, RecordingEventSink
from event_sourcery.kernel.time import FrozenClock

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemoryEventStore",
    "RecordingEventSink",
]
