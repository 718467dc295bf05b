"""Unit tests for testing fakes and generators."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from hypothesis import given

from event_sourcery.kernel.ddd import Event
from event_sourcery.kernel.errors import ConcurrencyError, ValidationError
from event_sourcery.testing import (
    FakeClock,
    InMemoryEventStore,
    RecordingEventSink,
    event_strategy,
    history_strategy,
)
from event_sourcery.testing.fakes.clock import DEFAULT_START


def _new(aggregate_id: str = "agg-1", **kwargs: object) -> Event:
    return Event(aggregate_id=aggregate_id, type="happened", **kwargs)  # type: ignore[arg-type]


class TestFakeClock:
    def test_first_reading_is_start(self) -> None:
        assert FakeClock().now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_steps_after_each_reading(self) -> None:
        clock = FakeClock(step=timedelta(minutes=1))
        readings = [clock.now() for _ in range(3)]
        assert readings == [
            datetime(2026, 1, 1, 12, 0, tzinfo=UTC),
            datetime(2026, 1, 1, 12, 1, tzinfo=UTC),
            datetime(2026, 1, 1, 12, 2, tzinfo=UTC),
        ]
        assert clock.readings == 3
        assert clock.peek() == datetime(2026, 1, 1, 12, 3, tzinfo=UTC)

    def test_zero_step_is_frozen(self) -> None:
        clock = FakeClock(step=timedelta(0))
        assert clock.now() == clock.now() == DEFAULT_START

    def test_advance(self) -> None:
        clock = FakeClock()
        clock.advance(minutes=5)
        assert clock.now() == datetime(2026, 1, 1, 12, 5, tzinfo=UTC)

    def test_negative_step_rejected(self) -> None:
        with pytest.raises(ValueError):
            FakeClock(step=timedelta(seconds=-1))


class TestInMemoryEventStore:
    def test_sink_assigns_id_version_and_timestamp(self) -> None:
        store = InMemoryEventStore(clock=FakeClock())
        event = _new(body={"k": "v"})
        store.sink(event)

        [stored] = store.get_events_for_aggregate_id("agg-1")
        assert stored.persisted()
        assert stored.id == 1
        assert stored.version == 1
        assert stored.created_at == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        assert stored == event
        assert stored.body == {"k": "v"}
        assert not event.persisted()

    def test_created_at_follows_append_order(self) -> None:
        clock = FakeClock(step=timedelta(seconds=30))
        store = InMemoryEventStore(clock=clock)
        for _ in range(3):
            store.sink(_new())
        stamps = [e.created_at for e in store.all_events()]
        assert stamps == sorted(stamps)
        assert len(set(stamps)) == 3
        assert clock.readings == 3

    def test_rejected_append_does_not_read_clock(self) -> None:
        clock = FakeClock()
        store = InMemoryEventStore(clock=clock)
        with pytest.raises(ConcurrencyError):
            store.sink(_new(version=2))
        assert clock.readings == 0

    def test_ids_are_store_wide_versions_per_aggregate(self) -> None:
        store = InMemoryEventStore()
        store.sink(_new("a"))
        store.sink(_new("b"))
        store.sink(_new("a"))
        assert [(e.aggregate_id, e.id, e.version) for e in store.all_events()] == [
            ("a", 1, 1),
            ("b", 2, 1),
            ("a", 3, 2),
        ]
        assert store.stream_version("a") == 2
        assert store.stream_version("missing") == 0

    def test_events_returned_in_append_order(self) -> None:
        store = InMemoryEventStore()
        events = [_new(body={"n": i}) for i in range(3)]
        for event in events:
            store.sink(event)
        assert store.get_events_for_aggregate_id("agg-1") == events

    def test_unknown_aggregate_returns_empty(self) -> None:
        assert InMemoryEventStore().get_events_for_aggregate_id("nope") == []

    def test_matching_version_accepted(self) -> None:
        store = InMemoryEventStore()
        store.sink(_new(version=1))
        store.sink(_new(version=2))
        assert store.stream_version("agg-1") == 2

    def test_conflicting_version_rejected(self) -> None:
        store = InMemoryEventStore()
        store.sink(_new(version=1))
        with pytest.raises(ConcurrencyError) as exc_info:
            store.sink(_new(version=1))
        err = exc_info.value
        assert err.aggregate_id == "agg-1"
        assert err.expected == 2
        assert err.actual == 1
        assert store.stream_version("agg-1") == 1

    def test_event_without_aggregate_rejected(self) -> None:
        with pytest.raises(ValidationError):
            InMemoryEventStore().sink(Event(type="orphan"))


class TestRecordingEventSink:
    def test_keeps_events_in_order(self) -> None:
        sink = RecordingEventSink()
        first, second = _new(), _new()
        sink.sink(first)
        sink.sink(second)
        assert sink.events == [first, second]


class TestStrategies:
    @given(event_strategy(["a", "b"], aggregate_id="agg-1"))
    def test_event_strategy(self, event: Event) -> None:
        assert event.type in ("a", "b")
        assert event.aggregate_id == "agg-1"
        assert not event.persisted()

    @given(history_strategy("agg-1"))
    def test_history_strategy_is_sequential(self, history: list[Event]) -> None:
        positions = list(range(1, len(history) + 1))
        assert [e.id for e in history] == positions
        assert [e.version for e in history] == positions
        assert all(e.aggregate_id == "agg-1" for e in history)
