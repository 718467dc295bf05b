"""Unit tests for kernel time helpers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from event_sourcery.kernel.time import FrozenClock, SystemClock, utc_now


class TestSystemClock:
    def test_now_is_aware_utc(self) -> None:
        now = SystemClock().now()
        assert now.tzinfo is UTC

    def test_now_is_current(self) -> None:
        before = datetime.now(UTC)
        now = SystemClock().now()
        assert before <= now <= datetime.now(UTC)


class TestFrozenClock:
    def test_returns_fixed_time(self) -> None:
        fixed = datetime(2026, 3, 1, tzinfo=UTC)
        clock = FrozenClock(fixed)
        assert clock.now() == fixed
        assert clock.now() == fixed

    def test_advance(self) -> None:
        clock = FrozenClock(datetime(2026, 3, 1, tzinfo=UTC))
        clock.advance(hours=1, seconds=30)
        assert clock.now() == datetime(2026, 3, 1, tzinfo=UTC) + timedelta(hours=1, seconds=30)


def test_utc_now_is_aware() -> None:
    assert utc_now().utcoffset() == timedelta(0)
