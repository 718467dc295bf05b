"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install "event-sourcery[test]"
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

    from event_sourcery.kernel.ddd.event import Event


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


def body_strategy(max_size: int = 5) -> "SearchStrategy[dict[str, Any]]":
    """Hypothesis strategy for already-normalised event bodies.

    Keys are short non-empty strings; values are JSON scalars or flat lists
    of them, so a drawn body is unchanged by
    :class:`~event_sourcery.kernel.ddd.body_serializer.EventBodySerializer`.
    """
    st = _require_hypothesis()
    scalars = st.one_of(
        st.none(),
        st.booleans(),
        st.integers(min_value=-(2**31), max_value=2**31),
        st.text(max_size=20),
    )
    values = st.one_of(scalars, st.lists(scalars, max_size=3))
    return st.dictionaries(st.text(min_size=1, max_size=10), values, max_size=max_size)


def event_strategy(
    type_names: Sequence[str] = ("item_added",),
    *,
    aggregate_id: str | None = None,
) -> "SearchStrategy[Event]":
    """Hypothesis strategy for unpersisted generic :class:`Event` instances.

    Example::

        @given(event_strategy(["item_added", "item_removed"]))
        def test_new_events_are_not_persisted(event):
            assert not event.persisted()
    """
    from event_sourcery.kernel.ddd.event import Event

    st = _require_hypothesis()
    return st.builds(
        Event,
        aggregate_id=st.just(aggregate_id),
        type=st.sampled_from(list(type_names)),
        body=body_strategy(),
        correlation_id=st.one_of(st.none(), st.uuids().map(str)),
    )


def history_strategy(
    aggregate_id: str,
    type_names: Sequence[str] = ("item_added",),
    *,
    max_size: int = 20,
) -> "SearchStrategy[list[Event]]":
    """Hypothesis strategy for a persisted stream of one aggregate.

    Events carry consecutive ``id`` and ``version`` values starting at 1, as
    an event source would return them.
    """
    st = _require_hypothesis()

    def _persist(events: list[Event]) -> list[Event]:
        return [
            event.replace(id=position, version=position)
            for position, event in enumerate(events, start=1)
        ]

    return st.lists(
        event_strategy(type_names, aggregate_id=aggregate_id),
        max_size=max_size,
    ).map(_persist)


__all__ = ["body_strategy", "event_strategy", "history_strategy"]
