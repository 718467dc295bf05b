"""Application event sourcing – Repository."""

from __future__ import annotations

import dataclasses
from typing import TypeVar

from event_sourcery.application.event_sourcing.ports import EventSink, EventSource
from event_sourcery.config.validation import ConfigError
from event_sourcery.kernel.ddd.aggregate import AggregateRoot
from event_sourcery.observability.logging import get_logger

T = TypeVar("T", bound=AggregateRoot)

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class RepositoryConfig:
    """Collaborators a :class:`Repository` reads from and writes to."""

    event_source: EventSource
    event_sink: EventSink


class Repository:
    """Loads aggregates by replaying their history from an event source.

    Collaborators come from *config* and may be overridden by keyword, both
    at construction and per :meth:`load` call, so two repositories can point
    at different stores without any shared state.

    Example::

        repo = Repository(RepositoryConfig(event_source=store, event_sink=store))
        cart = repo.load(ShoppingCart, "cart-1")
        cart.add_item("B")   # recorded through the sink
    """

    def __init__(
        self,
        config: RepositoryConfig | None = None,
        *,
        event_source: EventSource | None = None,
        event_sink: EventSink | None = None,
    ) -> None:
        if config is not None:
            event_source = event_source if event_source is not None else config.event_source
            event_sink = event_sink if event_sink is not None else config.event_sink
        if event_source is None:
            raise ConfigError("Repository requires an event source")
        if event_sink is None:
            raise ConfigError("Repository requires an event sink")
        self._event_source: EventSource = event_source
        self._event_sink: EventSink = event_sink

    def load(
        self,
        aggregate_class: type[T],
        aggregate_id: str,
        *,
        event_source: EventSource | None = None,
        event_sink: EventSink | None = None,
    ) -> T:
        """Return a fresh *aggregate_class* instance with its history replayed.

        Raises :class:`~event_sourcery.kernel.errors.UnknownEventError` when
        the history holds an event the aggregate has no handler for.
        """
        source = event_source if event_source is not None else self._event_source
        sink = event_sink if event_sink is not None else self._event_sink
        events = list(source.get_events_for_aggregate_id(aggregate_id))
        aggregate = aggregate_class(aggregate_id, sink)
        aggregate.load_history(events)
        _log.info(
            "aggregate.loaded",
            aggregate_type=aggregate_class.__qualname__,
            aggregate_id=aggregate_id,
            event_count=len(events),
            version=aggregate.version,
        )
        return aggregate


__all__ = ["Repository", "RepositoryConfig"]
