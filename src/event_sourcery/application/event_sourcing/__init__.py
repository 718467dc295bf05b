"""Application — Event Sourcing."""

from event_sourcery.application.event_sourcing.ports import EventSink, EventSource
from event_sourcery.application.event_sourcing.repository import Repository, RepositoryConfig

__all__ = [
    "EventSink",
    "EventSource",
    "Repository",
    "RepositoryConfig",
]
