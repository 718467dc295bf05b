"""
event_sourcery – Event-sourcing core.

Import path convention::

    from event_sourcery.kernel.ddd import AggregateRoot, Event, handles
    from event_sourcery.kernel.errors import UnknownEventError
    from event_sourcery.application.event_sourcing import Repository, RepositoryConfig
    from event_sourcery.testing import InMemoryEventStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
