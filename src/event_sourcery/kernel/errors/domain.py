"""Domain errors — event, aggregate and registry contract violations."""

from __future__ import annotations

from typing import Any

from event_sourcery.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules."""

    default_code = "validation_error"


class InvalidEventVersionError(ValidationError):
    """An event was constructed with a version that is not a non-negative integer."""

    default_code = "invalid_event_version"

    def __init__(self, value: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Event version must be a non-negative integer, got {value!r}",
            detail={"value": repr(value)},
            **kwargs,
        )
        self.value = value


class UnknownEventError(DomainError):
    """An aggregate has no handler for the type of an event it was given.

    Signals a mismatch between code and event stream; never retried.
    """

    default_code = "unknown_event"

    def __init__(self, event_type: str, aggregate_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"{event_type} is unknown to {aggregate_type}",
            detail={"event_type": event_type, "aggregate_type": aggregate_type},
            **kwargs,
        )
        self.event_type = event_type
        self.aggregate_type = aggregate_type


class InvalidTypeOverrideError(DomainError):
    """``Event.replace`` was asked to change ``type`` without changing the event class."""

    default_code = "invalid_type_override"

    def __init__(
        self,
        event_class: str,
        declared_type: str,
        requested_type: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Cannot override type of {event_class} (declared {declared_type!r}) "
            f"with {requested_type!r}; change the event class instead",
            detail={
                "event_class": event_class,
                "declared_type": declared_type,
                "requested_type": requested_type,
            },
            **kwargs,
        )
        self.event_class = event_class
        self.declared_type = declared_type
        self.requested_type = requested_type


class UnpersistedEventComparisonError(DomainError, TypeError):
    """Events are ordered by ``id``; an event without one cannot be compared."""

    default_code = "unpersisted_event_comparison"


class DuplicateEventTypeError(DomainError):
    """A type name or event class was registered twice."""

    default_code = "duplicate_event_type"


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class ConcurrencyError(ConflictError):
    """An appended event's version is not the next position of its stream."""

    default_code = "concurrency_conflict"

    def __init__(self, aggregate_id: str, expected: int, actual: int, **kwargs: Any) -> None:
        super().__init__(
            f"Concurrency conflict on aggregate '{aggregate_id}': "
            f"expected version {expected}, got {actual}",
            detail={"aggregate_id": aggregate_id, "expected": expected, "actual": actual},
            **kwargs,
        )
        self.aggregate_id = aggregate_id
        self.expected = expected
        self.actual = actual


__all__ = [
    "ConcurrencyError",
    "ConflictError",
    "DomainError",
    "DuplicateEventTypeError",
    "InvalidEventVersionError",
    "InvalidTypeOverrideError",
    "UnknownEventError",
    "UnpersistedEventComparisonError",
    "ValidationError",
]
