"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   │   └── InvalidEventVersionError
    │   ├── UnknownEventError
    │   ├── InvalidTypeOverrideError
    │   ├── UnpersistedEventComparisonError
    │   ├── DuplicateEventTypeError
    │   └── ConflictError
    │       └── ConcurrencyError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
"""

from event_sourcery.kernel.errors.application import ApplicationError
from event_sourcery.kernel.errors.base import BaseError
from event_sourcery.kernel.errors.domain import (
    ConcurrencyError,
    ConflictError,
    DomainError,
    DuplicateEventTypeError,
    InvalidEventVersionError,
    InvalidTypeOverrideError,
    UnknownEventError,
    UnpersistedEventComparisonError,
    ValidationError,
)
from event_sourcery.kernel.errors.infrastructure import InfrastructureError, SerializationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConcurrencyError",
    "ConflictError",
    "DomainError",
    "DuplicateEventTypeError",
    "InfrastructureError",
    "InvalidEventVersionError",
    "InvalidTypeOverrideError",
    "SerializationError",
    "UnknownEventError",
    "UnpersistedEventComparisonError",
    "ValidationError",
]
