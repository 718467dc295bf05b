"""Testing generators – Hypothesis strategies for events and histories."""
from event_sourcery.testing.generators.strategies import (
    body_strategy,
    event_strategy,
    history_strategy,
)

__all__ = ["body_strategy", "event_strategy", "history_strategy"]
