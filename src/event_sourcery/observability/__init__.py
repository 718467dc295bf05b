"""Observability – structured logging."""

from event_sourcery.observability.logging import EventContextProcessor, JsonLoggerFactory, get_logger

__all__ = ["EventContextProcessor", "JsonLoggerFactory", "get_logger"]
