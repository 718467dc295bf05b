"""Observability – structured logging helpers."""
from event_sourcery.observability.logging.factory import JsonLoggerFactory
from event_sourcery.observability.logging.processors import EventContextProcessor, get_logger

__all__ = ["EventContextProcessor", "JsonLoggerFactory", "get_logger"]
