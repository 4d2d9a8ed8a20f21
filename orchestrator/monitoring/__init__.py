"""Observability for storage class matching."""

from .events import (
    EventSink,
    LoggingEventSink,
    PrometheusEventSink,
    CompositeEventSink,
    default_event_sink,
)

__all__ = [
    "EventSink",
    "LoggingEventSink",
    "PrometheusEventSink",
    "CompositeEventSink",
    "default_event_sink",
]
