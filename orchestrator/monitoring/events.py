"""
Structured event sinks for storage class matching and membership changes.

Storage classes never log directly; they report what happened to an
injected ``EventSink``.  The sinks below forward events to the standard
logging module and to Prometheus.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from prometheus_client import CollectorRegistry

from orchestrator.config import base_config
from .metrics import STORAGE_CLASS_METRICS, build_metrics

# Event names
POOL_MATCHED = "pool_matched"
POOL_MATCH_FAILED = "pool_match_failed"
INVALID_POOL = "invalid_pool"
BACKEND_SKIPPED_OFFLINE = "backend_skipped_offline"
BACKEND_REGISTERED = "backend_registered"
BACKEND_PRUNED = "backend_pruned"
EXTERNAL_CONSTRUCTED = "external_constructed"
STORAGE_CLASS_DELETED = "storage_class_deleted"


class EventSink(ABC):
    """Receives structured events"""

    @abstractmethod
    def emit(self, event: str, **fields: Any) -> None:
        pass


class LoggingEventSink(EventSink):
    """Writes events through the logging module"""

    WARNING_EVENTS = frozenset({INVALID_POOL})

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def emit(self, event: str, **fields: Any) -> None:
        level = logging.WARNING if event in self.WARNING_EVENTS else logging.DEBUG
        if not self.logger.isEnabledFor(level):
            return
        rendered = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
        self.logger.log(
            level,
            f"{event} {rendered}".rstrip(),
            extra={"event": event, "event_fields": fields}
        )


class PrometheusEventSink(EventSink):
    """Counts events per storage class and tracks pool membership size.

    Events carrying ``pool_count`` update the ``storage_class_pools``
    gauge.  Pass a private registry to keep metrics out of the default
    process registry.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.metrics = STORAGE_CLASS_METRICS if registry is None else build_metrics(registry)

    def emit(self, event: str, **fields: Any) -> None:
        storage_class = str(fields.get("storage_class", ""))
        self.metrics.events.labels(event=event, storage_class=storage_class).inc()
        if event == STORAGE_CLASS_DELETED:
            try:
                self.metrics.pools.remove(storage_class)
            except KeyError:
                pass
        elif "pool_count" in fields:
            self.metrics.pools.labels(storage_class=storage_class).set(fields["pool_count"])


class CompositeEventSink(EventSink):
    """Fans events out to several sinks"""

    def __init__(self, sinks: Iterable[EventSink]):
        self.sinks: List[EventSink] = list(sinks)

    def emit(self, event: str, **fields: Any) -> None:
        for sink in self.sinks:
            sink.emit(event, **fields)


def default_event_sink() -> EventSink:
    """Logging sink, plus Prometheus when metrics are enabled"""
    if base_config.METRICS_ENABLED:
        return CompositeEventSink([LoggingEventSink(), PrometheusEventSink()])
    return LoggingEventSink()
