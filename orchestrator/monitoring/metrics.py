from prometheus_client import Counter, Gauge, CollectorRegistry, REGISTRY
from typing import NamedTuple, Optional


class StorageClassMetrics(NamedTuple):
    events: Counter
    pools: Gauge


def build_metrics(registry: Optional[CollectorRegistry] = None) -> StorageClassMetrics:
    """Create the storage class metric families on ``registry``"""
    registry = registry if registry is not None else REGISTRY
    return StorageClassMetrics(
        events=Counter(
            'storage_class_events_total',
            'Storage class matching and membership events',
            ['event', 'storage_class'],
            registry=registry
        ),
        pools=Gauge(
            'storage_class_pools',
            'Number of storage pools currently matching a storage class',
            ['storage_class'],
            registry=registry
        ),
    )


# Storage Class Metrics
STORAGE_CLASS_METRICS = build_metrics()
