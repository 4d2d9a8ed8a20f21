"""
Storage class example: match two backends against a few storage classes
and print the resulting projections.
"""
import json
import logging

from orchestrator.core import StorageOrchestrator
from orchestrator.logging_config import configure_logging
from orchestrator.models import Protocol, StorageBackend, StoragePool
from orchestrator.storage_attribute import (
    BoolOffer,
    IntOffer,
    StringOffer,
    MEDIA,
    IOPS,
    SNAPSHOTS,
    PROVISIONING_TYPE,
)

configure_logging()
logger = logging.getLogger(__name__)


def build_backends():
    """Create a NAS backend and a SAN backend with a mix of pools"""
    nas = StorageBackend(name="nas-east", protocol=Protocol.FILE, driver_name="ontap-nas")
    nas.add_storage_pool(StoragePool(name="aggr1", attributes={
        MEDIA: StringOffer.of("ssd"),
        SNAPSHOTS: BoolOffer(True),
        PROVISIONING_TYPE: StringOffer.of("thin", "thick"),
        IOPS: IntOffer(min=0, max=40000),
    }))
    nas.add_storage_pool(StoragePool(name="aggr2", attributes={
        MEDIA: StringOffer.of("hdd"),
        SNAPSHOTS: BoolOffer(True),
        PROVISIONING_TYPE: StringOffer.of("thin"),
        IOPS: IntOffer(min=0, max=5000),
    }))

    san = StorageBackend(name="san-west", protocol=Protocol.BLOCK, driver_name="solidfire-san")
    san.add_storage_pool(StoragePool(name="gold", attributes={
        MEDIA: StringOffer.of("ssd"),
        SNAPSHOTS: BoolOffer(False),
        IOPS: IntOffer(min=1000, max=100000),
    }))
    return [nas, san]


STORAGE_CLASSES = [
    {"name": "fast", "attributes": {"media": "ssd", "IOPS": "20000"}},
    {"name": "snapshots", "attributes": {"snapshots": True}},
    {"name": "pinned", "backendStoragePools": {"nas-east": ["aggr2"]}},
]


def main():
    orchestrator = StorageOrchestrator()
    for config in STORAGE_CLASSES:
        orchestrator.add_storage_class_from_json(json.dumps(config))
    for backend in build_backends():
        orchestrator.add_backend(backend)

    for external in orchestrator.list_storage_classes():
        logger.info(f"{external.get_name()}: {external.to_json()}")

    orchestrator.remove_backend("nas-east")
    logger.info(f"After removing nas-east: {orchestrator.get_storage_class('fast').to_json()}")

    for persistent in orchestrator.persistent_storage_classes():
        logger.info(f"Persisted {persistent.get_name()}: {persistent.to_json()}")


if __name__ == "__main__":
    main()
