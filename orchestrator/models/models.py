"""Data models for backends, storage pools and volumes."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Set
from enum import Enum

from orchestrator.storage_attribute import Offer

# Enums
class Protocol(Enum):
    FILE = "file"
    BLOCK = "block"
    ANY = ""

# Volume Models
@dataclass
class VolumeConfig:
    """Requested properties of a volume"""
    name: str
    size: str = "1G"
    storage_class: str = ""
    protocol: Protocol = Protocol.ANY

@dataclass(eq=False)
class Volume:
    """A provisioned volume living in a storage pool"""
    config: VolumeConfig
    backend: str = ""
    pool: str = ""
    created_at: datetime = field(default_factory=datetime.now)

# Storage Models
@dataclass(eq=False)
class StoragePool:
    """Capacity unit exposed by a backend.

    ``attributes`` maps attribute names to offers; it is ``None`` only
    when a driver failed to initialize the pool.  ``storage_classes``
    records the names of the storage classes that claimed this pool.
    Pools compare by identity.
    """
    name: str
    attributes: Optional[Dict[str, Offer]] = field(default_factory=dict)
    backend: Optional['StorageBackend'] = None
    volumes: Dict[str, Volume] = field(default_factory=dict)
    storage_classes: Set[str] = field(default_factory=set)

    def add_storage_class(self, storage_class_name: str) -> None:
        self.storage_classes.add(storage_class_name)

    def remove_storage_class(self, storage_class_name: str) -> bool:
        """Drop a back-reference; returns whether one was present"""
        if storage_class_name in self.storage_classes:
            self.storage_classes.discard(storage_class_name)
            return True
        return False

    def add_volume(self, volume: Volume) -> None:
        volume.pool = self.name
        if self.backend is not None:
            volume.backend = self.backend.name
        self.volumes[volume.config.name] = volume

    def __repr__(self):
        backend_name = self.backend.name if self.backend is not None else None
        return f"StoragePool(name={self.name!r}, backend={backend_name!r})"

@dataclass(eq=False)
class StorageBackend:
    """Connection to a storage system; owns its pools"""
    name: str
    protocol: Protocol = Protocol.FILE
    online: bool = True
    driver_name: str = ""
    storage: Dict[str, StoragePool] = field(default_factory=dict)

    def add_storage_pool(self, pool: StoragePool) -> StoragePool:
        pool.backend = self
        self.storage[pool.name] = pool
        return pool

    def get_protocol(self) -> Protocol:
        return self.protocol

    def get_pools(self) -> List[StoragePool]:
        return list(self.storage.values())

    def __repr__(self):
        return f"StorageBackend(name={self.name!r}, protocol={self.protocol.value!r}, online={self.online})"
