"""Backend, storage pool and volume models."""

from .models import (
    Protocol,
    VolumeConfig,
    Volume,
    StoragePool,
    StorageBackend,
)

__all__ = [
    "Protocol",
    "VolumeConfig",
    "Volume",
    "StoragePool",
    "StorageBackend",
]
