"""Storage classes and their projections."""

from .config import Config
from .projections import StorageClassExternal, StorageClassPersistent
from .storage_class import StorageClass

__all__ = [
    "Config",
    "StorageClass",
    "StorageClassExternal",
    "StorageClassPersistent",
]
