"""Orchestrator core coordinating backends and storage classes."""

import logging
import threading
from typing import Dict, List, Optional, Union

from orchestrator.models.models import StorageBackend
from orchestrator.monitoring import events
from orchestrator.monitoring.events import EventSink, default_event_sink
from orchestrator.storage_class import (
    Config,
    StorageClass,
    StorageClassExternal,
    StorageClassPersistent,
)
from orchestrator.utils.errors import AlreadyExistsError, InvalidPoolStateError, NotFoundError

logger = logging.getLogger(__name__)


class StorageOrchestrator:
    """Owns every backend and storage class behind one coarse lock.

    Storage classes have no locking of their own, so every add, remove
    and query goes through this lock.
    """

    def __init__(self, event_sink: Optional[EventSink] = None,
                 skip_invalid_pools: Optional[bool] = None):
        self.event_sink = event_sink or default_event_sink()
        self.skip_invalid_pools = skip_invalid_pools
        self.backends: Dict[str, StorageBackend] = {}
        self.storage_classes: Dict[str, StorageClass] = {}
        self._lock = threading.RLock()

    def add_backend(self, backend: StorageBackend) -> int:
        """Register a backend with every storage class.

        A backend replacing one of the same name has the old backend's
        pools pruned first.  If the new backend fails to register, every
        class is rolled back and the old backend is registered again.
        Returns the number of pools added across all storage classes.
        """
        with self._lock:
            previous = self.backends.pop(backend.name, None)
            if previous is not None:
                logger.info(f"Replacing backend {backend.name}")
                for storage_class in self.storage_classes.values():
                    storage_class.remove_pools_for_backend(previous)

            added = 0
            try:
                for storage_class in self.storage_classes.values():
                    added += storage_class.check_and_add_backend(
                        backend, skip_invalid_pools=self.skip_invalid_pools
                    )
            except InvalidPoolStateError as e:
                logger.error(f"Failed to add backend {backend.name}: {e.message}")
                for storage_class in self.storage_classes.values():
                    storage_class.remove_pools_for_backend(backend)
                if previous is not None:
                    self._restore_backend(previous)
                raise

            self.backends[backend.name] = backend
            logger.info(f"Added backend {backend.name}; {added} storage pool(s) matched")
            return added

    def _restore_backend(self, backend: StorageBackend) -> None:
        # Registered cleanly before this call
        self.backends[backend.name] = backend
        for storage_class in self.storage_classes.values():
            storage_class.check_and_add_backend(
                backend, skip_invalid_pools=self.skip_invalid_pools
            )
        logger.info(f"Restored backend {backend.name}")

    def remove_backend(self, name: str) -> StorageBackend:
        with self._lock:
            backend = self.backends.pop(name, None)
            if backend is None:
                raise NotFoundError("backend", name)
            for storage_class in self.storage_classes.values():
                storage_class.remove_pools_for_backend(backend)
            logger.info(f"Removed backend {name}")
            return backend

    def get_backend(self, name: str) -> StorageBackend:
        with self._lock:
            if name not in self.backends:
                raise NotFoundError("backend", name)
            return self.backends[name]

    def add_storage_class(self, storage_class: Union[Config, StorageClass]) -> StorageClassExternal:
        """Add a storage class and match it against every known backend"""
        if isinstance(storage_class, Config):
            storage_class = StorageClass(storage_class, event_sink=self.event_sink)

        with self._lock:
            name = storage_class.get_name()
            if name in self.storage_classes:
                raise AlreadyExistsError("storage class", name)

            added = 0
            try:
                for backend in self.backends.values():
                    added += storage_class.check_and_add_backend(
                        backend, skip_invalid_pools=self.skip_invalid_pools
                    )
            except InvalidPoolStateError as e:
                logger.error(f"Failed to add storage class {name}: {e.message}")
                for backend in self.backends.values():
                    storage_class.remove_pools_for_backend(backend)
                raise

            self.storage_classes[name] = storage_class
            logger.info(f"Added storage class {name}; {added} storage pool(s) matched")
            return storage_class.construct_external()

    def add_storage_class_from_json(self, config_json: str) -> StorageClassExternal:
        return self.add_storage_class(Config.from_json(config_json))

    def restore_storage_class(self, persistent: StorageClassPersistent) -> StorageClassExternal:
        """Re-add a storage class loaded from the durable store"""
        return self.add_storage_class(
            StorageClass.new_from_persistent(persistent, event_sink=self.event_sink)
        )

    def delete_storage_class(self, name: str) -> None:
        with self._lock:
            storage_class = self.storage_classes.pop(name, None)
            if storage_class is None:
                raise NotFoundError("storage class", name)
            for storage_pool in storage_class.get_storage_pools():
                storage_pool.remove_storage_class(name)
            self.event_sink.emit(events.STORAGE_CLASS_DELETED, storage_class=name)
            logger.info(f"Deleted storage class {name}")

    def get_storage_class(self, name: str) -> StorageClassExternal:
        with self._lock:
            if name not in self.storage_classes:
                raise NotFoundError("storage class", name)
            return self.storage_classes[name].construct_external()

    def list_storage_classes(self) -> List[StorageClassExternal]:
        with self._lock:
            return [
                self.storage_classes[name].construct_external()
                for name in sorted(self.storage_classes)
            ]

    def persistent_storage_classes(self) -> List[StorageClassPersistent]:
        """Snapshots to write to the durable store"""
        with self._lock:
            return [
                self.storage_classes[name].construct_persistent()
                for name in sorted(self.storage_classes)
            ]
