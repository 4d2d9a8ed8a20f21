"""
Storage class entity: matches storage pools against a storage class
configuration and keeps the set of pools currently satisfying it.

A StorageClass is not thread safe.  Callers serialize access, see
orchestrator.core.orchestrator.StorageOrchestrator.
"""
from typing import Dict, List, Mapping, Optional, Tuple

from orchestrator.config import base_config
from orchestrator.models.models import Protocol, StorageBackend, StoragePool, Volume
from orchestrator.monitoring import events
from orchestrator.monitoring.events import EventSink, default_event_sink
from orchestrator.storage_attribute import Request
from orchestrator.utils.errors import InvalidPoolStateError
from .config import Config
from .projections import StorageClassExternal, StorageClassPersistent


class StorageClass:
    """Named provisioning profile and its live pool membership"""

    def __init__(self, config: Config, event_sink: Optional[EventSink] = None):
        self.config = config.with_default_version(base_config.ORCHESTRATOR_API_VERSION)
        self.event_sink = event_sink or default_event_sink()
        self._pools: List[StoragePool] = []

    @classmethod
    def new_for_config(cls, config_json: str,
                       event_sink: Optional[EventSink] = None) -> "StorageClass":
        """Create a storage class from its JSON configuration"""
        return cls(Config.from_json(config_json), event_sink=event_sink)

    @classmethod
    def new_from_persistent(cls, persistent: StorageClassPersistent,
                            event_sink: Optional[EventSink] = None) -> "StorageClass":
        """Restore a storage class from the durable store.

        Membership starts empty; backends must be registered again.
        """
        return cls(persistent.config, event_sink=event_sink)

    def matches(self, storage_pool: StoragePool) -> bool:
        """Check whether a pool satisfies this storage class.

        A pool named in the allow-list for its backend always matches.
        Otherwise every requested attribute must be offered and
        satisfied; a class without attributes matches nothing.

        Raises:
            InvalidPoolStateError: the pool has no attribute map.
        """
        backend_name = storage_pool.backend.name if storage_pool.backend is not None else None
        allowed = self.config.backend_storage_pools.get(backend_name, ())
        if storage_pool.name in allowed:
            return True

        if not self.config.attributes:
            return False

        for name, request in self.config.attributes.items():
            if storage_pool.attributes is None:
                raise InvalidPoolStateError(self.get_name(), storage_pool.name, backend_name, name)
            offer = storage_pool.attributes.get(name)
            if offer is None or not offer.matches(request):
                self.event_sink.emit(
                    events.POOL_MATCH_FAILED,
                    storage_class=self.get_name(),
                    pool=storage_pool.name,
                    backend=backend_name,
                    attribute=name,
                    offer=offer,
                    request=request,
                    found=offer is not None,
                )
                return False
        return True

    def check_and_add_backend(self, backend: StorageBackend,
                              skip_invalid_pools: Optional[bool] = None) -> int:
        """Add every pool of ``backend`` that satisfies this storage class.

        Registration is idempotent: pools already claimed from the same
        backend are dropped before the backend is evaluated again.  The
        whole backend is evaluated before membership changes, so an
        InvalidPoolStateError leaves membership untouched.

        Returns the number of pools added.
        """
        if not backend.online:
            self.event_sink.emit(
                events.BACKEND_SKIPPED_OFFLINE,
                storage_class=self.get_name(),
                backend=backend.name,
            )
            return 0

        if skip_invalid_pools is None:
            skip_invalid_pools = base_config.SKIP_INVALID_POOLS

        matched = []
        for storage_pool in backend.storage.values():
            try:
                if self.matches(storage_pool):
                    matched.append(storage_pool)
            except InvalidPoolStateError as e:
                if not skip_invalid_pools:
                    raise
                self.event_sink.emit(
                    events.INVALID_POOL,
                    storage_class=self.get_name(),
                    pool=storage_pool.name,
                    backend=backend.name,
                    attribute=e.attribute,
                )

        self._prune(backend)
        for storage_pool in matched:
            self._pools.append(storage_pool)
            storage_pool.add_storage_class(self.get_name())
            self.event_sink.emit(
                events.POOL_MATCHED,
                storage_class=self.get_name(),
                pool=storage_pool.name,
                backend=backend.name,
            )

        self.event_sink.emit(
            events.BACKEND_REGISTERED,
            storage_class=self.get_name(),
            backend=backend.name,
            added=len(matched),
            pool_count=len(self._pools),
        )
        return len(matched)

    def remove_pools_for_backend(self, backend: StorageBackend) -> int:
        """Drop every member pool owned by ``backend``.

        Returns the number of pools removed.
        """
        removed = self._prune(backend)
        self.event_sink.emit(
            events.BACKEND_PRUNED,
            storage_class=self.get_name(),
            backend=backend.name,
            removed=removed,
            pool_count=len(self._pools),
        )
        return removed

    def _prune(self, backend: StorageBackend) -> int:
        remaining = []
        removed = 0
        for storage_pool in self._pools:
            if storage_pool.backend is backend:
                storage_pool.remove_storage_class(self.get_name())
                removed += 1
            else:
                remaining.append(storage_pool)
        self._pools = remaining
        return removed

    def get_volumes(self) -> List[Volume]:
        """Volumes in member pools that were provisioned for this class"""
        ret = []
        for storage_pool in self._pools:
            # A pool can serve several storage classes
            for volume in storage_pool.volumes.values():
                if volume.config.storage_class == self.get_name():
                    ret.append(volume)
        return ret

    def get_name(self) -> str:
        return self.config.name

    def get_attributes(self) -> Mapping[str, Request]:
        return self.config.attributes

    def get_backend_storage_pools(self) -> Mapping[str, Tuple[str, ...]]:
        return self.config.backend_storage_pools

    def get_storage_pools(self) -> Tuple[StoragePool, ...]:
        return tuple(self._pools)

    def get_storage_pools_for_protocol(self, protocol: Protocol) -> List[StoragePool]:
        return [
            storage_pool for storage_pool in self._pools
            if protocol == Protocol.ANY or storage_pool.backend.get_protocol() == protocol
        ]

    def construct_external(self) -> StorageClassExternal:
        storage_pools: Dict[str, List[str]] = {}
        for storage_pool in self._pools:
            storage_pools.setdefault(storage_pool.backend.name, []).append(storage_pool.name)
        for pool_names in storage_pools.values():
            pool_names.sort()

        self.event_sink.emit(
            events.EXTERNAL_CONSTRUCTED,
            storage_class=self.get_name(),
            backends=len(storage_pools),
            pool_count=len(self._pools),
        )
        return StorageClassExternal(config=self.config.sorted(), storage_pools=storage_pools)

    def construct_persistent(self) -> StorageClassPersistent:
        return StorageClassPersistent(config=self.config.sorted())

    def __repr__(self):
        return f"StorageClass(name={self.get_name()!r}, pools={len(self._pools)})"
