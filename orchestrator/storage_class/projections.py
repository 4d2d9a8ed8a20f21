"""Serializable views of a storage class."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from orchestrator.utils.errors import InvalidStorageClassConfigError
from orchestrator.utils.serializers import dumps
from .config import Config


@dataclass
class StorageClassExternal:
    """Configuration plus the pools currently matching, grouped by backend"""
    config: Config
    storage_pools: Dict[str, List[str]] = field(default_factory=dict)

    def get_name(self) -> str:
        return self.config.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Config": self.config.to_dict(),
            "StoragePools": {backend: list(pools) for backend, pools in self.storage_pools.items()},
        }

    def to_json(self) -> str:
        return dumps(self.to_dict())


@dataclass
class StorageClassPersistent:
    """Declared intent of a storage class as written to the durable store"""
    config: Config

    def get_name(self) -> str:
        return self.config.name

    def to_dict(self) -> Dict[str, Any]:
        return {"Config": self.config.to_dict()}

    def to_json(self) -> str:
        return dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> "StorageClassPersistent":
        if not isinstance(data, dict) or "Config" not in data:
            raise InvalidStorageClassConfigError("persistent storage class must contain Config")
        return cls(config=Config.from_dict(data["Config"]))

    @classmethod
    def from_json(cls, persistent_json: str) -> "StorageClassPersistent":
        try:
            data = json.loads(persistent_json)
        except (TypeError, ValueError) as e:
            raise InvalidStorageClassConfigError(str(e)) from e
        return cls.from_dict(data)
