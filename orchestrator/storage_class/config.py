"""Declarative storage class configuration."""

import json
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from orchestrator.storage_attribute import Request, create_requests
from orchestrator.utils.errors import InvalidAttributeError, InvalidStorageClassConfigError
from orchestrator.utils.serializers import dumps


@dataclass(frozen=True)
class Config:
    """Immutable storage class configuration.

    ``attributes`` maps attribute names to requests.
    ``backend_storage_pools`` is the allow-list of backend name to pool
    names; a pool listed there matches regardless of attributes.
    """
    name: str
    version: str = ""
    attributes: Mapping[str, Request] = field(default_factory=dict)
    backend_storage_pools: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(
            self,
            "backend_storage_pools",
            MappingProxyType({
                backend: tuple(pools) for backend, pools in self.backend_storage_pools.items()
            })
        )

    def with_default_version(self, version: str) -> "Config":
        if self.version:
            return self
        return replace(self, version=version)

    def sorted(self) -> "Config":
        """Copy of this configuration with every allow-list sorted"""
        return replace(
            self,
            backend_storage_pools={
                backend: tuple(sorted(pools))
                for backend, pools in self.backend_storage_pools.items()
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "version": self.version,
            "name": self.name,
            "attributes": {
                name: request.to_json_value() for name, request in self.attributes.items()
            },
        }
        if self.backend_storage_pools:
            data["backendStoragePools"] = {
                backend: list(pools) for backend, pools in self.backend_storage_pools.items()
            }
        return data

    def to_json(self) -> str:
        return dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a configuration from decoded JSON, validating its shape"""
        if not isinstance(data, dict):
            raise InvalidStorageClassConfigError("storage class config must be a JSON object")

        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidStorageClassConfigError("storage class name is required")

        # null is treated the same as a missing key
        version = data.get("version")
        if version is None:
            version = ""
        if not isinstance(version, str):
            raise InvalidStorageClassConfigError(f"version must be a string, got {version!r}")

        attributes = data.get("attributes")
        if attributes is None:
            attributes = {}
        if not isinstance(attributes, dict):
            raise InvalidStorageClassConfigError("attributes must be a JSON object")
        try:
            requests = create_requests(attributes)
        except InvalidAttributeError as e:
            raise InvalidStorageClassConfigError(e.message) from e

        pools = data.get("backendStoragePools")
        if pools is None:
            pools = {}
        if not isinstance(pools, dict):
            raise InvalidStorageClassConfigError("backendStoragePools must be a JSON object")
        for backend, pool_names in pools.items():
            if not isinstance(pool_names, list) or not all(isinstance(p, str) for p in pool_names):
                raise InvalidStorageClassConfigError(
                    f"backendStoragePools entry for {backend} must be a list of pool names"
                )

        return cls(
            name=name,
            version=version,
            attributes=requests,
            backend_storage_pools=pools,
        )

    @classmethod
    def from_json(cls, config_json: str) -> "Config":
        try:
            data = json.loads(config_json)
        except (TypeError, ValueError) as e:
            raise InvalidStorageClassConfigError(str(e)) from e
        return cls.from_dict(data)
