"""Known attribute names and construction of requests from configuration values."""

from typing import Any, Dict

from orchestrator.utils.errors import InvalidAttributeError
from .types import (
    AttributeType,
    Request,
    BoolRequest,
    IntRequest,
    StringRequest,
)

# Attribute names
MEDIA = "media"
PROVISIONING_TYPE = "provisioningType"
BACKEND_TYPE = "backendType"
SNAPSHOTS = "snapshots"
ENCRYPTION = "encryption"
IOPS = "IOPS"

# Media values
HDD = "hdd"
SSD = "ssd"
HYBRID = "hybrid"

# Provisioning types
THIN = "thin"
THICK = "thick"

ATTRIBUTE_TYPES: Dict[str, AttributeType] = {
    MEDIA: AttributeType.STRING,
    PROVISIONING_TYPE: AttributeType.STRING,
    BACKEND_TYPE: AttributeType.STRING,
    SNAPSHOTS: AttributeType.BOOL,
    ENCRYPTION: AttributeType.BOOL,
    IOPS: AttributeType.INT,
}


def get_attribute_type(name: str) -> AttributeType:
    """Unregistered attributes are compared as strings"""
    return ATTRIBUTE_TYPES.get(name, AttributeType.STRING)


def _coerce_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise InvalidAttributeError(name, value, "a boolean")


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidAttributeError(name, value, "an integer")


def create_request(name: str, value: Any) -> Request:
    """Build a typed request for attribute ``name`` from a JSON value.

    Requests that are already typed are passed through after checking
    that their type agrees with the registry.
    """
    attr_type = get_attribute_type(name)
    if isinstance(value, Request):
        if value.type != attr_type:
            raise InvalidAttributeError(name, value, f"a {attr_type.value} request")
        return value
    if attr_type == AttributeType.BOOL:
        return BoolRequest(_coerce_bool(name, value))
    if attr_type == AttributeType.INT:
        return IntRequest(_coerce_int(name, value))
    if not isinstance(value, str):
        raise InvalidAttributeError(name, value, "a string")
    return StringRequest(value)


def create_requests(attributes: Dict[str, Any]) -> Dict[str, Request]:
    return {name: create_request(name, value) for name, value in attributes.items()}
