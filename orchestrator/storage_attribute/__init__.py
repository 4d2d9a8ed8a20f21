"""Storage attribute offers and requests."""

from .types import (
    AttributeType,
    Request,
    Offer,
    BoolRequest,
    IntRequest,
    StringRequest,
    BoolOffer,
    IntOffer,
    StringOffer,
)
from .registry import (
    MEDIA,
    PROVISIONING_TYPE,
    BACKEND_TYPE,
    SNAPSHOTS,
    ENCRYPTION,
    IOPS,
    HDD,
    SSD,
    HYBRID,
    THIN,
    THICK,
    ATTRIBUTE_TYPES,
    get_attribute_type,
    create_request,
    create_requests,
)

__all__ = [
    "AttributeType",
    "Request",
    "Offer",
    "BoolRequest",
    "IntRequest",
    "StringRequest",
    "BoolOffer",
    "IntOffer",
    "StringOffer",
    "MEDIA",
    "PROVISIONING_TYPE",
    "BACKEND_TYPE",
    "SNAPSHOTS",
    "ENCRYPTION",
    "IOPS",
    "HDD",
    "SSD",
    "HYBRID",
    "THIN",
    "THICK",
    "ATTRIBUTE_TYPES",
    "get_attribute_type",
    "create_request",
    "create_requests",
]
