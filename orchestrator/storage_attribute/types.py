"""Offer and request types used to compare pool capabilities with storage class requirements."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple


class AttributeType(Enum):
    BOOL = "bool"
    INT = "int"
    STRING = "string"


class Request(ABC):
    """A value requested by a storage class for one named attribute."""

    @property
    @abstractmethod
    def type(self) -> AttributeType:
        pass

    @abstractmethod
    def to_json_value(self) -> Any:
        """Return the plain JSON value this request was built from"""
        pass


class Offer(ABC):
    """A capability advertised by a storage pool for one named attribute."""

    @property
    @abstractmethod
    def type(self) -> AttributeType:
        pass

    @abstractmethod
    def matches(self, request: Request) -> bool:
        pass


@dataclass(frozen=True)
class BoolRequest(Request):
    value: bool

    @property
    def type(self) -> AttributeType:
        return AttributeType.BOOL

    def to_json_value(self) -> bool:
        return self.value

    def __str__(self):
        return str(self.value).lower()


@dataclass(frozen=True)
class IntRequest(Request):
    value: int

    @property
    def type(self) -> AttributeType:
        return AttributeType.INT

    def to_json_value(self) -> int:
        return self.value

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class StringRequest(Request):
    value: str

    @property
    def type(self) -> AttributeType:
        return AttributeType.STRING

    def to_json_value(self) -> str:
        return self.value

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class BoolOffer(Offer):
    """A pool that offers True can also serve requests for False."""
    offer: bool

    @property
    def type(self) -> AttributeType:
        return AttributeType.BOOL

    def matches(self, request: Request) -> bool:
        if not isinstance(request, BoolRequest):
            return False
        return self.offer or not request.value

    def __str__(self):
        return str(self.offer).lower()


@dataclass(frozen=True)
class IntOffer(Offer):
    """Inclusive range of integer values a pool can serve."""
    min: int
    max: int

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"IntOffer min {self.min} is greater than max {self.max}")

    @property
    def type(self) -> AttributeType:
        return AttributeType.INT

    def matches(self, request: Request) -> bool:
        if not isinstance(request, IntRequest):
            return False
        return self.min <= request.value <= self.max

    def __str__(self):
        return f"{self.min}:{self.max}"


@dataclass(frozen=True)
class StringOffer(Offer):
    """Set of string values a pool can serve."""
    offers: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "offers", tuple(self.offers))

    @classmethod
    def of(cls, *offers: str) -> "StringOffer":
        return cls(offers=tuple(offers))

    @property
    def type(self) -> AttributeType:
        return AttributeType.STRING

    def matches(self, request: Request) -> bool:
        if not isinstance(request, StringRequest):
            return False
        return request.value in self.offers

    def __str__(self):
        return ",".join(self.offers)
