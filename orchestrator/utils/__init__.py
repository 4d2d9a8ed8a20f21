"""Utility modules for the storage class orchestrator."""

from .errors import (
    OrchestratorError,
    InvalidStorageClassConfigError,
    InvalidAttributeError,
    InvalidPoolStateError,
    NotFoundError,
    AlreadyExistsError
)

from .serializers import JSONEncoder, dumps

__all__ = [
    # Error handling
    'OrchestratorError',
    'InvalidStorageClassConfigError',
    'InvalidAttributeError',
    'InvalidPoolStateError',
    'NotFoundError',
    'AlreadyExistsError',

    # Serialization
    'JSONEncoder',
    'dumps'
]
