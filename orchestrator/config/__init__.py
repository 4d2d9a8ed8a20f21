"""Configuration package."""

from .base_config import (
    ORCHESTRATOR_API_VERSION,
    LOG_LEVEL,
    METRICS_ENABLED,
    SKIP_INVALID_POOLS,
)

__all__ = [
    'ORCHESTRATOR_API_VERSION',
    'LOG_LEVEL',
    'METRICS_ENABLED',
    'SKIP_INVALID_POOLS',
]
