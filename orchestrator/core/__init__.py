"""Orchestrator core."""

from .orchestrator import StorageOrchestrator

__all__ = ["StorageOrchestrator"]
