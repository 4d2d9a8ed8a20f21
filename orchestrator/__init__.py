"""Storage class matching engine for a storage orchestration control plane."""

__version__ = "0.1.0"
