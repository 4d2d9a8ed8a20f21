"""Logging setup shared by entry points."""
import logging
from typing import Optional

from orchestrator.config import base_config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the orchestrator."""
    logging.basicConfig(
        level=getattr(logging, (level or base_config.LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT
    )
