"""Logging utilities for Property Reel."""

from .logging_config import configure_logging
from .simple_logger import log_start, log_update, log_complete, log_failed

__all__ = [
    "configure_logging",
    "log_start",
    "log_update",
    "log_complete",
    "log_failed",
]
