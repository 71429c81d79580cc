"""Centralized logging configuration for Property Reel."""

import logging
import sys
from typing import Optional


PROGRESS_MARKS = {
    "start": "🚀",
    "update": "   ▶",
    "complete": "✅",
    "failed": "❌",
}


class ProgressFormatter(logging.Formatter):
    """Prefixes progress records from simple_logger with a stage marker."""
    
    def format(self, record):
        message = super().format(record)
        mark = PROGRESS_MARKS.get(getattr(record, "progress_type", None))
        return f"{mark} {message}" if mark else message


def configure_logging(
    level: str = "INFO",
    format: Optional[str] = None,
    suppress_external: bool = True
) -> None:
    """Configure logging for the application.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format: Custom format string, or None for default
        suppress_external: If True, suppress noisy external library logs
    """
    # Default format: levelname | time | logger | message
    if format is None:
        format = "%(levelname)-5s | %(asctime)s | %(name)s | %(message)s"
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ProgressFormatter(format, datefmt="%H:%M:%S"))
    
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True  # Reconfigure if already configured
    )
    
    if suppress_external:
        for name in ("uvicorn.access", "httpx", "httpcore", "multipart"):
            logging.getLogger(name).setLevel(logging.WARNING)
