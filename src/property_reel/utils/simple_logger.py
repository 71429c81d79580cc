"""Progress logging helpers for pipeline stages."""

import logging


def _log_progress(logger: logging.Logger, message: str, progress_type: str, level: int = logging.INFO):
    if not logger.isEnabledFor(level):
        return
    record = logger.makeRecord(
        logger.name, level, "", 0, message, (), None
    )
    record.progress_type = progress_type
    logger.handle(record)


def log_start(logger: logging.Logger, message: str):
    """Log the start of a task."""
    _log_progress(logger, message, 'start')


def log_update(logger: logging.Logger, message: str):
    """Log a progress update."""
    _log_progress(logger, message, 'update')


def log_complete(logger: logging.Logger, message: str):
    """Log task completion."""
    _log_progress(logger, message, 'complete')


def log_failed(logger: logging.Logger, message: str):
    """Log a stage that ended with errors."""
    _log_progress(logger, message, 'failed', logging.WARNING)
