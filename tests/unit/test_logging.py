"""Tests for logging helpers."""

import logging

from property_reel.utils.logging_config import ProgressFormatter, configure_logging
from property_reel.utils.simple_logger import log_complete, log_failed, log_start


class TestProgressLogging:
    """Test progress records and their formatting."""
    
    def test_progress_records(self, caplog):
        logger = logging.getLogger("property_reel.test")
        
        with caplog.at_level(logging.INFO, logger="property_reel.test"):
            log_start(logger, "Assembling timeline")
            log_complete(logger, "assemble_ok")
            log_failed(logger, "validate_failed")
        
        assert [r.progress_type for r in caplog.records] == ["start", "complete", "failed"]
        assert caplog.records[2].levelno == logging.WARNING
    
    def test_skipped_below_level(self, caplog):
        logger = logging.getLogger("property_reel.quiet")
        
        with caplog.at_level(logging.ERROR, logger="property_reel.quiet"):
            log_start(logger, "hidden")
        
        assert caplog.records == []
    
    def test_formatter_marks(self):
        formatter = ProgressFormatter("%(message)s")
        record = logging.LogRecord("x", logging.INFO, "", 0, "done", (), None)
        assert formatter.format(record) == "done"
        
        record.progress_type = "complete"
        assert formatter.format(record) == "✅ done"
    
    def test_configure_logging(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("DEBUG")
            
            assert root.level == logging.DEBUG
            assert isinstance(root.handlers[0].formatter, ProgressFormatter)
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
