# test_logger.py

import logging

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from text_style.logger import Logger


class TestLogger:

    def test_disabled_logger_adds_null_handler(self):
        logger = Logger("text_style.tests.disabled")
        logger.debug("hidden")
        assert any(isinstance(h, logging.NullHandler)
                   for h in logging.getLogger("text_style.tests.disabled").handlers)

    def test_enabled_logger_writes_file(self, tmp_path):
        log_file = tmp_path / "logs" / "debug.log"
        logger = Logger("text_style.tests.enabled", logging_enabled=True, log_file=str(log_file))
        logger.error("write failed")
        for handler in logging.getLogger("text_style.tests.enabled").handlers:
            handler.flush()
        assert "ERROR - write failed" in log_file.read_text()

    def test_level_methods_exist(self):
        logger = Logger("text_style.tests.methods")
        for level in ("debug", "info", "warning", "error"):
            assert callable(getattr(logger, level))

    def test_enabled_logger_configured_once(self, tmp_path):
        log_file = tmp_path / "once.log"
        name = "text_style.tests.once"
        first = Logger(name, logging_enabled=True, log_file=str(log_file))
        second = Logger(name, logging_enabled=True, log_file=str(log_file))
        assert len(logging.getLogger(name).handlers) == 1
        second.info("only once")
        for handler in logging.getLogger(name).handlers:
            handler.flush()
        assert log_file.read_text().count("only once") == 1
        assert first is not second

    def test_disabled_logger_configured_once(self):
        name = "text_style.tests.disabled_once"
        for _ in range(5):
            Logger(name)
        assert len(logging.getLogger(name).handlers) == 1
