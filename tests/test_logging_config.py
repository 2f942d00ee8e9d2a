"""
Tests for logging configuration
"""

import logging
import uuid

from spliceview.logging_config import get_logger


def unique_name():
    return f"spliceview.tests.{uuid.uuid4().hex}"


class TestGetLogger:
    """Tests for get_logger"""

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv("SPLICEVIEW_LOG_LEVEL", raising=False)

        logger = get_logger(unique_name())

        assert logger.level == logging.WARNING

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("SPLICEVIEW_LOG_LEVEL", "debug")

        logger = get_logger(unique_name())

        assert logger.level == logging.DEBUG

    def test_invalid_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("SPLICEVIEW_LOG_LEVEL", "CHATTY")

        logger = get_logger(unique_name())

        assert logger.level == logging.WARNING

    def test_handler_added_once(self):
        name = unique_name()

        get_logger(name)
        logger = get_logger(name)

        assert len(logger.handlers) == 1

    def test_format(self):
        logger = get_logger(unique_name())

        fmt = logger.handlers[0].formatter._fmt

        assert fmt == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
