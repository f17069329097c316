"""Tests for structured logging setup."""

import logging

import pytest
import structlog

from patternkit.config.schemas import LoggingConfig, LogLevel, LogRenderer
from patternkit.infrastructure.logging import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestSetupLogging:

    def test_configures_root_logger(self, restore_root_logger):
        setup_logging(LoggingConfig(level=LogLevel.DEBUG))

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(
            restore_root_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter
        )
        assert structlog.is_configured()

    def test_json_renderer(self, restore_root_logger):
        setup_logging(LoggingConfig(level="warning", renderer=LogRenderer.JSON))

        assert restore_root_logger.level == logging.WARNING

    def test_custom_format_wraps_rendered_event(self, restore_root_logger):
        """Test the configured format string is applied by the root handler."""
        setup_logging(LoggingConfig(format="CUSTOM %(message)s"))
        formatter = restore_root_logger.handlers[0].formatter
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)

        rendered = formatter.format(record)

        assert rendered.startswith("CUSTOM ")
        assert "hello" in rendered


class TestGetLogger:

    def setup_method(self):
        """Start from an unconfigured structlog."""
        structlog.reset_defaults()

    def teardown_method(self):
        structlog.reset_defaults()

    def test_get_logger_configures_structlog(self):
        """Test get_logger configures structlog when nothing else has."""
        assert not structlog.is_configured()

        logger = get_logger(__name__)
        logger.debug("debug event", key="value")

        assert structlog.is_configured()

    def test_get_logger_leaves_root_logger_alone(self):
        root_logger = logging.getLogger()
        handlers = root_logger.handlers[:]
        level = root_logger.level

        get_logger(__name__)

        assert root_logger.handlers == handlers
        assert root_logger.level == level
