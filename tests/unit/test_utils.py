"""Unit tests for logging configuration.

Tests that the package logger gets one handler per configuration, honours
the configured level and emits JSON when structured output is requested.
"""

import json
import logging

import pytest

from ephys_meta.config import LoggingConfig
from ephys_meta.utils import PACKAGE_LOGGER, JsonFormatter, configure_logging

pytestmark = pytest.mark.unit


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _record(message="Exported document", level=logging.INFO):
    return logging.LogRecord("ephys_meta.yaml_io", level, __file__, 1, message, None, None)


class TestConfigureLogging:
    """Test package logger configuration."""

    def test_Should_SetLevel_When_Configured(self, package_logger):
        configure_logging(LoggingConfig(level="debug"))

        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_Should_ReplaceOwnHandler_When_ConfiguredTwice(self, package_logger):
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig(level="WARNING", structured=True))

        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, JsonFormatter)

    def test_Should_KeepForeignHandlers_When_Configured(self, package_logger):
        foreign = logging.NullHandler()
        package_logger.addHandler(foreign)

        configure_logging(LoggingConfig())

        assert foreign in package_logger.handlers
        assert len(package_logger.handlers) == 2

    def test_Should_LeaveRootLogger_When_Configured(self, package_logger):
        root = logging.getLogger()
        handlers = list(root.handlers)

        configure_logging(LoggingConfig(level="ERROR"))

        assert root.handlers == handlers


class TestJsonFormatter:
    def test_Should_EmitParsableJson_When_MessageHasQuotes(self):
        """Quotes in messages do not break the JSON line."""
        line = JsonFormatter().format(_record('Excluded field "lab"'))

        payload = json.loads(line)

        assert payload["message"] == 'Excluded field "lab"'
        assert payload["level"] == "INFO"
        assert payload["name"] == "ephys_meta.yaml_io"
