"""Logging setup for ephys-meta.

The CLI calls ``configure_logging`` once with the loaded ``LoggingConfig``.
Only the ``ephys_meta`` package logger is touched, so applications that
embed the library keep their own root logger configuration.
"""

import json
import logging

from ..config import LoggingConfig

__all__ = [
    "PACKAGE_LOGGER",
    "JsonFormatter",
    "configure_logging",
]

PACKAGE_LOGGER = "ephys_meta"

_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Format each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, _DATE_FORMAT),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Handlers added by earlier calls are replaced; foreign handlers are kept.

    Args:
        config: Validated logging settings (level already upper-cased)

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(config.level)

    for handler in list(package_logger.handlers):
        if getattr(handler, "_ephys_meta", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._ephys_meta = True
    handler.setFormatter(JsonFormatter() if config.structured else logging.Formatter(_TEXT_FORMAT, datefmt=_DATE_FORMAT))
    package_logger.addHandler(handler)

    return package_logger
