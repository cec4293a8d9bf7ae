"""Logging configuration for URL shortener."""

import json
import logging
import sys
from typing import Optional, TextIO


LOGGER_NAME = "url_shortener"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes LoggingMiddleware attaches through ``extra=``
ACCESS_FIELDS = ("client_ip", "method", "path", "status_code", "duration_ms")


class AccessFormatter(logging.Formatter):
    """
    Text formatter that switches to an access-log layout for records carrying
    request fields, and the plain layout for everything else.
    """

    basic_format = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    access_format = (
        "%(asctime)s [%(levelname)s] %(name)s - %(client_ip)s "
        "\"%(method)s %(path)s\" %(status_code)s %(duration_ms).2fms - %(message)s"
    )

    def __init__(self):
        super().__init__(fmt=self.basic_format, datefmt=DATE_FORMAT)
        self._access = logging.Formatter(fmt=self.access_format, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if all(hasattr(record, field) for field in ACCESS_FIELDS):
            return self._access.format(record)
        return super().format(record)


class JsonFormatter(logging.Formatter):
    """One JSON object per line. Message text is escaped by ``json.dumps``."""

    def __init__(self):
        super().__init__(datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in ACCESS_FIELDS:
            if hasattr(record, field):
                entry[field] = getattr(record, field)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _build_formatter(json_format: bool) -> logging.Formatter:
    return JsonFormatter() if json_format else AccessFormatter()


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter):
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the ``url_shortener`` logger.

    Calling it again replaces the handlers from an earlier call, so the
    server and the CLI can each pick their own console stream.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Also append to this file when set
        json_format: Emit JSON lines instead of text
        stream: Console stream (defaults to stdout)

    Returns:
        The configured logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = _build_formatter(json_format)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(stream or sys.stdout), numeric_level, formatter)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), numeric_level, formatter)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a logger by name, normally a child of ``url_shortener``."""
    return logging.getLogger(name)
