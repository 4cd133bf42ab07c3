"""
Logging configuration for pbc.

Uses structlog on top of stdlib logging, writing to stderr so that
command output on stdout stays clean:
- Human-readable console format (default)
- JSON format (logging.format: json)

Level names follow the logrus convention used by earlier pbc releases:
trace, debug, info, warn, error, fatal, panic.
"""
import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import EventDict

LOG_LEVELS: dict[str, int] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
}


def parse_level(name: str) -> int:
    """
    Convert a level name to a stdlib logging level.

    Args:
        name: Level name, case-insensitive (e.g. "warn", "DEBUG")

    Returns:
        logging level constant

    Raises:
        ValueError: If the name is not a known level
    """
    try:
        return LOG_LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"not a valid logging level: {name!r}") from None


def add_log_level(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add log level to the event dict.
    """
    if method_name == "warn":
        method_name = "warning"
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(
    log_level: str = "warn",
    log_format: str = "console",
    stream: TextIO | None = None,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Level name accepted by parse_level()
        log_format: "console" or "json"
        stream: Output stream (default: sys.stderr)

    Raises:
        ValueError: If log_level is not a known level
    """
    numeric_level = parse_level(log_level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(numeric_level)

    logging.basicConfig(
        format="%(message)s",
        handlers=[handler],
        level=numeric_level,
        force=True
        )

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        ]
    if log_format == "json":
        # ConsoleRenderer formats exceptions itself
        processors.append(structlog.processors.format_exc_info)
    processors += [
        structlog.processors.UnicodeDecoder(),
        renderer,
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance (structured logger).

    Usage:
        logger = get_logger(__name__)
        logger.debug("message", key="value")
    """
    return structlog.get_logger(name)
