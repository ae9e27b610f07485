"""
Structured logging for streamfmt.

structlog loggers are wrapped around stdlib loggers under the "streamfmt"
namespace, so nothing is emitted until the application (or the CLI) enables it.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog
from structlog.types import Processor

ROOT_LOGGER_NAME = "streamfmt"

_PROCESSORS: list[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "logger", "event"]),
]


def configure_logging(level: int = logging.WARNING, stream: IO[str] | None = None) -> None:
    """
    Send streamfmt log records to a stream.

    Replaces any handler installed by a previous call, so it is safe to call
    more than once.

    Args:
        level: Minimum stdlib level to emit
        stream: Destination, stderr when omitted
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger bound to a stdlib logger.

    Args:
        name: Logger name (typically __name__)
        **initial_context: Initial context values to bind

    Usage:
        log = get_logger(__name__)
        log.debug("directive parsed", conversion="d")
    """
    return structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER_NAME),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_context,
    )
