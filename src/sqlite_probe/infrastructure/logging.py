"""Structured logging configuration.

Probe events are printed one per line, as JSON by default, so the version
report and any fatal error land on a single operator-visible stream.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator, TextIO

import structlog
from structlog.types import Processor


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    stream: TextIO | None = None,
) -> None:
    """
    Set up structured logging with structlog.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format ('json' or 'console')
        stream: Output stream (stdout at first use if None)
    """
    log_level = getattr(logging, level.upper())

    # Third-party libraries (opentelemetry) log through the stdlib.
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=stream or sys.stderr,
        level=max(log_level, logging.WARNING),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # ConsoleRenderer formats exc_info itself.
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=(stream or sys.stdout).isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a bound logger instance.

    Args:
        name: Logger name (module name typically)
        **initial_context: Initial context to bind to the logger

    Returns:
        A bound structlog logger
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger


@contextmanager
def run_context(**fields: Any) -> Iterator[None]:
    """Attach fields to every event logged during one probe run."""
    with structlog.contextvars.bound_contextvars(**fields):
        yield
