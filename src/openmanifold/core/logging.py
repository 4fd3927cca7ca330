"""
Structured logging configuration for OpenManifold.

Uses structlog (https://www.structlog.org/) to provide structured, context-rich
logging throughout the library. Supports both JSON output (production) and
colored console output (development).

Usage::

    from openmanifold.core.logging import configure_logging, get_logger

    configure_logging(json_output=False)  # Call once at startup
    logger = get_logger(__name__)
    logger.debug("kernel_call", operation="union", triangles=96)

Without that call the package stays quiet: every logger writes through the
stdlib ``openmanifold.*`` hierarchy, which carries a ``NullHandler``.
"""

import logging
import sys
from typing import Optional

import structlog

#: Root of the package logger hierarchy.
LOGGER_NAME = "openmanifold"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure structured logging for the host application.

    The library never calls this itself; applications embedding the facade
    call it once at start-up.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: If True, output JSON lines (for production/log aggregation).
                     If False, output colored console-friendly lines (dev mode).
        log_file: Optional path to write logs to a file in addition to stderr.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=handlers,
        force=True,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Route stdlib records (including the kernel-call debug lines) through
    # the same renderer.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger for the given module name.

    The logger always writes through the stdlib logger of the same name.
    Until the host calls :func:`configure_logging`, events therefore obey
    stdlib levels and handlers (DEBUG is dropped by default) instead of
    structlog's print-to-stdout default.

    Args:
        name: Module name, typically ``__name__``.

    Returns:
        A bound structlog logger instance.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
