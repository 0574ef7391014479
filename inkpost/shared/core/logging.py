"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.

Log Output:
===========
Development:
    2026-01-15 10:30:00 [info     ] Blog created                   blog_id=42 author=550e8400-...

Production (JSON):
    {"timestamp": "2026-01-15T10:30:00", "level": "info", "event": "Blog created", "blog_id": 42}

Every line carries the `service` name bound by the process entry point
(user, author, blog, or worker), so logs from all four processes can share
one aggregation stream.

Usage:
======
    from inkpost.shared.core.logging import logger, get_logger, log_context

    logger.info("Blog created", blog_id=blog.id, author=user_id)

    cache_logger = get_logger("cache")
    cache_logger.debug("Cache hit", key=key)

    log_context(service="blog")
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from inkpost.config.settings import settings


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    - Development: Colored console output for readability
    - Everything else: JSON output for log aggregation systems

    Stdlib loggers (used by the adapters) share the same stream and level.
    Called automatically when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Args:
        **kwargs: Key-value pairs to add to log context

    Example:
        log_context(service="worker", message_id=message.message_id)
        logger.info("Processing event")  # Includes service, message_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """
    Clear all context variables.

    The worker calls this after every message so one event's context
    does not leak into the next.
    """
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("inkpost")
