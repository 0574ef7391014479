"""
Core Module

Provides core functionality shared across the services:
- Structured logging
- Custom exceptions

Usage:
======
    from inkpost.shared.core.logging import logger, get_logger
    from inkpost.shared.core.exceptions import InkpostException, BlogNotFoundError

    logger.info("Starting operation", blog_id=blog_id)
"""

from inkpost.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from inkpost.shared.core.exceptions import (
    InkpostException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    BlogNotFoundError,
    CommentNotFoundError,
    ValidationError,
    ConflictError,
    ServiceUnavailableError,
    ExternalServiceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "InkpostException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "BlogNotFoundError",
    "CommentNotFoundError",
    "ValidationError",
    "ConflictError",
    "ServiceUnavailableError",
    "ExternalServiceError",
]
