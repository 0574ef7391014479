"""
API Middleware

Custom middleware for the FastAPI applications.

Components:
===========
- error_handler: Global exception handling

Usage:
======
    from inkpost.api.middleware import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from inkpost.api.middleware.error_handler import setup_exception_handlers

__all__ = [
    "setup_exception_handlers",
]
