"""
API Handlers

Route handlers for the Inkpost services.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.

Modules:
========
- health_handler: /health, /ready, /live (every service)
- user_handler: login and profiles (user service)
- author_handler: blog create/update/delete (author service)
- blog_handler: cached reads and bookmarks (blog service)
- comment_handler: comments (blog service)
"""

from inkpost.api.handlers import (
    author_handler,
    blog_handler,
    comment_handler,
    health_handler,
    user_handler,
)

__all__ = [
    "author_handler",
    "blog_handler",
    "comment_handler",
    "health_handler",
    "user_handler",
]
