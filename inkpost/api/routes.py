"""
Route Registration

Centralizes route registration for the three services. Each service is its
own FastAPI application; they share the health endpoints and the /api/v1
prefix.

Route Hierarchy:
================
    every service
        /health, /ready, /live

    user service
        POST /api/v1/login
        GET  /api/v1/me
        GET  /api/v1/user/{id}
        POST /api/v1/user/update
        POST /api/v1/user/update/pic

    author service
        POST   /api/v1/blog/new
        POST   /api/v1/blog/{id}
        DELETE /api/v1/blog/{id}

    blog service
        GET    /api/v1/blog/all
        GET    /api/v1/blog/saved/all
        GET    /api/v1/blog/{id}
        POST   /api/v1/save/{blog_id}
        POST   /api/v1/comment/{blog_id}
        GET    /api/v1/comment/{blog_id}
        DELETE /api/v1/comment/{comment_id}

Usage:
======
    from inkpost.api.routes import register_routes

    app = FastAPI()
    register_routes(app, ServiceName.BLOG)
"""

from enum import Enum

from fastapi import FastAPI

from inkpost.api.handlers import (
    author_handler,
    blog_handler,
    comment_handler,
    health_handler,
    user_handler,
)
from inkpost.shared.schemas.common import ErrorResponse


API_PREFIX = "/api/v1"

# Documented error bodies; every handler renders domain errors in this shape
ERROR_RESPONSES = {
    status_code: {"model": ErrorResponse}
    for status_code in (400, 401, 403, 404, 409, 503)
}


class ServiceName(str, Enum):
    """The deployable services."""

    USER = "user"
    AUTHOR = "author"
    BLOG = "blog"


def register_routes(app: FastAPI, service: ServiceName) -> None:
    """
    Register the routes of one service.

    Args:
        app: FastAPI application instance
        service: Which service the application serves
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    if service == ServiceName.USER:
        app.include_router(
            user_handler.router,
            prefix=API_PREFIX,
            responses=ERROR_RESPONSES,
            tags=["Users"],
        )
    elif service == ServiceName.AUTHOR:
        app.include_router(
            author_handler.router,
            prefix=API_PREFIX,
            responses=ERROR_RESPONSES,
            tags=["Authoring"],
        )
    elif service == ServiceName.BLOG:
        app.include_router(
            blog_handler.router,
            prefix=API_PREFIX,
            responses=ERROR_RESPONSES,
            tags=["Blogs"],
        )
        app.include_router(
            comment_handler.router,
            prefix=API_PREFIX,
            responses=ERROR_RESPONSES,
            tags=["Comments"],
        )
