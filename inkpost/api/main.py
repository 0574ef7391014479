"""
Inkpost API Application Entry Points

FastAPI application setup for the three services, sharing middleware,
exception handling and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                     user_app / author_app / blog_app                        │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                    Middleware Stack                          │          │
│   │  ┌─────────────────────────────────────────────────────┐    │          │
│   │  │ CORS Middleware                                      │    │          │
│   │  │ Error Handler                                        │    │          │
│   │  └─────────────────────────────────────────────────────┘    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Routers (per service, see routes.py)            │          │
│   │  ┌──────────┐ ┌──────────┐ ┌──────────┐ ┌──────────┐       │          │
│   │  │  Health  │ │  Users   │ │ Authoring│ │  Blogs   │       │          │
│   │  └──────────┘ └──────────┘ └──────────┘ └──────────┘       │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                Dependencies (Injected)                       │          │
│   │  ┌──────────┐ ┌──────────┐ ┌──────────┐ ┌──────────┐       │          │
│   │  │ Database │ │   Auth   │ │ Services │ │ Adapters │       │          │
│   │  └──────────┘ └──────────┘ └──────────┘ └──────────┘       │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection verified (blog service: Redis too)
3. Application serves requests
4. Application stops → lifespan shutdown
5. HTTP clients, Redis and database connections closed

Usage:
======
    uvicorn inkpost.api.main:user_app --port 5000
    uvicorn inkpost.api.main:author_app --port 5001
    uvicorn inkpost.api.main:blog_app --port 5002

    # Or programmatically
    from inkpost.api.main import create_application
    app = create_application(ServiceName.BLOG)
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inkpost.api.middleware import setup_exception_handlers
from inkpost.api.routes import ServiceName, register_routes
from inkpost.config.settings import settings
from inkpost.shared.adapters.google_oauth_adapter import get_google_oauth_adapter
from inkpost.shared.adapters.redis_adapter import get_redis_adapter
from inkpost.shared.adapters.user_service_client import get_user_service_client
from inkpost.shared.core.logging import logger
from inkpost.shared.db import close_db, init_db


DESCRIPTIONS = {
    ServiceName.USER: "Accounts, Google sign-in and profiles",
    ServiceName.AUTHOR: "Blog authoring",
    ServiceName.BLOG: "Cached blog reads, comments and bookmarks",
}


def build_lifespan(service: ServiceName) -> Callable:
    """
    Build the lifespan context manager of one service.

    Startup:
    - Verify the database connection
    - Blog service: verify Redis (a failure is logged, reads fall back to the database)

    Shutdown:
    - Close HTTP clients and Redis owned by the service
    - Close database connections
    """

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
        # ═══════════════════════════════════════════════════════════════════════
        # STARTUP
        # ═══════════════════════════════════════════════════════════════════════
        logger.info(
            "Starting Inkpost service",
            service=service.value,
            version=settings.APP_VERSION,
            environment=settings.APP_ENV,
        )

        await init_db()

        if service == ServiceName.BLOG:
            if await get_redis_adapter().ping():
                logger.info("Redis connected")
            else:
                logger.warning("Redis unreachable, serving reads from the database")

        logger.info("Inkpost service started", service=service.value)

        yield

        # ═══════════════════════════════════════════════════════════════════════
        # SHUTDOWN
        # ═══════════════════════════════════════════════════════════════════════
        logger.info("Shutting down Inkpost service", service=service.value)

        if service == ServiceName.USER:
            await get_google_oauth_adapter().close()
        elif service == ServiceName.BLOG:
            await get_user_service_client().close()
            await get_redis_adapter().close()

        await close_db()

        logger.info("Inkpost service shutdown complete", service=service.value)

    return lifespan


def create_application(service: ServiceName) -> FastAPI:
    """
    Create and configure the FastAPI application of one service.

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS)
    3. Sets up exception handlers
    4. Registers the service's routes
    """
    app = FastAPI(
        title=f"{settings.APP_NAME} {service.value} service",
        description=DESCRIPTIONS[service],
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=build_lifespan(service),
    )
    app.state.service = f"{settings.APP_NAME.lower()}-{service.value}"

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app, service)

    return app


user_app = create_application(ServiceName.USER)
author_app = create_application(ServiceName.AUTHOR)
blog_app = create_application(ServiceName.BLOG)
