"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request around the request's db session. Adapters
are process-wide singletons (connection pools, HTTP clients) and are injected
through their own dependencies so tests can swap them for fakes with
app.dependency_overrides.

Usage:
======
    from inkpost.api.dependencies.services import get_blog_service

    @router.get("/blog/{blog_id}")
    async def get_blog(
        blog_id: int,
        blog_service: BlogService = Depends(get_blog_service),
    ):
        return await blog_service.get_blog(blog_id)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.api.dependencies.database import get_db
from inkpost.shared.adapters.google_oauth_adapter import (
    GoogleOAuthAdapter,
    get_google_oauth_adapter,
)
from inkpost.shared.adapters.redis_adapter import RedisAdapter, get_redis_adapter
from inkpost.shared.adapters.sqs_adapter import SQSAdapter, get_sqs_adapter
from inkpost.shared.adapters.storage_adapter import StorageAdapter, get_storage_adapter
from inkpost.shared.adapters.user_service_client import (
    UserServiceClient,
    get_user_service_client,
)
from inkpost.shared.services.auth_service import AuthService
from inkpost.shared.services.author_service import AuthorService
from inkpost.shared.services.blog_service import BlogService
from inkpost.shared.services.comment_service import CommentService
from inkpost.shared.services.saved_blog_service import SavedBlogService
from inkpost.shared.services.user_service import UserService


# ═══════════════════════════════════════════════════════════════════════════════
# ADAPTERS
# ═══════════════════════════════════════════════════════════════════════════════


def get_google() -> GoogleOAuthAdapter:
    return get_google_oauth_adapter()


def get_storage() -> StorageAdapter:
    return get_storage_adapter()


def get_publisher() -> SQSAdapter:
    return get_sqs_adapter()


def get_cache() -> RedisAdapter:
    return get_redis_adapter()


def get_user_client() -> UserServiceClient:
    return get_user_service_client()


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICES
# ═══════════════════════════════════════════════════════════════════════════════


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
    google: GoogleOAuthAdapter = Depends(get_google),
) -> AuthService:
    """
    Dependency to get AuthService instance.
    """
    return AuthService(db, google)


async def get_user_service(
    db: AsyncSession = Depends(get_db),
    storage: StorageAdapter = Depends(get_storage),
) -> UserService:
    """
    Dependency to get UserService instance.
    """
    return UserService(db, storage)


async def get_author_service(
    db: AsyncSession = Depends(get_db),
    storage: StorageAdapter = Depends(get_storage),
    publisher: SQSAdapter = Depends(get_publisher),
) -> AuthorService:
    """
    Dependency to get AuthorService instance.
    """
    return AuthorService(db, storage, publisher)


async def get_blog_service(
    db: AsyncSession = Depends(get_db),
    cache: RedisAdapter = Depends(get_cache),
    user_client: UserServiceClient = Depends(get_user_client),
) -> BlogService:
    """
    Dependency to get BlogService instance.
    """
    return BlogService(db, cache, user_client)


async def get_comment_service(
    db: AsyncSession = Depends(get_db),
) -> CommentService:
    """
    Dependency to get CommentService instance.
    """
    return CommentService(db)


async def get_saved_blog_service(
    db: AsyncSession = Depends(get_db),
) -> SavedBlogService:
    """
    Dependency to get SavedBlogService instance.
    """
    return SavedBlogService(db)
