"""
Blog Service

Read path for blogs, served through a Redis read-through cache.

Cache Layout:
=============
    blogs:{searchQuery}:{category}  → list of BlogResponse dicts
    blog:{id}                       → {"blog": BlogResponse, "author": UserResponse | None}

Entries expire after BLOG_CACHE_TTL_SECONDS and are evicted early by the
cache worker when the author service publishes an invalidation event. The
cache is best-effort: a Redis outage turns every read into a database read.

Usage:
======
    from inkpost.shared.services.blog_service import BlogService

    service = BlogService(db, get_redis_adapter(), get_user_service_client())
    blogs = await service.list_blogs(search_query="python", category="Technology")
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.config.settings import settings
from inkpost.shared.adapters.redis_adapter import RedisAdapter
from inkpost.shared.adapters.user_service_client import UserServiceClient
from inkpost.shared.core.exceptions import (
    BlogNotFoundError,
    ExternalServiceError,
    ValidationError,
)
from inkpost.shared.core.logging import logger
from inkpost.shared.models.blog import Blog
from inkpost.shared.models.enums import BlogCategory
from inkpost.shared.repositories.blog_repository import BlogRepository
from inkpost.shared.schemas.blog import BlogResponse
from inkpost.shared.schemas.events import (
    DEFAULT_BLOG_LIST_KEY,
    blog_detail_cache_key,
    blog_list_cache_key,
)


def serialize_blogs(blogs: List[Blog]) -> List[Dict[str, Any]]:
    """Convert blogs to their cached JSON form."""
    return [BlogResponse.model_validate(blog).model_dump(mode="json") for blog in blogs]


def parse_category(category: Optional[str]) -> Optional[BlogCategory]:
    """
    Parse the category query parameter.

    An empty value means "all categories".

    Raises:
        ValidationError: If the value is not a known category
    """
    if not category:
        return None
    try:
        return BlogCategory(category)
    except ValueError as e:
        raise ValidationError(
            f"Unknown category '{category}'",
            details={"field": "category", "allowed": [c.value for c in BlogCategory]},
        ) from e


class BlogService:
    """
    Service for cached blog reads.

    Attributes:
        session: Database session
        repo: BlogRepository instance
        cache: Redis adapter
        user_client: Client for author profile lookups
    """

    def __init__(
        self,
        session: AsyncSession,
        cache: RedisAdapter,
        user_client: Optional[UserServiceClient] = None,
    ) -> None:
        """
        Initialize BlogService.

        Args:
            session: Async database session
            cache: Redis adapter used as the read-through cache
            user_client: User service client; only needed for get_blog()
        """
        self.session = session
        self.repo = BlogRepository(session)
        self.cache = cache
        self.user_client = user_client
        self.ttl = settings.BLOG_CACHE_TTL_SECONDS

    async def list_blogs(
        self,
        search_query: str = "",
        category: str = "",
    ) -> List[Dict[str, Any]]:
        """
        List blogs matching a search and category, newest first.

        Args:
            search_query: Case-insensitive substring of title or description
            category: Category value, or "" for all

        Returns:
            List of blog dicts in BlogResponse shape

        Raises:
            ValidationError: If category is unknown
        """
        search_query = search_query or ""
        category = category or ""
        parsed_category = parse_category(category)
        key = blog_list_cache_key(search_query, category)

        cached = await self.cache.get_json(key)
        if cached is not None:
            logger.debug("Blog list cache hit", key=key)
            return cached

        blogs = serialize_blogs(await self.repo.search(search_query, parsed_category))
        await self.cache.set_json(key, blogs, ttl=self.ttl)
        logger.debug("Blog list cache filled", key=key, count=len(blogs))
        return blogs

    async def get_blog(self, blog_id: int) -> Dict[str, Any]:
        """
        Get a blog with its author's public profile.

        A missing blog is not cached. If the user service cannot be reached
        the blog is returned with author None and left uncached, so the next
        read tries again.

        Returns:
            {"blog": {...}, "author": {...} | None}

        Raises:
            BlogNotFoundError: If the blog does not exist
        """
        key = blog_detail_cache_key(blog_id)

        cached = await self.cache.get_json(key)
        if cached is not None:
            logger.debug("Blog cache hit", key=key)
            return cached

        blog = await self.repo.get(blog_id)
        if blog is None:
            raise BlogNotFoundError(blog_id)

        payload: Dict[str, Any] = {
            "blog": BlogResponse.model_validate(blog).model_dump(mode="json"),
            "author": None,
        }

        try:
            payload["author"] = await self.user_client.get_user(blog.author)
        except ExternalServiceError as e:
            logger.warning("Author lookup failed", blog_id=blog_id, error=e.message)
            return payload

        await self.cache.set_json(key, payload, ttl=self.ttl)
        return payload

    async def refresh_default_listing(self) -> int:
        """
        Rebuild the unfiltered listing entry ("blogs::").

        Called by the cache worker after the listing keys were evicted, so
        the front page is warm again before the next reader arrives.

        Returns:
            Number of blogs cached
        """
        blogs = serialize_blogs(await self.repo.search("", None))
        await self.cache.set_json(DEFAULT_BLOG_LIST_KEY, blogs, ttl=self.ttl)
        return len(blogs)
