"""
Cache invalidation processor.

Applies the events the author service publishes after every blog mutation:

    {"action": "invalidate_cache", "keys": ["blogs:*", "blog:42"]}

1. Every key pattern is deleted from Redis (SCAN + DEL).
2. If the listing pattern "blogs:*" was among them, the unfiltered listing
   "blogs::" is rebuilt from Postgres so the front page stays warm.

Both steps are idempotent, so a redelivered event is harmless.
"""

from typing import Any, Callable, Dict

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.shared.adapters.redis_adapter import RedisAdapter
from inkpost.shared.core.logging import logger
from inkpost.shared.db import AsyncSessionLocal
from inkpost.shared.schemas.events import BLOG_LIST_KEY_PATTERN, CacheInvalidationEvent
from inkpost.shared.services.blog_service import BlogService
from inkpost.worker.processors.base_processor import BaseProcessor, MalformedMessageError


class CacheInvalidationProcessor(BaseProcessor):
    """
    Evicts cached blog pages and re-warms the default listing.

    Attributes:
        cache: Redis adapter holding the blog service's read cache
        session_factory: Callable returning an AsyncSession context manager
    """

    def __init__(
        self,
        cache: RedisAdapter,
        session_factory: Callable[[], AsyncSession] = AsyncSessionLocal,
    ) -> None:
        self.cache = cache
        self.session_factory = session_factory

    def build_blog_service(self, session: AsyncSession) -> BlogService:
        return BlogService(session, self.cache)

    async def handle_invalidate_cache(self, message: Dict[str, Any]) -> None:
        """
        Apply one invalidation event.

        Raises:
            MalformedMessageError: If the event does not match the schema
            RedisError: If a pattern could not be deleted (event is retried)
        """
        try:
            event = CacheInvalidationEvent.model_validate(message)
        except ValidationError as e:
            raise MalformedMessageError(f"Invalid cache invalidation event: {e}") from e

        for pattern in event.keys:
            deleted = await self.cache.delete_pattern(pattern)
            logger.info("Cache keys invalidated", pattern=pattern, deleted=deleted)

        if BLOG_LIST_KEY_PATTERN in event.keys:
            async with self.session_factory() as session:
                count = await self.build_blog_service(session).refresh_default_listing()
            logger.info("Default blog listing repopulated", blogs=count)
