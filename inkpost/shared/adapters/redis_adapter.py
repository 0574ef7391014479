"""
Redis adapter - Blog read cache.

Provides:
- JSON get/set with TTL
- Glob-pattern deletion (SCAN based, safe on large keyspaces)
- Connectivity check

Connection resilience is the client's job, not ours: the client is built with
an exponential-backoff Retry policy and a health-check interval that PINGs
idle connections so providers do not drop them. Any RedisError that still
escapes is logged and reported as a miss/False. The cache is never allowed
to fail a read.
"""

import functools
import json
import logging
from typing import Any, Optional

import redis.asyncio as redis
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError
from redis.asyncio.retry import Retry

from inkpost.config.settings import settings

logger = logging.getLogger(__name__)


class RedisAdapter:
    """
    Adapter for Redis cache operations.

    Handles:
    - Caching JSON documents with TTL
    - Invalidation by key pattern
    """

    def __init__(self, url: Optional[str] = None):
        """
        Initialize Redis adapter.

        Args:
            url: Redis URL (redis://host:port/db)
        """
        self.url = url or settings.REDIS_URL
        self._client: Optional[redis.Redis] = None

    @property
    def client(self) -> redis.Redis:
        """Lazy-loaded Redis client."""
        if self._client is None:
            self._client = redis.from_url(
                self.url,
                decode_responses=True,
                health_check_interval=settings.REDIS_HEALTH_CHECK_INTERVAL,
                retry=Retry(
                    ExponentialBackoff(cap=settings.REDIS_MAX_BACKOFF_SECONDS, base=1),
                    retries=3,
                ),
                retry_on_error=[RedisConnectionError, RedisTimeoutError],
            )
        return self._client

    async def get_json(self, key: str) -> Optional[Any]:
        """
        Get a JSON value from cache.

        Args:
            key: Cache key

        Returns:
            Parsed JSON, or None on miss, corrupt entry, or Redis error
        """
        try:
            value = await self.client.get(key)
        except RedisError as e:
            logger.warning("Redis get failed for %s: %s", key, e)
            return None

        if value is None:
            return None

        try:
            return json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Discarding corrupt cache entry %s", key)
            return None

    async def set_json(
        self,
        key: str,
        value: Any,
        ttl: Optional[int] = None,
    ) -> bool:
        """
        Set a JSON value in cache.

        Args:
            key: Cache key
            value: JSON-serializable value
            ttl: Time-to-live in seconds

        Returns:
            True if successful
        """
        try:
            await self.client.set(key, json.dumps(value), ex=ttl)
            return True
        except RedisError as e:
            logger.warning("Redis set failed for %s: %s", key, e)
            return False

    async def delete_pattern(self, pattern: str) -> int:
        """
        Delete every key matching a glob pattern.

        Unlike the cache helpers above, errors propagate: the worker must
        know that an invalidation did not happen so the event is redelivered.

        Args:
            pattern: Redis glob, e.g. "blogs:*" or "blog:42"

        Returns:
            Number of keys deleted
        """
        deleted = 0
        batch: list[str] = []
        async for key in self.client.scan_iter(match=pattern, count=500):
            batch.append(key)
            if len(batch) >= 500:
                deleted += await self.client.delete(*batch)
                batch = []
        if batch:
            deleted += await self.client.delete(*batch)
        return deleted

    async def ping(self) -> bool:
        """
        Check Redis connectivity.

        Returns:
            True if connected
        """
        try:
            return bool(await self.client.ping())
        except RedisError:
            return False

    async def close(self) -> None:
        """Close the connection pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


@functools.lru_cache(maxsize=1)
def get_redis_adapter() -> RedisAdapter:
    """Get or create Redis adapter singleton."""
    return RedisAdapter()
