"""
Queue event schemas.

Wire format of the message the author service publishes after every blog
mutation and the cache worker consumes:

    {"action": "invalidate_cache", "keys": ["blogs:*", "blog:42"]}

Each entry in `keys` is a Redis glob pattern (a plain key is a pattern that
matches only itself).
"""

from typing import List

from pydantic import BaseModel, Field

from inkpost.shared.models.enums import CacheEventAction


# Cache key layout shared by the blog service (writer) and the worker (invalidator)
BLOG_LIST_KEY_PATTERN = "blogs:*"
DEFAULT_BLOG_LIST_KEY = "blogs::"


def blog_list_cache_key(search_query: str = "", category: str = "") -> str:
    """Key of one cached listing: blogs:{searchQuery}:{category}."""
    return f"blogs:{search_query}:{category}"


def blog_detail_cache_key(blog_id: int) -> str:
    """Key of one cached blog detail page."""
    return f"blog:{blog_id}"


class CacheInvalidationEvent(BaseModel):
    """Cache invalidation event."""

    action: CacheEventAction = CacheEventAction.INVALIDATE_CACHE
    keys: List[str] = Field(min_length=1)
