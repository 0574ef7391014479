"""
Enums used across the application.
"""

from enum import Enum


class BlogCategory(str, Enum):
    """
    Fixed set of blog categories.

    Values are stored verbatim in blogs.category and used as the
    `category` filter of the listing endpoint (and thus in cache keys).
    """

    TECHNOLOGY = "Technology"
    HEALTH = "Health"
    FINANCE = "Finance"
    TRAVEL = "Travel"
    EDUCATION = "Education"
    ENTERTAINMENT = "Entertainment"
    STUDY = "Study"


class CacheEventAction(str, Enum):
    """Actions understood by the cache invalidation worker."""

    INVALIDATE_CACHE = "invalidate_cache"
