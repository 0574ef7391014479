"""
Queue event processors.
"""

from inkpost.worker.processors.base_processor import BaseProcessor, MalformedMessageError
from inkpost.worker.processors.cache_invalidation_processor import CacheInvalidationProcessor

__all__ = [
    "BaseProcessor",
    "CacheInvalidationProcessor",
    "MalformedMessageError",
]
