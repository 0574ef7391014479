"""
Base processor class.
"""

from typing import Any, Dict

from inkpost.shared.models.enums import CacheEventAction


class MalformedMessageError(Exception):
    """
    A queue message that can never be processed.

    The worker deletes such messages instead of letting SQS redeliver them.
    """


class BaseProcessor:
    """Base class for queue event processors."""

    async def process(self, message: Dict[str, Any]) -> None:
        """Dispatch an event on its "action" field."""
        action = message.get("action")

        if action == CacheEventAction.INVALIDATE_CACHE.value:
            return await self.handle_invalidate_cache(message)
        raise MalformedMessageError(f"Unknown action: {action!r}")

    async def handle_invalidate_cache(self, message: Dict[str, Any]) -> None:
        """Handle a cache invalidation event."""
        raise NotImplementedError
