"""
Comment repository for data access.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.shared.models.comment import Comment
from inkpost.shared.repositories.base import BaseRepository, is_storable_id


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Comment, session)

    async def list_for_blog(self, blog_id: int) -> List[Comment]:
        """Get all comments on a blog, newest first."""
        if not is_storable_id(blog_id):
            return []
        return await self.list(
            filters={"blog_id": blog_id},
            order_by="created_at",
            order_desc=True,
            limit=None,
        )
