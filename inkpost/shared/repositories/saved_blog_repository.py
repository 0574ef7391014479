"""
SavedBlog repository for data access.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.shared.models.saved_blog import SavedBlog
from inkpost.shared.repositories.base import BaseRepository


class SavedBlogRepository(BaseRepository[SavedBlog]):
    """Repository for SavedBlog entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(SavedBlog, session)

    async def get_user_save(self, user_id: str, blog_id: int) -> Optional[SavedBlog]:
        """Check if user already bookmarked this blog."""
        stmt = select(SavedBlog).where(
            SavedBlog.user_id == user_id,
            SavedBlog.blog_id == blog_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: str) -> List[SavedBlog]:
        """Get all bookmarks for a user, newest first."""
        return await self.list(
            filters={"user_id": user_id},
            order_by="created_at",
            order_desc=True,
            limit=None,
        )
