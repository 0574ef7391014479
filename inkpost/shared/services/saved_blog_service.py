"""
Saved Blog Service

Business logic for bookmarks. Saving is a toggle: saving a blog that is
already saved removes the bookmark.
"""

from typing import List, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.shared.core.exceptions import BlogNotFoundError
from inkpost.shared.core.logging import logger
from inkpost.shared.models.saved_blog import SavedBlog
from inkpost.shared.repositories.blog_repository import BlogRepository
from inkpost.shared.repositories.saved_blog_repository import SavedBlogRepository


class SavedBlogService:
    """Service for toggling and listing bookmarks."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.blog_repo = BlogRepository(session)
        self.repo = SavedBlogRepository(session)

    async def toggle_save(self, user_id: str, blog_id: int) -> Tuple[str, bool]:
        """
        Save the blog, or unsave it if the caller already saved it.

        Returns:
            Tuple of (message, saved)

        Raises:
            BlogNotFoundError: If the blog does not exist
        """
        if not await self.blog_repo.exists(blog_id):
            raise BlogNotFoundError(blog_id)

        existing = await self.repo.get_user_save(user_id, blog_id)
        if existing is not None:
            await self.repo.delete(existing.id)
            logger.info("Blog unsaved", user_id=user_id, blog_id=blog_id)
            return "Blog Unsaved", False

        try:
            async with self.session.begin_nested():
                await self.repo.create(user_id=user_id, blog_id=blog_id)
        except IntegrityError:
            # A concurrent request saved it first; the bookmark exists either way
            logger.info("Blog already saved", user_id=user_id, blog_id=blog_id)
            return "Blog Saved", True

        logger.info("Blog saved", user_id=user_id, blog_id=blog_id)
        return "Blog Saved", True

    async def list_saved(self, user_id: str) -> List[SavedBlog]:
        """The caller's bookmarks, newest first."""
        return await self.repo.list_for_user(user_id)
