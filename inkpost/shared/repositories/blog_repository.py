"""
Blog Repository

Database operations for Blog, including the search query behind the
listing endpoint and the cascade used when an author deletes a post.
"""

from typing import List, Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.shared.models.blog import Blog
from inkpost.shared.models.comment import Comment
from inkpost.shared.models.enums import BlogCategory
from inkpost.shared.models.saved_blog import SavedBlog
from inkpost.shared.repositories.base import BaseRepository


class BlogRepository(BaseRepository[Blog]):
    """Repository for Blog entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Blog, session)

    async def search(
        self,
        search_query: str = "",
        category: Optional[BlogCategory] = None,
    ) -> List[Blog]:
        """
        List blogs, newest first.

        Args:
            search_query: Case-insensitive substring matched against
                title OR description. Empty string matches everything.
            category: Exact category filter, or None for all categories

        SQL Generated:
            SELECT * FROM blogs
            WHERE (lower(title) LIKE '%' || lower(:q) || '%' ESCAPE '/'
                   OR lower(description) LIKE '%' || lower(:q) || '%' ESCAPE '/')
              AND category = 'Travel'
            ORDER BY created_at DESC
        """
        stmt = select(Blog)

        if search_query:
            # % and _ in the query are literal characters, not wildcards
            stmt = stmt.where(
                or_(
                    Blog.title.icontains(search_query, autoescape=True),
                    Blog.description.icontains(search_query, autoescape=True),
                )
            )

        if category is not None:
            stmt = stmt.where(Blog.category == category)

        stmt = stmt.order_by(Blog.created_at.desc(), Blog.id.desc())

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_with_children(self, blog_id: int) -> bool:
        """
        Delete a blog together with its comments and bookmarks.

        Children are removed with explicit DELETEs rather than relying on
        the ON DELETE CASCADE alone, so the result does not depend on how
        the schema was created.

        Returns:
            True if the blog existed and was deleted
        """
        await self.session.execute(delete(Comment).where(Comment.blog_id == blog_id))
        await self.session.execute(delete(SavedBlog).where(SavedBlog.blog_id == blog_id))
        result = await self.session.execute(delete(Blog).where(Blog.id == blog_id))
        await self.session.flush()
        return bool(result.rowcount)
