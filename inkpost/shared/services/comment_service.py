"""
Comment Service

Business logic for comments on blogs.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.shared.core.exceptions import (
    AuthorizationError,
    BlogNotFoundError,
    CommentNotFoundError,
)
from inkpost.shared.core.logging import logger
from inkpost.shared.models.comment import Comment
from inkpost.shared.repositories.blog_repository import BlogRepository
from inkpost.shared.repositories.comment_repository import CommentRepository


class CommentService:
    """
    Service for adding, listing and removing comments.

    The commenter's display name is copied onto the comment when it is
    written, so later profile renames do not rewrite history.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.blog_repo = BlogRepository(session)
        self.repo = CommentRepository(session)

    async def add_comment(
        self,
        blog_id: int,
        user_id: str,
        username: str,
        text: str,
    ) -> Comment:
        """
        Add a comment to a blog.

        Raises:
            BlogNotFoundError: If the blog does not exist
        """
        if not await self.blog_repo.exists(blog_id):
            raise BlogNotFoundError(blog_id)

        comment = await self.repo.create(
            comment=text,
            user_id=user_id,
            username=username,
            blog_id=blog_id,
        )
        logger.info("Comment added", blog_id=blog_id, comment_id=comment.id)
        return comment

    async def list_comments(self, blog_id: int) -> List[Comment]:
        """Comments on a blog, newest first. Unknown blogs have none."""
        return await self.repo.list_for_blog(blog_id)

    async def delete_comment(self, comment_id: int, user_id: str) -> None:
        """
        Delete a comment written by the caller.

        Raises:
            CommentNotFoundError: If the comment does not exist
            AuthorizationError: If the caller did not write it
        """
        comment = await self.repo.get(comment_id)
        if comment is None:
            raise CommentNotFoundError(comment_id)
        if comment.user_id != user_id:
            raise AuthorizationError("You are not the owner of this comment")

        await self.repo.delete(comment_id)
        logger.info("Comment deleted", comment_id=comment_id)
