"""
Author Service

Business logic for writing blogs.

Every mutation ends with a cache invalidation event on SQS so the blog
service's read cache catches up:

    create  → ["blogs:*"]
    update  → ["blogs:*", "blog:{id}"]
    delete  → ["blogs:*", "blog:{id}"]

Publishing is fire-and-log. The write has already been committed when the
event is sent, and a lost event only leaves cached pages stale until their
TTL expires.

Usage:
======
    from inkpost.shared.services.author_service import AuthorService

    service = AuthorService(db, get_storage_adapter(), get_sqs_adapter())
    blog = await service.create_blog(author_id, title=..., image_data=...)
"""

import asyncio
from typing import List, Optional

from botocore.exceptions import BotoCoreError, ClientError
from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.shared.adapters.sqs_adapter import SQSAdapter
from inkpost.shared.adapters.storage_adapter import StorageAdapter
from inkpost.shared.core.exceptions import (
    AuthorizationError,
    BlogNotFoundError,
    ValidationError,
)
from inkpost.shared.core.logging import logger
from inkpost.shared.models.blog import Blog
from inkpost.shared.models.enums import BlogCategory
from inkpost.shared.repositories.blog_repository import BlogRepository
from inkpost.shared.schemas.events import BLOG_LIST_KEY_PATTERN, blog_detail_cache_key


BLOG_IMAGE_FOLDER = "blogs"


class AuthorService:
    """
    Service for blog authoring.

    Handles:
    - Creating, updating and deleting blogs
    - Ownership checks
    - Cover image uploads
    - Publishing cache invalidation events

    Attributes:
        session: Database session
        repo: BlogRepository instance
        storage: Image storage
        publisher: SQS adapter for invalidation events
    """

    def __init__(
        self,
        session: AsyncSession,
        storage: StorageAdapter,
        publisher: SQSAdapter,
    ) -> None:
        """
        Initialize AuthorService.

        Args:
            session: Async database session
            storage: Adapter used for cover image uploads
            publisher: Adapter used to publish invalidation events
        """
        self.session = session
        self.repo = BlogRepository(session)
        self.storage = storage
        self.publisher = publisher

    async def create_blog(
        self,
        author_id: str,
        title: str,
        description: str,
        blogcontent: str,
        category: BlogCategory,
        image_data: Optional[bytes],
        image_content_type: Optional[str],
    ) -> Blog:
        """
        Create a blog owned by the caller.

        Args:
            author_id: Caller's user id
            title: Blog title
            description: Short summary shown in listings
            blogcontent: Rich-text body
            category: Blog category
            image_data: Cover image bytes (required)
            image_content_type: MIME type of the cover image

        Returns:
            The created Blog

        Raises:
            ValidationError: If the cover image is missing or not an image
            ExternalServiceError: If the upload fails
        """
        if image_data is None:
            raise ValidationError("No file to upload", details={"field": "file"})

        image_url = await self._upload(image_data, image_content_type)

        blog = await self.repo.create(
            title=title,
            description=description,
            blogcontent=blogcontent,
            image=image_url,
            category=category,
            author=author_id,
        )
        await self.session.commit()

        logger.info("Blog created", blog_id=blog.id, author=author_id)
        await self._publish_invalidation([BLOG_LIST_KEY_PATTERN])
        return blog

    async def update_blog(
        self,
        blog_id: int,
        author_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        blogcontent: Optional[str] = None,
        category: Optional[BlogCategory] = None,
        image_data: Optional[bytes] = None,
        image_content_type: Optional[str] = None,
    ) -> Blog:
        """
        Update the supplied fields of a blog.

        A new cover image is uploaded only when image_data is given.

        Raises:
            BlogNotFoundError: If the blog does not exist
            AuthorizationError: If the caller is not the author
        """
        await self._get_owned_blog(blog_id, author_id)

        image_url = None
        if image_data is not None:
            image_url = await self._upload(image_data, image_content_type)

        blog = await self.repo.update(
            blog_id,
            title=title,
            description=description,
            blogcontent=blogcontent,
            category=category,
            image=image_url,
        )
        if blog is None:
            raise BlogNotFoundError(blog_id)
        await self.session.commit()

        logger.info("Blog updated", blog_id=blog_id, author=author_id)
        await self._publish_invalidation(
            [BLOG_LIST_KEY_PATTERN, blog_detail_cache_key(blog_id)]
        )
        return blog

    async def delete_blog(self, blog_id: int, author_id: str) -> None:
        """
        Delete a blog together with its comments and bookmarks.

        Raises:
            BlogNotFoundError: If the blog does not exist
            AuthorizationError: If the caller is not the author
        """
        await self._get_owned_blog(blog_id, author_id)

        if not await self.repo.delete_with_children(blog_id):
            raise BlogNotFoundError(blog_id)
        await self.session.commit()

        logger.info("Blog deleted", blog_id=blog_id, author=author_id)
        await self._publish_invalidation(
            [BLOG_LIST_KEY_PATTERN, blog_detail_cache_key(blog_id)]
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _get_owned_blog(self, blog_id: int, author_id: str) -> Blog:
        blog = await self.repo.get(blog_id)
        if blog is None:
            raise BlogNotFoundError(blog_id)
        if blog.author != author_id:
            raise AuthorizationError("You are not the author of this blog")
        return blog

    async def _upload(self, data: bytes, content_type: Optional[str]) -> str:
        return await asyncio.to_thread(
            self.storage.upload_image, data, content_type, BLOG_IMAGE_FOLDER
        )

    async def _publish_invalidation(self, keys: List[str]) -> None:
        """Send an invalidation event; failures are logged, never raised."""
        try:
            message_id = await asyncio.to_thread(self.publisher.send_cache_invalidation, keys)
        except (ClientError, BotoCoreError) as e:
            logger.error("Cache invalidation publish failed", keys=keys, error=str(e))
            return
        logger.debug("Cache invalidation published", keys=keys, message_id=message_id)
