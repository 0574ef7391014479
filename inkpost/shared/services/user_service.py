"""
User Service

Business logic for user profiles.

Every profile mutation re-issues the JWT, because the display name travels
in the token's `name` claim and the blog service uses it as the comment
username.

Usage:
======
    from inkpost.shared.services.user_service import UserService

    service = UserService(db, get_storage_adapter())
    user = await service.get_user(user_id)
    user, token, expires = await service.update_profile(user_id, bio="Hello")
"""

import asyncio
from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.shared.adapters.storage_adapter import StorageAdapter
from inkpost.shared.core.exceptions import UserNotFoundError, ValidationError
from inkpost.shared.core.logging import logger
from inkpost.shared.models.user import User
from inkpost.shared.repositories.user_repository import UserRepository
from inkpost.shared.utils.security import SecurityUtils


PROFILE_IMAGE_FOLDER = "profiles"


def parse_user_id(user_id: str) -> UUID:
    """
    Parse a user id from a path or token.

    A malformed id cannot name an existing user, so it is reported as
    not found rather than as a validation error.
    """
    try:
        return UUID(str(user_id))
    except ValueError as e:
        raise UserNotFoundError(user_id) from e


class UserService:
    """
    Service for profile reads and updates.

    Attributes:
        session: Database session
        repo: UserRepository instance
        storage: Image storage for profile pictures
    """

    def __init__(self, session: AsyncSession, storage: StorageAdapter) -> None:
        self.session = session
        self.repo = UserRepository(session)
        self.storage = storage

    async def get_user(self, user_id: str) -> User:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: If the id is malformed or unknown
        """
        user = await self.repo.get(parse_user_id(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def update_profile(
        self,
        user_id: str,
        name: Optional[str] = None,
        instagram: Optional[str] = None,
        facebook: Optional[str] = None,
        linkedin: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> Tuple[User, str, int]:
        """
        Update the supplied profile fields.

        Fields left as None keep their current value.

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            ValidationError: If name is supplied but blank
            UserNotFoundError: If the user no longer exists
        """
        if name is not None and not name.strip():
            raise ValidationError("Name cannot be empty", details={"field": "name"})

        user = await self.repo.update(
            parse_user_id(user_id),
            name=name,
            instagram=instagram,
            facebook=facebook,
            linkedin=linkedin,
            bio=bio,
        )
        if user is None:
            raise UserNotFoundError(user_id)

        logger.info("Profile updated", user_id=user_id)
        token, expires_in = SecurityUtils.create_user_token(user)
        return user, token, expires_in

    async def update_picture(
        self,
        user_id: str,
        data: bytes,
        content_type: Optional[str],
    ) -> Tuple[User, str, int]:
        """
        Upload a new profile picture and store its URL.

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            ValidationError: If the upload is empty or not an image
            ExternalServiceError: If storage rejects the upload
            UserNotFoundError: If the user no longer exists
        """
        user = await self.get_user(user_id)

        image_url = await asyncio.to_thread(
            self.storage.upload_image, data, content_type, PROFILE_IMAGE_FOLDER
        )
        user = await self.repo.update(user.id, image=image_url)
        if user is None:
            raise UserNotFoundError(user_id)

        logger.info("Profile picture updated", user_id=user_id)
        token, expires_in = SecurityUtils.create_user_token(user)
        return user, token, expires_in
