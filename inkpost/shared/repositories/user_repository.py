"""
User Repository

Database operations specific to the User model.

Common Operations:
==================
- get_by_email()   → Find the account behind a Google identity

Usage Example:
==============
    repo = UserRepository(db)
    user = await repo.get_by_email(profile.email)
    if user is None:
        user = await repo.create(name=profile.name, email=profile.email, image=profile.picture)
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.shared.repositories.base import BaseRepository
from inkpost.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: Email address reported by the identity provider

        Returns:
            User if found, None otherwise
        """
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()
