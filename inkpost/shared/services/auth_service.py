"""
Authentication Service

Business logic for Google sign-in.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- External services (Google)
- Domain logic

Sign-in Flow:
=============
    frontend popup → authorization code → POST /api/v1/login
        → GoogleOAuthAdapter.exchange_code()   (email, name, picture)
        → find user by email, or create one
        → mint JWT with user_id/email/name claims

Usage:
======
    from inkpost.shared.services.auth_service import AuthService

    service = AuthService(db, get_google_oauth_adapter())
    user, token, expires = await service.login_with_google(code)
"""

from typing import Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.shared.adapters.google_oauth_adapter import GoogleOAuthAdapter, GoogleProfile
from inkpost.shared.core.exceptions import ConflictError, ValidationError
from inkpost.shared.core.logging import logger
from inkpost.shared.models.user import User
from inkpost.shared.repositories.user_repository import UserRepository
from inkpost.shared.utils.security import SecurityUtils


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - Authorization code exchange with Google
    - First-login account creation
    - JWT token generation

    Attributes:
        session: Database session
        repo: UserRepository instance
        google: Google OAuth adapter
    """

    def __init__(self, session: AsyncSession, google: GoogleOAuthAdapter) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
            google: Adapter used to exchange authorization codes
        """
        self.session = session
        self.repo = UserRepository(session)
        self.google = google

    async def login_with_google(self, code: str) -> Tuple[User, str, int]:
        """
        Sign a user in with a Google authorization code.

        Args:
            code: Authorization code from the frontend popup flow

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            ValidationError: If the code is blank
            AuthenticationError: If Google rejects the code
            ExternalServiceError: If Google is unreachable
        """
        if not code or not code.strip():
            raise ValidationError("Authorization code is required", details={"field": "code"})

        profile = await self.google.exchange_code(code)

        user = await self.repo.get_by_email(profile.email)
        if user is None:
            user = await self._create_user(profile)
        else:
            logger.info("User signed in", user_id=str(user.id))

        token, expires_in = SecurityUtils.create_user_token(user)
        return user, token, expires_in

    async def _create_user(self, profile: GoogleProfile) -> User:
        """
        Create the account for a first sign-in.

        Two first sign-ins for the same email can race; the loser of the
        unique constraint on users.email picks up the winner's row.

        Raises:
            ConflictError: If the email is taken but the row cannot be read
        """
        try:
            async with self.session.begin_nested():
                user = await self.repo.create(
                    name=profile.name,
                    email=profile.email,
                    image=profile.picture,
                )
        except IntegrityError:
            user = await self.repo.get_by_email(profile.email)
            if user is None:
                raise ConflictError(
                    "Account is being created, please retry",
                    details={"email": profile.email},
                )
            logger.info("User signed in after concurrent sign-up", user_id=str(user.id))
            return user

        logger.info("User created", user_id=str(user.id), email=user.email)
        return user
