"""
Security Utilities

JWT token management.

Sign-in is delegated to Google, so there are no local passwords. The user
service mints a JWT after a successful OAuth exchange and every service
verifies it with the shared SECRET_KEY.

Token Claims:
=============
    user_id  - User UUID as string
    email    - User email
    name     - Display name (used as the comment username by the blog service)
    exp/iat  - Standard expiry / issued-at

Usage:
======
    from inkpost.shared.utils.security import SecurityUtils

    token = SecurityUtils.create_user_token(user)
    payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
"""

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Optional

import jwt

from inkpost.config.settings import settings

if TYPE_CHECKING:
    from inkpost.shared.models.user import User


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides JWT token creation and validation.
    """

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (e.g., user_id, email)
            secret_key: Secret key for signing
            expires_delta: Token expiration time (default: 5 days)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(days=5))

        to_encode.update({
            "exp": expire,
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")

    @staticmethod
    def create_user_token(user: "User") -> tuple[str, int]:
        """
        Mint a token for a user with the configured expiry.

        Returns:
            Tuple of (access_token, expires_in_seconds)
        """
        token = SecurityUtils.create_access_token(
            data={
                "user_id": str(user.id),
                "email": user.email,
                "name": user.name,
            },
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )
        return token, settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
