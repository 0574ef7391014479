"""
Authentication Dependencies

FastAPI dependencies for bearer-token authentication. All three services
verify the same JWT, issued by the user service and signed with the shared
SECRET_KEY, so none of them needs a database round-trip to know who is
calling.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate JWT from header
           │
           ▼
    get_current_user()        ← Check claims, return user dict

Type Aliases:
=============
    CurrentUser - {"user_id", "email", "name"} of the caller

Usage:
======
    from inkpost.api.dependencies.auth import CurrentUser

    @router.delete("/comment/{comment_id}")
    async def delete_comment(comment_id: int, current_user: CurrentUser):
        ...
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from inkpost.config.settings import settings
from inkpost.shared.core.exceptions import AuthenticationError
from inkpost.shared.utils.security import SecurityUtils


# Missing header is reported by get_current_user_token as a 401
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded token payload

    Raises:
        AuthenticationError: If token is missing, expired or invalid
    """
    if not credentials:
        raise AuthenticationError("Please Login - No auth header")

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
) -> dict:
    """
    Get current authenticated user from token claims.

    Returns:
        User data dict with user_id, email and name

    Raises:
        AuthenticationError: If user_id not in token
    """
    user_id = token.get("user_id")
    if not user_id:
        raise AuthenticationError("Invalid token payload")

    return {
        "user_id": str(user_id),
        "email": token.get("email"),
        "name": token.get("name") or "",
    }


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[dict, Depends(get_current_user)]
