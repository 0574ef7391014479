"""
User Handler

Login and profile endpoints of the user service.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Adapters (Google, S3)

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Domain errors raised
by services are rendered by the global exception handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from inkpost.api.dependencies.auth import CurrentUser
from inkpost.api.dependencies.services import get_auth_service, get_user_service
from inkpost.shared.core.exceptions import ValidationError
from inkpost.shared.schemas.user import (
    AuthResponse,
    LoginRequest,
    ProfileUpdateRequest,
    UserResponse,
)
from inkpost.shared.services.auth_service import AuthService
from inkpost.shared.services.user_service import UserService


router = APIRouter()


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Sign in with a Google authorization code.

    Creates the account on first login.

    Raises:
        401: If Google rejects the code
        503: If Google cannot be reached
    """
    user, token, expires_in = await auth_service.login_with_google(data.code)

    return AuthResponse(
        message="Login success",
        token=token,
        expires_in=expires_in,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
async def my_profile(
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Get the caller's profile.

    Raises:
        404: If the account behind the token no longer exists
    """
    user = await user_service.get_user(current_user["user_id"])
    return UserResponse.model_validate(user)


@router.get("/user/{user_id}", response_model=UserResponse)
async def user_profile(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
):
    """
    Get a public profile. Used by the blog service for author cards.

    Raises:
        404: If the id is malformed or unknown
    """
    user = await user_service.get_user(user_id)
    return UserResponse.model_validate(user)


@router.post("/user/update", response_model=AuthResponse)
async def update_profile(
    data: ProfileUpdateRequest,
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Update the caller's profile and re-issue their token.
    """
    user, token, expires_in = await user_service.update_profile(
        current_user["user_id"],
        name=data.name,
        instagram=data.instagram,
        facebook=data.facebook,
        linkedin=data.linkedin,
        bio=data.bio,
    )

    return AuthResponse(
        message="User Updated",
        token=token,
        expires_in=expires_in,
        user=UserResponse.model_validate(user),
    )


@router.post("/user/update/pic", response_model=AuthResponse)
async def update_profile_picture(
    current_user: CurrentUser,
    file: Optional[UploadFile] = File(None),
    user_service: UserService = Depends(get_user_service),
):
    """
    Replace the caller's profile picture.

    Raises:
        400: If no file was sent or it is not an image
    """
    if file is None:
        raise ValidationError("No file to upload", details={"field": "file"})

    user, token, expires_in = await user_service.update_picture(
        current_user["user_id"],
        data=await file.read(),
        content_type=file.content_type,
    )

    return AuthResponse(
        message="User Profile pic updated",
        token=token,
        expires_in=expires_in,
        user=UserResponse.model_validate(user),
    )
