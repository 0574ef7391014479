"""
User Schemas

Request/response models for login and profile endpoints.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from inkpost.shared.schemas.common import BaseSchema


class LoginRequest(BaseModel):
    """Authorization code returned to the frontend by Google."""

    code: str = Field(min_length=1, description="OAuth authorization code")


class UserResponse(BaseSchema):
    """Public user profile."""

    id: UUID
    name: str
    email: EmailStr
    image: str = ""
    instagram: str = ""
    facebook: str = ""
    linkedin: str = ""
    bio: str = ""
    created_at: Optional[datetime] = None


class ProfileUpdateRequest(BaseModel):
    """
    Partial profile update.

    Omitted (null) fields keep their current value.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    instagram: Optional[str] = Field(None, max_length=255)
    facebook: Optional[str] = Field(None, max_length=255)
    linkedin: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = None


class AuthResponse(BaseModel):
    """Token plus profile, returned by login and every profile change."""

    message: str
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    user: UserResponse
