"""
Comment-related Pydantic schemas.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from inkpost.shared.schemas.common import BaseSchema


class CommentCreate(BaseModel):
    """Request to add a comment."""

    comment: str = Field(min_length=1, max_length=255)


class CommentResponse(BaseSchema):
    """A comment on a blog."""

    id: int
    comment: str
    user_id: str
    username: str
    blog_id: int
    created_at: datetime


class CommentCreatedResponse(BaseModel):
    """Response after adding a comment."""

    message: str
    comment: CommentResponse
