"""
Blog-related Pydantic schemas.

BlogResponse is also the cache format: the blog service stores
`BlogResponse.model_dump(mode="json")` in Redis and validates it back on a hit.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from inkpost.shared.models.enums import BlogCategory
from inkpost.shared.schemas.common import BaseSchema
from inkpost.shared.schemas.user import UserResponse


class BlogResponse(BaseSchema):
    """A blog post."""

    id: int
    title: str
    description: str
    blogcontent: str
    image: str
    category: BlogCategory
    author: str
    created_at: datetime


class BlogWithAuthorResponse(BaseModel):
    """Blog detail page payload: the post plus its author's public profile."""

    blog: BlogResponse
    author: Optional[UserResponse] = None


class BlogMutationResponse(BaseModel):
    """Response after creating or updating a blog."""

    message: str
    blog: BlogResponse


class SavedBlogResponse(BaseSchema):
    """A bookmark record."""

    id: int
    user_id: str
    blog_id: int
    created_at: datetime


class SaveToggleResponse(BaseModel):
    """Result of toggling a bookmark."""

    message: str
    saved: bool
