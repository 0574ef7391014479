"""
Pydantic Schemas

Request and response models for the APIs, plus queue event payloads.

Schema Categories:
==================
- common: Base schema, message/error/health responses
- user: Login and profile schemas
- blog: Blog, bookmark schemas
- comment: Comment schemas
- events: Cache invalidation event and cache key helpers
"""

from inkpost.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from inkpost.shared.schemas.user import (
    LoginRequest,
    UserResponse,
    ProfileUpdateRequest,
    AuthResponse,
)
from inkpost.shared.schemas.blog import (
    BlogResponse,
    BlogWithAuthorResponse,
    BlogMutationResponse,
    SavedBlogResponse,
    SaveToggleResponse,
)
from inkpost.shared.schemas.comment import (
    CommentCreate,
    CommentResponse,
    CommentCreatedResponse,
)
from inkpost.shared.schemas.events import CacheInvalidationEvent

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "LoginRequest",
    "UserResponse",
    "ProfileUpdateRequest",
    "AuthResponse",
    # Blog
    "BlogResponse",
    "BlogWithAuthorResponse",
    "BlogMutationResponse",
    "SavedBlogResponse",
    "SaveToggleResponse",
    # Comment
    "CommentCreate",
    "CommentResponse",
    "CommentCreatedResponse",
    # Events
    "CacheInvalidationEvent",
]
