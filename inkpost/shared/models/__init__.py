"""
Inkpost SQLAlchemy Models

Model Hierarchy:
================
    User                     (user service)

    Blog                     (author + blog services)
       ├── comments (Comment[])
       └── saves (SavedBlog[])

Models Overview:
================
- Base: Base class and timestamp mixins
- User: Signed-in user with profile fields
- Blog: Published post
- Comment: Reader comment on a blog
- SavedBlog: User-to-blog bookmark

Usage:
======
    from inkpost.shared.models import Blog, Comment, SavedBlog, User
"""

from inkpost.shared.models.base import Base, CreatedAtMixin, TimestampMixin
from inkpost.shared.models.enums import BlogCategory, CacheEventAction
from inkpost.shared.models.user import User
from inkpost.shared.models.blog import Blog
from inkpost.shared.models.comment import Comment
from inkpost.shared.models.saved_blog import SavedBlog

__all__ = [
    # Base classes and mixins
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    # Enums
    "BlogCategory",
    "CacheEventAction",
    # Models
    "User",
    "Blog",
    "Comment",
    "SavedBlog",
]
