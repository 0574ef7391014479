"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── UserRepository             ← Lookup by email
         ├── BlogRepository             ← Search listing, cascading delete
         ├── CommentRepository          ← Comments per blog
         └── SavedBlogRepository        ← Bookmarks per user

Usage Example:
==============
    from inkpost.shared.repositories import BlogRepository

    async def latest(db: AsyncSession):
        return await BlogRepository(db).search()
"""

from inkpost.shared.repositories.base import BaseRepository
from inkpost.shared.repositories.user_repository import UserRepository
from inkpost.shared.repositories.blog_repository import BlogRepository
from inkpost.shared.repositories.comment_repository import CommentRepository
from inkpost.shared.repositories.saved_blog_repository import SavedBlogRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "BlogRepository",
    "CommentRepository",
    "SavedBlogRepository",
]
