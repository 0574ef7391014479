"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
external services, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ Adapters (Google, S3, SQS, Redis, user service)

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Handle transactions (via session)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Google sign-in and token issuing
- UserService: Profile reads and updates
- AuthorService: Blog create/update/delete + invalidation events
- BlogService: Cached blog reads
- CommentService: Comments on blogs
- SavedBlogService: Bookmark toggling

Usage:
======
    from inkpost.shared.services import BlogService

    service = BlogService(db, get_redis_adapter(), get_user_service_client())
    blog = await service.get_blog(42)
"""

from inkpost.shared.services.auth_service import AuthService
from inkpost.shared.services.author_service import AuthorService
from inkpost.shared.services.blog_service import BlogService
from inkpost.shared.services.comment_service import CommentService
from inkpost.shared.services.saved_blog_service import SavedBlogService
from inkpost.shared.services.user_service import UserService

__all__ = [
    "AuthService",
    "AuthorService",
    "BlogService",
    "CommentService",
    "SavedBlogService",
    "UserService",
]
