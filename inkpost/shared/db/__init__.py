"""
Database Module

Database connectivity and session management.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, auto commit/rollback/close)
        │  Passed to Service → Repository
        ▼
    Repositories: UserRepository, BlogRepository,
                  CommentRepository, SavedBlogRepository
        │  SQL Queries
        ▼
    PostgreSQL

Usage:
======
    from inkpost.shared.db import get_db, AsyncSessionLocal

    async with AsyncSessionLocal() as session:
        blogs = await BlogRepository(session).search()
"""

from inkpost.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
