"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed on success, rolled back on error and closed after
the request. Tests replace get_db through app.dependency_overrides.

Usage:
======
    from inkpost.api.dependencies.database import get_db, DbSession

    @router.get("/blog/{blog_id}")
    async def get_blog(blog_id: int, db: DbSession):
        ...
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inkpost.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db)]
