"""
Base Model Classes

Declarative base and timestamp mixins shared by all SQLAlchemy models.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       ├── CreatedAtMixin   ← created_at only (blogs, comments, saved blogs)
       │
       └── TimestampMixin   ← created_at + updated_at (users)

Records here are never versioned or soft-deleted. Blogs, comments and
bookmarks are written once and removed by their owner, so they only carry a
creation time. User profiles are edited in place and track updated_at too.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Example:
        class Blog(Base, CreatedAtMixin):
            __tablename__ = "blogs"

            id: Mapped[int] = mapped_column(Integer, primary_key=True)
    """


class CreatedAtMixin:
    """
    Mixin that adds a database-populated creation timestamp.

    created_at is set by PostgreSQL on INSERT via server_default.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


class TimestampMixin(CreatedAtMixin):
    """
    Mixin that adds created_at and updated_at.

    updated_at is set on INSERT by the database and refreshed by SQLAlchemy
    on every UPDATE.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
