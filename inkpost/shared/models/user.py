"""
User Entity Model

Represents a user who signed in through Google.

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ name             │ "Ada Lovelace"                                            │
│ email            │ "ada@example.com"                                         │
│ image            │ "https://lh3.googleusercontent.com/a/..."                 │
│ instagram        │ "https://instagram.com/ada"                               │
│ facebook         │ ""                                                        │
│ linkedin         │ "https://linkedin.com/in/ada"                             │
│ bio              │ "Writes about engines."                                   │
└──────────────────────────────────────────────────────────────────────────────┘

The user id leaves this service as an opaque string: blogs, comments and
bookmarks store it without a foreign key.
"""

import uuid

from sqlalchemy import String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from inkpost.shared.models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """
    User model.

    Attributes:
        id: Unique identifier (UUID v4)
        name: Display name
        email: Email from the identity provider (unique, indexed)
        image: Profile picture URL
        instagram/facebook/linkedin: Social profile links
        bio: Free-form profile text
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # IDENTITY
    # ═══════════════════════════════════════════════════════════════════════════

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    image: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    instagram: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    facebook: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    linkedin: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, email={self.email})>"
