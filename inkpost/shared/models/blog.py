"""
Blog Entity Model

A published blog post.

SAMPLE BLOG RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 42                                                        │
│ title            │ "Caching without tears"                                   │
│ description      │ "Read-through caches in practice"                         │
│ blogcontent      │ "<p>Rich text body...</p>"                                │
│ image            │ "https://cdn.example.com/blogs/3f2a...png"                │
│ category         │ "Technology"                                              │
│ author           │ "550e8400-e29b-41d4-a716-446655440000"                    │
│ created_at       │ 2026-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import Enum as SAEnum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkpost.shared.models.base import Base, CreatedAtMixin
from inkpost.shared.models.enums import BlogCategory

if TYPE_CHECKING:
    from inkpost.shared.models.comment import Comment
    from inkpost.shared.models.saved_blog import SavedBlog


class Blog(Base, CreatedAtMixin):
    """
    Blog model.

    Attributes:
        id: Serial identifier
        title: Headline (≤255 chars)
        description: Short summary (≤255 chars)
        blogcontent: Rich-text HTML body
        image: Cover image URL (object storage)
        category: One of BlogCategory
        author: Author's user id (opaque string from the user service)

    Relationships:
        comments: Comments on this blog
        saves: Bookmarks of this blog
    """

    __tablename__ = "blogs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    blogcontent: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str] = mapped_column(String(255), nullable=False)

    category: Mapped[BlogCategory] = mapped_column(
        SAEnum(
            BlogCategory,
            name="blogcategory",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        index=True,
    )

    author: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="blog",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    saves: Mapped[list["SavedBlog"]] = relationship(
        "SavedBlog",
        back_populates="blog",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Blog(id={self.id}, title={self.title!r})>"
