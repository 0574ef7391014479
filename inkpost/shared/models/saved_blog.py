"""
SavedBlog Entity Model

A user's bookmark of a blog.

SAMPLE SAVED_BLOG RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 7                                                         │
│ user_id          │ "550e8400-e29b-41d4-a716-446655440000"                    │
│ blog_id          │ 42                                                        │
│ created_at       │ 2026-01-16T08:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkpost.shared.models.base import Base, CreatedAtMixin

if TYPE_CHECKING:
    from inkpost.shared.models.blog import Blog


class SavedBlog(Base, CreatedAtMixin):
    """
    SavedBlog model - one bookmark per (user, blog) pair.

    Attributes:
        id: Serial identifier
        user_id: Bookmarking user's id
        blog_id: The bookmarked blog
    """

    __tablename__ = "saved_blogs"
    __table_args__ = (
        UniqueConstraint("user_id", "blog_id", name="uq_saved_blogs_user_blog"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    blog_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    blog: Mapped["Blog"] = relationship("Blog", back_populates="saves")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<SavedBlog(id={self.id}, user_id={self.user_id}, blog_id={self.blog_id})>"
