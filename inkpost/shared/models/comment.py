"""
Comment Entity Model

A reader's comment on a blog. The commenter's display name is copied from
their token at write time, so listing comments never calls the user service.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkpost.shared.models.base import Base, CreatedAtMixin

if TYPE_CHECKING:
    from inkpost.shared.models.blog import Blog


class Comment(Base, CreatedAtMixin):
    """Comment model."""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    comment: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)

    blog_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    blog: Mapped["Blog"] = relationship("Blog", back_populates="comments")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Comment(id={self.id}, blog_id={self.blog_id})>"
