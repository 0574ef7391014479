# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2026-03-01 00:00:00

Tables created:
- users: Accounts (Google sign-in) and profiles
- blogs: Published posts
- comments: Comments on blogs
- saved_blogs: Bookmarks, one per (user_id, blog_id)

Enums created:
- blogcategory: Technology, Health, Finance, Travel, Education, Entertainment, Study

User ids are stored as strings on the blog-side tables, without a foreign
key to users. Comments and bookmarks cascade with their blog.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Enum types
blog_category_enum = postgresql.ENUM(
    "Technology",
    "Health",
    "Finance",
    "Travel",
    "Education",
    "Entertainment",
    "Study",
    name="blogcategory",
    create_type=False,
)


def upgrade() -> None:
    """Upgrade database schema."""
    # Create enum types
    op.execute(
        "CREATE TYPE blogcategory AS ENUM "
        "('Technology', 'Health', 'Finance', 'Travel', "
        "'Education', 'Entertainment', 'Study')"
    )

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("image", sa.Text(), nullable=False, server_default=""),
        sa.Column("instagram", sa.String(255), nullable=False, server_default=""),
        sa.Column("facebook", sa.String(255), nullable=False, server_default=""),
        sa.Column("linkedin", sa.String(255), nullable=False, server_default=""),
        sa.Column("bio", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )

    # Create blogs table
    op.create_table(
        "blogs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("blogcontent", sa.Text(), nullable=False),
        sa.Column("image", sa.String(255), nullable=False),
        sa.Column("category", blog_category_enum, nullable=False, index=True),
        sa.Column("author", sa.String(255), nullable=False, index=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )

    # Create comments table
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("comment", sa.String(255), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False, index=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column(
            "blog_id",
            sa.Integer(),
            sa.ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )

    # Create saved_blogs table
    op.create_table(
        "saved_blogs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(255), nullable=False, index=True),
        sa.Column(
            "blog_id",
            sa.Integer(),
            sa.ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.UniqueConstraint("user_id", "blog_id", name="uq_saved_blogs_user_blog"),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("saved_blogs")
    op.drop_table("comments")
    op.drop_table("blogs")
    op.drop_table("users")

    # Drop enum types
    op.execute("DROP TYPE IF EXISTS blogcategory")
