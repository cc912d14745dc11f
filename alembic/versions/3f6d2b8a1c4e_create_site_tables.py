"""create_site_tables

Revision ID: 3f6d2b8a1c4e
Revises:
Create Date: 2026-10-18
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f6d2b8a1c4e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "appointments",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("date", sa.String(length=50), nullable=True),
        sa.Column("service", sa.String(length=200), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_appointments_created_at"), "appointments", ["created_at"], unique=False)

    op.create_table(
        "messages",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_messages_created_at"), "messages", ["created_at"], unique=False)

    op.create_table(
        "blog_posts",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("title", sa.String(length=300), nullable=True),
        sa.Column("date", sa.String(length=50), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_blog_posts_created_at"), "blog_posts", ["created_at"], unique=False)

    op.create_table(
        "open_hours",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("day", sa.String(length=50), nullable=True),
        sa.Column("open", sa.String(length=50), nullable=True),
        sa.Column("close", sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    # One row per day; upserts rely on this.
    op.create_index(op.f("ix_open_hours_day"), "open_hours", ["day"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_open_hours_day"), table_name="open_hours")
    op.drop_table("open_hours")
    op.drop_index(op.f("ix_blog_posts_created_at"), table_name="blog_posts")
    op.drop_table("blog_posts")
    op.drop_index(op.f("ix_messages_created_at"), table_name="messages")
    op.drop_table("messages")
    op.drop_index(op.f("ix_appointments_created_at"), table_name="appointments")
    op.drop_table("appointments")
