"""create_comments

Create the comments table with the indexes the moderation queries need:
- post + status for listing and counting a post's comments
- user and ip for a submitter's history

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:12:41.518204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("post", sa.String(length=512), nullable=False),
        sa.Column("author", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("website", sa.String(length=512), nullable=False, server_default=""),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("html", sa.Text(), nullable=False),
        sa.Column("ip", sa.String(length=45), nullable=False, server_default=""),
        sa.Column(
            "status", sa.String(length=16), nullable=False, server_default="pending"
        ),
        sa.Column("user", sa.String(length=64), nullable=True),
        sa.Column(
            "parent",
            sa.Integer(),
            sa.ForeignKey("comments.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'spam', 'deleted')",
            name="valid_comment_status",
        ),
    )

    op.create_index("idx_comments_post_status", "comments", ["post", "status"])
    op.create_index("idx_comments_user", "comments", ["user"])
    op.create_index("idx_comments_ip", "comments", ["ip"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_created_at", table_name="comments")
    op.drop_index("idx_comments_ip", table_name="comments")
    op.drop_index("idx_comments_user", table_name="comments")
    op.drop_index("idx_comments_post_status", table_name="comments")
    op.drop_table("comments")
