"""SQLAlchemy table definitions for meh.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("post", String(512), nullable=False),  # Opaque post path
    Column("author", String(255), nullable=False),
    Column("email", String(255), nullable=False, server_default=""),
    Column("website", String(512), nullable=False, server_default=""),
    Column("text", Text, nullable=False),  # Raw markup as submitted
    Column("html", Text, nullable=False),  # Rendered at write time
    Column("ip", String(45), nullable=False, server_default=""),  # Fits IPv6
    Column("status", String(16), nullable=False, server_default="pending"),
    Column("user", String(64), nullable=True),  # Token subject
    Column(
        "parent", Integer, ForeignKey("comments.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('pending', 'approved', 'spam', 'deleted')",
        name="valid_comment_status",
    ),
)

Index("idx_comments_post_status", comments_table.c.post, comments_table.c.status)
Index("idx_comments_user", comments_table.c.user)
Index("idx_comments_ip", comments_table.c.ip)
Index("idx_comments_created_at", comments_table.c.created_at)
