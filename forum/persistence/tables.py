"""SQLAlchemy table definitions for the forum.

Core tables only; rows are mapped to pydantic domain models by hand in
``forum.persistence.mappers``. They match the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("handle", String(30), nullable=False, unique=True),
    Column("display_name", String(20), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("points", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("points >= 0", name="ck_users_points_non_negative"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
# author_id is a weak reference: deleting a user leaves their posts in place
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("author_id", UUID, nullable=False),
    Column("title", String(200), nullable=False),
    Column("body", Text, nullable=False),
    Column("image_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_id", UUID, nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_created", comments_table.c.post_id, comments_table.c.created_at)

# ============================================================================
# REACTIONS TABLE (polymorphic: posts and comments)
# ============================================================================
# One row per (user, item); the kind column makes like and dislike
# mutually exclusive.
reactions_table = Table(
    "reactions",
    metadata,
    Column("user_id", UUID, nullable=False),
    Column(
        "reactable_type",
        Enum("post", "comment", name="reactable_type", create_type=False),
        nullable=False,
    ),
    Column("reactable_id", UUID, nullable=False),
    Column(
        "kind",
        Enum("like", "dislike", name="reaction_kind", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "user_id", "reactable_type", "reactable_id", name="uq_reactions_user_item"
    ),
)

Index(
    "idx_reactions_reactable",
    reactions_table.c.reactable_type,
    reactions_table.c.reactable_id,
)
