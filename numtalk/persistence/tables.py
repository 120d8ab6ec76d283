"""SQLAlchemy table definitions for the number board.

Each post row is a document: numeric nodes and comments are embedded as
JSONB arrays rather than living in tables of their own.
"""

from sqlalchemy import Column, Double, Index, MetaData, String, Table, Text, text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("author_id", String(255), nullable=False),
    Column("author_name", String(255), nullable=True),
    Column("text", Text, nullable=True),  # Set for text posts
    Column("start_number", Double, nullable=True),  # Set for chain posts
    Column("nodes", JSONB, nullable=False, server_default=text("'[]'::jsonb")),
    # Nullable: rows written before comments existed have no array
    Column("comments", JSONB, nullable=True, server_default=text("'[]'::jsonb")),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
