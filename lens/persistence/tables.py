"""SQLAlchemy table definitions for InspireLens.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from dataclasses import dataclass

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

from lens.domain.value import ContentKind

# Metadata object for all tables
metadata = MetaData()


def _created_at() -> Column:
    return Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    )


def _is_deleted() -> Column:
    return Column("is_deleted", Boolean, nullable=False, server_default="false")


# ============================================================================
# USERS TABLE (Owned by the auth service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(100), nullable=False, unique=True),
    Column("email", String(255), nullable=True, unique=True),
    Column("password_hash", String(255), nullable=True),  # Set by the auth service
    _created_at(),
    _is_deleted(),
)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False),
    Column("slug", String(50), nullable=False, unique=True),
    Column("icon", String(20), nullable=True),
    Column("color", String(100), nullable=True),
    _created_at(),
    _is_deleted(),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False, unique=True),
    _created_at(),
    CheckConstraint("name = lower(trim(name))", name="ck_tags_normalized"),
)

# ============================================================================
# CONTENT TABLES (one per kind, independent id spaces)
# ============================================================================


def _owner_columns() -> list[Column]:
    return [
        Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
        Column("category_id", Integer, ForeignKey("categories.id"), nullable=True),
        _created_at(),
        _is_deleted(),
    ]


quotes_table = Table(
    "quotes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("quote", Text, nullable=False),
    Column("author", String(255), nullable=True),
    *_owner_columns(),
)

articles_table = Table(
    "articles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(500), nullable=False),
    Column("url", Text, nullable=False),
    *_owner_columns(),
)

books_table = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(500), nullable=False),
    Column("author", String(255), nullable=True),
    Column("summary", Text, nullable=False),
    Column("url", Text, nullable=True),
    *_owner_columns(),
)

videos_table = Table(
    "videos",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(500), nullable=False),
    Column("url", Text, nullable=False),
    *_owner_columns(),
)

aiprompts_table = Table(
    "aiprompts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("prompt", Text, nullable=False),
    *_owner_columns(),
)

# ============================================================================
# TAG JUNCTION TABLES (one per kind)
# ============================================================================


def _junction(kind: str, content_table: Table) -> Table:
    content_column = f"{kind}_id"
    return Table(
        f"{kind}_tags",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column(
            content_column,
            Integer,
            ForeignKey(f"{content_table.name}.id", ondelete="CASCADE"),
            nullable=False,
        ),
        Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
        UniqueConstraint(content_column, "tag_id", name=f"uq_{kind}_tag"),
    )


quote_tags_table = _junction("quote", quotes_table)
article_tags_table = _junction("article", articles_table)
book_tags_table = _junction("book", books_table)
video_tags_table = _junction("video", videos_table)
aiprompt_tags_table = _junction("aiprompt", aiprompts_table)

# ============================================================================
# VOTES TABLE (Polymorphic: any content kind)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("post_type", String(20), nullable=False),
    Column("post_id", Integer, nullable=False),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("vote_type", String(10), nullable=False),
    _created_at(),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    _is_deleted(),
    UniqueConstraint("post_type", "post_id", "user_id", name="uq_vote_post_user"),
    CheckConstraint("vote_type IN ('up', 'down')", name="ck_votes_vote_type"),
    CheckConstraint(
        "post_type IN ('quote', 'article', 'book', 'video', 'aiprompt')",
        name="ck_votes_post_type",
    ),
)

Index("idx_votes_post", votes_table.c.post_type, votes_table.c.post_id)

# ============================================================================
# COMMENTS TABLE (Polymorphic: any content kind)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("post_type", String(20), nullable=False),
    Column("post_id", Integer, nullable=False),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("comment", Text, nullable=False),
    _created_at(),
    _is_deleted(),
    CheckConstraint(
        "post_type IN ('quote', 'article', 'book', 'video', 'aiprompt')",
        name="ck_comments_post_type",
    ),
)

Index("idx_comments_post", comments_table.c.post_type, comments_table.c.post_id)
Index("idx_comments_user", comments_table.c.user_id)


# ============================================================================
# KIND -> STORAGE MAPPING
# ============================================================================
@dataclass(frozen=True)
class ContentStorage:
    """Where one content kind lives.

    ``text_column`` is the column that becomes the feed row's ``content``.
    """

    table: Table
    tag_table: Table
    tag_column: str
    text_column: str


CONTENT_STORAGE: dict[ContentKind, ContentStorage] = {
    ContentKind.QUOTE: ContentStorage(quotes_table, quote_tags_table, "quote_id", "quote"),
    ContentKind.ARTICLE: ContentStorage(
        articles_table, article_tags_table, "article_id", "title"
    ),
    ContentKind.BOOK: ContentStorage(books_table, book_tags_table, "book_id", "title"),
    ContentKind.VIDEO: ContentStorage(videos_table, video_tags_table, "video_id", "title"),
    ContentKind.AIPROMPT: ContentStorage(
        aiprompts_table, aiprompt_tags_table, "aiprompt_id", "prompt"
    ),
}
