"""initial_schema

Create the InspireLens schema:
- Users (read-only here, owned by the auth service)
- Categories (seeded separately)
- Five content tables: quotes, articles, books, videos, aiprompts
- Tags plus one junction table per content kind
- Votes (one row per user and item, up/down, soft-deleted on removal)
- Comments (flat, soft-deleted)

Revision ID: 3c1d9a7e5b20
Revises:
Create Date: 2026-10-16 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1d9a7e5b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CONTENT_KINDS = ("quote", "article", "book", "video", "aiprompt")
POST_TYPE_CHECK = "post_type IN ('quote', 'article', 'book', 'video', 'aiprompt')"


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("NOW()"),
        nullable=False,
    )


def _is_deleted() -> sa.Column:
    return sa.Column(
        "is_deleted", sa.Boolean(), server_default=sa.text("false"), nullable=False
    )


def _owner_columns() -> list[sa.Column]:
    return [
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column(
            "category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=True
        ),
        _created_at(),
        _is_deleted(),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=True),
        _created_at(),
        _is_deleted(),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # ========================================================================
    # CATEGORIES table
    # ========================================================================
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("slug", sa.String(50), nullable=False),
        sa.Column("icon", sa.String(20), nullable=True),
        sa.Column("color", sa.String(100), nullable=True),
        _created_at(),
        _is_deleted(),
        sa.UniqueConstraint("slug", name="uq_categories_slug"),
    )

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False),
        _created_at(),
        sa.UniqueConstraint("name", name="uq_tags_name"),
        sa.CheckConstraint("name = lower(trim(name))", name="ck_tags_normalized"),
    )

    # ========================================================================
    # CONTENT tables (independent id spaces)
    # ========================================================================
    op.create_table(
        "quotes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("quote", sa.Text(), nullable=False),
        sa.Column("author", sa.String(255), nullable=True),
        *_owner_columns(),
    )
    op.create_table(
        "articles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        *_owner_columns(),
    )
    op.create_table(
        "books",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("summary", sa.Text(), nullable=False),
        sa.Column("url", sa.Text(), nullable=True),
        *_owner_columns(),
    )
    op.create_table(
        "videos",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        *_owner_columns(),
    )
    op.create_table(
        "aiprompts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("prompt", sa.Text(), nullable=False),
        *_owner_columns(),
    )

    # The feed reads active rows newest first
    for kind in CONTENT_KINDS:
        table = f"{kind}s"
        op.create_index(
            f"idx_{table}_active_created_at",
            table,
            [sa.text("created_at DESC")],
            postgresql_where=sa.text("is_deleted = false"),
        )
        op.create_index(f"idx_{table}_category_id", table, ["category_id"])

    # ========================================================================
    # TAG junction tables
    # ========================================================================
    for kind in CONTENT_KINDS:
        op.create_table(
            f"{kind}_tags",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column(
                f"{kind}_id",
                sa.Integer(),
                sa.ForeignKey(f"{kind}s.id", ondelete="CASCADE"),
                nullable=False,
            ),
            sa.Column(
                "tag_id",
                sa.Integer(),
                sa.ForeignKey("tags.id", ondelete="CASCADE"),
                nullable=False,
            ),
            sa.UniqueConstraint(f"{kind}_id", "tag_id", name=f"uq_{kind}_tag"),
        )
        op.create_index(f"idx_{kind}_tags_tag_id", f"{kind}_tags", ["tag_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("post_type", sa.String(20), nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("vote_type", sa.String(10), nullable=False),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        _is_deleted(),
        sa.UniqueConstraint("post_type", "post_id", "user_id", name="uq_vote_post_user"),
        sa.CheckConstraint("vote_type IN ('up', 'down')", name="ck_votes_vote_type"),
        sa.CheckConstraint(POST_TYPE_CHECK, name="ck_votes_post_type"),
    )
    op.create_index("idx_votes_post", "votes", ["post_type", "post_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("post_type", sa.String(20), nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        _created_at(),
        _is_deleted(),
        sa.CheckConstraint(POST_TYPE_CHECK, name="ck_comments_post_type"),
    )
    op.create_index("idx_comments_post", "comments", ["post_type", "post_id"])
    op.create_index("idx_comments_user", "comments", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("comments")
    op.drop_table("votes")
    for kind in CONTENT_KINDS:
        op.drop_table(f"{kind}_tags")
    for kind in CONTENT_KINDS:
        op.drop_table(f"{kind}s")
    op.drop_table("tags")
    op.drop_table("categories")
    op.drop_table("users")
