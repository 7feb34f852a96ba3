"""PostgreSQL implementation of Comment repository."""

from typing import List

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lens.domain.model import Comment, FeedComment
from lens.domain.repository import CommentRepository
from lens.domain.value import CommentId, ContentId, ContentRef, UserId
from lens.persistence.mappers import comment_to_dict, row_to_comment, row_to_feed_comment
from lens.persistence.tables import comments_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _active_on(self, ref: ContentRef):
        return and_(
            comments_table.c.post_type == ref.kind.value,
            comments_table.c.post_id == ref.id,
            comments_table.c.is_deleted.is_(False),
        )

    async def has_active_duplicate(
        self, ref: ContentRef, user_id: UserId, text: str
    ) -> bool:
        """Check whether the user already has this exact active comment."""
        stmt = (
            select(comments_table.c.id)
            .where(
                self._active_on(ref),
                comments_table.c.user_id == user_id,
                comments_table.c.comment == text,
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment and return it with its ID."""
        stmt = (
            insert(comments_table)
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_comment(dict(row))

    async def soft_delete(
        self, post_id: ContentId, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Soft-delete a comment owned by the user."""
        stmt = (
            update(comments_table)
            .where(
                comments_table.c.id == comment_id,
                comments_table.c.post_id == post_id,
                comments_table.c.user_id == user_id,
                comments_table.c.is_deleted.is_(False),
            )
            .values(is_deleted=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_active_by_content(self, ref: ContentRef) -> List[FeedComment]:
        """Find active comments on an item with author usernames."""
        stmt = (
            select(
                comments_table.c.id,
                users_table.c.username,
                comments_table.c.comment,
                comments_table.c.created_at,
            )
            .select_from(comments_table)
            .join(users_table, users_table.c.id == comments_table.c.user_id)
            .where(self._active_on(ref))
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_feed_comment(dict(row)) for row in result.mappings().all()]
