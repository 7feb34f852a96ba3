"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, case, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from lens.domain.error import DuplicateVoteError
from lens.domain.model import FeedVote, Vote
from lens.domain.repository import VoteRepository
from lens.domain.value import ContentRef, UserId, VoteType
from lens.persistence.mappers import row_to_feed_vote, row_to_vote
from lens.persistence.tables import users_table, votes_table

UNIQUE_VIOLATION = "23505"


def _is_unique_violation(error: IntegrityError) -> bool:
    """Tell a racing duplicate vote apart from other integrity failures."""
    if getattr(error.orig, "sqlstate", None) == UNIQUE_VIOLATION:
        return True
    return "uq_vote_post_user" in str(error.orig)


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _for_content(self, ref: ContentRef):
        return and_(
            votes_table.c.post_type == ref.kind.value,
            votes_table.c.post_id == ref.id,
        )

    async def find_by_user_and_content(
        self, user_id: UserId, ref: ContentRef
    ) -> Optional[Vote]:
        """Find a user's vote row on an item, active or soft-deleted."""
        stmt = select(votes_table).where(
            self._for_content(ref), votes_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def toggle(self, user_id: UserId, ref: ContentRef, vote_type: VoteType) -> Vote:
        """Apply a vote request in a single upsert.

        On conflict the SET clause reads the existing row: an active vote
        in the requested direction is soft-deleted, anything else takes the
        requested direction and is revived.
        """
        stmt = pg_insert(votes_table).values(
            post_type=ref.kind.value,
            post_id=ref.id,
            user_id=user_id,
            vote_type=vote_type.value,
        )
        stmt = stmt.on_conflict_do_update(
            constraint="uq_vote_post_user",
            set_={
                "is_deleted": case(
                    (
                        and_(
                            votes_table.c.is_deleted.is_(False),
                            votes_table.c.vote_type == stmt.excluded.vote_type,
                        ),
                        True,
                    ),
                    else_=False,
                ),
                "vote_type": stmt.excluded.vote_type,
                "updated_at": func.now(),
            },
        ).returning(votes_table)

        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise DuplicateVoteError()
            raise

        row = result.mappings().one()
        await self.session.flush()
        return row_to_vote(dict(row))

    async def find_active_by_content(self, ref: ContentRef) -> List[FeedVote]:
        """Find active votes on an item, newest first, with usernames."""
        stmt = (
            select(
                votes_table.c.id,
                votes_table.c.user_id,
                users_table.c.username,
                votes_table.c.vote_type,
                votes_table.c.created_at,
            )
            .select_from(votes_table)
            .join(users_table, users_table.c.id == votes_table.c.user_id)
            .where(self._for_content(ref), votes_table.c.is_deleted.is_(False))
            .order_by(votes_table.c.created_at.desc(), votes_table.c.id.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_feed_vote(dict(row)) for row in result.mappings().all()]

    async def count_up(self, ref: ContentRef) -> int:
        """Count active up votes on an item."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(
                self._for_content(ref),
                votes_table.c.vote_type == VoteType.UP.value,
                votes_table.c.is_deleted.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
