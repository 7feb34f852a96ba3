"""Unit tests for the SQL the PostgreSQL repositories emit.

A recording session stands in for AsyncSession so the statements can be
compiled against the PostgreSQL dialect without a database.
"""

from datetime import datetime

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError

from lens.domain.error import DuplicateVoteError
from lens.domain.value import ContentId, ContentKind, ContentRef, UserId, VoteType
from lens.persistence.repository import (
    PostgresContentRepository,
    PostgresVoteRepository,
)
from tests.conftest import make_content

NOW = datetime(2026, 5, 1, 10, 0)


class _Result:
    def __init__(self, row):
        self._row = row

    def mappings(self):
        return self

    def one(self):
        return self._row

    def first(self):
        return self._row


class RecordingSession:
    """Minimal async session that records statements."""

    def __init__(self, row=None, error: Exception | None = None):
        self.row = row
        self.error = error
        self.statements = []

    async def execute(self, stmt):
        self.statements.append(stmt)
        if self.error:
            raise self.error
        return _Result(self.row)

    async def flush(self):
        pass


class _DriverError(Exception):
    """DBAPI error carrying a PostgreSQL sqlstate."""

    def __init__(self, sqlstate: str, message: str):
        super().__init__(message)
        self.sqlstate = sqlstate


def _sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


def _vote_row(is_deleted: bool = False) -> dict:
    return {
        "id": 1,
        "post_type": "quote",
        "post_id": 4,
        "user_id": 2,
        "vote_type": "down",
        "created_at": NOW,
        "updated_at": NOW,
        "is_deleted": is_deleted,
    }


class TestVoteToggleStatement:
    """The toggle is one atomic upsert on the ledger's unique key."""

    @pytest.mark.asyncio
    async def test_upsert_on_unique_constraint(self):
        session = RecordingSession(row=_vote_row())
        repo = PostgresVoteRepository(session)
        ref = ContentRef(kind=ContentKind.QUOTE, id=ContentId(4))

        vote = await repo.toggle(UserId(2), ref, VoteType.DOWN)

        sql = _sql(session.statements[0])
        assert "ON CONFLICT ON CONSTRAINT uq_vote_post_user DO UPDATE" in sql
        assert "CASE WHEN" in sql
        assert "RETURNING" in sql
        assert vote.state is VoteType.DOWN

    @pytest.mark.asyncio
    async def test_unique_violation_becomes_duplicate_vote(self):
        session = RecordingSession(
            error=IntegrityError(
                "INSERT",
                {},
                _DriverError("23505", "duplicate key violates uq_vote_post_user"),
            )
        )
        repo = PostgresVoteRepository(session)
        ref = ContentRef(kind=ContentKind.QUOTE, id=ContentId(4))

        with pytest.raises(DuplicateVoteError):
            await repo.toggle(UserId(2), ref, VoteType.UP)

    @pytest.mark.asyncio
    async def test_foreign_key_violation_is_not_a_duplicate(self):
        session = RecordingSession(
            error=IntegrityError(
                "INSERT",
                {},
                _DriverError("23503", "violates foreign key constraint on user_id"),
            )
        )
        repo = PostgresVoteRepository(session)
        ref = ContentRef(kind=ContentKind.QUOTE, id=ContentId(4))

        with pytest.raises(IntegrityError):
            await repo.toggle(UserId(42), ref, VoteType.UP)


class TestContentStatements:
    """Kind-specific tables and duplicate matching."""

    @pytest.mark.asyncio
    async def test_duplicate_check_targets_kind_table(self):
        session = RecordingSession(row=None)
        repo = PostgresContentRepository(session)

        found = await repo.has_duplicate(make_content(ContentKind.QUOTE, author=None))

        sql = _sql(session.statements[0])
        assert "FROM quotes" in sql
        assert "quotes.quote IS NOT DISTINCT FROM" in sql
        assert "quotes.author IS NOT DISTINCT FROM" in sql
        assert found is False

    @pytest.mark.asyncio
    async def test_prompt_saved_into_prompt_column(self):
        row = {
            "id": 3,
            "prompt": "Act as a coach and review my weekly goals.",
            "user_id": 1,
            "category_id": 2,
            "created_at": NOW,
            "is_deleted": False,
        }
        session = RecordingSession(row=row)
        repo = PostgresContentRepository(session)

        saved = await repo.save(make_content(ContentKind.AIPROMPT))

        sql = _sql(session.statements[0])
        assert sql.startswith("INSERT INTO aiprompts")
        assert "prompt" in sql
        assert saved.id == 3
        assert saved.text == row["prompt"]
