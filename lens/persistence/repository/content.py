"""PostgreSQL implementation of Content repository.

Every kind has its own table; ``CONTENT_STORAGE`` picks the table for
each call so the statements are written once for all five kinds.
"""

from typing import Optional

import logfire
from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from lens.domain.model import ContentItem
from lens.domain.repository import ContentRepository
from lens.domain.value import ContentRef
from lens.persistence.mappers import content_to_dict, row_to_content
from lens.persistence.tables import CONTENT_STORAGE


class PostgresContentRepository(ContentRepository):
    """PostgreSQL implementation of ContentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_ref(self, ref: ContentRef) -> Optional[ContentItem]:
        """Find an active content item by its (kind, id) key."""
        table = CONTENT_STORAGE[ref.kind].table
        stmt = select(table).where(table.c.id == ref.id, table.c.is_deleted.is_(False))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_content(ref.kind, dict(row)) if row else None

    async def exists(self, ref: ContentRef) -> bool:
        """Check whether an active content item exists."""
        table = CONTENT_STORAGE[ref.kind].table
        stmt = (
            select(table.c.id)
            .where(table.c.id == ref.id, table.c.is_deleted.is_(False))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def has_duplicate(self, item: ContentItem) -> bool:
        """Check for an active item of the same kind with equal duplicate fields.

        NULLs compare equal, so two quotes without an author still match.
        """
        storage = CONTENT_STORAGE[item.kind]  # type: ignore[attr-defined]
        table = storage.table
        values = content_to_dict(item)

        conditions = [table.c.is_deleted.is_(False)]
        for field in item.duplicate_fields:
            column = storage.text_column if field == "text" else field
            conditions.append(table.c[column].is_not_distinct_from(values[column]))

        stmt = select(table.c.id).where(and_(*conditions)).limit(1)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, item: ContentItem) -> ContentItem:
        """Insert a new content item and return it with its ID."""
        kind = item.kind  # type: ignore[attr-defined]
        table = CONTENT_STORAGE[kind].table
        with logfire.span("content_repository.save", kind=kind.value):
            stmt = insert(table).values(**content_to_dict(item)).returning(table)
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.flush()
            return row_to_content(kind, dict(row))
