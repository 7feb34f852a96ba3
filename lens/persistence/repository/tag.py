"""PostgreSQL implementation of Tag repository."""

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from lens.domain.model.tag import Tag
from lens.domain.repository.tag import TagRepository
from lens.domain.value import ContentRef, TagId, TagName
from lens.persistence.mappers import row_to_tag
from lens.persistence.tables import CONTENT_STORAGE, tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def ensure(self, name: TagName) -> Tag:
        """Return the tag with this name, creating it if absent."""
        stmt = (
            pg_insert(tags_table)
            .values(name=name.root)
            .on_conflict_do_nothing(index_elements=["name"])
        )
        await self.session.execute(stmt)

        result = await self.session.execute(
            select(tags_table).where(tags_table.c.name == name.root)
        )
        row = result.mappings().one()
        return row_to_tag(dict(row))

    async def link(self, ref: ContentRef, tag_id: TagId) -> None:
        """Link a tag to a content item; linking twice is a no-op."""
        storage = CONTENT_STORAGE[ref.kind]
        stmt = (
            pg_insert(storage.tag_table)
            .values({storage.tag_column: ref.id, "tag_id": tag_id})
            .on_conflict_do_nothing(index_elements=[storage.tag_column, "tag_id"])
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def find_names_for(self, ref: ContentRef) -> list[str]:
        """Find the names of tags linked to a content item."""
        storage = CONTENT_STORAGE[ref.kind]
        junction = storage.tag_table
        stmt = (
            select(tags_table.c.name)
            .select_from(junction)
            .join(tags_table, junction.c.tag_id == tags_table.c.id)
            .where(junction.c[storage.tag_column] == ref.id)
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_all(self, limit: int = 100) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings().all()]
