"""PostgreSQL implementation of Category repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from lens.domain.model import Category
from lens.domain.repository import CategoryRepository
from lens.domain.value import CategoryId, Slug
from lens.persistence.mappers import category_to_dict, row_to_category
from lens.persistence.tables import categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find an active category by slug."""
        stmt = select(categories_table).where(
            categories_table.c.slug == slug.root,
            categories_table.c.is_deleted.is_(False),
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_category(dict(row)) if row else None

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find an active category by ID."""
        stmt = select(categories_table).where(
            categories_table.c.id == category_id,
            categories_table.c.is_deleted.is_(False),
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_category(dict(row)) if row else None

    async def find_all(self) -> List[Category]:
        """Find all active categories ordered by ID."""
        stmt = (
            select(categories_table)
            .where(categories_table.c.is_deleted.is_(False))
            .order_by(categories_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_category(dict(row)) for row in result.mappings().all()]

    async def save(self, category: Category) -> Category:
        """Save a category (create or update)."""
        category_dict = category_to_dict(category)
        stmt = pg_insert(categories_table).values(**category_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={
                key: stmt.excluded[key] for key in category_dict if key != "id"
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return category
