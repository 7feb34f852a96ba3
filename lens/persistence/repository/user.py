"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from lens.domain.model import User
from lens.domain.repository import UserRepository
from lens.domain.value import UserId
from lens.persistence.mappers import row_to_user, user_to_dict
from lens.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find an active user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(
            users_table.c.id == user_id,
            users_table.c.is_deleted.is_(False),
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)
        stmt = pg_insert(users_table).values(**user_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={
                "username": stmt.excluded.username,
                "email": stmt.excluded.email,
                "is_deleted": stmt.excluded.is_deleted,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
