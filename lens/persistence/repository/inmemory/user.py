"""In-memory user repository for testing."""

from typing import Optional

from lens.domain.model.user import User
from lens.domain.repository.user import UserRepository
from lens.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find an active user by ID."""
        user = self._store.users.get(user_id)
        if user and not user.is_deleted:
            return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._store.users[user.id] = user
        return user
