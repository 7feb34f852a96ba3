"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lens.domain.model.user import User
from lens.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity.

    Users are owned by the authentication service; this API only needs
    to look them up for display names.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find an active user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
