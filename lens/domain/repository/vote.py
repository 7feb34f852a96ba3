"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from lens.domain.model.feed import FeedVote
from lens.domain.model.vote import Vote
from lens.domain.value import ContentRef, UserId, VoteType


class VoteRepository(ABC):
    """Repository for the vote ledger.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_content(
        self, user_id: UserId, ref: ContentRef
    ) -> Optional[Vote]:
        """Find a user's vote row on an item, active or soft-deleted.

        Args:
            user_id: The user's ID
            ref: Content item key

        Returns:
            The vote row if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def toggle(self, user_id: UserId, ref: ContentRef, vote_type: VoteType) -> Vote:
        """Apply a vote request atomically.

        Follows ``Vote.toggled``: repeating the active direction removes
        the vote, any other request sets the direction and revives the row,
        and a missing row is inserted. Implementations must not race two
        concurrent requests from the same user into two rows.

        Args:
            user_id: The voting user
            ref: Content item key
            vote_type: Requested direction

        Returns:
            The vote row after the update

        Raises:
            DuplicateVoteError: If the uniqueness guard rejects the write
        """
        pass

    @abstractmethod
    async def find_active_by_content(self, ref: ContentRef) -> List[FeedVote]:
        """Find active votes on an item, newest first, with usernames.

        Args:
            ref: Content item key

        Returns:
            Active votes
        """
        pass

    @abstractmethod
    async def count_up(self, ref: ContentRef) -> int:
        """Count active up votes on an item.

        Args:
            ref: Content item key

        Returns:
            Number of active up votes
        """
        pass
