"""In-memory vote repository for testing."""

from datetime import datetime
from typing import List, Optional

from lens.domain.model.feed import FeedVote
from lens.domain.model.vote import Vote
from lens.domain.repository.vote import VoteRepository
from lens.domain.value import ContentRef, UserId, VoteId, VoteType

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _on(self, ref: ContentRef) -> list[Vote]:
        return [
            v
            for v in self._store.votes.values()
            if v.post_type == ref.kind and v.post_id == ref.id
        ]

    async def find_by_user_and_content(
        self, user_id: UserId, ref: ContentRef
    ) -> Optional[Vote]:
        """Find a user's vote row on an item, active or soft-deleted."""
        for vote in self._on(ref):
            if vote.user_id == user_id:
                return vote
        return None

    async def toggle(self, user_id: UserId, ref: ContentRef, vote_type: VoteType) -> Vote:
        """Apply a vote request to the user's single row for the item."""
        existing = await self.find_by_user_and_content(user_id, ref)
        if existing is None:
            now = datetime.now()
            vote = Vote(
                id=VoteId(self._store.next_id("votes")),
                post_type=ref.kind,
                post_id=ref.id,
                user_id=user_id,
                vote_type=vote_type,
                created_at=now,
                updated_at=now,
            )
        else:
            vote = existing.toggled(vote_type)

        self._store.votes[vote.id] = vote  # type: ignore[index]
        return vote

    async def find_active_by_content(self, ref: ContentRef) -> List[FeedVote]:
        """Find active votes on an item, newest first, with usernames."""
        active = [v for v in self._on(ref) if not v.is_deleted]
        active.sort(key=lambda v: (v.created_at, v.id), reverse=True)
        return [
            FeedVote(
                id=v.id,  # type: ignore[arg-type]
                user_id=v.user_id,
                username=self._store.username(v.user_id),
                vote_type=v.vote_type,
                created_at=v.created_at,
            )
            for v in active
        ]

    async def count_up(self, ref: ContentRef) -> int:
        """Count active up votes on an item."""
        return sum(
            1
            for v in self._on(ref)
            if not v.is_deleted and v.vote_type == VoteType.UP
        )
