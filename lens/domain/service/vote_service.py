"""Vote domain service."""

import logfire

from lens.domain.error import DuplicateVoteError
from lens.domain.model.feed import FeedVote
from lens.domain.repository import VoteRepository
from lens.domain.value import ContentRef, UserId, VoteType

from .base import Service
from .content_service import ContentService


class VoteService(Service):
    """Domain service for the vote toggle."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        content_service: ContentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            content_service: Content domain service
        """
        self.vote_repository = vote_repository
        self.content_service = content_service

    async def toggle_vote(
        self, ref: ContentRef, user_id: UserId, vote_type: VoteType
    ) -> list[FeedVote]:
        """Apply a vote request and return the item's active votes.

        Transitions for the user's vote on the item:

            none + up   -> up       up + up     -> none
            none + down -> down     up + down   -> down
            down + down -> none     down + up   -> up

        Args:
            ref: Content item key
            user_id: Voting user
            vote_type: Requested direction

        Returns:
            Active votes on the item after the change, newest first

        Raises:
            NotFoundError: If the content item does not exist
            DuplicateVoteError: If the ledger rejected a racing write
        """
        with logfire.span(
            "vote_service.toggle_vote",
            ref=str(ref),
            user_id=user_id,
            vote_type=vote_type.value,
        ):
            await self.content_service.ensure_exists(ref)

            try:
                vote = await self.vote_repository.toggle(user_id, ref, vote_type)
            except DuplicateVoteError:
                logfire.warn("Duplicate vote attempt", ref=str(ref), user_id=user_id)
                raise

            if vote.is_deleted:
                logfire.info("Vote removed", ref=str(ref), user_id=user_id)
            else:
                logfire.info(
                    "Vote recorded",
                    ref=str(ref),
                    user_id=user_id,
                    vote_type=vote.vote_type.value,
                )

            return await self.vote_repository.find_active_by_content(ref)
