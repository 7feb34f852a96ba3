"""Toggle vote use case."""

from pydantic import BaseModel

from lens.application.usecase.base import BaseUseCase
from lens.domain.model.feed import FeedVote
from lens.domain.service import UserService, VoteService
from lens.domain.value import ContentId, ContentKind, ContentRef, UserId, VoteType


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    content_id: int
    content_type: str | None = None  # Content kind, "prompt" accepted
    vote_type: str | None = None  # "upvote" or "downvote"
    user_id: int  # User ID from authenticated user


class ToggleVoteResponse(BaseModel):
    """Toggle vote response."""

    votes: list[FeedVote]  # Active votes on the item after the change


class ToggleVoteUseCase(BaseUseCase):
    """Use case for up/down voting a content item."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute toggle vote flow.

        Args:
            request: Toggle vote request

        Returns:
            The item's active votes, re-read after the change

        Raises:
            InvalidVoteTypeError: If the vote token is not recognised
            InvalidContentKindError: If the content type is unknown
            NotFoundError: If the content item or the voter does not exist
            DuplicateVoteError: If a racing write was rejected
        """
        vote_type = VoteType.from_token(request.vote_type)
        ref = ContentRef(
            kind=ContentKind.parse(request.content_type),
            id=ContentId(request.content_id),
        )

        user = await self.user_service.get_by_id(UserId(request.user_id))
        votes = await self.vote_service.toggle_vote(ref, user.id, vote_type)
        return ToggleVoteResponse(votes=votes)
