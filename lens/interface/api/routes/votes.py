"""Vote routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Path
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, ConfigDict, Field

from lens.application.usecase.vote import ToggleVoteRequest, ToggleVoteUseCase
from lens.domain.error import DomainError
from lens.domain.model.feed import FeedVote
from lens.domain.service import JWTService
from lens.domain.value import MAX_ID
from lens.interface.api.auth import authenticate, bearer_scheme
from lens.interface.error import to_http_exception

IdPath = Annotated[int, Path(ge=1, le=MAX_ID)]

router = APIRouter(prefix="/content-type", tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting on content."""

    model_config = ConfigDict(populate_by_name=True)

    content_type: str | None = Field(default=None, alias="contentType")
    vote_type: str | None = Field(default=None, alias="voteType")


@router.put("/{content_id}/vote", response_model=list[FeedVote])
async def toggle_vote(
    content_id: IdPath,
    request: VoteAPIRequest,
    use_case: FromDishka[ToggleVoteUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> list[FeedVote]:
    """Up or down vote a content item.

    Voting the same way twice removes the vote; voting the other way
    switches it. Requires authentication.

    Args:
        content_id: Content ID within its kind
        request: Content kind and vote direction
        use_case: Toggle vote use case (injected)
        jwt_service: JWT service for token verification (injected)
        credentials: Bearer token

    Returns:
        All active votes on the item after the change

    Raises:
        HTTPException: If not authenticated, invalid, or the item is missing
    """
    user = authenticate(credentials, jwt_service)

    try:
        response = await use_case.execute(
            ToggleVoteRequest(
                content_id=content_id,
                content_type=request.content_type,
                vote_type=request.vote_type,
                user_id=user.id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    return response.votes
