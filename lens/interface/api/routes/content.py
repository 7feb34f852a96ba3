"""Content submission routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from lens.application.usecase.content import (
    CreateContentRequest,
    CreateContentResponse,
    CreateContentUseCase,
)
from lens.domain.error import DomainError
from lens.domain.service import JWTService
from lens.interface.api.auth import authenticate, bearer_scheme
from lens.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["content"], route_class=DishkaRoute)


class AddContentAPIRequest(BaseModel):
    """API request for submitting content.

    Which fields apply depends on ``type``: quotes and prompts use
    ``content``; articles and videos use ``title`` and ``url``; books use
    ``title``, ``content`` (the summary), ``author`` and ``url``.
    """

    type: str | None = None
    category: str | None = None
    title: str | None = None
    content: str | None = None
    author: str | None = None
    url: str | None = None
    tags: list[str] = Field(default_factory=list)


@router.post(
    "/addContent",
    response_model=CreateContentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_content(
    request: AddContentAPIRequest,
    use_case: FromDishka[CreateContentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CreateContentResponse:
    """Submit a quote, article, book, video or AI prompt.

    Requires authentication.

    Args:
        request: Content fields
        use_case: Create content use case (injected)
        jwt_service: JWT service for token verification (injected)
        credentials: Bearer token

    Returns:
        The new content ID

    Raises:
        HTTPException: If not authenticated, invalid, or a duplicate
    """
    user = authenticate(credentials, jwt_service)

    try:
        use_case_request = CreateContentRequest(
            **request.model_dump(), user_id=user.id
        )
        return await use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e)
