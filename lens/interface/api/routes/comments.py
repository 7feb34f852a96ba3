"""Comment routes."""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Path, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, ConfigDict, Field

from lens.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from lens.domain.error import DomainError
from lens.domain.service import JWTService
from lens.domain.value import MAX_ID
from lens.interface.api.auth import authenticate, bearer_scheme
from lens.interface.error import to_http_exception

IdPath = Annotated[int, Path(ge=1, le=MAX_ID)]

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment."""

    model_config = ConfigDict(populate_by_name=True)

    comment: str | None = None
    post_type: str | None = Field(default=None, alias="postType")


@router.post(
    "/{content_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    content_id: IdPath,
    request: AddCommentAPIRequest,
    use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AddCommentResponse:
    """Comment on a content item.

    Requires authentication.

    Args:
        content_id: Content ID within its kind
        request: Comment text and content kind
        use_case: Add comment use case (injected)
        jwt_service: JWT service for token verification (injected)
        credentials: Bearer token

    Returns:
        The created comment

    Raises:
        HTTPException: If not authenticated, empty, a duplicate, or the
            item is missing
    """
    user = authenticate(credentials, jwt_service)

    try:
        return await use_case.execute(
            AddCommentRequest(
                content_id=content_id,
                post_type=request.post_type,
                comment=request.comment,
                user_id=user.id,
            )
        )
    except DomainError as e:
        logfire.warn("Comment rejected", content_id=content_id, error=str(e))
        raise to_http_exception(e)


@router.delete(
    "/deleteComment/{content_id}/comments/{comment_id}",
    response_model=DeleteCommentResponse,
)
async def delete_comment(
    content_id: IdPath,
    comment_id: IdPath,
    use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteCommentResponse:
    """Delete one of your own comments.

    Someone else's comment is reported as not found.

    Args:
        content_id: Content ID the comment belongs to
        comment_id: Comment ID
        use_case: Delete comment use case (injected)
        jwt_service: JWT service for token verification (injected)
        credentials: Bearer token

    Returns:
        Confirmation message

    Raises:
        HTTPException: If not authenticated or no matching comment exists
    """
    user = authenticate(credentials, jwt_service)

    try:
        return await use_case.execute(
            DeleteCommentRequest(
                content_id=content_id, comment_id=comment_id, user_id=user.id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
