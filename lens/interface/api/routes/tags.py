"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from lens.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List tags",
    description="Get the names of tags attached to content, alphabetically.",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    limit: int = Query(default=100, ge=1, le=500),
) -> ListTagsResponse:
    """List tag names.

    Args:
        use_case: List tags use case (injected)
        limit: Maximum number of tags to return (1-500)

    Returns:
        Tag names

    Example:
        GET /tags?limit=10
    """
    with logfire.span("api.list_tags", limit=limit):
        return await use_case.execute(ListTagsRequest(limit=limit))
