"""Feed routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from lens.application.usecase.feed import (
    GetFeedRequest,
    GetFeedResponse,
    GetFeedUseCase,
)
from lens.domain.error import DomainError
from lens.interface.error import to_http_exception

router = APIRouter(tags=["feed"], route_class=DishkaRoute)


@router.get("/", response_model=GetFeedResponse)
async def get_feed(
    use_case: FromDishka[GetFeedUseCase],
    page: int | None = None,
    limit: int | None = None,
) -> GetFeedResponse:
    """Get the full aggregated feed, newest first.

    Args:
        use_case: Get feed use case (injected)
        page: Page number, used with ``limit``
        limit: Page size; omit to get the whole feed

    Returns:
        Feed rows plus per-kind content totals
    """
    try:
        return await use_case.execute(GetFeedRequest(page=page, limit=limit))
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/content-type", response_model=GetFeedResponse)
async def get_filtered_feed(
    use_case: FromDishka[GetFeedUseCase],
    type: str | None = None,
    category: str | None = None,
    page: int | None = None,
    limit: int | None = None,
) -> GetFeedResponse:
    """Get the feed filtered by content kind and/or category.

    Either filter may be omitted or sent as "undefined".

    Args:
        use_case: Get feed use case (injected)
        type: Content kind (``prompt`` is accepted for ``aiprompt``)
        category: Category ID
        page: Page number, used with ``limit``
        limit: Page size; omit to get every matching row

    Returns:
        Matching feed rows

    Example:
        GET /content-type?type=quote&category=3
    """
    with logfire.span("api.get_filtered_feed", type=type, category=category):
        try:
            request = GetFeedRequest(
                type=type, category=category, page=page, limit=limit
            )
            return await use_case.execute(request)
        except DomainError as e:
            raise to_http_exception(e)
