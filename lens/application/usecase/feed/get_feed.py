"""Get feed use case."""

import logfire
from pydantic import BaseModel

from lens.config import FeedSettings
from lens.domain.error import ValidationError
from lens.domain.model.feed import FeedItem
from lens.domain.service import FeedService
from lens.domain.value import MAX_ID, CategoryId, ContentKind

# Query values the web client sends for "no filter"
_ABSENT = {"", "undefined", "null"}


class GetFeedRequest(BaseModel):
    """Get feed request."""

    type: str | None = None  # Content kind filter
    category: str | None = None  # Category ID filter
    page: int | None = None
    limit: int | None = None


class GetFeedResponse(BaseModel):
    """Get feed response."""

    posts: list[FeedItem]
    counts: dict[ContentKind, int] | None = None  # Unfiltered feed only


def _present(value: str | None) -> str | None:
    if value is None or value.strip().lower() in _ABSENT:
        return None
    return value.strip()


class GetFeedUseCase:
    """Use case for reading the aggregated feed."""

    def __init__(self, feed_service: FeedService, feed_settings: FeedSettings) -> None:
        """Initialize get feed use case.

        Args:
            feed_service: Feed domain service
            feed_settings: Feed configuration
        """
        self.feed_service = feed_service
        self.feed_settings = feed_settings

    async def execute(self, request: GetFeedRequest) -> GetFeedResponse:
        """Execute get feed flow.

        Without ``limit`` the whole matching feed is returned. With it,
        ``limit`` is capped at the configured maximum and ``page``
        (default 1) selects the slice.

        Args:
            request: Get feed request

        Returns:
            Feed rows, newest first

        Raises:
            ValidationError: If the kind, category or paging values are invalid
        """
        type_filter = _present(request.type)
        category_filter = _present(request.category)

        kind = ContentKind.parse(type_filter) if type_filter else None

        category_id = None
        if category_filter is not None:
            if not (
                category_filter.isascii()
                and category_filter.isdigit()
                and len(category_filter) <= len(str(MAX_ID))
                and int(category_filter) <= MAX_ID
            ):
                raise ValidationError(
                    "Invalid category",
                    [{"field": "category", "message": "Category must be a numeric ID"}],
                )
            category_id = CategoryId(int(category_filter))

        limit = None
        offset = 0
        if request.limit is not None:
            page = request.page if request.page is not None else 1
            if request.limit < 1 or not 1 <= page <= MAX_ID:
                raise ValidationError(
                    "Validation failed",
                    [{"field": "limit", "message": "page and limit must be positive"}],
                )
            limit = min(request.limit, self.feed_settings.max_limit)
            offset = (page - 1) * limit

        with logfire.span(
            "get_feed.execute",
            kind=kind.value if kind else None,
            category_id=category_id,
            limit=limit,
            offset=offset,
        ):
            page_result = await self.feed_service.get_feed(
                kind=kind, category_id=category_id, limit=limit, offset=offset
            )
            return GetFeedResponse(
                posts=page_result.posts,
                counts=page_result.type_counts or None,
            )
