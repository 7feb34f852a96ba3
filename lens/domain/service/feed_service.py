"""Feed domain service."""

from typing import Optional

import logfire

from lens.domain.model.feed import FeedPage
from lens.domain.repository import FeedRepository
from lens.domain.value import CategoryId, ContentKind

from .base import Service


class FeedService(Service):
    """Domain service for the aggregated feed."""

    def __init__(self, feed_repository: FeedRepository) -> None:
        """Initialize feed service.

        Args:
            feed_repository: Feed repository
        """
        self.feed_repository = feed_repository

    async def get_feed(
        self,
        kind: Optional[ContentKind] = None,
        category_id: Optional[CategoryId] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> FeedPage:
        """Get the aggregated feed.

        Per-kind totals are only reported for the unfiltered feed.

        Args:
            kind: Restrict to one content kind
            category_id: Restrict to one category
            limit: Maximum rows to return (None for all)
            offset: Rows to skip

        Returns:
            Feed page, newest first
        """
        with logfire.span(
            "feed_service.get_feed",
            kind=kind.value if kind else None,
            category_id=category_id,
            limit=limit,
            offset=offset,
        ):
            posts = await self.feed_repository.find(
                kind=kind, category_id=category_id, limit=limit, offset=offset
            )

            type_counts = {}
            if kind is None and category_id is None:
                type_counts = await self.feed_repository.count_by_kind()

            logfire.info("Feed retrieved", count=len(posts))
            return FeedPage(posts=posts, type_counts=type_counts)
