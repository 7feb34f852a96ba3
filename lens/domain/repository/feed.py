"""Feed repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from lens.domain.model.feed import FeedItem
from lens.domain.value import CategoryId, ContentKind


class FeedRepository(ABC):
    """Read-only aggregation over every content kind."""

    @abstractmethod
    async def find(
        self,
        kind: Optional[ContentKind] = None,
        category_id: Optional[CategoryId] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[FeedItem]:
        """Find feed rows, newest first.

        Each row carries its tags, active comments, active votes and up
        vote count. Filters combine with AND; a None filter is ignored.

        Args:
            kind: Restrict to one content kind
            category_id: Restrict to one category
            limit: Maximum rows to return (None for all)
            offset: Rows to skip

        Returns:
            Feed rows ordered by creation time descending
        """
        pass

    @abstractmethod
    async def count_by_kind(self) -> dict[ContentKind, int]:
        """Count active content items per kind.

        Returns:
            Mapping of every kind to its active item count
        """
        pass
