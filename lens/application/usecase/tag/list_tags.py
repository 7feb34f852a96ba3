"""List tags use case."""

import logfire
from pydantic import BaseModel, Field

from lens.domain.service import TagService


class ListTagsRequest(BaseModel):
    """List tags request."""

    limit: int = Field(default=100, ge=1, le=500)


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[str]


class ListTagsUseCase:
    """Use case for listing tags in use."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Tag names ordered alphabetically
        """
        with logfire.span("list_tags.execute", limit=request.limit):
            tags = await self.tag_service.get_all_tags(limit=request.limit)
            return ListTagsResponse(tags=[tag.name.root for tag in tags])
