"""Content domain service."""

import logfire

from lens.domain.error import DuplicateContentError, NotFoundError
from lens.domain.model.content import ContentItem
from lens.domain.repository import ContentRepository
from lens.domain.value import ContentRef

from .base import Service


class ContentService(Service):
    """Domain service for content items of every kind."""

    def __init__(self, content_repository: ContentRepository) -> None:
        """Initialize content service.

        Args:
            content_repository: Content repository
        """
        self.content_repository = content_repository

    async def create_content(self, item: ContentItem) -> ContentItem:
        """Store a new content item after the duplicate guard.

        Args:
            item: Validated, unsaved content item

        Returns:
            Saved item with its new ID

        Raises:
            DuplicateContentError: If an identical active item exists
        """
        kind = item.kind  # type: ignore[attr-defined]
        with logfire.span(
            "content_service.create_content",
            kind=kind.value,
            user_id=item.user_id,
            category_id=item.category_id,
        ):
            if await self.content_repository.has_duplicate(item):
                logfire.warn(
                    "Duplicate content rejected", kind=kind.value, user_id=item.user_id
                )
                raise DuplicateContentError(kind.label)

            saved = await self.content_repository.save(item)
            logfire.info("Content created", kind=kind.value, content_id=saved.id)
            return saved

    async def ensure_exists(self, ref: ContentRef) -> None:
        """Check that an active content item exists.

        Raises:
            NotFoundError: If the item does not exist or is soft-deleted
        """
        if not await self.content_repository.exists(ref):
            logfire.warn("Content not found", ref=str(ref))
            raise NotFoundError("Content", str(ref))
