"""Tag domain service."""

import logfire

from lens.domain.error import ValidationError
from lens.domain.model.tag import Tag
from lens.domain.repository.tag import TagRepository
from lens.domain.value import ContentRef, TagName

from .base import Service

MAX_TAGS = 10


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    @staticmethod
    def normalize_tags(raw_tags: list[str]) -> list[TagName]:
        """Normalize raw tag strings.

        Trims and lowercases each name, drops empty ones and removes
        duplicates while keeping first-seen order.

        Args:
            raw_tags: Tags as submitted by the client

        Returns:
            Distinct normalized tag names

        Raises:
            ValidationError: If more than ten tags are submitted or a
                name is too long
        """
        if len(raw_tags) > MAX_TAGS:
            raise ValidationError(
                "Validation failed",
                [{"field": "tags", "message": f"At most {MAX_TAGS} tags allowed"}],
            )

        names: list[TagName] = []
        seen: set[str] = set()
        for raw in raw_tags:
            if not raw.strip():
                continue
            try:
                name = TagName(raw)
            except ValueError:
                raise ValidationError(
                    "Validation failed",
                    [{"field": "tags", "message": "Tag name must be at most 50 characters"}],
                )
            if name.root not in seen:
                seen.add(name.root)
                names.append(name)
        return names

    async def attach_tags(self, ref: ContentRef, raw_tags: list[str]) -> list[Tag]:
        """Ensure each tag exists and link it to a content item.

        Args:
            ref: Content item key
            raw_tags: Tags as submitted by the client

        Returns:
            The linked tags
        """
        with logfire.span("tag_service.attach_tags", ref=str(ref), count=len(raw_tags)):
            tags = []
            for name in self.normalize_tags(raw_tags):
                tag = await self.tag_repository.ensure(name)
                await self.tag_repository.link(ref, tag.id)  # type: ignore[arg-type]
                tags.append(tag)
            logfire.info(
                "Tags linked", ref=str(ref), tags=[t.name.root for t in tags]
            )
            return tags

    async def get_all_tags(self, limit: int = 100) -> list[Tag]:
        """Get all available tags.

        Args:
            limit: Maximum number of tags to return

        Returns:
            List of tags ordered by name
        """
        with logfire.span("tag_service.get_all_tags", limit=limit):
            tags = await self.tag_repository.find_all(limit=limit)
            logfire.info("Tags retrieved", count=len(tags))
            return tags
