"""Tag repository interface."""

from abc import ABC, abstractmethod

from lens.domain.model.tag import Tag
from lens.domain.value import ContentRef, TagId, TagName


class TagRepository(ABC):
    """Repository for the tag dictionary and its per-kind junction tables."""

    @abstractmethod
    async def ensure(self, name: TagName) -> Tag:
        """Return the tag with this name, creating it if absent.

        Args:
            name: Normalized tag name

        Returns:
            The existing or newly created tag
        """
        pass

    @abstractmethod
    async def link(self, ref: ContentRef, tag_id: TagId) -> None:
        """Link a tag to a content item; linking twice is a no-op.

        Args:
            ref: Content item key
            tag_id: Tag identifier
        """
        pass

    @abstractmethod
    async def find_names_for(self, ref: ContentRef) -> list[str]:
        """Find the names of tags linked to a content item.

        Args:
            ref: Content item key

        Returns:
            Tag names
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> list[Tag]:
        """Find all tags ordered by name.

        Args:
            limit: Maximum number of tags to return

        Returns:
            List of tags
        """
        pass
