"""Content repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lens.domain.model.content import ContentItem
from lens.domain.value import ContentRef


class ContentRepository(ABC):
    """Repository for the five content kinds.

    One repository serves every kind; implementations route each call to
    the kind's own table.
    """

    @abstractmethod
    async def find_by_ref(self, ref: ContentRef) -> Optional[ContentItem]:
        """Find an active content item by its (kind, id) key.

        Args:
            ref: Composite content key

        Returns:
            The item if it exists and is not soft-deleted, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, ref: ContentRef) -> bool:
        """Check whether an active content item exists.

        Args:
            ref: Composite content key

        Returns:
            True if the item exists and is not soft-deleted
        """
        pass

    @abstractmethod
    async def has_duplicate(self, item: ContentItem) -> bool:
        """Check for an active item of the same kind with equal duplicate fields.

        The compared fields are the kind's ``duplicate_fields``.

        Args:
            item: Unsaved content item

        Returns:
            True if a matching active item already exists
        """
        pass

    @abstractmethod
    async def save(self, item: ContentItem) -> ContentItem:
        """Insert a new content item.

        Args:
            item: Unsaved content item (``id`` is None)

        Returns:
            The saved item with its database-assigned ``id``
        """
        pass
