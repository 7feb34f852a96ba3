"""In-memory content repository for testing."""

from typing import Optional

from lens.domain.model.content import ContentItem
from lens.domain.repository.content import ContentRepository
from lens.domain.value import ContentId, ContentRef

from .store import InMemoryStore


class InMemoryContentRepository(ContentRepository):
    """In-memory implementation of ContentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_ref(self, ref: ContentRef) -> Optional[ContentItem]:
        """Find an active content item by its (kind, id) key."""
        item = self._store.content[ref.kind].get(ref.id)
        if item and not item.is_deleted:
            return item
        return None

    async def exists(self, ref: ContentRef) -> bool:
        """Check whether an active content item exists."""
        return await self.find_by_ref(ref) is not None

    async def has_duplicate(self, item: ContentItem) -> bool:
        """Check for an active item of the same kind with equal duplicate fields."""
        key = item.duplicate_key()
        return any(
            not existing.is_deleted and existing.duplicate_key() == key
            for existing in self._store.content[item.kind].values()  # type: ignore[attr-defined]
        )

    async def save(self, item: ContentItem) -> ContentItem:
        """Insert a content item, assigning the kind's next ID."""
        kind = item.kind  # type: ignore[attr-defined]
        if item.id is None:
            item = item.model_copy(
                update={"id": ContentId(self._store.next_id(kind.value))}
            )
        self._store.content[kind][item.id] = item
        return item
