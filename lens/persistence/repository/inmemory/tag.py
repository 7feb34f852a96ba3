"""In-memory tag repository for testing."""

from lens.domain.model.tag import Tag
from lens.domain.repository.tag import TagRepository
from lens.domain.value import ContentRef, TagId, TagName

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def ensure(self, name: TagName) -> Tag:
        """Return the tag with this name, creating it if absent."""
        tag = self._store.tags.get(name.root)
        if tag is None:
            tag = Tag(id=TagId(self._store.next_id("tags")), name=name)
            self._store.tags[name.root] = tag
        return tag

    async def link(self, ref: ContentRef, tag_id: TagId) -> None:
        """Link a tag to a content item; linking twice is a no-op."""
        links = self._store.tag_links[ref]
        if tag_id not in links:
            links.append(tag_id)

    async def find_names_for(self, ref: ContentRef) -> list[str]:
        """Find the names of tags linked to a content item."""
        linked = set(self._store.tag_links.get(ref, []))
        return sorted(t.name.root for t in self._store.tags.values() if t.id in linked)

    async def find_all(self, limit: int = 100) -> list[Tag]:
        """Find all tags ordered by name."""
        return [self._store.tags[name] for name in sorted(self._store.tags)][:limit]
