"""In-memory feed repository for testing."""

from typing import List, Optional

from lens.domain.model.content import AiPrompt, Article, Book, ContentItem, Quote, Video
from lens.domain.model.feed import FeedItem
from lens.domain.repository.feed import FeedRepository
from lens.domain.value import CategoryId, ContentKind

from .comment import InMemoryCommentRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .vote import InMemoryVoteRepository


class InMemoryFeedRepository(FeedRepository):
    """In-memory implementation of FeedRepository for testing.

    Builds each row from the same store the other in-memory repositories
    write to.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._tags = InMemoryTagRepository(store)
        self._votes = InMemoryVoteRepository(store)
        self._comments = InMemoryCommentRepository(store)

    async def _to_feed_item(self, item: ContentItem) -> FeedItem:
        ref = item.ref
        category = self._store.categories.get(item.category_id)
        fields: dict = {"author": None, "summary": None, "url": None}
        if isinstance(item, Quote):
            fields.update(content=item.text, author=item.author)
        elif isinstance(item, (Article, Video)):
            fields.update(content=item.title, url=item.url)
        elif isinstance(item, Book):
            fields.update(
                content=item.title,
                author=item.author,
                summary=item.summary,
                url=item.url,
            )
        elif isinstance(item, AiPrompt):
            fields.update(content=item.text)

        return FeedItem(
            type=ref.kind,
            id=ref.id,
            created_at=item.created_at,
            category_id=category.id if category else None,
            category_name=category.name if category else None,
            username=self._store.username(item.user_id),
            tags=await self._tags.find_names_for(ref),
            comments=await self._comments.find_active_by_content(ref),
            points=await self._votes.find_active_by_content(ref),
            points_count=await self._votes.count_up(ref),
            **fields,
        )

    async def find(
        self,
        kind: Optional[ContentKind] = None,
        category_id: Optional[CategoryId] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[FeedItem]:
        """Find feed rows, newest first."""
        items = [
            item
            for k, table in self._store.content.items()
            if kind is None or k == kind
            for item in table.values()
            if not item.is_deleted
            and (category_id is None or item.category_id == category_id)
        ]
        items.sort(key=lambda i: (i.created_at, i.id), reverse=True)
        if limit is not None:
            items = items[offset : offset + limit]
        return [await self._to_feed_item(item) for item in items]

    async def count_by_kind(self) -> dict[ContentKind, int]:
        """Count active content items per kind."""
        return {
            kind: sum(1 for i in table.values() if not i.is_deleted)
            for kind, table in self._store.content.items()
        }
