"""In-memory category repository for testing."""

from typing import List, Optional

from lens.domain.model.category import Category
from lens.domain.repository.category import CategoryRepository
from lens.domain.value import CategoryId, Slug

from .store import InMemoryStore


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find an active category by slug."""
        for category in self._store.categories.values():
            if category.slug == slug and not category.is_deleted:
                return category
        return None

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find an active category by ID."""
        category = self._store.categories.get(category_id)
        if category and not category.is_deleted:
            return category
        return None

    async def find_all(self) -> List[Category]:
        """Find all active categories ordered by ID."""
        return [
            c
            for _, c in sorted(self._store.categories.items())
            if not c.is_deleted
        ]

    async def save(self, category: Category) -> Category:
        """Save or update a category."""
        self._store.categories[category.id] = category
        return category
