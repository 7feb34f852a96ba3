"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from lens.domain.model.category import Category
from lens.domain.value import CategoryId, Slug


class CategoryRepository(ABC):
    """Repository for Category entity."""

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find an active category by slug.

        Args:
            slug: Category slug

        Returns:
            The category if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find an active category by ID.

        Args:
            category_id: Category identifier

        Returns:
            The category if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Category]:
        """Find all active categories ordered by ID.

        Returns:
            List of categories
        """
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save a category (create or update).

        Args:
            category: Category to save

        Returns:
            Saved category
        """
        pass
