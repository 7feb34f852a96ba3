"""Category domain service."""

import logfire

from lens.domain.error import InvalidCategoryError
from lens.domain.model.category import Category
from lens.domain.repository import CategoryRepository
from lens.domain.value import Slug

from .base import Service


class CategoryService(Service):
    """Domain service for category lookups."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        """Initialize category service.

        Args:
            category_repository: Category repository
        """
        self.category_repository = category_repository

    async def resolve_slug(self, slug: str) -> Category:
        """Resolve a client-supplied slug to an active category.

        Matching ignores case and surrounding whitespace.

        Args:
            slug: Category slug from the request

        Returns:
            The matching category

        Raises:
            InvalidCategoryError: If the slug is malformed or unknown
        """
        with logfire.span("category_service.resolve_slug", slug=slug):
            try:
                category_slug = Slug(slug.strip().lower())
            except ValueError:
                logfire.warn("Malformed category slug", slug=slug)
                raise InvalidCategoryError(slug)

            category = await self.category_repository.find_by_slug(category_slug)
            if not category:
                logfire.warn("Unknown category slug", slug=slug)
                raise InvalidCategoryError(slug)
            return category

    async def list_categories(self) -> list[Category]:
        """List active categories ordered by ID.

        Returns:
            List of categories
        """
        with logfire.span("category_service.list_categories"):
            categories = await self.category_repository.find_all()
            logfire.info("Categories retrieved", count=len(categories))
            return categories
