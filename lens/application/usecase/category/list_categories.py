"""List categories use case."""

from pydantic import BaseModel

from lens.domain.service import CategoryService


class CategoryItem(BaseModel):
    """Category item in response."""

    id: int
    name: str
    slug: str
    icon: str | None
    color: str | None


class ListCategoriesResponse(BaseModel):
    """List categories response."""

    categories: list[CategoryItem]


class ListCategoriesUseCase:
    """Use case for listing active categories."""

    def __init__(self, category_service: CategoryService) -> None:
        """Initialize list categories use case.

        Args:
            category_service: Category domain service
        """
        self.category_service = category_service

    async def execute(self) -> ListCategoriesResponse:
        """Execute list categories flow.

        Returns:
            Active categories ordered by ID
        """
        categories = await self.category_service.list_categories()
        return ListCategoriesResponse(
            categories=[
                CategoryItem(
                    id=c.id,
                    name=c.name,
                    slug=c.slug.root,
                    icon=c.icon,
                    color=c.color,
                )
                for c in categories
            ]
        )
