"""Category routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from lens.application.usecase.category import (
    ListCategoriesResponse,
    ListCategoriesUseCase,
)

router = APIRouter(prefix="/categories", tags=["categories"], route_class=DishkaRoute)


@router.get("", response_model=ListCategoriesResponse)
async def list_categories(
    use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """List active categories ordered by ID."""
    return await use_case.execute()
