"""Category routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from empire.application.usecase.catalog import (
    ListCategoriesResponse,
    ListCategoriesUseCase,
)

router = APIRouter(prefix="/categories", tags=["catalog"], route_class=DishkaRoute)


@router.get("", response_model=ListCategoriesResponse)
async def list_categories(
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """All categories, ordered by English name."""
    return await list_categories_use_case.execute()
