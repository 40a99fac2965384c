"""List categories use case."""

from pydantic import BaseModel

from empire.domain.service import CategoryService

from .views import CategoryItem


class ListCategoriesResponse(BaseModel):
    categories: list[CategoryItem]


class ListCategoriesUseCase:
    """Use case for listing all categories."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self) -> ListCategoriesResponse:
        categories = await self.category_service.list_categories()
        return ListCategoriesResponse(
            categories=[CategoryItem.from_domain(c) for c in categories]
        )
