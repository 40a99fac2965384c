"""Category domain service."""

import logfire

from empire.domain.model import Category
from empire.domain.repository import CategoryRepository

from .base import Service


class CategoryService(Service):
    """Domain service for category operations."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    async def list_categories(self) -> list[Category]:
        """All categories ordered by English name."""
        with logfire.span("category_service.list_categories"):
            categories = await self.category_repository.find_all()
            logfire.info("Categories retrieved", count=len(categories))
            return categories
