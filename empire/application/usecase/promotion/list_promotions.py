"""List promotions use case."""

from pydantic import BaseModel

from empire.domain.service import PromotionService

from .views import PromotionItem


class ListPromotionsResponse(BaseModel):
    promotions: list[PromotionItem]


class ListPromotionsUseCase:
    """Use case for listing promotions with their current status."""

    def __init__(self, promotion_service: PromotionService) -> None:
        self.promotion_service = promotion_service

    async def execute(self) -> ListPromotionsResponse:
        promotions = await self.promotion_service.list_promotions()
        return ListPromotionsResponse(
            promotions=[PromotionItem.from_domain(p) for p in promotions]
        )
