"""In-memory promotion repository for testing."""

from typing import Optional

from empire.domain.model.promotion import Promotion
from empire.domain.repository.promotion import PromotionRepository
from empire.domain.value import PromotionId


class InMemoryPromotionRepository(PromotionRepository):
    """In-memory implementation of PromotionRepository for testing."""

    def __init__(self) -> None:
        self._promotions: dict[PromotionId, Promotion] = {}

    async def find_all(self) -> list[Promotion]:
        return sorted(
            self._promotions.values(), key=lambda p: p.created_at, reverse=True
        )

    async def find_by_id(self, promotion_id: PromotionId) -> Optional[Promotion]:
        return self._promotions.get(promotion_id)

    async def find_by_code(self, code: str) -> Optional[Promotion]:
        for promotion in self._promotions.values():
            if promotion.code.root == code.upper():
                return promotion
        return None

    async def save(self, promotion: Promotion) -> Promotion:
        self._promotions[promotion.id] = promotion
        return promotion

    async def delete(self, promotion_id: PromotionId) -> bool:
        return self._promotions.pop(promotion_id, None) is not None
