"""Promotion repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from empire.domain.model.promotion import Promotion
from empire.domain.value import PromotionId


class PromotionRepository(ABC):
    """Repository for Promotion entity."""

    @abstractmethod
    async def find_all(self) -> list[Promotion]:
        """All promotions, newest first."""
        pass

    @abstractmethod
    async def find_by_id(self, promotion_id: PromotionId) -> Optional[Promotion]:
        pass

    @abstractmethod
    async def find_by_code(self, code: str) -> Optional[Promotion]:
        """Find a promotion by its upper-cased code."""
        pass

    @abstractmethod
    async def save(self, promotion: Promotion) -> Promotion:
        pass

    @abstractmethod
    async def delete(self, promotion_id: PromotionId) -> bool:
        """Delete a promotion.

        Returns:
            True if a promotion was deleted
        """
        pass
