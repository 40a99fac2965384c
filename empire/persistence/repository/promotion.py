"""PostgreSQL implementation of Promotion repository."""

from typing import Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from empire.domain.model import Promotion
from empire.domain.repository import PromotionRepository
from empire.domain.value import PromotionId
from empire.persistence.mappers import promotion_to_dict, row_to_promotion
from empire.persistence.tables import promotions_table


class PostgresPromotionRepository(PromotionRepository):
    """PostgreSQL implementation of PromotionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> list[Promotion]:
        stmt = select(promotions_table).order_by(desc(promotions_table.c.created_at))
        result = await self.session.execute(stmt)
        return [row_to_promotion(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, promotion_id: PromotionId) -> Optional[Promotion]:
        stmt = select(promotions_table).where(promotions_table.c.id == promotion_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_promotion(row._asdict()) if row else None

    async def find_by_code(self, code: str) -> Optional[Promotion]:
        stmt = select(promotions_table).where(promotions_table.c.code == code.upper())
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_promotion(row._asdict()) if row else None

    async def save(self, promotion: Promotion) -> Promotion:
        """Save a promotion (create or update)."""
        promotion_dict = promotion_to_dict(promotion)
        if await self.find_by_id(promotion.id):
            stmt = (
                promotions_table.update()
                .where(promotions_table.c.id == promotion.id)
                .values(**promotion_dict)
            )
        else:
            stmt = promotions_table.insert().values(**promotion_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return promotion

    async def delete(self, promotion_id: PromotionId) -> bool:
        stmt = (
            promotions_table.delete()
            .where(promotions_table.c.id == promotion_id)
            .returning(promotions_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted
