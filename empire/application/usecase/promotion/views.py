"""Promotion response item and editable payload."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from empire.domain.model import Promotion


class PromotionItem(BaseModel):
    id: str
    code: str
    name_en: str
    name_vi: str
    description_en: Optional[str]
    description_vi: Optional[str]
    discount_percent: float
    max_discount_amount: Optional[float]
    minimum_order_amount: Optional[float]
    start_date: datetime
    end_date: datetime
    usage_limit: Optional[int]
    used_count: int
    status: str
    created_at: datetime

    @classmethod
    def from_domain(cls, promotion: Promotion) -> "PromotionItem":
        return cls(
            **promotion.model_dump(exclude={"id", "code", "status"}),
            id=str(promotion.id),
            code=promotion.code.root,
            status=promotion.status.value,
        )


class PromotionInput(BaseModel):
    """Editable fields of a promotion; required ones are checked on create."""

    code: Optional[str] = None
    name_en: Optional[str] = None
    name_vi: Optional[str] = None
    description_en: Optional[str] = None
    description_vi: Optional[str] = None
    discount_percent: Optional[float] = None
    max_discount_amount: Optional[float] = None
    minimum_order_amount: Optional[float] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    usage_limit: Optional[int] = None
