"""Promotion entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from empire.domain.model.common import DomainModel, as_utc, utcnow
from empire.domain.value import PromotionCode, PromotionId, PromotionStatus


def derive_promotion_status(
    now: datetime, start_date: datetime, end_date: datetime
) -> PromotionStatus:
    """Status of a promotion at ``now``; both ends of the range are inclusive."""
    now, start_date, end_date = as_utc(now), as_utc(start_date), as_utc(end_date)
    if now < start_date:
        return PromotionStatus.SCHEDULED
    if now <= end_date:
        return PromotionStatus.ACTIVE
    return PromotionStatus.EXPIRED


class Promotion(DomainModel):
    """Discount code with a validity window.

    ``status`` is persisted on every write and recomputed with
    :meth:`with_current_status` whenever promotions are read.
    """

    id: PromotionId
    code: PromotionCode
    name_en: str = Field(min_length=1, max_length=200)
    name_vi: str = Field(min_length=1, max_length=200)
    description_en: Optional[str] = None
    description_vi: Optional[str] = None
    discount_percent: float = Field(gt=0, le=100)
    max_discount_amount: Optional[float] = Field(default=None, ge=0)
    minimum_order_amount: Optional[float] = Field(default=None, ge=0)
    start_date: datetime
    end_date: datetime
    usage_limit: Optional[int] = Field(default=None, ge=0)
    used_count: int = Field(default=0, ge=0)
    status: PromotionStatus = PromotionStatus.SCHEDULED
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_date_range(self) -> "Promotion":
        if as_utc(self.end_date) < as_utc(self.start_date):
            raise ValueError("end_date must not be before start_date")
        return self

    def with_current_status(self, now: datetime | None = None) -> "Promotion":
        status = derive_promotion_status(
            now or utcnow(), self.start_date, self.end_date
        )
        if status == self.status:
            return self
        return self.model_copy(update={"status": status})
