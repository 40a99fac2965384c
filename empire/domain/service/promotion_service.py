"""Promotion domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from empire.domain.error import NotFoundError, ValidationError
from empire.domain.model import Promotion, derive_promotion_status
from empire.domain.model.common import utcnow
from empire.domain.repository import PromotionRepository
from empire.domain.value import PromotionCode, PromotionId

from .base import Service


class PromotionService(Service):
    """Domain service for promotion operations.

    Status is derived from the date range on every write and again on every
    read, so a listing never shows a stale value.
    """

    def __init__(self, promotion_repository: PromotionRepository) -> None:
        """Initialize promotion service.

        Args:
            promotion_repository: Promotion repository
        """
        self.promotion_repository = promotion_repository

    async def list_promotions(self, now: datetime | None = None) -> list[Promotion]:
        """All promotions, newest first, with their current status."""
        with logfire.span("promotion_service.list_promotions"):
            now = now or utcnow()
            promotions = await self.promotion_repository.find_all()
            logfire.info("Promotions retrieved", count=len(promotions))
            return [p.with_current_status(now) for p in promotions]

    async def get_promotion(self, promotion_id: PromotionId) -> Promotion:
        """Get a promotion by ID.

        Raises:
            NotFoundError: If promotion not found
        """
        with logfire.span(
            "promotion_service.get_promotion", promotion_id=str(promotion_id)
        ):
            promotion = await self.promotion_repository.find_by_id(promotion_id)
            if not promotion:
                logfire.warn("Promotion not found", promotion_id=str(promotion_id))
                raise NotFoundError("Promotion", str(promotion_id))
            return promotion.with_current_status()

    async def create_promotion(self, **fields) -> Promotion:
        """Create a promotion from its editable fields.

        Raises:
            ValidationError: Invalid fields, inverted date range or duplicate
                code
        """
        with logfire.span(
            "promotion_service.create_promotion", code=str(fields.get("code"))
        ):
            promotion = self._build(
                {**fields, "id": PromotionId(uuid4()), "used_count": 0}
            )
            await self._ensure_code_free(promotion.code)
            saved = await self.promotion_repository.save(promotion)
            logfire.info(
                "Promotion created",
                promotion_id=str(saved.id),
                code=saved.code.root,
                status=saved.status.value,
            )
            return saved

    async def update_promotion(self, promotion_id: PromotionId, **fields) -> Promotion:
        """Replace the editable fields of a promotion.

        Raises:
            NotFoundError: Promotion does not exist
            ValidationError: Invalid fields, inverted date range or duplicate
                code
        """
        with logfire.span(
            "promotion_service.update_promotion", promotion_id=str(promotion_id)
        ):
            existing = await self.promotion_repository.find_by_id(promotion_id)
            if not existing:
                logfire.warn("Promotion not found", promotion_id=str(promotion_id))
                raise NotFoundError("Promotion", str(promotion_id))

            data = existing.model_dump()
            data.update(fields)
            data["id"] = existing.id
            promotion = self._build(data)
            if promotion.code != existing.code:
                await self._ensure_code_free(promotion.code)

            saved = await self.promotion_repository.save(promotion)
            logfire.info(
                "Promotion updated",
                promotion_id=str(saved.id),
                status=saved.status.value,
            )
            return saved

    async def delete_promotion(self, promotion_id: PromotionId) -> None:
        """Delete a promotion.

        Raises:
            NotFoundError: Promotion does not exist
        """
        with logfire.span(
            "promotion_service.delete_promotion", promotion_id=str(promotion_id)
        ):
            if not await self.promotion_repository.delete(promotion_id):
                logfire.warn("Promotion not found", promotion_id=str(promotion_id))
                raise NotFoundError("Promotion", str(promotion_id))
            logfire.info("Promotion deleted", promotion_id=str(promotion_id))

    def _build(self, data: dict) -> Promotion:
        start: Optional[datetime] = data.get("start_date")
        end: Optional[datetime] = data.get("end_date")
        if start is None or end is None:
            raise ValidationError("start_date and end_date are required")
        data["status"] = derive_promotion_status(utcnow(), start, end)
        try:
            return Promotion.model_validate(data)
        except PydanticValidationError as e:
            messages = "; ".join(err["msg"] for err in e.errors())
            raise ValidationError(messages)

    async def _ensure_code_free(self, code: PromotionCode) -> None:
        if await self.promotion_repository.find_by_code(code.root):
            logfire.warn("Duplicate promotion code", code=code.root)
            raise ValidationError(f"Promotion code already exists: {code.root}")
