"""Create, update and delete promotion use cases."""

from pydantic import BaseModel

from empire.application.usecase.parsing import parse_uuid
from empire.domain.error import ValidationError
from empire.domain.service import PromotionService
from empire.domain.value import PromotionId

from .views import PromotionInput, PromotionItem

REQUIRED_FIELDS = (
    "code",
    "name_en",
    "name_vi",
    "discount_percent",
    "start_date",
    "end_date",
)


class CreatePromotionRequest(BaseModel):
    promotion: PromotionInput


class UpdatePromotionRequest(BaseModel):
    promotion_id: str
    promotion: PromotionInput


class PromotionIdRequest(BaseModel):
    promotion_id: str


class PromotionResponse(BaseModel):
    promotion: PromotionItem


class CreatePromotionUseCase:
    """Use case for creating a promotion; its status is derived from the dates."""

    def __init__(self, promotion_service: PromotionService) -> None:
        self.promotion_service = promotion_service

    async def execute(self, request: CreatePromotionRequest) -> PromotionResponse:
        """Execute create promotion flow.

        Raises:
            ValidationError: Missing required fields, invalid values or
                duplicate code
        """
        fields = request.promotion.model_dump()
        missing = [name for name in REQUIRED_FIELDS if fields.get(name) in (None, "")]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        promotion = await self.promotion_service.create_promotion(**fields)
        return PromotionResponse(promotion=PromotionItem.from_domain(promotion))


class UpdatePromotionUseCase:
    """Use case for editing a promotion; only supplied fields change."""

    def __init__(self, promotion_service: PromotionService) -> None:
        self.promotion_service = promotion_service

    async def execute(self, request: UpdatePromotionRequest) -> PromotionResponse:
        promotion_id = PromotionId(parse_uuid(request.promotion_id, "promotion id"))
        fields = request.promotion.model_dump(exclude_unset=True)
        promotion = await self.promotion_service.update_promotion(
            promotion_id, **fields
        )
        return PromotionResponse(promotion=PromotionItem.from_domain(promotion))


class DeletePromotionUseCase:
    def __init__(self, promotion_service: PromotionService) -> None:
        self.promotion_service = promotion_service

    async def execute(self, request: PromotionIdRequest) -> None:
        promotion_id = PromotionId(parse_uuid(request.promotion_id, "promotion id"))
        await self.promotion_service.delete_promotion(promotion_id)
