"""Promotion routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status

from empire.application.usecase.promotion import (
    CreatePromotionRequest,
    CreatePromotionUseCase,
    DeletePromotionUseCase,
    ListPromotionsResponse,
    ListPromotionsUseCase,
    PromotionIdRequest,
    PromotionInput,
    PromotionResponse,
    UpdatePromotionRequest,
    UpdatePromotionUseCase,
)
from empire.domain.service import AccessPolicy
from empire.interface.api.guards import require_admin, session_token
from empire.interface.api.routes.common import SuccessResponse

router = APIRouter(prefix="/promotions", tags=["promotions"], route_class=DishkaRoute)


@router.get("", response_model=ListPromotionsResponse)
async def list_promotions(
    list_promotions_use_case: FromDishka[ListPromotionsUseCase],
) -> ListPromotionsResponse:
    """All promotions, newest first, with their status as of now."""
    return await list_promotions_use_case.execute()


@router.post(
    "",
    response_model=PromotionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_promotion(
    request: PromotionInput,
    create_promotion_use_case: FromDishka[CreatePromotionUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> PromotionResponse:
    """Create a promotion. Admin only."""
    await require_admin(access_policy, token)
    return await create_promotion_use_case.execute(
        CreatePromotionRequest(promotion=request)
    )


@router.put("/{promotion_id}", response_model=PromotionResponse)
async def update_promotion(
    promotion_id: str,
    request: PromotionInput,
    update_promotion_use_case: FromDishka[UpdatePromotionUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> PromotionResponse:
    """Update the supplied fields of a promotion. Admin only."""
    await require_admin(access_policy, token)
    return await update_promotion_use_case.execute(
        UpdatePromotionRequest(promotion_id=promotion_id, promotion=request)
    )


@router.delete("/{promotion_id}", response_model=SuccessResponse)
async def delete_promotion(
    promotion_id: str,
    delete_promotion_use_case: FromDishka[DeletePromotionUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> SuccessResponse:
    """Delete a promotion. Admin only."""
    await require_admin(access_policy, token)
    await delete_promotion_use_case.execute(
        PromotionIdRequest(promotion_id=promotion_id)
    )
    return SuccessResponse(success=True)
