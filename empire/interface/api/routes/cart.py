"""Cart routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from empire.application.usecase.cart import (
    AddCartItemRequest,
    AddCartItemResponse,
    AddCartItemUseCase,
    GetCartRequest,
    GetCartResponse,
    GetCartUseCase,
    RemoveCartItemRequest,
    RemoveCartItemUseCase,
    UpdateCartItemRequest,
    UpdateCartItemResponse,
    UpdateCartItemUseCase,
)
from empire.domain.service import AccessPolicy
from empire.interface.api.guards import require_user, session_token
from empire.interface.api.routes.common import SuccessResponse

router = APIRouter(prefix="/cart", tags=["cart"], route_class=DishkaRoute)


class AddCartItemAPIRequest(BaseModel):
    item_id: str | None = None
    item_type: str | None = None
    variant_id: str | None = None
    quantity: int = 1
    price_usd: float | None = None
    price_vnd: float | None = None


class UpdateCartItemAPIRequest(BaseModel):
    quantity: int | None = None


@router.get("", response_model=GetCartResponse)
async def get_cart(
    get_cart_use_case: FromDishka[GetCartUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
    currency: str | None = None,
) -> GetCartResponse:
    """The caller's cart lines and totals in ``currency``."""
    user_id = require_user(access_policy, token)
    return await get_cart_use_case.execute(
        GetCartRequest(user_id=str(user_id), currency=currency)
    )


@router.post("", response_model=AddCartItemResponse)
async def add_cart_item(
    request: AddCartItemAPIRequest,
    add_cart_item_use_case: FromDishka[AddCartItemUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> AddCartItemResponse:
    """Add a line; re-adding the same item and variant increments it."""
    user_id = require_user(access_policy, token)
    return await add_cart_item_use_case.execute(
        AddCartItemRequest(user_id=str(user_id), **request.model_dump())
    )


@router.put("/{cart_item_id}", response_model=UpdateCartItemResponse)
async def update_cart_item(
    cart_item_id: str,
    request: UpdateCartItemAPIRequest,
    update_cart_item_use_case: FromDishka[UpdateCartItemUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> UpdateCartItemResponse:
    """Set the quantity of one of the caller's lines."""
    user_id = require_user(access_policy, token)
    return await update_cart_item_use_case.execute(
        UpdateCartItemRequest(
            user_id=str(user_id),
            cart_item_id=cart_item_id,
            quantity=request.quantity,
        )
    )


@router.delete("/{cart_item_id}", response_model=SuccessResponse)
async def remove_cart_item(
    cart_item_id: str,
    remove_cart_item_use_case: FromDishka[RemoveCartItemUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> SuccessResponse:
    """Remove one of the caller's lines."""
    user_id = require_user(access_policy, token)
    await remove_cart_item_use_case.execute(
        RemoveCartItemRequest(user_id=str(user_id), cart_item_id=cart_item_id)
    )
    return SuccessResponse(success=True)
