"""Add cart item use case."""

from uuid import UUID

from pydantic import BaseModel

from empire.application.usecase.parsing import (
    parse_item_type,
    parse_optional_uuid,
    parse_uuid,
)
from empire.domain.error import ValidationError
from empire.domain.service import CartService
from empire.domain.value import UserId, VariantId

from .views import CartLineItem


class AddCartItemRequest(BaseModel):
    user_id: str  # From the session
    item_id: str | None = None
    item_type: str | None = None
    variant_id: str | None = None
    quantity: int = 1
    price_usd: float | None = None
    price_vnd: float | None = None


class AddCartItemResponse(BaseModel):
    item: CartLineItem


class AddCartItemUseCase:
    """Use case for adding a line, or incrementing the matching one."""

    def __init__(self, cart_service: CartService) -> None:
        self.cart_service = cart_service

    async def execute(self, request: AddCartItemRequest) -> AddCartItemResponse:
        """Execute add to cart flow.

        Raises:
            ValidationError: Missing fields, invalid item_type, quantity or price
        """
        if (
            not request.item_id
            or not request.item_type
            or request.price_usd is None
            or request.price_vnd is None
        ):
            raise ValidationError("Missing required fields")

        variant_id = parse_optional_uuid(request.variant_id, "variant_id")
        item = await self.cart_service.add_item(
            user_id=UserId(UUID(request.user_id)),
            item_id=parse_uuid(request.item_id, "item_id"),
            item_type=parse_item_type(request.item_type),
            price_usd=request.price_usd,
            price_vnd=request.price_vnd,
            quantity=request.quantity,
            variant_id=VariantId(variant_id) if variant_id else None,
        )
        return AddCartItemResponse(item=CartLineItem.from_domain(item))
