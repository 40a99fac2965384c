"""Update and remove cart item use cases."""

from uuid import UUID

from pydantic import BaseModel

from empire.application.usecase.parsing import parse_uuid
from empire.domain.error import ValidationError
from empire.domain.service import CartService
from empire.domain.value import CartItemId, UserId

from .views import CartLineItem


class UpdateCartItemRequest(BaseModel):
    user_id: str  # From the session
    cart_item_id: str
    quantity: int | None = None


class UpdateCartItemResponse(BaseModel):
    item: CartLineItem


class RemoveCartItemRequest(BaseModel):
    user_id: str  # From the session
    cart_item_id: str


class UpdateCartItemUseCase:
    """Use case for changing the quantity of one of the caller's lines."""

    def __init__(self, cart_service: CartService) -> None:
        self.cart_service = cart_service

    async def execute(self, request: UpdateCartItemRequest) -> UpdateCartItemResponse:
        """Execute update quantity flow.

        Raises:
            ValidationError: Missing or out-of-range quantity
            ForbiddenError: Line absent or owned by someone else
        """
        if request.quantity is None:
            raise ValidationError("Missing quantity")
        item = await self.cart_service.update_quantity(
            user_id=UserId(UUID(request.user_id)),
            item_id=CartItemId(parse_uuid(request.cart_item_id, "cart item id")),
            quantity=request.quantity,
        )
        return UpdateCartItemResponse(item=CartLineItem.from_domain(item))


class RemoveCartItemUseCase:
    """Use case for removing one of the caller's lines."""

    def __init__(self, cart_service: CartService) -> None:
        self.cart_service = cart_service

    async def execute(self, request: RemoveCartItemRequest) -> None:
        await self.cart_service.remove_item(
            user_id=UserId(UUID(request.user_id)),
            item_id=CartItemId(parse_uuid(request.cart_item_id, "cart item id")),
        )
