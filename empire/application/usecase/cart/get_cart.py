"""Get cart use case."""

from uuid import UUID

from pydantic import BaseModel

from empire.application.usecase.parsing import parse_currency
from empire.config import ShopSettings
from empire.domain.service import CartService
from empire.domain.value import UserId

from .views import CartLineItem, CartTotalsItem


class GetCartRequest(BaseModel):
    user_id: str  # From the session
    currency: str | None = None


class GetCartResponse(BaseModel):
    items: list[CartLineItem]
    totals: CartTotalsItem


class GetCartUseCase:
    """Use case for reading the caller's cart, created on first access."""

    def __init__(self, cart_service: CartService, shop_settings: ShopSettings) -> None:
        self.cart_service = cart_service
        self.shop_settings = shop_settings

    async def execute(self, request: GetCartRequest) -> GetCartResponse:
        currency = parse_currency(request.currency, self.shop_settings.default_currency)
        view = await self.cart_service.get_cart(UserId(UUID(request.user_id)), currency)
        return GetCartResponse(
            items=[CartLineItem.from_domain(item) for item in view.items],
            totals=CartTotalsItem.from_domain(view.totals),
        )
