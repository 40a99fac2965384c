"""Cart aggregate.

One cart per user, created lazily. A cart line is unique per
``(cart_id, item_id, item_type, variant_id)``; adding the same line again
increments its quantity.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from empire.domain.model.common import DomainModel, utcnow
from empire.domain.value import CartId, CartItemId, Currency, ItemType, UserId, VariantId
from empire.domain.value.types import CART_MAX_QUANTITY


class Cart(DomainModel):
    """A user's cart."""

    id: CartId
    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)


class CartItem(DomainModel):
    """One line of a cart."""

    id: CartItemId
    cart_id: CartId
    item_id: UUID
    item_type: ItemType
    variant_id: Optional[VariantId] = None
    quantity: int = Field(default=1, ge=1, le=CART_MAX_QUANTITY)
    price_usd: float = Field(gt=0)
    price_vnd: float = Field(gt=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def line_total(self, currency: Currency) -> float:
        price = self.price_usd if currency == Currency.USD else self.price_vnd
        return price * self.quantity

    def same_line(self, other: "CartItem") -> bool:
        return (
            self.cart_id == other.cart_id
            and self.item_id == other.item_id
            and self.item_type == other.item_type
            and self.variant_id == other.variant_id
        )
