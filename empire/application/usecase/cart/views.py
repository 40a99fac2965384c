"""Cart response items."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from empire.domain.model import CartItem
from empire.domain.service import CartTotals


class CartLineItem(BaseModel):
    id: str
    cart_id: str
    item_id: str
    item_type: str
    variant_id: Optional[str]
    quantity: int
    price_usd: float
    price_vnd: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, item: CartItem) -> "CartLineItem":
        return cls(
            id=str(item.id),
            cart_id=str(item.cart_id),
            item_id=str(item.item_id),
            item_type=item.item_type.value,
            variant_id=str(item.variant_id) if item.variant_id else None,
            quantity=item.quantity,
            price_usd=item.price_usd,
            price_vnd=item.price_vnd,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


class CartTotalsItem(BaseModel):
    currency: str
    subtotal: float
    tax: float
    total: float
    item_count: int

    @classmethod
    def from_domain(cls, totals: CartTotals) -> "CartTotalsItem":
        return cls(
            currency=totals.currency.value,
            subtotal=totals.subtotal,
            tax=totals.tax,
            total=totals.total,
            item_count=totals.item_count,
        )
