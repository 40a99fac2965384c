"""Cart domain service."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID, uuid4

import logfire

from empire.config import ShopSettings
from empire.domain.error import ForbiddenError, ValidationError
from empire.domain.model import Cart, CartItem
from empire.domain.model.common import utcnow
from empire.domain.repository import CartRepository
from empire.domain.value import CartItemId, Currency, ItemType, UserId, VariantId
from empire.domain.value.types import CART_MAX_QUANTITY

from .access_policy import ensure_granted, require_owner
from .base import Service
from .pricing import CartTotals, compute_cart_totals


@dataclass
class CartView:
    """A cart with its lines and totals."""

    cart: Cart
    items: list[CartItem]
    totals: CartTotals


def _check_quantity(quantity: int) -> None:
    if not 1 <= quantity <= CART_MAX_QUANTITY:
        raise ValidationError(
            f"Quantity must be between 1 and {CART_MAX_QUANTITY}"
        )


class CartService(Service):
    """Domain service for cart operations.

    Every operation acts on the caller's own cart; line mutations verify
    ownership first.
    """

    def __init__(
        self, cart_repository: CartRepository, shop_settings: ShopSettings
    ) -> None:
        """Initialize cart service.

        Args:
            cart_repository: Cart repository
            shop_settings: Tax rate and currency defaults
        """
        self.cart_repository = cart_repository
        self.shop_settings = shop_settings

    async def get_cart(self, user_id: UserId, currency: Currency) -> CartView:
        """The user's cart, created on first access."""
        with logfire.span(
            "cart_service.get_cart", user_id=str(user_id), currency=currency.value
        ):
            cart = await self.cart_repository.get_or_create(user_id)
            items = await self.cart_repository.find_items(cart.id)
            totals = compute_cart_totals(items, currency, self.shop_settings.tax_rate)
            logfire.info(
                "Cart retrieved",
                user_id=str(user_id),
                cart_id=str(cart.id),
                lines=len(items),
            )
            return CartView(cart=cart, items=items, totals=totals)

    async def add_item(
        self,
        user_id: UserId,
        item_id: UUID,
        item_type: ItemType,
        price_usd: float,
        price_vnd: float,
        quantity: int = 1,
        variant_id: Optional[VariantId] = None,
    ) -> CartItem:
        """Add a line, or increase the quantity of the matching line.

        Raises:
            ValidationError: Quantity out of range or non-positive price
        """
        with logfire.span(
            "cart_service.add_item",
            user_id=str(user_id),
            item_id=str(item_id),
            item_type=item_type.value,
            variant_id=str(variant_id) if variant_id else None,
            quantity=quantity,
        ):
            _check_quantity(quantity)
            if price_usd <= 0 or price_vnd <= 0:
                raise ValidationError("Prices must be positive")

            cart = await self.cart_repository.get_or_create(user_id)
            now = utcnow()
            line = CartItem(
                id=CartItemId(uuid4()),
                cart_id=cart.id,
                item_id=item_id,
                item_type=item_type,
                variant_id=variant_id,
                quantity=quantity,
                price_usd=price_usd,
                price_vnd=price_vnd,
                created_at=now,
                updated_at=now,
            )
            stored = await self.cart_repository.add_or_increment(line)
            logfire.info(
                "Cart line stored",
                cart_id=str(cart.id),
                cart_item_id=str(stored.id),
                quantity=stored.quantity,
            )
            return stored

    async def update_quantity(
        self, user_id: UserId, item_id: CartItemId, quantity: int
    ) -> CartItem:
        """Set the quantity of one of the caller's lines.

        Raises:
            ValidationError: Quantity out of range
            ForbiddenError: Line absent or in another user's cart
        """
        with logfire.span(
            "cart_service.update_quantity",
            user_id=str(user_id),
            cart_item_id=str(item_id),
            quantity=quantity,
        ):
            _check_quantity(quantity)
            owner = await self.cart_repository.find_item_owner(item_id)
            ensure_granted(require_owner(user_id, owner))

            updated = await self.cart_repository.update_quantity(item_id, quantity)
            if updated is None:
                # Removed between the ownership check and the update
                raise ForbiddenError()
            logfire.info(
                "Cart line quantity updated",
                cart_item_id=str(item_id),
                quantity=quantity,
            )
            return updated

    async def remove_item(self, user_id: UserId, item_id: CartItemId) -> None:
        """Remove one of the caller's lines.

        Raises:
            ForbiddenError: Line absent or in another user's cart
        """
        with logfire.span(
            "cart_service.remove_item",
            user_id=str(user_id),
            cart_item_id=str(item_id),
        ):
            owner = await self.cart_repository.find_item_owner(item_id)
            ensure_granted(require_owner(user_id, owner))

            await self.cart_repository.delete_item(item_id)
            logfire.info("Cart line removed", cart_item_id=str(item_id))
