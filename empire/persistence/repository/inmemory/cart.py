"""In-memory cart repository for testing."""

from typing import Optional
from uuid import uuid4

from empire.domain.model.cart import Cart, CartItem
from empire.domain.model.common import utcnow
from empire.domain.repository.cart import CartRepository
from empire.domain.value import CartId, CartItemId, UserId
from empire.domain.value.types import CART_MAX_QUANTITY


class InMemoryCartRepository(CartRepository):
    """In-memory implementation of CartRepository for testing."""

    def __init__(self) -> None:
        self._carts: dict[UserId, Cart] = {}
        self._items: dict[CartItemId, CartItem] = {}

    async def get_or_create(self, user_id: UserId) -> Cart:
        if user_id not in self._carts:
            self._carts[user_id] = Cart(id=CartId(uuid4()), user_id=user_id)
        return self._carts[user_id]

    async def find_items(self, cart_id: CartId) -> list[CartItem]:
        items = [i for i in self._items.values() if i.cart_id == cart_id]
        items.sort(key=lambda i: i.created_at)
        return items

    async def add_or_increment(self, item: CartItem) -> CartItem:
        for existing in self._items.values():
            if existing.same_line(item):
                updated = existing.model_copy(
                    update={
                        "quantity": min(
                            existing.quantity + item.quantity, CART_MAX_QUANTITY
                        ),
                        "updated_at": item.updated_at,
                    }
                )
                self._items[existing.id] = updated
                return updated
        self._items[item.id] = item
        return item

    async def find_item_owner(self, item_id: CartItemId) -> Optional[UserId]:
        item = self._items.get(item_id)
        if item is None:
            return None
        for cart in self._carts.values():
            if cart.id == item.cart_id:
                return cart.user_id
        return None

    async def update_quantity(
        self, item_id: CartItemId, quantity: int
    ) -> Optional[CartItem]:
        item = self._items.get(item_id)
        if item is None:
            return None
        updated = item.model_copy(update={"quantity": quantity, "updated_at": utcnow()})
        self._items[item_id] = updated
        return updated

    async def delete_item(self, item_id: CartItemId) -> bool:
        return self._items.pop(item_id, None) is not None
