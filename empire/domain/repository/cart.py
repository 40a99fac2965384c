"""Cart repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from empire.domain.model.cart import Cart, CartItem
from empire.domain.value import CartId, CartItemId, UserId


class CartRepository(ABC):
    """Repository for Cart aggregate.

    The get-or-create and add-or-increment operations must be atomic with
    respect to concurrent requests of the same user; implementations rely on
    the unique constraints on ``cart(user_id)`` and on the cart line key
    instead of a preceding read.
    """

    @abstractmethod
    async def get_or_create(self, user_id: UserId) -> Cart:
        """Return the user's cart, creating it on first access.

        Args:
            user_id: Owner of the cart

        Returns:
            The existing or newly created cart
        """
        pass

    @abstractmethod
    async def find_items(self, cart_id: CartId) -> list[CartItem]:
        """Cart lines, oldest first."""
        pass

    @abstractmethod
    async def add_or_increment(self, item: CartItem) -> CartItem:
        """Insert a cart line or add its quantity to the existing line.

        Args:
            item: Line to add; its id is used only when a new row is created

        Returns:
            The stored line with its resulting quantity
        """
        pass

    @abstractmethod
    async def find_item_owner(self, item_id: CartItemId) -> Optional[UserId]:
        """Owner of the cart containing the line, None if the line is absent."""
        pass

    @abstractmethod
    async def update_quantity(
        self, item_id: CartItemId, quantity: int
    ) -> Optional[CartItem]:
        pass

    @abstractmethod
    async def delete_item(self, item_id: CartItemId) -> bool:
        pass
