"""Cart use cases."""

from .add_cart_item import AddCartItemRequest, AddCartItemResponse, AddCartItemUseCase
from .get_cart import GetCartRequest, GetCartResponse, GetCartUseCase
from .update_cart_item import (
    RemoveCartItemRequest,
    RemoveCartItemUseCase,
    UpdateCartItemRequest,
    UpdateCartItemResponse,
    UpdateCartItemUseCase,
)
from .views import CartLineItem, CartTotalsItem

__all__ = [
    "AddCartItemRequest",
    "AddCartItemResponse",
    "AddCartItemUseCase",
    "CartLineItem",
    "CartTotalsItem",
    "GetCartRequest",
    "GetCartResponse",
    "GetCartUseCase",
    "RemoveCartItemRequest",
    "RemoveCartItemUseCase",
    "UpdateCartItemRequest",
    "UpdateCartItemResponse",
    "UpdateCartItemUseCase",
]
