"""Integration tests for CartRepository.

These tests verify the upsert on the cart line constraint, which the
in-memory repository only imitates.
"""

from uuid import uuid4

import pytest

from empire.domain.model import CartItem
from empire.domain.repository import CartRepository
from empire.domain.service import AuthService
from empire.domain.value import CartItemId, ItemType, UserId
from empire.domain.value.types import CART_MAX_QUANTITY
from tests.factories import DEFAULT_PASSWORD
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def _register(env) -> UserId:
    auth_service = await env.get(AuthService)
    profile = await auth_service.register(
        f"cart-{uuid4().hex[:12]}@example.com", DEFAULT_PASSWORD, "Cart Owner"
    )
    return profile.id


def _line(cart_id, item_id, quantity: int) -> CartItem:
    return CartItem(
        id=CartItemId(uuid4()),
        cart_id=cart_id,
        item_id=item_id,
        item_type=ItemType.ACCOUNT,
        variant_id=None,
        quantity=quantity,
        price_usd=10.0,
        price_vnd=250000.0,
    )


class TestCartRepositoryIntegration:
    """Integration tests for PostgresCartRepository."""

    @pytest.mark.asyncio
    async def test_get_or_create_returns_same_cart(self, integration_env):
        cart_repo = await integration_env.get(CartRepository)
        user_id = await _register(integration_env)

        first = await cart_repo.get_or_create(user_id)
        second = await cart_repo.get_or_create(user_id)

        assert first.id == second.id
        assert second.user_id == user_id

    @pytest.mark.asyncio
    async def test_same_line_without_variant_is_incremented(self, integration_env):
        """Lines with a NULL variant must still collide on the line constraint."""
        # Arrange
        cart_repo = await integration_env.get(CartRepository)
        cart = await cart_repo.get_or_create(await _register(integration_env))
        item_id = uuid4()

        # Act
        await cart_repo.add_or_increment(_line(cart.id, item_id, 2))
        stored = await cart_repo.add_or_increment(_line(cart.id, item_id, 3))

        # Assert
        items = await cart_repo.find_items(cart.id)
        assert len(items) == 1
        assert items[0].quantity == 5
        assert stored.id == items[0].id

    @pytest.mark.asyncio
    async def test_increment_is_capped(self, integration_env):
        cart_repo = await integration_env.get(CartRepository)
        cart = await cart_repo.get_or_create(await _register(integration_env))
        item_id = uuid4()

        await cart_repo.add_or_increment(_line(cart.id, item_id, 600))
        stored = await cart_repo.add_or_increment(_line(cart.id, item_id, 600))

        assert stored.quantity == CART_MAX_QUANTITY
        items = await cart_repo.find_items(cart.id)
        assert [item.quantity for item in items] == [CART_MAX_QUANTITY]
