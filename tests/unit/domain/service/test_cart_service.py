"""Unit tests for CartService."""

from uuid import uuid4

import pytest

from empire.domain.error import ForbiddenError, ValidationError
from empire.domain.service import CartService
from empire.domain.value import CartItemId, Currency, ItemType, UserId, VariantId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddItem:
    """Tests for add_item."""

    @pytest.mark.asyncio
    async def test_adding_same_line_twice_increments_quantity(self, unit_env):
        # Arrange
        cart_service = await unit_env.get(CartService)
        user_id = UserId(uuid4())
        item_id = uuid4()
        variant_id = VariantId(uuid4())

        # Act
        first = await cart_service.add_item(
            user_id, item_id, ItemType.ACCOUNT, 9.99, 250000, variant_id=variant_id
        )
        second = await cart_service.add_item(
            user_id, item_id, ItemType.ACCOUNT, 9.99, 250000, variant_id=variant_id
        )

        # Assert
        assert second.id == first.id
        assert second.quantity == 2
        view = await cart_service.get_cart(user_id, Currency.USD)
        assert len(view.items) == 1

    @pytest.mark.asyncio
    async def test_other_variant_is_a_new_line(self, unit_env):
        cart_service = await unit_env.get(CartService)
        user_id = UserId(uuid4())
        item_id = uuid4()

        await cart_service.add_item(
            user_id, item_id, ItemType.ACCOUNT, 5, 125000, variant_id=VariantId(uuid4())
        )
        await cart_service.add_item(
            user_id, item_id, ItemType.ACCOUNT, 7, 175000, variant_id=VariantId(uuid4())
        )

        view = await cart_service.get_cart(user_id, Currency.USD)
        assert len(view.items) == 2

    @pytest.mark.asyncio
    async def test_lines_without_variant_also_merge(self, unit_env):
        cart_service = await unit_env.get(CartService)
        user_id = UserId(uuid4())
        course_id = uuid4()

        await cart_service.add_item(user_id, course_id, ItemType.COURSE, 20, 500000)
        line = await cart_service.add_item(
            user_id, course_id, ItemType.COURSE, 20, 500000, quantity=3
        )

        assert line.quantity == 4

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quantity", [0, -1, 1000])
    async def test_quantity_out_of_range_rejected(self, unit_env, quantity):
        cart_service = await unit_env.get(CartService)

        with pytest.raises(ValidationError, match="Quantity"):
            await cart_service.add_item(
                UserId(uuid4()), uuid4(), ItemType.COURSE, 1, 1, quantity=quantity
            )

    @pytest.mark.asyncio
    async def test_non_positive_price_rejected(self, unit_env):
        cart_service = await unit_env.get(CartService)

        with pytest.raises(ValidationError, match="positive"):
            await cart_service.add_item(
                UserId(uuid4()), uuid4(), ItemType.COURSE, 0, 1
            )


class TestGetCart:
    """Tests for get_cart."""

    @pytest.mark.asyncio
    async def test_cart_is_created_on_first_access(self, unit_env):
        cart_service = await unit_env.get(CartService)
        user_id = UserId(uuid4())

        first = await cart_service.get_cart(user_id, Currency.USD)
        second = await cart_service.get_cart(user_id, Currency.USD)

        assert first.cart.id == second.cart.id
        assert first.cart.user_id == user_id
        assert first.items == []
        assert first.totals.total == 0

    @pytest.mark.asyncio
    async def test_totals_include_flat_tax(self, unit_env):
        # Arrange
        cart_service = await unit_env.get(CartService)
        user_id = UserId(uuid4())
        await cart_service.add_item(
            user_id, uuid4(), ItemType.COURSE, 10, 250000, quantity=2
        )
        await cart_service.add_item(user_id, uuid4(), ItemType.ACCOUNT, 5, 125000)

        # Act
        usd = await cart_service.get_cart(user_id, Currency.USD)
        vnd = await cart_service.get_cart(user_id, Currency.VND)

        # Assert
        assert usd.totals.subtotal == pytest.approx(25.0)
        assert usd.totals.tax == pytest.approx(2.5)
        assert usd.totals.total == pytest.approx(27.5)
        assert usd.totals.item_count == 3
        assert vnd.totals.subtotal == pytest.approx(625000)


class TestLineOwnership:
    """Updates and removals only touch the caller's own lines."""

    @pytest.mark.asyncio
    async def test_owner_updates_quantity(self, unit_env):
        cart_service = await unit_env.get(CartService)
        user_id = UserId(uuid4())
        line = await cart_service.add_item(user_id, uuid4(), ItemType.COURSE, 3, 75000)

        updated = await cart_service.update_quantity(user_id, line.id, 5)

        assert updated.quantity == 5

    @pytest.mark.asyncio
    async def test_other_user_cannot_update(self, unit_env):
        cart_service = await unit_env.get(CartService)
        owner = UserId(uuid4())
        line = await cart_service.add_item(owner, uuid4(), ItemType.COURSE, 3, 75000)

        with pytest.raises(ForbiddenError):
            await cart_service.update_quantity(UserId(uuid4()), line.id, 2)

        view = await cart_service.get_cart(owner, Currency.USD)
        assert view.items[0].quantity == 1

    @pytest.mark.asyncio
    async def test_other_user_cannot_remove(self, unit_env):
        cart_service = await unit_env.get(CartService)
        owner = UserId(uuid4())
        line = await cart_service.add_item(owner, uuid4(), ItemType.COURSE, 3, 75000)

        with pytest.raises(ForbiddenError):
            await cart_service.remove_item(UserId(uuid4()), line.id)

        view = await cart_service.get_cart(owner, Currency.USD)
        assert len(view.items) == 1

    @pytest.mark.asyncio
    async def test_missing_line_is_forbidden(self, unit_env):
        """An unknown line is reported like a foreign one."""
        cart_service = await unit_env.get(CartService)

        with pytest.raises(ForbiddenError):
            await cart_service.remove_item(UserId(uuid4()), CartItemId(uuid4()))

    @pytest.mark.asyncio
    async def test_owner_removes_line(self, unit_env):
        cart_service = await unit_env.get(CartService)
        user_id = UserId(uuid4())
        line = await cart_service.add_item(user_id, uuid4(), ItemType.COURSE, 3, 75000)

        await cart_service.remove_item(user_id, line.id)

        view = await cart_service.get_cart(user_id, Currency.USD)
        assert view.items == []

    @pytest.mark.asyncio
    async def test_update_validates_quantity_before_ownership(self, unit_env):
        cart_service = await unit_env.get(CartService)

        with pytest.raises(ValidationError):
            await cart_service.update_quantity(UserId(uuid4()), CartItemId(uuid4()), 0)
