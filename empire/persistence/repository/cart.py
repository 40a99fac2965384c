"""PostgreSQL implementation of Cart repository.

Cart creation and line increments are single ``INSERT ... ON CONFLICT``
statements against the unique constraints, so concurrent requests of the
same user cannot create duplicate carts or lines.
"""

from typing import Optional
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from empire.domain.model import Cart, CartItem
from empire.domain.model.common import utcnow
from empire.domain.repository import CartRepository
from empire.domain.value import CartId, CartItemId, UserId
from empire.domain.value.types import CART_MAX_QUANTITY
from empire.persistence.mappers import cart_item_to_dict, row_to_cart, row_to_cart_item
from empire.persistence.tables import cart_items_table, carts_table


class PostgresCartRepository(CartRepository):
    """PostgreSQL implementation of CartRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_or_create(self, user_id: UserId) -> Cart:
        stmt = (
            pg_insert(carts_table)
            .values(id=uuid4(), user_id=user_id, created_at=utcnow())
            .on_conflict_do_nothing(index_elements=[carts_table.c.user_id])
        )
        await self.session.execute(stmt)

        result = await self.session.execute(
            select(carts_table).where(carts_table.c.user_id == user_id)
        )
        return row_to_cart(result.one()._asdict())

    async def find_items(self, cart_id: CartId) -> list[CartItem]:
        stmt = (
            select(cart_items_table)
            .where(cart_items_table.c.cart_id == cart_id)
            .order_by(cart_items_table.c.created_at, cart_items_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_cart_item(row._asdict()) for row in result.fetchall()]

    async def add_or_increment(self, item: CartItem) -> CartItem:
        """Insert the line or add to the stored quantity, capped at the maximum."""
        stmt = pg_insert(cart_items_table).values(**cart_item_to_dict(item))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_cart_items_line",
            set_={
                "quantity": func.least(
                    cart_items_table.c.quantity + stmt.excluded.quantity,
                    CART_MAX_QUANTITY,
                ),
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(cart_items_table)

        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return row_to_cart_item(row._asdict())

    async def find_item_owner(self, item_id: CartItemId) -> Optional[UserId]:
        stmt = (
            select(carts_table.c.user_id)
            .select_from(
                cart_items_table.join(
                    carts_table, cart_items_table.c.cart_id == carts_table.c.id
                )
            )
            .where(cart_items_table.c.id == item_id)
        )
        result = await self.session.execute(stmt)
        owner = result.scalar()
        return UserId(owner) if owner else None

    async def update_quantity(
        self, item_id: CartItemId, quantity: int
    ) -> Optional[CartItem]:
        stmt = (
            cart_items_table.update()
            .where(cart_items_table.c.id == item_id)
            .values(quantity=quantity, updated_at=utcnow())
            .returning(cart_items_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        await self.session.flush()
        return row_to_cart_item(row._asdict())

    async def delete_item(self, item_id: CartItemId) -> bool:
        stmt = (
            cart_items_table.delete()
            .where(cart_items_table.c.id == item_id)
            .returning(cart_items_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted
