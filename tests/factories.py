"""Entity factories and API helpers shared by the test suites."""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from empire.domain.model import (
    Account,
    AccountVariant,
    Category,
    Comment,
    Course,
    Profile,
)
from empire.domain.value import (
    AccountId,
    CategoryId,
    CommentId,
    CourseId,
    ItemType,
    Role,
    Slug,
    UserId,
    VariantId,
)

DEFAULT_PASSWORD = "Passw0rdX"

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Deterministic timestamp ``minutes`` after the base time."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_profile(
    role: Role = Role.USER,
    full_name: str = "Test User",
    created_at: datetime | None = None,
) -> Profile:
    user_id = UserId(uuid4())
    return Profile(
        id=user_id,
        email=f"{user_id.hex[:8]}@example.com",
        full_name=full_name,
        role=role,
        created_at=created_at or BASE_TIME,
        updated_at=created_at or BASE_TIME,
    )


def make_comment(
    item_id: UUID,
    user_id: UserId,
    text: str = "Nice",
    parent_id: CommentId | None = None,
    minutes: int = 0,
    item_type: ItemType = ItemType.ACCOUNT,
) -> Comment:
    return Comment(
        id=CommentId(uuid4()),
        item_id=item_id,
        item_type=item_type,
        user_id=user_id,
        parent_id=parent_id,
        comment=text,
        created_at=at(minutes),
        updated_at=at(minutes),
    )


def make_category(slug: str = "streaming", name_en: str = "Streaming") -> Category:
    return Category(
        id=CategoryId(uuid4()), slug=Slug(slug), name_en=name_en, name_vi=name_en
    )


def make_variant(
    account_id: AccountId, price_usd: float, price_vnd: float | None = None
) -> AccountVariant:
    return AccountVariant(
        id=VariantId(uuid4()),
        account_id=account_id,
        name_en=f"Plan {price_usd}",
        name_vi=f"Goi {price_usd}",
        price_usd=price_usd,
        price_vnd=price_vnd if price_vnd is not None else price_usd * 25000,
    )


def make_account(
    slug: str,
    prices: list[float],
    minutes: int = 0,
    category: Category | None = None,
) -> Account:
    account_id = AccountId(uuid4())
    return Account(
        id=account_id,
        slug=Slug(slug),
        name_en=slug.title(),
        name_vi=slug.title(),
        category_id=category.id if category else None,
        variants=[make_variant(account_id, price) for price in prices],
        created_at=at(minutes),
        updated_at=at(minutes),
    )


def make_course(slug: str, price_usd: float = 10.0, minutes: int = 0) -> Course:
    return Course(
        id=CourseId(uuid4()),
        slug=Slug(slug),
        title_en=slug.title(),
        title_vi=slug.title(),
        instructor="Jane Doe",
        price_usd=price_usd,
        price_vnd=price_usd * 25000,
        created_at=at(minutes),
        updated_at=at(minutes),
    )


def register_and_login(
    client, email: str, password: str = DEFAULT_PASSWORD, full_name: str = "Test User"
) -> str:
    """Register through the API and return a bearer token.

    Cookies are cleared so later calls only carry the returned token.
    """
    response = client.post(
        "/auth/register",
        json={"email": email, "password": password, "full_name": full_name},
    )
    assert response.status_code == 201, response.text
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    client.cookies.clear()
    return response.json()["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def promote_to_admin(persistence, email: str) -> None:
    """Give a registered user the admin role in the in-memory store."""

    async def _promote() -> None:
        profile = await persistence.profiles.find_by_email(email)
        await persistence.profiles.save(profile.model_copy(update={"role": Role.ADMIN}))

    asyncio.run(_promote())


def seed(repository, *entities) -> None:
    """Save entities into an in-memory repository from sync tests."""

    async def _save() -> None:
        for entity in entities:
            await repository.save(entity)

    asyncio.run(_save())
