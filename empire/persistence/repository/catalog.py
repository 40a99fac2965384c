"""PostgreSQL implementations of the catalogue repositories."""

from collections import defaultdict
from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from empire.domain.model import Account, Category, Course, GalleryImage
from empire.domain.repository import (
    AccountRepository,
    CategoryRepository,
    CourseRepository,
)
from empire.domain.value import AccountId, CategoryId, CourseId
from empire.persistence.mappers import (
    account_to_dict,
    category_to_dict,
    course_to_dict,
    image_to_dict,
    row_to_account,
    row_to_category,
    row_to_course,
    row_to_image,
    row_to_variant,
    variant_to_dict,
)
from empire.persistence.tables import (
    account_images_table,
    account_variants_table,
    accounts_table,
    categories_table,
    course_images_table,
    courses_table,
)


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> list[Category]:
        stmt = select(categories_table).order_by(categories_table.c.name_en)
        result = await self.session.execute(stmt)
        return [row_to_category(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        stmt = select(categories_table).where(categories_table.c.id == category_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def save(self, category: Category) -> Category:
        category_dict = category_to_dict(category)
        if await self.find_by_id(category.id):
            stmt = (
                categories_table.update()
                .where(categories_table.c.id == category.id)
                .values(**category_dict)
            )
        else:
            stmt = categories_table.insert().values(**category_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return category


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository.

    Relations are loaded with one query per table for the whole result set.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _load(self, rows: list[dict]) -> list[Account]:
        if not rows:
            return []
        account_ids = [row["id"] for row in rows]
        category_ids = {row["category_id"] for row in rows if row["category_id"]}

        categories: dict[UUID, Category] = {}
        if category_ids:
            result = await self.session.execute(
                select(categories_table).where(categories_table.c.id.in_(category_ids))
            )
            for row in result.fetchall():
                category = row_to_category(row._asdict())
                categories[category.id] = category

        account_images: dict[UUID, list[GalleryImage]] = defaultdict(list)
        variant_images: dict[UUID, list[GalleryImage]] = defaultdict(list)
        result = await self.session.execute(
            select(account_images_table)
            .where(account_images_table.c.account_id.in_(account_ids))
            .order_by(account_images_table.c.order_index)
        )
        for row in result.fetchall():
            data = row._asdict()
            if data["variant_id"]:
                variant_images[data["variant_id"]].append(row_to_image(data))
            else:
                account_images[data["account_id"]].append(row_to_image(data))

        variants = defaultdict(list)
        result = await self.session.execute(
            select(account_variants_table)
            .where(account_variants_table.c.account_id.in_(account_ids))
            .order_by(account_variants_table.c.position)
        )
        for row in result.fetchall():
            data = row._asdict()
            variants[data["account_id"]].append(
                row_to_variant(data, variant_images.get(data["id"], []))
            )

        return [
            row_to_account(
                row,
                category=categories.get(row["category_id"]),
                variants=variants.get(row["id"], []),
                images=account_images.get(row["id"], []),
            )
            for row in rows
        ]

    async def find_all(self) -> list[Account]:
        stmt = select(accounts_table).order_by(desc(accounts_table.c.created_at))
        result = await self.session.execute(stmt)
        return await self._load([row._asdict() for row in result.fetchall()])

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        [account] = await self._load([row._asdict()])
        return account

    async def save(self, account: Account) -> Account:
        """Upsert the listing row and replace its variants and images."""
        account_dict = account_to_dict(account)
        exists = await self.session.execute(
            select(accounts_table.c.id).where(accounts_table.c.id == account.id)
        )
        if exists.scalar() is not None:
            await self.session.execute(
                accounts_table.update()
                .where(accounts_table.c.id == account.id)
                .values(**account_dict)
            )
        else:
            await self.session.execute(accounts_table.insert().values(**account_dict))

        await self.session.execute(
            account_images_table.delete().where(
                account_images_table.c.account_id == account.id
            )
        )
        await self.session.execute(
            account_variants_table.delete().where(
                account_variants_table.c.account_id == account.id
            )
        )

        if account.variants:
            await self.session.execute(
                account_variants_table.insert(),
                [
                    variant_to_dict(variant.model_copy(update={"account_id": account.id}), i)
                    for i, variant in enumerate(account.variants)
                ],
            )
        images = [
            image_to_dict(image, account_id=account.id, variant_id=None)
            for image in account.images
        ] + [
            image_to_dict(image, account_id=account.id, variant_id=variant.id)
            for variant in account.variants
            for image in variant.images
        ]
        if images:
            await self.session.execute(account_images_table.insert(), images)

        await self.session.flush()
        return await self.find_by_id(account.id) or account

    async def delete(self, account_id: AccountId) -> bool:
        stmt = (
            accounts_table.delete()
            .where(accounts_table.c.id == account_id)
            .returning(accounts_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted


class PostgresCourseRepository(CourseRepository):
    """PostgreSQL implementation of CourseRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _images_for(
        self, course_ids: Iterable[UUID]
    ) -> dict[UUID, list[GalleryImage]]:
        images: dict[UUID, list[GalleryImage]] = defaultdict(list)
        ids = list(course_ids)
        if not ids:
            return images
        result = await self.session.execute(
            select(course_images_table)
            .where(course_images_table.c.course_id.in_(ids))
            .order_by(course_images_table.c.order_index)
        )
        for row in result.fetchall():
            data = row._asdict()
            images[data["course_id"]].append(row_to_image(data))
        return images

    async def find_page(
        self, limit: int, created_before: Optional[datetime] = None
    ) -> list[Course]:
        stmt = select(courses_table)
        if created_before is not None:
            stmt = stmt.where(courses_table.c.created_at < created_before)
        stmt = stmt.order_by(desc(courses_table.c.created_at)).limit(limit)

        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]
        images = await self._images_for(row["id"] for row in rows)
        return [row_to_course(row, images.get(row["id"], [])) for row in rows]

    async def find_by_id(self, course_id: CourseId) -> Optional[Course]:
        stmt = select(courses_table).where(courses_table.c.id == course_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        images = await self._images_for([course_id])
        return row_to_course(row._asdict(), images.get(course_id, []))

    async def save(self, course: Course) -> Course:
        course_dict = course_to_dict(course)
        exists = await self.session.execute(
            select(courses_table.c.id).where(courses_table.c.id == course.id)
        )
        if exists.scalar() is not None:
            await self.session.execute(
                courses_table.update()
                .where(courses_table.c.id == course.id)
                .values(**course_dict)
            )
        else:
            await self.session.execute(courses_table.insert().values(**course_dict))

        await self.session.execute(
            course_images_table.delete().where(
                course_images_table.c.course_id == course.id
            )
        )
        if course.images:
            await self.session.execute(
                course_images_table.insert(),
                [image_to_dict(image, course_id=course.id) for image in course.images],
            )

        await self.session.flush()
        return await self.find_by_id(course.id) or course

    async def delete(self, course_id: CourseId) -> bool:
        stmt = (
            courses_table.delete()
            .where(courses_table.c.id == course_id)
            .returning(courses_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted
