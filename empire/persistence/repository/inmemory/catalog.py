"""In-memory catalogue repositories for testing."""

from datetime import datetime
from typing import Optional

from empire.domain.model.catalog import Account, Category, Course
from empire.domain.model.common import as_utc
from empire.domain.repository.catalog import (
    AccountRepository,
    CategoryRepository,
    CourseRepository,
)
from empire.domain.value import AccountId, CategoryId, CourseId


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        self._categories: dict[CategoryId, Category] = {}

    async def find_all(self) -> list[Category]:
        return sorted(self._categories.values(), key=lambda c: c.name_en)

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        return self._categories.get(category_id)

    async def save(self, category: Category) -> Category:
        self._categories[category.id] = category
        return category


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Holds a reference to the category repository to load relations the way
    the database join does.
    """

    def __init__(self, categories: InMemoryCategoryRepository) -> None:
        self._accounts: dict[AccountId, Account] = {}
        self._categories = categories

    async def _with_category(self, account: Account) -> Account:
        category = (
            await self._categories.find_by_id(account.category_id)
            if account.category_id
            else None
        )
        return account.model_copy(update={"category": category})

    async def find_all(self) -> list[Account]:
        accounts = sorted(
            self._accounts.values(), key=lambda a: a.created_at, reverse=True
        )
        return [await self._with_category(a) for a in accounts]

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        account = self._accounts.get(account_id)
        return await self._with_category(account) if account else None

    async def save(self, account: Account) -> Account:
        variants = [
            v.model_copy(update={"account_id": account.id}) for v in account.variants
        ]
        self._accounts[account.id] = account.model_copy(
            update={"variants": variants, "category": None}
        )
        return await self._with_category(self._accounts[account.id])

    async def delete(self, account_id: AccountId) -> bool:
        return self._accounts.pop(account_id, None) is not None


class InMemoryCourseRepository(CourseRepository):
    """In-memory implementation of CourseRepository for testing."""

    def __init__(self) -> None:
        self._courses: dict[CourseId, Course] = {}

    async def find_page(
        self, limit: int, created_before: Optional[datetime] = None
    ) -> list[Course]:
        courses = sorted(
            self._courses.values(), key=lambda c: c.created_at, reverse=True
        )
        if created_before is not None:
            cutoff = as_utc(created_before)
            courses = [c for c in courses if as_utc(c.created_at) < cutoff]
        return courses[:limit]

    async def find_by_id(self, course_id: CourseId) -> Optional[Course]:
        return self._courses.get(course_id)

    async def save(self, course: Course) -> Course:
        self._courses[course.id] = course
        return course

    async def delete(self, course_id: CourseId) -> bool:
        return self._courses.pop(course_id, None) is not None
