"""Catalogue repository interfaces."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from empire.domain.model.catalog import Account, Category, Course
from empire.domain.value import AccountId, CategoryId, CourseId


class CategoryRepository(ABC):
    """Repository for Category entity."""

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """All categories ordered by English name."""
        pass

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        pass


class AccountRepository(ABC):
    """Repository for Account listing aggregate.

    Listings are always returned with their category, variants and gallery
    images loaded.
    """

    @abstractmethod
    async def find_all(self) -> list[Account]:
        """All listings, newest first."""
        pass

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Create or update a listing.

        Variants and gallery images on the given aggregate replace the
        stored ones.

        Args:
            account: Listing with its variants and images

        Returns:
            The stored listing, relations loaded
        """
        pass

    @abstractmethod
    async def delete(self, account_id: AccountId) -> bool:
        """Delete a listing with its variants and images.

        Returns:
            True if a listing was deleted
        """
        pass


class CourseRepository(ABC):
    """Repository for Course aggregate."""

    @abstractmethod
    async def find_page(
        self, limit: int, created_before: Optional[datetime] = None
    ) -> list[Course]:
        """Courses newest first, for cursor pagination.

        Args:
            limit: Maximum number of courses to return
            created_before: Only courses created strictly before this instant

        Returns:
            Courses with gallery images loaded
        """
        pass

    @abstractmethod
    async def find_by_id(self, course_id: CourseId) -> Optional[Course]:
        pass

    @abstractmethod
    async def save(self, course: Course) -> Course:
        """Create or update a course, replacing its gallery images."""
        pass

    @abstractmethod
    async def delete(self, course_id: CourseId) -> bool:
        pass
