"""PostgreSQL repository implementations."""

from empire.persistence.repository.cart import PostgresCartRepository
from empire.persistence.repository.catalog import (
    PostgresAccountRepository,
    PostgresCategoryRepository,
    PostgresCourseRepository,
)
from empire.persistence.repository.comment import PostgresCommentRepository
from empire.persistence.repository.profile import (
    PostgresIdentityRepository,
    PostgresProfileRepository,
)
from empire.persistence.repository.promotion import PostgresPromotionRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresCartRepository",
    "PostgresCategoryRepository",
    "PostgresCommentRepository",
    "PostgresCourseRepository",
    "PostgresIdentityRepository",
    "PostgresProfileRepository",
    "PostgresPromotionRepository",
]
