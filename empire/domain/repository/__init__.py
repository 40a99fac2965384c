"""Repository interfaces for the storefront domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from empire.domain.repository.cart import CartRepository
from empire.domain.repository.catalog import (
    AccountRepository,
    CategoryRepository,
    CourseRepository,
)
from empire.domain.repository.comment import CommentRepository
from empire.domain.repository.profile import IdentityRepository, ProfileRepository
from empire.domain.repository.promotion import PromotionRepository

__all__ = [
    "AccountRepository",
    "CartRepository",
    "CategoryRepository",
    "CommentRepository",
    "CourseRepository",
    "IdentityRepository",
    "ProfileRepository",
    "PromotionRepository",
]
