"""In-memory repository implementations for testing."""

from .cart import InMemoryCartRepository
from .catalog import (
    InMemoryAccountRepository,
    InMemoryCategoryRepository,
    InMemoryCourseRepository,
)
from .comment import InMemoryCommentRepository
from .profile import InMemoryIdentityRepository, InMemoryProfileRepository
from .promotion import InMemoryPromotionRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryCartRepository",
    "InMemoryCategoryRepository",
    "InMemoryCommentRepository",
    "InMemoryCourseRepository",
    "InMemoryIdentityRepository",
    "InMemoryProfileRepository",
    "InMemoryPromotionRepository",
]
