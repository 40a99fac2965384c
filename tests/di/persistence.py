"""Mock persistence providers for testing."""

from dishka import Scope, provide

from empire.domain.repository import (
    AccountRepository,
    CartRepository,
    CategoryRepository,
    CommentRepository,
    CourseRepository,
    IdentityRepository,
    ProfileRepository,
    PromotionRepository,
)
from empire.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryCartRepository,
    InMemoryCategoryRepository,
    InMemoryCommentRepository,
    InMemoryCourseRepository,
    InMemoryIdentityRepository,
    InMemoryProfileRepository,
    InMemoryPromotionRepository,
)
from empire.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across the requests of one
    container; every test builds a fresh provider, which keeps tests isolated.
    The repositories are exposed as attributes for seeding.
    """

    __is_mock__ = True

    def __init__(self) -> None:
        super().__init__()
        self.identities = InMemoryIdentityRepository()
        self.profiles = InMemoryProfileRepository()
        self.comments = InMemoryCommentRepository()
        self.categories = InMemoryCategoryRepository()
        self.accounts = InMemoryAccountRepository(self.categories)
        self.courses = InMemoryCourseRepository()
        self.promotions = InMemoryPromotionRepository()
        self.carts = InMemoryCartRepository()

    @provide(scope=Scope.APP)
    def get_identity_repository(self) -> IdentityRepository:
        """Provide in-memory identity repository."""
        return self.identities

    @provide(scope=Scope.APP)
    def get_profile_repository(self) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return self.profiles

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        return self.comments

    @provide(scope=Scope.APP)
    def get_category_repository(self) -> CategoryRepository:
        return self.categories

    @provide(scope=Scope.APP)
    def get_account_repository(self) -> AccountRepository:
        return self.accounts

    @provide(scope=Scope.APP)
    def get_course_repository(self) -> CourseRepository:
        return self.courses

    @provide(scope=Scope.APP)
    def get_promotion_repository(self) -> PromotionRepository:
        return self.promotions

    @provide(scope=Scope.APP)
    def get_cart_repository(self) -> CartRepository:
        return self.carts
