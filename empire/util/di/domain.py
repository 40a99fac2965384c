"""Domain layer DI providers."""

from dishka import Scope, provide

from empire.config import AuthSettings, ShopSettings
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
from empire.domain.service import (
    AccessPolicy,
    AccountService,
    AuthService,
    CartService,
    CategoryService,
    CommentService,
    CourseService,
    JWTService,
    ProfileService,
    PromotionService,
)
from empire.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_access_policy(
        self, jwt_service: JWTService, profile_repository: ProfileRepository
    ) -> AccessPolicy:
        """Provide the session/role access policy."""
        return AccessPolicy(
            jwt_service=jwt_service, profile_repository=profile_repository
        )

    @provide
    def get_auth_service(
        self,
        identity_repository: IdentityRepository,
        profile_repository: ProfileRepository,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide email/password authentication service."""
        return AuthService(
            identity_repository=identity_repository,
            profile_repository=profile_repository,
            auth_settings=auth_settings,
        )

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            profile_repository=profile_repository,
        )

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository
    ) -> CategoryService:
        return CategoryService(category_repository=category_repository)

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        category_repository: CategoryRepository,
    ) -> AccountService:
        return AccountService(
            account_repository=account_repository,
            category_repository=category_repository,
        )

    @provide
    def get_course_service(self, course_repository: CourseRepository) -> CourseService:
        return CourseService(course_repository=course_repository)

    @provide
    def get_promotion_service(
        self, promotion_repository: PromotionRepository
    ) -> PromotionService:
        return PromotionService(promotion_repository=promotion_repository)

    @provide
    def get_cart_service(
        self, cart_repository: CartRepository, shop_settings: ShopSettings
    ) -> CartService:
        return CartService(cart_repository=cart_repository, shop_settings=shop_settings)
