"""Application layer DI providers."""

from dishka import Scope, provide

from empire.application.usecase.auth import LoginUseCase, RegisterUseCase
from empire.application.usecase.cart import (
    AddCartItemUseCase,
    GetCartUseCase,
    RemoveCartItemUseCase,
    UpdateCartItemUseCase,
)
from empire.application.usecase.catalog import (
    CreateAccountUseCase,
    CreateCourseUseCase,
    DeleteAccountUseCase,
    DeleteCourseUseCase,
    GetAccountUseCase,
    GetCourseUseCase,
    ListAccountsUseCase,
    ListCategoriesUseCase,
    ListCoursesUseCase,
    UpdateAccountUseCase,
    UpdateCourseUseCase,
)
from empire.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    ListAllCommentsUseCase,
)
from empire.application.usecase.profile import (
    GetProfileUseCase,
    ListUsersUseCase,
    UpdateProfileUseCase,
    UpdateUserUseCase,
)
from empire.application.usecase.promotion import (
    CreatePromotionUseCase,
    DeletePromotionUseCase,
    ListPromotionsUseCase,
    UpdatePromotionUseCase,
)
from empire.config import ShopSettings
from empire.domain.service import (
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(self, auth_service: AuthService) -> RegisterUseCase:
        return RegisterUseCase(auth_service=auth_service)

    @provide
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    # Comment use cases
    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_all_comments_use_case(
        self, comment_service: CommentService
    ) -> ListAllCommentsUseCase:
        return ListAllCommentsUseCase(comment_service=comment_service)

    # Profile use cases
    @provide
    def get_get_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetProfileUseCase:
        return GetProfileUseCase(profile_service=profile_service)

    @provide
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        return UpdateProfileUseCase(profile_service=profile_service)

    @provide
    def get_list_users_use_case(
        self, profile_service: ProfileService, shop_settings: ShopSettings
    ) -> ListUsersUseCase:
        return ListUsersUseCase(
            profile_service=profile_service, shop_settings=shop_settings
        )

    @provide
    def get_update_user_use_case(
        self, profile_service: ProfileService
    ) -> UpdateUserUseCase:
        return UpdateUserUseCase(profile_service=profile_service)

    # Catalogue use cases
    @provide
    def get_list_categories_use_case(
        self, category_service: CategoryService
    ) -> ListCategoriesUseCase:
        return ListCategoriesUseCase(category_service=category_service)

    @provide
    def get_list_accounts_use_case(
        self, account_service: AccountService, shop_settings: ShopSettings
    ) -> ListAccountsUseCase:
        return ListAccountsUseCase(
            account_service=account_service, shop_settings=shop_settings
        )

    @provide
    def get_get_account_use_case(
        self, account_service: AccountService
    ) -> GetAccountUseCase:
        return GetAccountUseCase(account_service=account_service)

    @provide
    def get_create_account_use_case(
        self, account_service: AccountService
    ) -> CreateAccountUseCase:
        return CreateAccountUseCase(account_service=account_service)

    @provide
    def get_update_account_use_case(
        self, account_service: AccountService
    ) -> UpdateAccountUseCase:
        return UpdateAccountUseCase(account_service=account_service)

    @provide
    def get_delete_account_use_case(
        self, account_service: AccountService
    ) -> DeleteAccountUseCase:
        return DeleteAccountUseCase(account_service=account_service)

    @provide
    def get_list_courses_use_case(
        self, course_service: CourseService, shop_settings: ShopSettings
    ) -> ListCoursesUseCase:
        return ListCoursesUseCase(
            course_service=course_service, shop_settings=shop_settings
        )

    @provide
    def get_get_course_use_case(self, course_service: CourseService) -> GetCourseUseCase:
        return GetCourseUseCase(course_service=course_service)

    @provide
    def get_create_course_use_case(
        self, course_service: CourseService
    ) -> CreateCourseUseCase:
        return CreateCourseUseCase(course_service=course_service)

    @provide
    def get_update_course_use_case(
        self, course_service: CourseService
    ) -> UpdateCourseUseCase:
        return UpdateCourseUseCase(course_service=course_service)

    @provide
    def get_delete_course_use_case(
        self, course_service: CourseService
    ) -> DeleteCourseUseCase:
        return DeleteCourseUseCase(course_service=course_service)

    # Promotion use cases
    @provide
    def get_list_promotions_use_case(
        self, promotion_service: PromotionService
    ) -> ListPromotionsUseCase:
        return ListPromotionsUseCase(promotion_service=promotion_service)

    @provide
    def get_create_promotion_use_case(
        self, promotion_service: PromotionService
    ) -> CreatePromotionUseCase:
        return CreatePromotionUseCase(promotion_service=promotion_service)

    @provide
    def get_update_promotion_use_case(
        self, promotion_service: PromotionService
    ) -> UpdatePromotionUseCase:
        return UpdatePromotionUseCase(promotion_service=promotion_service)

    @provide
    def get_delete_promotion_use_case(
        self, promotion_service: PromotionService
    ) -> DeletePromotionUseCase:
        return DeletePromotionUseCase(promotion_service=promotion_service)

    # Cart use cases
    @provide
    def get_get_cart_use_case(
        self, cart_service: CartService, shop_settings: ShopSettings
    ) -> GetCartUseCase:
        return GetCartUseCase(cart_service=cart_service, shop_settings=shop_settings)

    @provide
    def get_add_cart_item_use_case(
        self, cart_service: CartService
    ) -> AddCartItemUseCase:
        return AddCartItemUseCase(cart_service=cart_service)

    @provide
    def get_update_cart_item_use_case(
        self, cart_service: CartService
    ) -> UpdateCartItemUseCase:
        return UpdateCartItemUseCase(cart_service=cart_service)

    @provide
    def get_remove_cart_item_use_case(
        self, cart_service: CartService
    ) -> RemoveCartItemUseCase:
        return RemoveCartItemUseCase(cart_service=cart_service)
