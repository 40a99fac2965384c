"""Domain services."""

from .access_policy import (
    AccessDecision,
    AccessDenied,
    AccessGranted,
    AccessPolicy,
    DenialReason,
    ensure_granted,
    require_owner,
)
from .account_service import AccountListing, AccountService
from .auth_service import AuthService
from .base import Service
from .cart_service import CartService, CartView
from .category_service import CategoryService
from .comment_service import (
    CommentForest,
    CommentNode,
    CommentService,
    build_comment_forest,
)
from .course_service import CoursePage, CourseService
from .jwt_service import JWTService
from .pricing import (
    CartTotals,
    PriceRange,
    compute_cart_totals,
    filter_and_sort,
    select_min_price_variant,
)
from .profile_service import ProfilePage, ProfileService
from .promotion_service import PromotionService

__all__ = [
    "AccessDecision",
    "AccessDenied",
    "AccessGranted",
    "AccessPolicy",
    "AccountListing",
    "AccountService",
    "AuthService",
    "CartService",
    "CartTotals",
    "CartView",
    "CategoryService",
    "CommentForest",
    "CommentNode",
    "CommentService",
    "CoursePage",
    "CourseService",
    "DenialReason",
    "JWTService",
    "PriceRange",
    "ProfilePage",
    "ProfileService",
    "PromotionService",
    "Service",
    "build_comment_forest",
    "compute_cart_totals",
    "ensure_granted",
    "filter_and_sort",
    "require_owner",
    "select_min_price_variant",
]
