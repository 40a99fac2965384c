"""Domain model entities for the storefront."""

from empire.domain.model.cart import Cart, CartItem
from empire.domain.model.catalog import (
    Account,
    AccountVariant,
    Category,
    Course,
    GalleryImage,
)
from empire.domain.model.comment import Comment, CommentAuthor
from empire.domain.model.profile import Identity, Profile
from empire.domain.model.promotion import Promotion, derive_promotion_status

__all__ = [
    "Account",
    "AccountVariant",
    "Cart",
    "CartItem",
    "Category",
    "Comment",
    "CommentAuthor",
    "Course",
    "GalleryImage",
    "Identity",
    "Profile",
    "Promotion",
    "derive_promotion_status",
]
