"""Domain value objects for the storefront."""

from empire.domain.value.identifiers import (
    AccountId,
    CartId,
    CartItemId,
    CategoryId,
    CommentId,
    CourseId,
    ImageId,
    PromotionId,
    UserId,
    VariantId,
)
from empire.domain.value.types import (
    Currency,
    Email,
    InventoryStatus,
    ItemType,
    ProfileStatus,
    PromotionCode,
    PromotionStatus,
    Role,
    Slug,
    SortOrder,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "CategoryId",
    "AccountId",
    "VariantId",
    "CourseId",
    "ImageId",
    "PromotionId",
    "CartId",
    "CartItemId",
    # Types
    "Currency",
    "Email",
    "InventoryStatus",
    "ItemType",
    "ProfileStatus",
    "PromotionCode",
    "PromotionStatus",
    "Role",
    "Slug",
    "SortOrder",
]
