"""Strongly typed identifiers for storefront entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Identity and profile share the same identifier
UserId = NewType("UserId", UUID)

CommentId = NewType("CommentId", UUID)
CategoryId = NewType("CategoryId", UUID)
AccountId = NewType("AccountId", UUID)
VariantId = NewType("VariantId", UUID)
CourseId = NewType("CourseId", UUID)
ImageId = NewType("ImageId", UUID)
PromotionId = NewType("PromotionId", UUID)
CartId = NewType("CartId", UUID)
CartItemId = NewType("CartItemId", UUID)
