"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic objects, so rows are mapped by hand
instead of through SQLAlchemy's imperative mapping. Numeric columns come
back as ``Decimal`` and are converted to ``float`` here.
"""

from decimal import Decimal
from typing import Any, Dict, Iterable, Optional

from empire.domain.model import (
    Account,
    AccountVariant,
    Cart,
    CartItem,
    Category,
    Comment,
    Course,
    GalleryImage,
    Identity,
    Profile,
    Promotion,
)
from empire.domain.value import (
    CategoryId,
    InventoryStatus,
    ItemType,
    ProfileStatus,
    PromotionCode,
    PromotionStatus,
    Role,
    Slug,
)


def _num(value: Optional[Decimal | float | int]) -> Optional[float]:
    return float(value) if value is not None else None


def row_to_identity(row: Dict[str, Any]) -> Identity:
    return Identity(
        id=row["id"],
        email=row["email"],
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def identity_to_dict(identity: Identity) -> Dict[str, Any]:
    return identity.model_dump()


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=row["id"],
        email=row.get("email"),
        full_name=row.get("full_name"),
        avatar=row.get("avatar"),
        role=Role(row["role"]),
        status=ProfileStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    data = profile.model_dump()
    data["role"] = profile.role.value
    data["status"] = profile.status.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The author snapshot is attached by the service, never stored.
    """
    return Comment(
        id=row["id"],
        item_id=row["item_id"],
        item_type=ItemType(row["item_type"]),
        user_id=row["user_id"],
        parent_id=row.get("parent_id"),
        comment=row["comment"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    data = comment.model_dump(exclude={"author"})
    data["item_type"] = comment.item_type.value
    return data


def row_to_category(row: Dict[str, Any]) -> Category:
    return Category(
        id=row["id"],
        slug=Slug(row["slug"]),
        name_en=row["name_en"],
        name_vi=row["name_vi"],
        created_at=row["created_at"],
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    data = category.model_dump()
    data["slug"] = category.slug.root
    return data


def row_to_image(row: Dict[str, Any]) -> GalleryImage:
    return GalleryImage(
        id=row["id"],
        image_url=row["image_url"],
        locale=row["locale"],
        order_index=row["order_index"],
    )


def image_to_dict(image: GalleryImage, **owner: Any) -> Dict[str, Any]:
    """Gallery image row; ``owner`` names the foreign key(s) to set."""
    return {**image.model_dump(), **owner}


def row_to_variant(
    row: Dict[str, Any], images: Iterable[GalleryImage] = ()
) -> AccountVariant:
    return AccountVariant(
        id=row["id"],
        account_id=row["account_id"],
        name_en=row["name_en"],
        name_vi=row["name_vi"],
        price_usd=_num(row["price_usd"]),
        price_vnd=_num(row["price_vnd"]),
        original_price_usd=_num(row.get("original_price_usd")),
        original_price_vnd=_num(row.get("original_price_vnd")),
        sku=row.get("sku"),
        image=row.get("image"),
        stock=row["stock"],
        is_default=row["is_default"],
        images=list(images),
        created_at=row["created_at"],
    )


def variant_to_dict(variant: AccountVariant, position: int) -> Dict[str, Any]:
    data = variant.model_dump(exclude={"images"})
    data["position"] = position
    return data


def row_to_account(
    row: Dict[str, Any],
    category: Optional[Category] = None,
    variants: Iterable[AccountVariant] = (),
    images: Iterable[GalleryImage] = (),
) -> Account:
    """Convert database row plus loaded relations to Account domain model."""
    category_id = row.get("category_id")
    return Account(
        id=row["id"],
        slug=Slug(row["slug"]),
        name_en=row["name_en"],
        name_vi=row["name_vi"],
        description_en=row.get("description_en"),
        description_vi=row.get("description_vi"),
        image=row.get("image"),
        category_id=CategoryId(category_id) if category_id else None,
        inventory_status=InventoryStatus(row["inventory_status"]),
        delivery_type_en=row.get("delivery_type_en"),
        delivery_type_vi=row.get("delivery_type_vi"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        category=category,
        variants=list(variants),
        images=list(images),
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    data = account.model_dump(exclude={"category", "variants", "images"})
    data["slug"] = account.slug.root
    data["inventory_status"] = account.inventory_status.value
    return data


def row_to_course(row: Dict[str, Any], images: Iterable[GalleryImage] = ()) -> Course:
    return Course(
        id=row["id"],
        slug=Slug(row["slug"]),
        title_en=row["title_en"],
        title_vi=row["title_vi"],
        thumbnail=row.get("thumbnail"),
        instructor=row["instructor"],
        price_usd=_num(row["price_usd"]),
        price_vnd=_num(row["price_vnd"]),
        description_en=row.get("description_en"),
        description_vi=row.get("description_vi"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        images=list(images),
    )


def course_to_dict(course: Course) -> Dict[str, Any]:
    data = course.model_dump(exclude={"images"})
    data["slug"] = course.slug.root
    return data


def row_to_promotion(row: Dict[str, Any]) -> Promotion:
    """Convert database row to Promotion domain model (status as stored)."""
    return Promotion(
        id=row["id"],
        code=PromotionCode(row["code"]),
        name_en=row["name_en"],
        name_vi=row["name_vi"],
        description_en=row.get("description_en"),
        description_vi=row.get("description_vi"),
        discount_percent=_num(row["discount_percent"]),
        max_discount_amount=_num(row.get("max_discount_amount")),
        minimum_order_amount=_num(row.get("minimum_order_amount")),
        start_date=row["start_date"],
        end_date=row["end_date"],
        usage_limit=row.get("usage_limit"),
        used_count=row["used_count"],
        status=PromotionStatus(row["status"]),
        created_at=row["created_at"],
    )


def promotion_to_dict(promotion: Promotion) -> Dict[str, Any]:
    data = promotion.model_dump()
    data["code"] = promotion.code.root
    data["status"] = promotion.status.value
    return data


def row_to_cart(row: Dict[str, Any]) -> Cart:
    return Cart(id=row["id"], user_id=row["user_id"], created_at=row["created_at"])


def row_to_cart_item(row: Dict[str, Any]) -> CartItem:
    return CartItem(
        id=row["id"],
        cart_id=row["cart_id"],
        item_id=row["item_id"],
        item_type=ItemType(row["item_type"]),
        variant_id=row.get("variant_id"),
        quantity=row["quantity"],
        price_usd=_num(row["price_usd"]),
        price_vnd=_num(row["price_vnd"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def cart_item_to_dict(item: CartItem) -> Dict[str, Any]:
    data = item.model_dump()
    data["item_type"] = item.item_type.value
    return data
