"""Catalogue response items and editable payloads."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from empire.domain.model import (
    Account,
    AccountVariant,
    Category,
    Course,
    GalleryImage,
)
from empire.domain.service import AccountListing


class CategoryItem(BaseModel):
    id: str
    slug: str
    name_en: str
    name_vi: str

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryItem":
        return cls(
            id=str(category.id),
            slug=category.slug.root,
            name_en=category.name_en,
            name_vi=category.name_vi,
        )


class ImageItem(BaseModel):
    id: str
    image_url: str
    locale: str
    order_index: int

    @classmethod
    def from_domain(cls, image: GalleryImage) -> "ImageItem":
        return cls(
            id=str(image.id),
            image_url=image.image_url,
            locale=image.locale,
            order_index=image.order_index,
        )


class VariantItem(BaseModel):
    id: str
    name_en: str
    name_vi: str
    price_usd: float
    price_vnd: float
    original_price_usd: Optional[float]
    original_price_vnd: Optional[float]
    sku: Optional[str]
    image: Optional[str]
    stock: bool
    is_default: bool
    images: list[ImageItem]

    @classmethod
    def from_domain(cls, variant: AccountVariant) -> "VariantItem":
        return cls(
            id=str(variant.id),
            name_en=variant.name_en,
            name_vi=variant.name_vi,
            price_usd=variant.price_usd,
            price_vnd=variant.price_vnd,
            original_price_usd=variant.original_price_usd,
            original_price_vnd=variant.original_price_vnd,
            sku=variant.sku,
            image=variant.image,
            stock=variant.stock,
            is_default=variant.is_default,
            images=[ImageItem.from_domain(i) for i in variant.images],
        )


class AccountItem(BaseModel):
    """Account listing in responses.

    ``min_price`` and ``min_variant_id`` are only set on listings, where a
    currency is known.
    """

    id: str
    slug: str
    name_en: str
    name_vi: str
    description_en: Optional[str]
    description_vi: Optional[str]
    image: Optional[str]
    category_id: Optional[str]
    category: Optional[CategoryItem]
    inventory_status: str
    delivery_type_en: Optional[str]
    delivery_type_vi: Optional[str]
    variants: list[VariantItem]
    images: list[ImageItem]
    min_price: Optional[float] = None
    min_variant_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, account: Account) -> "AccountItem":
        return cls(
            id=str(account.id),
            slug=account.slug.root,
            name_en=account.name_en,
            name_vi=account.name_vi,
            description_en=account.description_en,
            description_vi=account.description_vi,
            image=account.image,
            category_id=str(account.category_id) if account.category_id else None,
            category=(
                CategoryItem.from_domain(account.category) if account.category else None
            ),
            inventory_status=account.inventory_status.value,
            delivery_type_en=account.delivery_type_en,
            delivery_type_vi=account.delivery_type_vi,
            variants=[VariantItem.from_domain(v) for v in account.variants],
            images=[ImageItem.from_domain(i) for i in account.images],
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

    @classmethod
    def from_listing(cls, listing: AccountListing) -> "AccountItem":
        item = cls.from_domain(listing.account)
        item.min_price = listing.min_price
        item.min_variant_id = (
            str(listing.min_variant.id) if listing.min_variant else None
        )
        return item


class CourseItem(BaseModel):
    id: str
    slug: str
    title_en: str
    title_vi: str
    thumbnail: Optional[str]
    thumbnail_image: Optional[str]
    instructor: str
    price_usd: float
    price_vnd: float
    description_en: Optional[str]
    description_vi: Optional[str]
    images: list[ImageItem]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, course: Course) -> "CourseItem":
        return cls(
            id=str(course.id),
            slug=course.slug.root,
            title_en=course.title_en,
            title_vi=course.title_vi,
            thumbnail=course.thumbnail,
            thumbnail_image=course.thumbnail_image,
            instructor=course.instructor,
            price_usd=course.price_usd,
            price_vnd=course.price_vnd,
            description_en=course.description_en,
            description_vi=course.description_vi,
            images=[ImageItem.from_domain(i) for i in course.images],
            created_at=course.created_at,
            updated_at=course.updated_at,
        )


class ImageInput(BaseModel):
    image_url: str
    locale: str = "vi"
    order_index: Optional[int] = None


class VariantInput(BaseModel):
    name_en: str
    name_vi: str
    price_usd: float
    price_vnd: float
    original_price_usd: Optional[float] = None
    original_price_vnd: Optional[float] = None
    sku: Optional[str] = None
    image: Optional[str] = None
    stock: bool = True
    is_default: bool = False
    images: list[ImageInput] = []


class AccountInput(BaseModel):
    """Editable fields of an account listing."""

    slug: Optional[str] = None
    name_en: Optional[str] = None
    name_vi: Optional[str] = None
    description_en: Optional[str] = None
    description_vi: Optional[str] = None
    image: Optional[str] = None
    category_id: Optional[str] = None
    inventory_status: str = "in-stock"
    delivery_type_en: Optional[str] = None
    delivery_type_vi: Optional[str] = None
    variants: list[VariantInput] = []
    gallery_images: list[ImageInput] = []


class CourseInput(BaseModel):
    """Editable fields of a course."""

    slug: Optional[str] = None
    title_en: Optional[str] = None
    title_vi: Optional[str] = None
    thumbnail: Optional[str] = None
    instructor: Optional[str] = None
    price_usd: float = 0
    price_vnd: float = 0
    description_en: Optional[str] = None
    description_vi: Optional[str] = None
    gallery_images: list[ImageInput] = []
