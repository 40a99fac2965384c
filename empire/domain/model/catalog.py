"""Catalogue entities: categories, account listings and courses.

Every price is stored in both currencies; which one is shown is decided
per request.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from empire.domain.model.common import DomainModel, utcnow
from empire.domain.value import (
    AccountId,
    CategoryId,
    CourseId,
    Currency,
    ImageId,
    InventoryStatus,
    Slug,
    VariantId,
)


class Category(DomainModel):
    """Account listing category."""

    id: CategoryId
    slug: Slug
    name_en: str = Field(min_length=1, max_length=200)
    name_vi: str = Field(min_length=1, max_length=200)
    created_at: datetime = Field(default_factory=utcnow)


class GalleryImage(DomainModel):
    """Image attached to an account listing, a variant or a course."""

    id: ImageId
    image_url: str
    locale: str = "vi"
    order_index: int = Field(default=0, ge=0)


class AccountVariant(DomainModel):
    """Purchasable priced option of an account listing."""

    id: VariantId
    account_id: AccountId
    name_en: str
    name_vi: str
    price_usd: float = Field(ge=0)
    price_vnd: float = Field(ge=0)
    original_price_usd: Optional[float] = Field(default=None, ge=0)
    original_price_vnd: Optional[float] = Field(default=None, ge=0)
    sku: Optional[str] = None
    image: Optional[str] = None
    stock: bool = True
    is_default: bool = False
    images: list[GalleryImage] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)

    def price(self, currency: Currency) -> float:
        return self.price_usd if currency == Currency.USD else self.price_vnd


class Account(DomainModel):
    """Digital account listing aggregate root."""

    id: AccountId
    slug: Slug
    name_en: str = Field(min_length=1, max_length=300)
    name_vi: str = Field(min_length=1, max_length=300)
    description_en: Optional[str] = None
    description_vi: Optional[str] = None
    image: Optional[str] = None
    category_id: Optional[CategoryId] = None
    inventory_status: InventoryStatus = InventoryStatus.IN_STOCK
    delivery_type_en: Optional[str] = None
    delivery_type_vi: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    # Loaded alongside the listing
    category: Optional[Category] = None
    variants: list[AccountVariant] = Field(default_factory=list)
    images: list[GalleryImage] = Field(default_factory=list)


class Course(DomainModel):
    """Online course aggregate root."""

    id: CourseId
    slug: Slug
    title_en: str = Field(min_length=1, max_length=300)
    title_vi: str = Field(min_length=1, max_length=300)
    thumbnail: Optional[str] = None
    instructor: str = Field(min_length=1, max_length=200)
    price_usd: float = Field(default=0, ge=0)
    price_vnd: float = Field(default=0, ge=0)
    description_en: Optional[str] = None
    description_vi: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    images: list[GalleryImage] = Field(default_factory=list)

    def price(self, currency: Currency) -> float:
        return self.price_usd if currency == Currency.USD else self.price_vnd

    @property
    def thumbnail_image(self) -> Optional[str]:
        """First gallery image, falling back to the stored thumbnail."""
        if self.images:
            return min(self.images, key=lambda i: i.order_index).image_url
        return self.thumbnail
