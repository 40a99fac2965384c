"""Domain value objects for the storefront.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules shared by the services and the API.
"""

import re
from enum import Enum
from urllib.parse import urlparse

from pydantic import field_validator

from empire.domain.value.common import RootValueObject

COMMENT_MAX_LENGTH = 1000
FULL_NAME_MIN_LENGTH = 2
FULL_NAME_MAX_LENGTH = 50
CART_MAX_QUANTITY = 999

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_SLUG_RE = re.compile(r"^[a-z0-9-]+$")
_UNSAFE_CHARS = str.maketrans("", "", "<>&\"'")


class ItemType(str, Enum):
    """Kind of catalogue entity a comment or cart line refers to."""

    ACCOUNT = "account"
    COURSE = "course"


class Role(str, Enum):
    """Profile role."""

    ADMIN = "admin"
    USER = "user"


class ProfileStatus(str, Enum):
    """Profile moderation status."""

    ACTIVE = "active"
    BANNED = "banned"


class PromotionStatus(str, Enum):
    """Promotion lifecycle status, derived from its date range."""

    SCHEDULED = "scheduled"
    ACTIVE = "active"
    EXPIRED = "expired"


class InventoryStatus(str, Enum):
    """Stock level shown on an account listing."""

    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"


class Currency(str, Enum):
    """Currencies every price is stored in."""

    USD = "usd"
    VND = "vnd"


class SortOrder(str, Enum):
    """Catalogue sort options."""

    DEFAULT = "default"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"


class Slug(RootValueObject[str]):
    """URL slug: lowercase letters, digits and hyphens."""

    @field_validator("root")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        if not _SLUG_RE.match(v):
            raise ValueError("Slug may only contain a-z, 0-9 and hyphens")
        return v


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not _EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        return v


class PromotionCode(RootValueObject[str]):
    """Promotion code, stored upper-cased."""

    @field_validator("root")
    @classmethod
    def validate_code(cls, v: str) -> str:
        v = v.strip().upper()
        if not v or len(v) > 50:
            raise ValueError("Promotion code must be 1-50 characters")
        return v


def sanitize_text(value: str) -> str:
    """Strip characters that could break out of HTML attributes."""
    return value.translate(_UNSAFE_CHARS)


def normalize_full_name(value: str) -> str:
    """Trim and sanitize a display name, enforcing its length bounds.

    Raises:
        ValueError: If the cleaned name is outside 2-50 characters
    """
    cleaned = sanitize_text(value.strip())
    if not FULL_NAME_MIN_LENGTH <= len(cleaned) <= FULL_NAME_MAX_LENGTH:
        raise ValueError(
            f"Name must be between {FULL_NAME_MIN_LENGTH} and "
            f"{FULL_NAME_MAX_LENGTH} characters"
        )
    return cleaned


def validate_avatar_url(value: str) -> str:
    """Require an absolute http(s) URL.

    Raises:
        ValueError: If the URL is relative or uses another scheme
    """
    parsed = urlparse(value.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Avatar must be an absolute http or https URL")
    return value.strip()


def is_strong_password(password: str) -> bool:
    """At least 8 characters with one upper-case letter and one digit."""
    if len(password) < 8:
        return False
    if not re.search(r"[A-Z]", password):
        return False
    if not re.search(r"[0-9]", password):
        return False
    return True
