"""SQLAlchemy table definitions for the storefront.

Domain models are immutable pydantic objects, so the tables are used with
SQLAlchemy Core and converted through ``mappers``. They match the schema
created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

item_type_enum = Enum("account", "course", name="item_type", create_type=False)

# ============================================================================
# IDENTITIES TABLE (email/password authentication)
# ============================================================================
identities_table = Table(
    "identities",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PROFILES TABLE (one per identity, same id)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column(
        "id",
        UUID(as_uuid=True),
        ForeignKey("identities.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("email", String(255), nullable=True),
    Column("full_name", String(50), nullable=True),
    Column("avatar", Text, nullable=True),
    Column(
        "role",
        Enum("admin", "user", name="profile_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column(
        "status",
        Enum("active", "banned", name="profile_status", create_type=False),
        nullable=False,
        server_default="active",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_profiles_created_at", profiles_table.c.created_at)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("slug", String(100), nullable=False, unique=True),
    Column("name_en", String(200), nullable=False),
    Column("name_vi", String(200), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# ACCOUNTS TABLE (digital account listings)
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("slug", String(200), nullable=False, unique=True),
    Column("name_en", String(300), nullable=False),
    Column("name_vi", String(300), nullable=False),
    Column("description_en", Text, nullable=True),
    Column("description_vi", Text, nullable=True),
    Column("image", Text, nullable=True),
    Column(
        "category_id",
        UUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "inventory_status",
        Enum(
            "in-stock",
            "low-stock",
            "out-of-stock",
            name="inventory_status",
            create_type=False,
        ),
        nullable=False,
        server_default="in-stock",
    ),
    Column("delivery_type_en", String(200), nullable=True),
    Column("delivery_type_vi", String(200), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_accounts_created_at", accounts_table.c.created_at.desc())
Index("idx_accounts_category_id", accounts_table.c.category_id)

account_variants_table = Table(
    "account_variants",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "account_id",
        UUID(as_uuid=True),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name_en", String(200), nullable=False),
    Column("name_vi", String(200), nullable=False),
    Column("price_usd", Numeric(12, 2), nullable=False),
    Column("price_vnd", Numeric(14, 0), nullable=False),
    Column("original_price_usd", Numeric(12, 2), nullable=True),
    Column("original_price_vnd", Numeric(14, 0), nullable=True),
    Column("sku", String(100), nullable=True),
    Column("image", Text, nullable=True),
    Column("stock", Boolean, nullable=False, server_default="true"),
    Column("is_default", Boolean, nullable=False, server_default="false"),
    Column("position", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_account_variants_account_id", account_variants_table.c.account_id)

# ============================================================================
# GALLERY IMAGES (account, variant and course galleries)
# ============================================================================
account_images_table = Table(
    "account_images",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "account_id",
        UUID(as_uuid=True),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "variant_id",
        UUID(as_uuid=True),
        ForeignKey("account_variants.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("image_url", Text, nullable=False),
    Column("locale", String(10), nullable=False, server_default="vi"),
    Column("order_index", Integer, nullable=False, server_default="0"),
)

Index("idx_account_images_account_id", account_images_table.c.account_id)

course_images_table = Table(
    "course_images",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "course_id",
        UUID(as_uuid=True),
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("image_url", Text, nullable=False),
    Column("locale", String(10), nullable=False, server_default="vi"),
    Column("order_index", Integer, nullable=False, server_default="0"),
)

Index("idx_course_images_course_id", course_images_table.c.course_id)

# ============================================================================
# COURSES TABLE
# ============================================================================
courses_table = Table(
    "courses",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("slug", String(200), nullable=False, unique=True),
    Column("title_en", String(300), nullable=False),
    Column("title_vi", String(300), nullable=False),
    Column("thumbnail", Text, nullable=True),
    Column("instructor", String(200), nullable=False),
    Column("price_usd", Numeric(12, 2), nullable=False, server_default="0"),
    Column("price_vnd", Numeric(14, 0), nullable=False, server_default="0"),
    Column("description_en", Text, nullable=True),
    Column("description_vi", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Cursor pagination walks this index
Index("idx_courses_created_at", courses_table.c.created_at.desc())

# ============================================================================
# COMMENTS TABLE (flat rows, threads rebuilt on read)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("item_id", UUID(as_uuid=True), nullable=False),
    Column("item_type", item_type_enum, nullable=False),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Deleting a comment removes its whole reply subtree
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("comment", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "char_length(comment) BETWEEN 1 AND 1000", name="comment_length"
    ),
)

Index(
    "idx_comments_subject",
    comments_table.c.item_id,
    comments_table.c.item_type,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# PROMOTIONS TABLE
# ============================================================================
promotions_table = Table(
    "promotions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("code", String(50), nullable=False, unique=True),
    Column("name_en", String(200), nullable=False),
    Column("name_vi", String(200), nullable=False),
    Column("description_en", Text, nullable=True),
    Column("description_vi", Text, nullable=True),
    Column("discount_percent", Numeric(5, 2), nullable=False),
    Column("max_discount_amount", Numeric(14, 2), nullable=True),
    Column("minimum_order_amount", Numeric(14, 2), nullable=True),
    Column("start_date", TIMESTAMP(timezone=True), nullable=False),
    Column("end_date", TIMESTAMP(timezone=True), nullable=False),
    Column("usage_limit", Integer, nullable=True),
    Column("used_count", Integer, nullable=False, server_default="0"),
    Column(
        "status",
        Enum(
            "scheduled", "active", "expired", name="promotion_status", create_type=False
        ),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "discount_percent > 0 AND discount_percent <= 100",
        name="discount_percent_range",
    ),
    CheckConstraint("end_date >= start_date", name="promotion_date_range"),
)

Index("idx_promotions_created_at", promotions_table.c.created_at.desc())

# ============================================================================
# CARTS TABLE (one per user)
# ============================================================================
carts_table = Table(
    "carts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", name="uq_carts_user_id"),
)

cart_items_table = Table(
    "cart_items",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "cart_id",
        UUID(as_uuid=True),
        ForeignKey("carts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("item_id", UUID(as_uuid=True), nullable=False),
    Column("item_type", item_type_enum, nullable=False),
    Column("variant_id", UUID(as_uuid=True), nullable=True),
    Column("quantity", Integer, nullable=False, server_default="1"),
    Column("price_usd", Numeric(12, 2), nullable=False),
    Column("price_vnd", Numeric(14, 0), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("quantity BETWEEN 1 AND 999", name="cart_quantity_range"),
    # NULL variant counts as a value so re-adding a variant-less line conflicts
    UniqueConstraint(
        "cart_id",
        "item_id",
        "item_type",
        "variant_id",
        name="uq_cart_items_line",
        postgresql_nulls_not_distinct=True,
    ),
)

Index("idx_cart_items_cart_id", cart_items_table.c.cart_id)
