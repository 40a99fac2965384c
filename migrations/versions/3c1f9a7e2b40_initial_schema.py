"""initial_schema

Create the storefront schema:
- Identities and profiles (email/password authentication, roles, bans)
- Categories, account listings with variants and gallery images
- Courses with gallery images
- Comments (flat rows with parent links, threads rebuilt on read)
- Promotions
- Carts and cart items

Requires PostgreSQL 15+ for NULLS NOT DISTINCT on the cart line constraint.

Revision ID: 3c1f9a7e2b40
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7e2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUM_TYPES = {
    "item_type": ("account", "course"),
    "profile_role": ("admin", "user"),
    "profile_status": ("active", "banned"),
    "inventory_status": ("in-stock", "low-stock", "out-of-stock"),
    "promotion_status": ("scheduled", "active", "expired"),
}


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUM_TYPES[name], name=name, create_type=False)


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    for name, values in ENUM_TYPES.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # IDENTITIES / PROFILES
    # ========================================================================
    op.create_table(
        "identities",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_identities_email"),
    )

    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("full_name", sa.String(50), nullable=True),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column(
            "role", _enum("profile_role"), nullable=False, server_default="user"
        ),
        sa.Column(
            "status", _enum("profile_status"), nullable=False, server_default="active"
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["id"], ["identities.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_profiles_created_at", "profiles", ["created_at"])

    # ========================================================================
    # CATALOGUE
    # ========================================================================
    op.create_table(
        "categories",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("name_en", sa.String(200), nullable=False),
        sa.Column("name_vi", sa.String(200), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_categories_slug"),
    )

    op.create_table(
        "accounts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("name_en", sa.String(300), nullable=False),
        sa.Column("name_vi", sa.String(300), nullable=False),
        sa.Column("description_en", sa.Text(), nullable=True),
        sa.Column("description_vi", sa.Text(), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("category_id", sa.UUID(), nullable=True),
        sa.Column(
            "inventory_status",
            _enum("inventory_status"),
            nullable=False,
            server_default="in-stock",
        ),
        sa.Column("delivery_type_en", sa.String(200), nullable=True),
        sa.Column("delivery_type_vi", sa.String(200), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_accounts_slug"),
    )
    op.create_index(
        "idx_accounts_created_at", "accounts", [sa.text("created_at DESC")]
    )
    op.create_index("idx_accounts_category_id", "accounts", ["category_id"])

    op.create_table(
        "account_variants",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("name_en", sa.String(200), nullable=False),
        sa.Column("name_vi", sa.String(200), nullable=False),
        sa.Column("price_usd", sa.Numeric(12, 2), nullable=False),
        sa.Column("price_vnd", sa.Numeric(14, 0), nullable=False),
        sa.Column("original_price_usd", sa.Numeric(12, 2), nullable=True),
        sa.Column("original_price_vnd", sa.Numeric(14, 0), nullable=True),
        sa.Column("sku", sa.String(100), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("stock", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_account_variants_account_id", "account_variants", ["account_id"]
    )

    op.create_table(
        "account_images",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("variant_id", sa.UUID(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("locale", sa.String(10), nullable=False, server_default="vi"),
        sa.Column("order_index", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["variant_id"], ["account_variants.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_account_images_account_id", "account_images", ["account_id"])

    op.create_table(
        "courses",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("title_en", sa.String(300), nullable=False),
        sa.Column("title_vi", sa.String(300), nullable=False),
        sa.Column("thumbnail", sa.Text(), nullable=True),
        sa.Column("instructor", sa.String(200), nullable=False),
        sa.Column("price_usd", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("price_vnd", sa.Numeric(14, 0), nullable=False, server_default="0"),
        sa.Column("description_en", sa.Text(), nullable=True),
        sa.Column("description_vi", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_courses_slug"),
    )
    # Cursor pagination walks this index
    op.create_index("idx_courses_created_at", "courses", [sa.text("created_at DESC")])

    op.create_table(
        "course_images",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("course_id", sa.UUID(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("locale", sa.String(10), nullable=False, server_default="vi"),
        sa.Column("order_index", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["course_id"], ["courses.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_course_images_course_id", "course_images", ["course_id"])

    # ========================================================================
    # COMMENTS
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("item_id", sa.UUID(), nullable=False),
        sa.Column("item_type", _enum("item_type"), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("comment", sa.Text(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        # Deleting a comment removes its whole reply subtree
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(comment) BETWEEN 1 AND 1000", name="comment_length"
        ),
    )
    op.create_index(
        "idx_comments_subject", "comments", ["item_id", "item_type", "created_at"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    # ========================================================================
    # PROMOTIONS
    # ========================================================================
    op.create_table(
        "promotions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("name_en", sa.String(200), nullable=False),
        sa.Column("name_vi", sa.String(200), nullable=False),
        sa.Column("description_en", sa.Text(), nullable=True),
        sa.Column("description_vi", sa.Text(), nullable=True),
        sa.Column("discount_percent", sa.Numeric(5, 2), nullable=False),
        sa.Column("max_discount_amount", sa.Numeric(14, 2), nullable=True),
        sa.Column("minimum_order_amount", sa.Numeric(14, 2), nullable=True),
        sa.Column("start_date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("end_date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("usage_limit", sa.Integer(), nullable=True),
        sa.Column("used_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", _enum("promotion_status"), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code", name="uq_promotions_code"),
        sa.CheckConstraint(
            "discount_percent > 0 AND discount_percent <= 100",
            name="discount_percent_range",
        ),
        sa.CheckConstraint("end_date >= start_date", name="promotion_date_range"),
    )
    op.create_index(
        "idx_promotions_created_at", "promotions", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # CARTS
    # ========================================================================
    op.create_table(
        "carts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", name="uq_carts_user_id"),
    )

    op.create_table(
        "cart_items",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("cart_id", sa.UUID(), nullable=False),
        sa.Column("item_id", sa.UUID(), nullable=False),
        sa.Column("item_type", _enum("item_type"), nullable=False),
        sa.Column("variant_id", sa.UUID(), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("price_usd", sa.Numeric(12, 2), nullable=False),
        sa.Column("price_vnd", sa.Numeric(14, 0), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["cart_id"], ["carts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("quantity BETWEEN 1 AND 999", name="cart_quantity_range"),
    )
    # NULL variant counts as a value so re-adding a variant-less line conflicts
    op.execute("""
        ALTER TABLE cart_items
        ADD CONSTRAINT uq_cart_items_line
        UNIQUE NULLS NOT DISTINCT (cart_id, item_id, item_type, variant_id)
    """)
    op.create_index("idx_cart_items_cart_id", "cart_items", ["cart_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("cart_items")
    op.drop_table("carts")
    op.drop_table("promotions")
    op.drop_table("comments")
    op.drop_table("course_images")
    op.drop_table("courses")
    op.drop_table("account_images")
    op.drop_table("account_variants")
    op.drop_table("accounts")
    op.drop_table("categories")
    op.drop_table("profiles")
    op.drop_table("identities")

    for name in reversed(list(ENUM_TYPES)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
