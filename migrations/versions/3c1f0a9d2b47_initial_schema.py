"""initial_schema

Create the estate admin schema:
- Users and teams (team membership with roles)
- Listing catalog: agents, amenities, locations, property types
- Properties (soft delete, amenity join table)
- Blog: categories, tags, media, posts (tag join table)
- Comments (threaded, moderated, with denormalized counters)
- SEO settings (key/value store)

Revision ID: 3c1f0a9d2b47
Revises:
Create Date: 2026-10-19 09:12:44.318027

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    "team_role": ("member", "admin"),
    "location_type": ("city", "suburb", "district", "region", "state"),
    "listing_type": ("sale", "rent"),
    "property_status": ("available", "sold", "rented", "pending", "draft"),
    "post_status": ("draft", "published", "scheduled", "archived"),
    "comment_status": ("pending", "approved", "rejected", "spam"),
    "setting_type": ("string", "text", "boolean", "integer", "json"),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _flags() -> list[sa.Column]:
    return [
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    for name, values in ENUMS.items():
        labels = ", ".join(f"'{v}'" for v in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # USERS / TEAMS
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column(
            "roles", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("idx_users_created_at", "users", [sa.text("created_at DESC")])

    op.create_table(
        "teams",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_teams_owner_id", "teams", ["owner_id"])

    op.create_table(
        "team_members",
        sa.Column("team_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "role", _enum("team_role"), nullable=False, server_default="member"
        ),
        sa.Column(
            "joined_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("team_id", "user_id", name="uq_team_member"),
    )

    # ========================================================================
    # LISTING CATALOG
    # ========================================================================
    op.create_table(
        "agents",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("license_number", sa.String(100), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("photo_path", sa.String(500), nullable=True),
        sa.Column("office_address", sa.String(255), nullable=True),
        sa.Column(
            "specializations",
            postgresql.JSONB(),
            nullable=False,
            server_default="[]",
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "commission_rate",
            sa.Numeric(5, 2),
            nullable=False,
            server_default="5.00",
        ),
        sa.Column(
            "experience_years", sa.Integer(), nullable=False, server_default="0"
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_agents_email"),
        sa.UniqueConstraint("license_number", name="uq_agents_license_number"),
    )
    op.create_index("idx_agents_active_name", "agents", ["is_active", "name"])

    op.create_table(
        "amenities",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(100), nullable=True),
        sa.Column("category", sa.String(100), nullable=False),
        *_flags(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_amenities_slug"),
    )
    op.create_index("idx_amenities_category", "amenities", ["category"])

    op.create_table(
        "locations",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column(
            "type", _enum("location_type"), nullable=False, server_default="city"
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        *_flags(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_locations_slug"),
        sa.CheckConstraint("latitude BETWEEN -90 AND 90", name="latitude_range"),
        sa.CheckConstraint("longitude BETWEEN -180 AND 180", name="longitude_range"),
    )
    op.create_index("idx_locations_type", "locations", ["type"])

    op.create_table(
        "property_types",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(100), nullable=True),
        *_flags(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_property_types_slug"),
    )

    # ========================================================================
    # PROPERTIES
    # ========================================================================
    op.create_table(
        "properties",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "listing_type",
            _enum("listing_type"),
            nullable=False,
            server_default="sale",
        ),
        sa.Column(
            "status",
            _enum("property_status"),
            nullable=False,
            server_default="available",
        ),
        sa.Column("price", sa.Numeric(15, 2), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False, server_default="BDT"),
        sa.Column("bedrooms", sa.Integer(), nullable=True),
        sa.Column("bathrooms", sa.Integer(), nullable=True),
        sa.Column("area_sqft", sa.Numeric(10, 2), nullable=True),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("meta_title", sa.String(255), nullable=True),
        sa.Column("meta_description", sa.Text(), nullable=True),
        sa.Column("property_type_id", sa.UUID(), nullable=False),
        sa.Column("location_id", sa.UUID(), nullable=False),
        sa.Column("agent_id", sa.UUID(), nullable=False),
        sa.Column("views_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("favorites_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("inquiries_count", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["property_type_id"], ["property_types.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(["location_id"], ["locations.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["agent_id"], ["agents.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_properties_slug"),
    )
    op.create_index(
        "idx_properties_status_listing_type", "properties", ["status", "listing_type"]
    )
    op.create_index(
        "idx_properties_property_type_id", "properties", ["property_type_id"]
    )
    op.create_index("idx_properties_location_id", "properties", ["location_id"])
    op.create_index("idx_properties_agent_id", "properties", ["agent_id"])
    op.create_index("idx_properties_deleted_at", "properties", ["deleted_at"])

    op.create_table(
        "property_amenities",
        sa.Column("property_id", sa.UUID(), nullable=False),
        sa.Column("amenity_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["amenity_id"], ["amenities.id"], ondelete="RESTRICT"),
        sa.UniqueConstraint("property_id", "amenity_id", name="uq_property_amenity"),
    )
    op.create_index(
        "idx_property_amenities_amenity_id", "property_amenities", ["amenity_id"]
    )

    # ========================================================================
    # CONTENT: CATEGORIES, TAGS, MEDIA, POSTS
    # ========================================================================
    for table in ("categories", "tags"):
        extra = (
            sa.Column("image", sa.String(255), nullable=True)
            if table == "categories"
            else sa.Column("color", sa.String(7), nullable=True)
        )
        op.create_table(
            table,
            _id(),
            sa.Column("name", sa.String(255), nullable=False),
            sa.Column("slug", sa.String(255), nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
            extra,
            sa.Column("seo_title", sa.String(255), nullable=True),
            sa.Column("seo_description", sa.String(160), nullable=True),
            sa.Column("seo_keywords", sa.String(255), nullable=True),
            *_flags(),
            *_timestamps(),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("slug", name=f"uq_{table}_slug"),
        )

    op.create_table(
        "media",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("file_name", sa.String(255), nullable=False),
        sa.Column("original_name", sa.String(255), nullable=False),
        sa.Column("path", sa.String(500), nullable=False),
        sa.Column("mime_type", sa.String(255), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("size", sa.BigInteger(), nullable=False),
        sa.Column("width", sa.Integer(), nullable=True),
        sa.Column("height", sa.Integer(), nullable=True),
        sa.Column("alt_text", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "metadata", postgresql.JSONB(), nullable=False, server_default="{}"
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("uploaded_by", sa.UUID(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["uploaded_by"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_media_type_active", "media", ["type", "is_active"])
    op.create_index("idx_media_uploaded_by", "media", ["uploaded_by"])

    op.create_table(
        "posts",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("meta_title", sa.String(255), nullable=True),
        sa.Column("meta_description", sa.Text(), nullable=True),
        sa.Column("meta_keywords", sa.String(255), nullable=True),
        sa.Column(
            "status", _enum("post_status"), nullable=False, server_default="draft"
        ),
        sa.Column("published_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("scheduled_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "allow_comments", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column("is_sticky", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("category_id", sa.UUID(), nullable=True),
        sa.Column("featured_image_id", sa.UUID(), nullable=True),
        sa.Column("views_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(
            ["featured_image_id"], ["media.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_posts_slug"),
        sa.CheckConstraint("comments_count >= 0", name="comments_count_non_negative"),
    )
    op.create_index(
        "idx_posts_status_published_at", "posts", ["status", "published_at"]
    )
    op.create_index("idx_posts_category_id", "posts", ["category_id"])
    op.create_index("idx_posts_author_id", "posts", ["author_id"])
    op.create_index("idx_posts_created_at", "posts", [sa.text("created_at DESC")])

    op.create_table(
        "post_tags",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("post_id", "tag_id", name="uq_post_tag"),
    )
    op.create_index("idx_post_tags_tag_id", "post_tags", ["tag_id"])

    # ========================================================================
    # COMMENTS
    # ========================================================================
    op.create_table(
        "comments",
        _id(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("author_name", sa.String(255), nullable=True),
        sa.Column("author_email", sa.String(255), nullable=True),
        sa.Column("author_website", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "status",
            _enum("comment_status"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("approved_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("approved_by", sa.UUID(), nullable=True),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("ip_address", sa.String(45), nullable=True),
        sa.Column("user_agent", sa.String(255), nullable=True),
        sa.Column(
            "metadata", postgresql.JSONB(), nullable=False, server_default="{}"
        ),
        sa.Column("likes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("replies_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["approved_by"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("likes_count >= 0", name="likes_count_non_negative"),
        sa.CheckConstraint("replies_count >= 0", name="replies_count_non_negative"),
    )
    op.create_index("idx_comments_post_status", "comments", ["post_id", "status"])
    op.create_index("idx_comments_user_status", "comments", ["user_id", "status"])
    op.create_index("idx_comments_parent_status", "comments", ["parent_id", "status"])
    op.create_index(
        "idx_comments_status_created_at", "comments", ["status", "created_at"]
    )
    op.create_index("idx_comments_approved_at", "comments", ["approved_at"])

    # ========================================================================
    # SEO SETTINGS
    # ========================================================================
    op.create_table(
        "seo_settings",
        _id(),
        sa.Column("key", sa.String(255), nullable=False),
        sa.Column("value", sa.Text(), nullable=True),
        sa.Column(
            "type", _enum("setting_type"), nullable=False, server_default="string"
        ),
        sa.Column("group", sa.String(100), nullable=False, server_default="general"),
        sa.Column("description", sa.Text(), nullable=True),
        *_flags(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("key", name="uq_seo_settings_key"),
    )
    op.create_index("idx_seo_settings_group", "seo_settings", ["group"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("seo_settings")
    op.drop_table("comments")
    op.drop_table("post_tags")
    op.drop_table("posts")
    op.drop_table("media")
    op.drop_table("tags")
    op.drop_table("categories")
    op.drop_table("property_amenities")
    op.drop_table("properties")
    op.drop_table("property_types")
    op.drop_table("locations")
    op.drop_table("amenities")
    op.drop_table("agents")
    op.drop_table("team_members")
    op.drop_table("teams")
    op.drop_table("users")

    # Drop ENUM types
    for name in reversed(list(ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
