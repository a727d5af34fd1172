"""SQLAlchemy table definitions for the estate admin.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def _timestamps() -> list[Column]:
    return [
        Column(
            "created_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default=text("NOW()"),
        ),
        Column(
            "updated_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default=text("NOW()"),
        ),
    ]


# ============================================================================
# USERS / TEAMS
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("roles", JSONB, nullable=False, server_default="[]"),
    *_timestamps(),
)

Index("idx_users_created_at", users_table.c.created_at.desc())

teams_table = Table(
    "teams",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(255), nullable=False),
    Column(
        "owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    *_timestamps(),
)

Index("idx_teams_owner_id", teams_table.c.owner_id)

team_members_table = Table(
    "team_members",
    metadata,
    Column("team_id", UUID, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "role",
        postgresql.ENUM("member", "admin", name="team_role", create_type=False),
        nullable=False,
        server_default="member",
    ),
    Column(
        "joined_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("team_id", "user_id", name="uq_team_member"),
)

# ============================================================================
# LISTING CATALOG
# ============================================================================
agents_table = Table(
    "agents",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("phone", String(50), nullable=True),
    Column("license_number", String(100), nullable=True, unique=True),
    Column("bio", Text, nullable=True),
    Column("photo_path", String(500), nullable=True),
    Column("office_address", String(255), nullable=True),
    Column("specializations", JSONB, nullable=False, server_default="[]"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("commission_rate", Numeric(5, 2), nullable=False, server_default="5.00"),
    Column("experience_years", Integer, nullable=False, server_default="0"),
    *_timestamps(),
)

Index("idx_agents_active_name", agents_table.c.is_active, agents_table.c.name)

amenities_table = Table(
    "amenities",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column("icon", String(100), nullable=True),
    Column("category", String(100), nullable=False),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    *_timestamps(),
)

Index("idx_amenities_category", amenities_table.c.category)

locations_table = Table(
    "locations",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column(
        "type",
        postgresql.ENUM(
            "city",
            "suburb",
            "district",
            "region",
            "state",
            name="location_type",
            create_type=False,
        ),
        nullable=False,
        server_default="city",
    ),
    Column("description", Text, nullable=True),
    Column("latitude", Float, nullable=True),
    Column("longitude", Float, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    *_timestamps(),
    CheckConstraint("latitude BETWEEN -90 AND 90", name="latitude_range"),
    CheckConstraint("longitude BETWEEN -180 AND 180", name="longitude_range"),
)

Index("idx_locations_type", locations_table.c.type)

property_types_table = Table(
    "property_types",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column("icon", String(100), nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    *_timestamps(),
)

# ============================================================================
# PROPERTIES
# ============================================================================
properties_table = Table(
    "properties",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("title", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column("description", Text, nullable=False, server_default=""),
    Column(
        "listing_type",
        postgresql.ENUM("sale", "rent", name="listing_type", create_type=False),
        nullable=False,
        server_default="sale",
    ),
    Column(
        "status",
        postgresql.ENUM(
            "available",
            "sold",
            "rented",
            "pending",
            "draft",
            name="property_status",
            create_type=False,
        ),
        nullable=False,
        server_default="available",
    ),
    Column("price", Numeric(15, 2), nullable=False),
    Column("currency", String(3), nullable=False, server_default="BDT"),
    Column("bedrooms", Integer, nullable=True),
    Column("bathrooms", Integer, nullable=True),
    Column("area_sqft", Numeric(10, 2), nullable=True),
    Column("address", String(255), nullable=False),
    Column("latitude", Float, nullable=True),
    Column("longitude", Float, nullable=True),
    Column("is_featured", Boolean, nullable=False, server_default="false"),
    Column("meta_title", String(255), nullable=True),
    Column("meta_description", Text, nullable=True),
    Column(
        "property_type_id",
        UUID,
        ForeignKey("property_types.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column(
        "location_id",
        UUID,
        ForeignKey("locations.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column(
        "agent_id", UUID, ForeignKey("agents.id", ondelete="RESTRICT"), nullable=False
    ),
    Column("views_count", Integer, nullable=False, server_default="0"),
    Column("favorites_count", Integer, nullable=False, server_default="0"),
    Column("inquiries_count", Integer, nullable=False, server_default="0"),
    *_timestamps(),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_properties_status_listing_type",
    properties_table.c.status,
    properties_table.c.listing_type,
)
Index("idx_properties_property_type_id", properties_table.c.property_type_id)
Index("idx_properties_location_id", properties_table.c.location_id)
Index("idx_properties_agent_id", properties_table.c.agent_id)
Index("idx_properties_deleted_at", properties_table.c.deleted_at)

property_amenities_table = Table(
    "property_amenities",
    metadata,
    Column(
        "property_id",
        UUID,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "amenity_id",
        UUID,
        ForeignKey("amenities.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    UniqueConstraint("property_id", "amenity_id", name="uq_property_amenity"),
)

Index("idx_property_amenities_amenity_id", property_amenities_table.c.amenity_id)

# ============================================================================
# CONTENT: CATEGORIES, TAGS, MEDIA, POSTS
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column("image", String(255), nullable=True),
    Column("seo_title", String(255), nullable=True),
    Column("seo_description", String(160), nullable=True),
    Column("seo_keywords", String(255), nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    *_timestamps(),
)

tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column("color", String(7), nullable=True),
    Column("seo_title", String(255), nullable=True),
    Column("seo_description", String(160), nullable=True),
    Column("seo_keywords", String(255), nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    *_timestamps(),
)

media_table = Table(
    "media",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(255), nullable=False),
    Column("file_name", String(255), nullable=False),
    Column("original_name", String(255), nullable=False),
    Column("path", String(500), nullable=False),
    Column("mime_type", String(255), nullable=False),
    Column("type", String(20), nullable=False),  # image, document, video, audio, other
    Column("size", BigInteger, nullable=False),
    Column("width", Integer, nullable=True),
    Column("height", Integer, nullable=True),
    Column("alt_text", Text, nullable=True),
    Column("description", Text, nullable=True),
    Column("metadata", JSONB, nullable=False, server_default="{}"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "uploaded_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    *_timestamps(),
)

Index("idx_media_type_active", media_table.c.type, media_table.c.is_active)
Index("idx_media_uploaded_by", media_table.c.uploaded_by)

posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("title", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column("excerpt", Text, nullable=True),
    Column("content", Text, nullable=True),
    Column("meta_title", String(255), nullable=True),
    Column("meta_description", Text, nullable=True),
    Column("meta_keywords", String(255), nullable=True),
    Column(
        "status",
        postgresql.ENUM(
            "draft",
            "published",
            "scheduled",
            "archived",
            name="post_status",
            create_type=False,
        ),
        nullable=False,
        server_default="draft",
    ),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column("scheduled_at", TIMESTAMP(timezone=True), nullable=True),
    Column("is_featured", Boolean, nullable=False, server_default="false"),
    Column("allow_comments", Boolean, nullable=False, server_default="true"),
    Column("is_sticky", Boolean, nullable=False, server_default="false"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "featured_image_id",
        UUID,
        ForeignKey("media.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("views_count", Integer, nullable=False, server_default="0"),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    *_timestamps(),
    CheckConstraint("comments_count >= 0", name="comments_count_non_negative"),
)

Index("idx_posts_status_published_at", posts_table.c.status, posts_table.c.published_at)
Index("idx_posts_category_id", posts_table.c.category_id)
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())

post_tags_table = Table(
    "post_tags",
    metadata,
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
    UniqueConstraint("post_id", "tag_id", name="uq_post_tag"),
)

Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)

# ============================================================================
# COMMENTS
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=True),
    Column("author_name", String(255), nullable=True),  # Guest comments
    Column("author_email", String(255), nullable=True),
    Column("author_website", String(255), nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "status",
        postgresql.ENUM(
            "pending",
            "approved",
            "rejected",
            "spam",
            name="comment_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column("approved_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "approved_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("ip_address", String(45), nullable=True),
    Column("user_agent", String(255), nullable=True),
    Column("metadata", JSONB, nullable=False, server_default="{}"),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("replies_count", Integer, nullable=False, server_default="0"),
    Column("is_featured", Boolean, nullable=False, server_default="false"),
    *_timestamps(),
    CheckConstraint("likes_count >= 0", name="likes_count_non_negative"),
    CheckConstraint("replies_count >= 0", name="replies_count_non_negative"),
)

Index("idx_comments_post_status", comments_table.c.post_id, comments_table.c.status)
Index("idx_comments_user_status", comments_table.c.user_id, comments_table.c.status)
Index("idx_comments_parent_status", comments_table.c.parent_id, comments_table.c.status)
Index(
    "idx_comments_status_created_at",
    comments_table.c.status,
    comments_table.c.created_at,
)
Index("idx_comments_approved_at", comments_table.c.approved_at)

# ============================================================================
# SEO SETTINGS
# ============================================================================
seo_settings_table = Table(
    "seo_settings",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("key", String(255), nullable=False, unique=True),
    Column("value", Text, nullable=True),
    Column(
        "type",
        postgresql.ENUM(
            "string",
            "text",
            "boolean",
            "integer",
            "json",
            name="setting_type",
            create_type=False,
        ),
        nullable=False,
        server_default="string",
    ),
    Column("group", String(100), nullable=False, server_default="general"),
    Column("description", Text, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    *_timestamps(),
)

Index("idx_seo_settings_group", seo_settings_table.c.group)
