"""SEO settings service with an application-wide read cache."""

import re
import time
from typing import Any, Callable, Literal
from uuid import uuid4

import logfire
from cachetools import TTLCache
from pydantic import BaseModel

from estate.domain.model import Category, Post, SeoSetting, Tag
from estate.domain.model.post import strip_tags
from estate.domain.model.seo_setting import format_setting_value
from estate.domain.repository import SeoSettingRepository
from estate.domain.value import SeoSettingId, SettingType

from .base import Service

_MISSING = object()

ALL_SETTINGS_KEY = "seo_settings_all"
DEFAULT_SITE_TITLE = "Estate"

# key, value, type, group, description
DEFAULT_SETTINGS: list[tuple[str, str, SettingType, str, str]] = [
    (
        "site_title",
        DEFAULT_SITE_TITLE,
        SettingType.STRING,
        "general",
        "Default site title",
    ),
    (
        "site_description",
        "Homes, apartments and offices for sale and rent",
        SettingType.TEXT,
        "general",
        "Default site description",
    ),
    (
        "site_keywords",
        "real estate, property, homes, apartments",
        SettingType.STRING,
        "general",
        "Default site keywords",
    ),
    (
        "title_separator",
        " | ",
        SettingType.STRING,
        "general",
        "Separator between page title and site title",
    ),
    (
        "default_og_image",
        "/images/default-og-image.jpg",
        SettingType.STRING,
        "social",
        "Default Open Graph image URL",
    ),
    ("twitter_handle", "", SettingType.STRING, "social", "Twitter handle (without @)"),
    ("facebook_app_id", "", SettingType.STRING, "social", "Facebook App ID"),
    (
        "google_analytics_id",
        "",
        SettingType.STRING,
        "analytics",
        "Google Analytics tracking ID",
    ),
    (
        "google_tag_manager_id",
        "",
        SettingType.STRING,
        "analytics",
        "Google Tag Manager ID",
    ),
]


class SeoSettingCache:
    """In-process TTL cache shared by every request.

    Writes never invalidate single keys: any change flushes everything.
    """

    def __init__(
        self,
        ttl_seconds: int,
        clock: Callable[[], float] = time.monotonic,
        max_entries: int = 1024,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._entries: TTLCache = TTLCache(
            maxsize=max_entries, ttl=ttl_seconds, timer=clock
        )

    def get(self, key: str) -> Any:
        """Cached value, or the module's missing marker when absent or expired."""
        return self._entries.get(key, _MISSING)

    def put(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def flush(self) -> None:
        logfire.debug("SEO cache flushed", entries=len(self._entries))
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries


class SettingUpdate(BaseModel):
    key: str
    value: str | None = None
    type: SettingType = SettingType.STRING


class Recommendation(BaseModel):
    type: Literal["success", "info", "warning"]
    message: str


class SeoAnalysis(BaseModel):
    title_length: int
    description_length: int
    has_og_image: bool
    has_twitter_card: bool
    recommendations: list[Recommendation]


class PostMeta(BaseModel):
    """Meta tags for a post page."""

    title: str
    meta_title: str
    description: str
    keywords: str
    og_image: str | None
    twitter_site: str


class SeoSettingService(Service):
    """Typed access to SEO settings, cached application-wide.

    Cache keys are ``seo_setting_{key}``, ``seo_settings_group_{group}`` and
    ``seo_settings_all``. Only active settings are readable through the
    cache; inactive ones behave as unset.
    """

    def __init__(
        self, seo_setting_repository: SeoSettingRepository, cache: SeoSettingCache
    ) -> None:
        self.repository = seo_setting_repository
        self.cache = cache

    async def get(self, key: str, default: Any = None) -> Any:
        """Typed value of an active setting, ``default`` when unset."""
        cache_key = f"seo_setting_{key}"
        entry = self.cache.get(cache_key)
        if entry is _MISSING:
            setting = await self.repository.find_by_key(key)
            # Unset keys are cached too; the default stays per call
            entry = (setting.typed_value,) if setting and setting.is_active else None
            self.cache.put(cache_key, entry)
        return entry[0] if entry is not None else default

    async def set(
        self,
        key: str,
        value: Any,
        type: SettingType = SettingType.STRING,
        group: str = "general",
    ) -> SeoSetting:
        """Store a setting and flush the whole cache."""
        with logfire.span("seo_setting_service.set", key=key, type=type.value):
            existing = await self.repository.find_by_key(key)
            saved = await self.repository.save(
                SeoSetting(
                    id=existing.id if existing else SeoSettingId(uuid4()),
                    key=key,
                    value=format_setting_value(value, type),
                    type=type,
                    group=group,
                    description=existing.description if existing else None,
                    is_active=True,
                    sort_order=existing.sort_order if existing else 0,
                )
            )
            self.cache.flush()
            logfire.info("SEO setting saved", key=key)
            return saved

    async def get_by_group(self, group: str) -> dict[str, Any]:
        """Active settings of one group as key -> typed value."""
        cache_key = f"seo_settings_group_{group}"
        cached = self.cache.get(cache_key)
        if cached is not _MISSING:
            return cached
        settings = await self.repository.find_all(group)
        values = {s.key: s.typed_value for s in settings if s.is_active}
        self.cache.put(cache_key, values)
        return values

    async def get_all(self) -> dict[str, dict[str, Any]]:
        """Active settings as group -> key -> typed value."""
        cached = self.cache.get(ALL_SETTINGS_KEY)
        if cached is not _MISSING:
            return cached
        grouped: dict[str, dict[str, Any]] = {}
        for setting in await self.repository.find_all():
            if setting.is_active:
                grouped.setdefault(setting.group, {})[setting.key] = setting.typed_value
        self.cache.put(ALL_SETTINGS_KEY, grouped)
        return grouped

    async def list_grouped(self) -> dict[str, list[SeoSetting]]:
        """Every setting, active or not, grouped for the settings screen."""
        grouped: dict[str, list[SeoSetting]] = {}
        for setting in await self.repository.find_all():
            grouped.setdefault(setting.group, []).append(setting)
        return grouped

    async def update_many(self, updates: list[SettingUpdate]) -> int:
        """Save several settings from the admin screen, then flush once."""
        with logfire.span("seo_setting_service.update_many", count=len(updates)):
            for update in updates:
                existing = await self.repository.find_by_key(update.key)
                await self.repository.save(
                    SeoSetting(
                        id=existing.id if existing else SeoSettingId(uuid4()),
                        key=update.key,
                        value=update.value or "",
                        type=update.type,
                        group=existing.group if existing else "general",
                        description=existing.description if existing else None,
                        is_active=True,
                        sort_order=existing.sort_order if existing else 0,
                    )
                )
            self.cache.flush()
            logfire.info("SEO settings updated", count=len(updates))
            return len(updates)

    async def reset_defaults(self) -> int:
        """Rewrite the default settings, then flush once."""
        with logfire.span("seo_setting_service.reset_defaults"):
            for key, value, setting_type, group, description in DEFAULT_SETTINGS:
                existing = await self.repository.find_by_key(key)
                await self.repository.save(
                    SeoSetting(
                        id=existing.id if existing else SeoSettingId(uuid4()),
                        key=key,
                        value=value,
                        type=setting_type,
                        group=group,
                        description=description,
                        is_active=True,
                        sort_order=0,
                    )
                )
            self.cache.flush()
            logfire.info("SEO settings reset", count=len(DEFAULT_SETTINGS))
            return len(DEFAULT_SETTINGS)

    def analyze(
        self,
        title: str | None,
        description: str | None,
        og_image: str | None,
        twitter_card: str | None = None,
    ) -> SeoAnalysis:
        """Length and completeness checks for a page's meta tags."""
        title_length = len(title or "")
        description_length = len(description or "")
        recommendations: list[Recommendation] = []

        if title_length < 30:
            recommendations.append(
                Recommendation(
                    type="warning",
                    message="Title is too short. Recommended length is 30-60 characters.",
                )
            )
        elif title_length > 60:
            recommendations.append(
                Recommendation(
                    type="warning",
                    message="Title is too long. It may be truncated in search results.",
                )
            )

        if description_length < 120:
            recommendations.append(
                Recommendation(
                    type="warning",
                    message="Meta description is too short. "
                    "Recommended length is 120-160 characters.",
                )
            )
        elif description_length > 160:
            recommendations.append(
                Recommendation(
                    type="warning",
                    message="Meta description is too long. "
                    "It may be truncated in search results.",
                )
            )

        if not og_image:
            recommendations.append(
                Recommendation(
                    type="info",
                    message="Consider adding an Open Graph image "
                    "for better social media sharing.",
                )
            )

        if not recommendations:
            recommendations.append(
                Recommendation(
                    type="success", message="SEO looks good! No major issues found."
                )
            )

        return SeoAnalysis(
            title_length=title_length,
            description_length=description_length,
            has_og_image=bool(og_image),
            has_twitter_card=bool(twitter_card),
            recommendations=recommendations,
        )

    async def post_meta(
        self,
        post: Post,
        tags: list[Tag],
        category: Category | None = None,
        featured_image_path: str | None = None,
    ) -> PostMeta:
        """Meta tags for a post, falling back to the site defaults."""
        site_title = await self.get("site_title", DEFAULT_SITE_TITLE)
        separator = await self.get("title_separator", " | ")
        site_description = await self.get("site_description", "")
        site_keywords = await self.get("site_keywords", "")

        title = post.meta_title or post.title
        description = (
            post.meta_description
            or post.excerpt
            or _limit(strip_tags(post.content or ""), 160)
            or site_description
        )

        keywords = post.meta_keywords
        if not keywords:
            candidates = [
                category.name if category else None,
                *(t.name for t in tags),
                *(site_keywords or "").split(", "),
            ]
            keywords = ", ".join(dict.fromkeys(k for k in candidates if k))

        return PostMeta(
            title=f"{title}{separator}{site_title}",
            meta_title=title,
            description=description or "",
            keywords=keywords,
            og_image=featured_image_path or await self.get("default_og_image") or None,
            twitter_site="@" + (await self.get("twitter_handle", "") or ""),
        )


def _limit(text: str, limit: int) -> str:
    text = re.sub(r"\s+", " ", text).strip()
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + "..."
