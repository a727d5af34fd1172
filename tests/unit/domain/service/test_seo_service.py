"""Unit tests for SeoSettingService and its cache."""

import pytest

from estate.domain.model import Category, Tag
from estate.domain.repository import SeoSettingRepository
from estate.domain.service import SeoSettingCache, SeoSettingService
from estate.domain.value import CategoryId, SettingType, TagId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestSeoSettingCache:
    def test_entries_expire_after_ttl(self):
        # Arrange
        clock = FakeClock()
        cache = SeoSettingCache(ttl_seconds=60, clock=clock)
        cache.put("seo_setting_site_title", ("Estate",))

        # Act
        clock.now = 59.0
        fresh = "seo_setting_site_title" in cache
        clock.now = 60.0
        expired = "seo_setting_site_title" in cache

        # Assert
        assert fresh is True
        assert expired is False

    def test_flush_drops_every_key(self):
        # Arrange
        cache = SeoSettingCache(ttl_seconds=60, clock=FakeClock())
        cache.put("seo_setting_site_title", ("Estate",))
        cache.put("seo_settings_group_general", {"site_title": "Estate"})

        # Act
        cache.flush()

        # Assert
        assert "seo_setting_site_title" not in cache
        assert "seo_settings_group_general" not in cache


class TestSettingValues:
    """Tests for typed reads, writes and cache flushing."""

    @pytest.mark.asyncio
    async def test_missing_key_returns_per_call_default(self, unit_env):
        # Arrange
        service = await unit_env.get(SeoSettingService)

        # Act
        first = await service.get("robots", "index")
        second = await service.get("robots", "noindex")

        # Assert
        assert first == "index"
        assert second == "noindex"

    @pytest.mark.asyncio
    async def test_set_then_get_returns_typed_value(self, unit_env):
        # Arrange
        service = await unit_env.get(SeoSettingService)

        # Act
        await service.set("sitemap_enabled", True, SettingType.BOOLEAN)
        await service.set("items_per_sitemap", 500, SettingType.INTEGER)
        await service.set("verification", {"google": "abc"}, SettingType.JSON)

        # Assert
        assert await service.get("sitemap_enabled") is True
        assert await service.get("items_per_sitemap") == 500
        assert await service.get("verification") == {"google": "abc"}

    @pytest.mark.asyncio
    async def test_set_flushes_every_cached_key(self, unit_env):
        """Writing one key drops cached reads of every other key too."""
        # Arrange
        service = await unit_env.get(SeoSettingService)
        repo = await unit_env.get(SeoSettingRepository)
        cache = await unit_env.get(SeoSettingCache)
        await service.set("site_title", "Old title")
        assert await service.get("site_title") == "Old title"

        # Change the row behind the cache's back
        stale = await repo.find_by_key("site_title")
        await repo.save(stale.model_copy(update={"value": "New title"}))
        assert await service.get("site_title") == "Old title"

        # Act
        await service.set("twitter_handle", "estate")

        # Assert
        assert "seo_setting_site_title" not in cache
        assert await service.get("site_title") == "New title"

    @pytest.mark.asyncio
    async def test_inactive_setting_reads_as_unset(self, unit_env):
        # Arrange
        service = await unit_env.get(SeoSettingService)
        repo = await unit_env.get(SeoSettingRepository)
        setting = await service.set("site_title", "Hidden")
        await repo.save(setting.model_copy(update={"is_active": False}))
        (await unit_env.get(SeoSettingCache)).flush()

        # Act
        value = await service.get("site_title", "Fallback")

        # Assert
        assert value == "Fallback"

    @pytest.mark.asyncio
    async def test_reset_defaults_restores_groups(self, unit_env):
        # Arrange
        service = await unit_env.get(SeoSettingService)
        await service.set("site_title", "Custom")

        # Act
        count = await service.reset_defaults()
        all_settings = await service.get_all()

        # Assert
        assert count == 9
        assert all_settings["general"]["site_title"] == "Estate"
        assert set(all_settings) == {"general", "social", "analytics"}
        assert "google_analytics_id" in await service.get_by_group("analytics")


class TestAnalyze:
    """Tests for the meta tag checks."""

    @pytest.mark.asyncio
    async def test_short_title_and_description_warn(self, unit_env):
        # Arrange
        service = await unit_env.get(SeoSettingService)

        # Act
        analysis = service.analyze("Homes", "Cheap", None)

        # Assert
        messages = [r.message for r in analysis.recommendations]
        assert analysis.title_length == 5
        assert analysis.has_og_image is False
        assert messages[0].startswith("Title is too short")
        assert messages[1].startswith("Meta description is too short")
        assert messages[2].startswith("Consider adding an Open Graph image")

    @pytest.mark.asyncio
    async def test_good_meta_tags_succeed(self, unit_env):
        # Arrange
        service = await unit_env.get(SeoSettingService)

        # Act
        analysis = service.analyze("A" * 45, "B" * 140, "/images/og.jpg", "summary")

        # Assert
        assert [r.type for r in analysis.recommendations] == ["success"]
        assert analysis.has_twitter_card is True


class TestPostMeta:
    @pytest.mark.asyncio
    async def test_falls_back_to_site_defaults(self, unit_env):
        """Keywords combine category, tags and site keywords without repeats."""
        # Arrange
        service = await unit_env.get(SeoSettingService)
        await service.reset_defaults()
        post = make_post("Buying in Dhaka", excerpt="Where to start.")
        category = Category(id=CategoryId(post.id), name="Guides", slug="guides")
        tag = Tag(id=TagId(post.id), name="homes", slug="homes")

        # Act
        meta = await service.post_meta(post, [tag], category)

        # Assert
        assert meta.title == "Buying in Dhaka | Estate"
        assert meta.description == "Where to start."
        assert meta.keywords == "Guides, homes, real estate, property, apartments"
        assert meta.og_image == "/images/default-og-image.jpg"
        assert meta.twitter_site == "@"
