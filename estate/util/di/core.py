"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from estate.config import AuthSettings, Settings, StorageSettings
from estate.domain.service import SeoSettingCache
from estate.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide upload storage settings."""
        return settings.storage

    @provide(scope=Scope.APP)
    def provide_seo_setting_cache(self, settings: Settings) -> SeoSettingCache:
        """Provide the process-wide SEO settings cache."""
        return SeoSettingCache(ttl_seconds=settings.seo.cache_ttl_seconds)
