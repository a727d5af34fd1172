"""Upload storage infrastructure providers."""

from dishka import Scope, provide

from estate.adapter.storage import LocalFileStorage
from estate.config import StorageSettings
from estate.domain.service import FileStorage
from estate.util.di.base import ProviderBase
from estate.util.error import ConfigurationError


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the local disk."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_file_storage(self, storage_settings: StorageSettings) -> FileStorage:
        """Provide local file storage.

        Raises:
            ConfigurationError: If the storage root cannot be created
        """
        try:
            storage_settings.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(
                f"Storage root {storage_settings.root} is not writable: {e}"
            ) from e
        return LocalFileStorage(storage_settings.root)
