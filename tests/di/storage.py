"""Mock storage providers for testing."""

from dishka import Scope, provide

from estate.adapter.storage import InMemoryFileStorage
from estate.domain.service import FileStorage
from estate.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Mock storage provider keeping uploads in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_file_storage(self) -> FileStorage:
        """Provide in-memory file storage."""
        return InMemoryFileStorage()
