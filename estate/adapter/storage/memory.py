"""In-memory storage for tests."""

from estate.domain.service.file_storage import FileStorage


class InMemoryFileStorage(FileStorage):
    """Keeps uploaded files in a dict keyed by relative path."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}

    async def save(self, directory: str, filename: str, content: bytes) -> str:
        path = f"{directory}/{filename}"
        self.files[path] = content
        return path

    async def delete(self, path: str) -> None:
        self.files.pop(path, None)

    async def exists(self, path: str) -> bool:
        return path in self.files
