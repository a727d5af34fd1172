"""Local disk storage for uploads."""

import asyncio
from pathlib import Path, PurePosixPath

import logfire

from estate.adapter.error import StorageError
from estate.domain.service.file_storage import FileStorage


class LocalFileStorage(FileStorage):
    """Stores uploads under a root directory on the local disk."""

    def __init__(self, root: Path) -> None:
        """Initialize storage.

        Args:
            root: Directory uploads are written under; must already exist
        """
        self.root = root.resolve()

    def _resolve(self, relative: str) -> Path:
        parts = PurePosixPath(relative).parts
        if not parts or any(p in ("..", "/") for p in parts):
            raise StorageError(f"Invalid storage path: {relative}")
        target = (self.root / Path(*parts)).resolve()
        if not target.is_relative_to(self.root):
            raise StorageError(f"Invalid storage path: {relative}")
        return target

    async def save(self, directory: str, filename: str, content: bytes) -> str:
        relative = f"{directory}/{filename}"
        target = self._resolve(relative)
        with logfire.span("file_storage.save", path=relative, size=len(content)):
            try:
                await asyncio.to_thread(_write, target, content)
            except OSError as e:
                logfire.error("Upload write failed", path=relative, error=str(e))
                raise StorageError(f"Failed to store {relative}: {e}") from e
            logfire.info("File stored", path=relative, size=len(content))
            return relative

    async def delete(self, path: str) -> None:
        target = self._resolve(path)
        with logfire.span("file_storage.delete", path=path):
            try:
                await asyncio.to_thread(target.unlink, missing_ok=True)
            except OSError as e:
                logfire.error("File delete failed", path=path, error=str(e))
                raise StorageError(f"Failed to delete {path}: {e}") from e

    async def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()


def _write(target: Path, content: bytes) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(content)
