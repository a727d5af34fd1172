"""File storage interface for uploads."""

import re
import secrets
import string
from abc import ABC, abstractmethod
from pathlib import PurePath

from .slug_service import slugify

_TOKEN_ALPHABET = string.ascii_letters + string.digits
_EXTENSION_JUNK = re.compile(r"[^a-z0-9]")


class FileStorage(ABC):
    """Interface for the place uploaded files are kept.

    Paths are relative to the storage root and use forward slashes,
    e.g. ``media/floor-plan-a1B2c3.pdf``.
    """

    @abstractmethod
    async def save(self, directory: str, filename: str, content: bytes) -> str:
        """Write a file and return its relative path."""
        pass

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Remove a file. Missing files are ignored."""
        pass

    @abstractmethod
    async def exists(self, path: str) -> bool:
        pass


def random_token(length: int = 6) -> str:
    return "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(length))


def stored_filename(original_name: str, name: str | None = None) -> str:
    """Collision-resistant name for an upload: ``{slug}-{6 random chars}.{ext}``.

    Args:
        original_name: Name the client sent
        name: Preferred base name; defaults to the original file stem
    """
    original = PurePath(original_name)
    base = slugify(name or original.stem, fallback="file")[:200]
    extension = _EXTENSION_JUNK.sub("", original.suffix.lower())[:10]
    filename = f"{base}-{random_token()}"
    return f"{filename}.{extension}" if extension else filename
