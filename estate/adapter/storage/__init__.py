"""Upload storage adapters."""

from .local import LocalFileStorage
from .memory import InMemoryFileStorage

__all__ = ["InMemoryFileStorage", "LocalFileStorage"]
