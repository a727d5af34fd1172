"""Media use cases."""

from .list_media import ListMediaResponse, ListMediaUseCase

__all__ = ["ListMediaResponse", "ListMediaUseCase"]
