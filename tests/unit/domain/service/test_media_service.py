"""Unit tests for MediaService."""

import re
from io import BytesIO
from uuid import uuid4

import pytest
from PIL import Image

from estate.domain.error import ValidationError
from estate.domain.model.media import human_size
from estate.domain.service import FileStorage, MediaService
from estate.domain.service.file_storage import stored_filename
from estate.domain.value import MediaType, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def png_bytes(width: int = 4, height: int = 3) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (width, height), "white").save(buffer, format="PNG")
    return buffer.getvalue()


class TestMediaType:
    def test_mime_types_map_to_categories(self):
        assert MediaType.from_mime_type("image/webp") == MediaType.IMAGE
        assert MediaType.from_mime_type("application/pdf") == MediaType.DOCUMENT
        assert MediaType.from_mime_type("video/mp4") == MediaType.VIDEO
        assert MediaType.from_mime_type("audio/mpeg") == MediaType.AUDIO
        assert MediaType.from_mime_type("application/zip") == MediaType.OTHER


class TestHumanSize:
    def test_formats_bytes(self):
        assert human_size(0) == "0 B"
        assert human_size(1536) == "1.5 KB"
        assert human_size(1024 * 1024) == "1 MB"


class TestStoredFilename:
    def test_name_is_slug_token_and_extension(self):
        # Act
        name = stored_filename("Floor Plan.PDF")

        # Assert
        assert re.fullmatch(r"floor-plan-[A-Za-z0-9]{6}\.pdf", name)

    def test_extension_keeps_only_letters_and_digits(self):
        # Act
        name = stored_filename("a.p h p")

        # Assert
        assert name.endswith(".php")
        assert " " not in name

    def test_storage_port_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            FileStorage()


class TestUpload:
    """Tests for upload and delete."""

    @pytest.mark.asyncio
    async def test_image_upload_records_dimensions(self, unit_env):
        # Arrange
        service = await unit_env.get(MediaService)
        storage = await unit_env.get(FileStorage)
        content = png_bytes(4, 3)

        # Act
        media = await service.upload(
            "Floor Plan.PNG", "image/png", content, UserId(uuid4())
        )

        # Assert
        assert media.type == MediaType.IMAGE
        assert (media.width, media.height) == (4, 3)
        assert media.name == "Floor Plan"
        assert media.original_name == "Floor Plan.PNG"
        assert media.file_name.startswith("floor-plan-")
        assert media.file_name.endswith(".png")
        assert len(media.file_name) == len("floor-plan-") + 6 + len(".png")
        assert media.path == f"media/{media.file_name}"
        assert await storage.exists(media.path)

    @pytest.mark.asyncio
    async def test_document_has_no_dimensions(self, unit_env):
        # Arrange
        service = await unit_env.get(MediaService)

        # Act
        media = await service.upload(
            "brochure.pdf",
            "application/pdf",
            b"%PDF-1.4",
            UserId(uuid4()),
            name="Brochure",
        )

        # Assert
        assert media.type == MediaType.DOCUMENT
        assert media.width is None
        assert media.name == "Brochure"

    @pytest.mark.asyncio
    async def test_empty_upload_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(MediaService)

        # Act & Assert
        with pytest.raises(ValidationError, match="No file was uploaded"):
            await service.upload("empty.txt", "text/plain", b"", UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_oversized_upload_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(MediaService)
        content = b"x" * (service.max_upload_bytes + 1)

        # Act & Assert
        with pytest.raises(ValidationError, match="may not be larger"):
            await service.upload("big.bin", "application/zip", content, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_removes_file(self, unit_env):
        # Arrange
        service = await unit_env.get(MediaService)
        storage = await unit_env.get(FileStorage)
        media = await service.upload("a.txt", "text/plain", b"hello", UserId(uuid4()))

        # Act
        await service.delete(media.id)

        # Assert
        assert not await storage.exists(media.path)

    @pytest.mark.asyncio
    async def test_stats_sum_sizes(self, unit_env):
        # Arrange
        service = await unit_env.get(MediaService)
        await service.upload("a.png", "image/png", png_bytes(), UserId(uuid4()))
        await service.upload("b.pdf", "application/pdf", b"12345", UserId(uuid4()))

        # Act
        stats = await service.stats()

        # Assert
        assert stats.total == 2
        assert stats.images == 1
        assert stats.documents == 1
        assert stats.total_size == len(png_bytes()) + 5
