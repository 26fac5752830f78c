"""Unit tests for PostService."""

import pytest

from forum.domain.error import ValidationError
from forum.domain.service import MediaStore, PostService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUploadImage:
    """Tests for image validation and upload."""

    @pytest.mark.asyncio
    async def test_image_is_uploaded(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        media_store = await unit_env.get(MediaStore)

        # Act
        url = await post_service.upload_image(b"\x89PNG...", "image/png", "cat.png")

        # Assert
        assert url.endswith(".png")
        assert media_store.images[url] == b"\x89PNG..."

    @pytest.mark.asyncio
    async def test_non_image_is_rejected(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        media_store = await unit_env.get(MediaStore)

        # Act & Assert
        with pytest.raises(ValidationError, match="Only image uploads"):
            await post_service.upload_image(b"%PDF", "application/pdf", "doc.pdf")
        assert media_store.images == {}

    @pytest.mark.asyncio
    async def test_missing_content_type_is_rejected(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await post_service.upload_image(b"data", None, "file")

    @pytest.mark.asyncio
    async def test_empty_file_is_rejected(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(ValidationError, match="empty"):
            await post_service.upload_image(b"", "image/jpeg", "empty.jpg")


class TestDeleteImage:
    """Tests for delete_image."""

    @pytest.mark.asyncio
    async def test_none_is_noop(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        media_store = await unit_env.get(MediaStore)

        # Act
        await post_service.delete_image(None)

        # Assert
        assert media_store.deleted == []
