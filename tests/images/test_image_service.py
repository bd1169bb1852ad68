"""Tests for image validation and storage."""
from pathlib import Path

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from images.models import Image
from images.services.image_service import ImageService, InvalidImageError, image_service

pytestmark = pytest.mark.django_db


def test_store_saves_file_and_metadata(png_upload, png_bytes, author, media_root):
    image = image_service.store(png_upload, author)

    assert Image.objects.get() == image
    assert image.content_type == "image/png"
    assert image.original_name == "diagram.png"
    assert image.size == len(png_bytes)
    assert (image.width, image.height) == (8, 6)
    stored = Image.objects.values("width", "height").get(pk=image.pk)
    assert stored == {"width": 8, "height": 6}
    assert image.uploaded_by == author
    assert image.file.name.startswith("images/")
    assert image.file.name.endswith(".png")
    assert (Path(media_root) / image.file.name).read_bytes() == png_bytes


def test_stored_name_does_not_reuse_client_filename(png_bytes):
    first = image_service.store(SimpleUploadedFile("same.png", png_bytes))
    second = image_service.store(SimpleUploadedFile("same.png", png_bytes))

    assert "same" not in first.file.name
    assert first.file.name != second.file.name


def test_extension_follows_detected_format(png_bytes):
    # Named like a JPEG, but the bytes are a PNG
    image = image_service.store(SimpleUploadedFile("photo.jpg", png_bytes))

    assert image.file.name.endswith(".png")
    assert image.content_type == "image/png"


def test_jpeg_is_accepted(jpeg_upload):
    image = image_service.store(jpeg_upload)

    assert image.content_type == "image/jpeg"
    assert image.file.name.endswith(".jpg")


def test_anonymous_uploader_is_not_recorded(png_upload):
    from django.contrib.auth.models import AnonymousUser

    image = image_service.store(png_upload, AnonymousUser())

    assert image.uploaded_by is None


def test_non_image_is_rejected():
    with pytest.raises(InvalidImageError):
        image_service.store(SimpleUploadedFile("notes.png", b"this is not an image"))

    assert not Image.objects.exists()


def test_empty_file_is_rejected():
    with pytest.raises(InvalidImageError, match="empty"):
        image_service.store(SimpleUploadedFile("empty.png", b""))


def test_oversized_file_is_rejected(png_upload):
    with pytest.raises(InvalidImageError, match="too large"):
        ImageService(max_size=16).store(png_upload)


def test_unsupported_format_is_rejected():
    from io import BytesIO
    from PIL import Image as PILImage

    buffer = BytesIO()
    PILImage.new("RGB", (4, 4)).save(buffer, format="BMP")

    with pytest.raises(InvalidImageError, match="BMP"):
        image_service.store(SimpleUploadedFile("old.bmp", buffer.getvalue()))
