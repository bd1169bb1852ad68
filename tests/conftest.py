from __future__ import annotations

from io import BytesIO

import pytest
from django.contrib.auth.models import User
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from PIL import Image as PILImage

from content.models import Article, Category


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings.MEDIA_ROOT


@pytest.fixture
def author(db):
    return User.objects.create_user(username="willem", email="willem@example.org", password="Secret123!")


@pytest.fixture
def other_author(db):
    return User.objects.create_user(username="guest", email="guest@example.org", password="Secret123!")


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        username="editor", email="editor@example.org", password="Secret123!", is_staff=True
    )


@pytest.fixture
def author_client(client, author):
    client.force_login(author)
    return client


@pytest.fixture
def category(db):
    return Category.objects.create(title="Machine Learning", slug="machine-learning")


@pytest.fixture
def make_article(author):
    def _make(title="Hello world", slug=None, body="# Hello\n\nFirst post.", published=True, **kwargs):
        kwargs.setdefault("author", author)
        kwargs.setdefault("published_at", timezone.now() if published else None)
        return Article.objects.create(
            title=title,
            slug=slug or title.lower().replace(" ", "-"),
            body=body,
            **kwargs,
        )
    return _make


def _image_bytes(image_format="PNG", size=(8, 6), mode="RGB"):
    buffer = BytesIO()
    PILImage.new(mode, size, color=(200, 30, 30)).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    return _image_bytes("PNG")


@pytest.fixture
def png_upload(png_bytes):
    return SimpleUploadedFile("diagram.png", png_bytes, content_type="image/png")


@pytest.fixture
def jpeg_upload():
    return SimpleUploadedFile("photo.jpeg", _image_bytes("JPEG", size=(32, 16)), content_type="image/jpeg")
