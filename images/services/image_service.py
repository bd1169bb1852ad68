# images/services/image_service.py
from __future__ import annotations

import logging
import os
import uuid
from io import BytesIO

from django.conf import settings
from django.core.files.base import ContentFile
from PIL import Image as PILImage

from images.models import Image

logger = logging.getLogger(__name__)

# Pillow format name -> (content type, file extension)
ALLOWED_FORMATS = {
    'JPEG': ('image/jpeg', '.jpg'),
    'PNG': ('image/png', '.png'),
    'GIF': ('image/gif', '.gif'),
    'WEBP': ('image/webp', '.webp'),
}


class InvalidImageError(ValueError):
    """The uploaded file is not an image we accept"""


class ImageService:
    """Validates uploaded images and stores them in the site's media storage."""

    def __init__(self, max_size: int | None = None):
        self._max_size = max_size

    @property
    def max_size(self) -> int:
        return self._max_size or settings.IMAGE_MAX_UPLOAD_SIZE

    def inspect(self, data: bytes) -> tuple[str, int, int]:
        """Return (format, width, height) for image bytes.

        Raises InvalidImageError when Pillow cannot read the bytes or the
        format is not one of ALLOWED_FORMATS.
        """
        try:
            with PILImage.open(BytesIO(data)) as img:
                img.verify()
                image_format = img.format
                width, height = img.size
        except Exception as e:
            raise InvalidImageError("The uploaded file is not a valid image") from e

        if image_format not in ALLOWED_FORMATS:
            raise InvalidImageError(f"Unsupported image format: {image_format}")

        return image_format, width, height

    def store(self, upload, user=None) -> Image:
        """Validate an uploaded file and save it as a new Image."""
        if not upload.size:
            raise InvalidImageError("The uploaded file is empty")
        if upload.size > self.max_size:
            raise InvalidImageError(
                f"The uploaded file is too large ({upload.size} bytes, limit is {self.max_size})"
            )

        data = upload.read()
        image_format, width, height = self.inspect(data)
        content_type, extension = ALLOWED_FORMATS[image_format]

        image = Image(
            original_name=os.path.basename(upload.name or '')[:255],
            content_type=content_type,
            size=len(data),
            uploaded_by=user if user is not None and user.is_authenticated else None,
        )
        image.file.save(f"{uuid.uuid4().hex}{extension}", ContentFile(data), save=False)
        # Assigning the file resets width_field/height_field, set them afterwards
        image.width, image.height = width, height
        image.save()

        logger.info(f"Stored image {image.file.name} ({image.size} bytes, {width}x{height})")
        return image


image_service = ImageService()
