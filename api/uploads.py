"""Multipart image upload helpers shared by recipe and avatar routes."""

from typing import Optional
import logging

from fastapi import UploadFile

from app.config import settings
from app.exceptions import ServiceValidationError

logger = logging.getLogger("recipebox.api.uploads")


def read_image_upload(upload: Optional[UploadFile]) -> Optional[bytes]:
    """
    Read an uploaded image into memory after checking its type and size.

    Returns:
        The file bytes, or None when no file (or an empty file) was sent

    Raises:
        ServiceValidationError: not an image/* upload, or larger than
            settings.max_upload_bytes
    """
    if upload is None or not upload.filename:
        return None

    content_type = (upload.content_type or "").lower()
    if not content_type.startswith("image/"):
        raise ServiceValidationError(
            "Only image files are allowed", details=f"received: {content_type or 'unknown'}"
        )

    # Read at most one byte past the limit
    data = upload.file.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise ServiceValidationError(
            "Image is too large",
            details=f"maximum size is {settings.max_upload_bytes} bytes",
        )
    if not data:
        return None

    logger.debug(
        f"image_upload_read filename={upload.filename} type={content_type} size={len(data)}"
    )
    return data
