"""Cloudinary adapter for image uploads.
"""

from typing import Optional
import io
import logging

import cloudinary
import cloudinary.uploader

from app.exceptions import UpstreamError

logger = logging.getLogger("recipebox.media")

# Bound the stored image size and let Cloudinary pick quality and format.
UPLOAD_TRANSFORMATION = [
    {"width": 1000, "height": 1000, "crop": "limit"},
    {"quality": "auto:good"},
    {"fetch_format": "auto"},
]


class CloudinaryUploader:
    """Uploads binary images to a Cloudinary folder and returns a durable URL."""

    def __init__(
        self,
        cloud_name: Optional[str] = None,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
    ):
        self.cloud_name = cloud_name or ""
        self.api_key = api_key or ""
        self.api_secret = api_secret or ""
        self._connected = False

    @property
    def is_configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def connect(self) -> None:
        if not self.is_configured:
            logger.warning(
                "Cloudinary credentials missing; image uploads will fail "
                "(required: CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY, CLOUDINARY_API_SECRET)"
            )
            return
        cloudinary.config(
            cloud_name=self.cloud_name,
            api_key=self.api_key,
            api_secret=self.api_secret,
            secure=True,
        )
        self._connected = True
        logger.info(
            "Cloudinary configured cloud_name=%s api_key=***%s",
            self.cloud_name,
            self.api_key[-4:],
        )

    def close(self) -> None:
        self._connected = False

    def upload(self, data: bytes, folder: str) -> str:
        """Upload ``data`` into ``folder``.

        Returns:
            The secure URL of the stored image

        Raises:
            UpstreamError: when not configured or when Cloudinary rejects the upload
        """
        if not self._connected:
            raise UpstreamError("Image upload is not configured")

        try:
            result = cloudinary.uploader.upload(
                io.BytesIO(data),
                folder=folder,
                resource_type="image",
                transformation=UPLOAD_TRANSFORMATION,
            )
        except Exception as exc:
            logger.error("cloudinary_upload_failed folder=%s error=%s", folder, exc)
            raise UpstreamError(
                "Failed to upload image", details=str(exc)
            ) from exc

        url = result.get("secure_url") or result.get("url")
        if not url:
            raise UpstreamError("Failed to upload image", details="No URL returned")
        logger.info("image_uploaded folder=%s url=%s", folder, url)
        return url
